"""Tests for the resource contract and concrete resource kinds."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from stingray_cli.models import (
    JSONConfigResource,
    Namespace,
    NodeStats,
    Pool,
    PoolNode,
    PoolStats,
    ResourceList,
    Resourcer,
    VirtualServer,
    combine_counter,
)


class TestContract:
    @pytest.mark.parametrize(
        ("cls", "namespace", "endpoint"),
        [
            (Pool, Namespace.CONFIGURATION, "pools"),
            (VirtualServer, Namespace.CONFIGURATION, "virtual_servers"),
            (NodeStats, Namespace.STATISTICS, "nodes/node"),
            (PoolStats, Namespace.STATISTICS, "pools"),
        ],
    )
    def test_class_constants(self, cls, namespace, endpoint):
        assert cls.namespace is namespace
        assert cls.endpoint == endpoint
        assert cls.content_type == "application/json"
        assert isinstance(cls(), Resourcer)

    def test_name_setter(self):
        pool = Pool()
        assert pool.name == ""
        pool.set_name("web")
        assert pool.name == "web"

    def test_new_sets_name_and_fields(self):
        pool = Pool.new("web", properties={"basic": {"note": "hi"}})
        assert pool.name == "web"
        assert pool.properties.basic.note == "hi"

    def test_name_is_not_part_of_body(self):
        body = json.loads(Pool.new("web").encode())
        assert "name" not in body
        assert "_name" not in body

    def test_namespace_is_per_class(self):
        class Monitor(JSONConfigResource):
            endpoint = "monitors"

        assert Monitor.namespace is Namespace.CONFIGURATION
        assert Monitor.new("ping").name == "ping"


class TestPool:
    def test_decode_in_place(self, mock_pool: dict):
        pool = Pool.new("web")
        assert pool.decode(json.dumps(mock_pool).encode()) is None
        assert pool.name == "web"
        assert pool.node_names() == ["10.0.0.1:80", "10.0.0.2:80"]
        assert pool.properties.load_balancing.algorithm == "round_robin"
        assert pool.properties.basic.nodes_table[1].state == "draining"

    def test_unknown_keys_survive_round_trip(self, mock_pool: dict):
        pool = Pool.new("web")
        pool.decode(json.dumps(mock_pool).encode())
        body = json.loads(pool.encode())
        assert body["properties"]["ssl"] == {"enable": False}
        assert body["properties"]["basic"]["bandwidth_class"] == ""

    def test_encode_omits_unset_fields(self):
        pool = Pool.new("web")
        pool.properties.basic.monitors = ["Ping"]
        body = json.loads(pool.encode())
        assert body["properties"]["basic"] == {"monitors": ["Ping"]}

    def test_encode_keeps_special_characters_raw(self):
        pool = Pool.new("web")
        pool.properties.basic.note = "R&D <staging>"
        assert b"R&D <staging>" in pool.encode()

    def test_encode_unpaired_surrogate(self):
        pool = Pool.new("web")
        pool.properties.basic.note = "bad \udcff"
        assert json.loads(pool.encode())["properties"]["basic"]["note"] == "bad \ufffd"

    def test_encode_decode_round_trip(self):
        pool = Pool.new("web")
        pool.properties.basic.note = "a<b>&c"
        pool.properties.basic.nodes_table = [PoolNode(node="10.0.0.1:80", weight=3)]
        other = Pool.new("web")
        other.decode(pool.encode())
        assert other.properties.basic.note == "a<b>&c"
        assert other.node_names() == ["10.0.0.1:80"]

    def test_decode_invalid_json_raises(self):
        pool = Pool.new("web")
        pool.properties.basic.note = "keep"
        with pytest.raises(ValidationError):
            pool.decode(b"<html>oops</html>")
        assert pool.properties.basic.note == "keep"

    def test_decode_wrong_shape_raises(self):
        with pytest.raises(ValidationError):
            Pool.new("web").decode(b'{"properties": {"basic": {"nodes_table": "nope"}}}')

    def test_str_is_json(self):
        assert json.loads(str(Pool.new("web")))["properties"]["basic"] == {}


class TestVirtualServer:
    def test_decode(self):
        vs = VirtualServer.new("front")
        vs.decode(b'{"properties": {"basic": {"enabled": true, "pool": "web", "port": 443, "protocol": "https"}}}')
        assert vs.properties.basic.enabled is True
        assert vs.properties.basic.pool == "web"
        assert vs.properties.basic.port == 443


class TestCounters:
    def test_combine_high_word(self):
        assert combine_counter(1, 0) == 1 << 32

    def test_combine_low_word(self):
        assert combine_counter(0, 4294967295) == 4294967295

    def test_combine_both(self):
        assert combine_counter(2, 7) == (2 << 32) + 7

    def test_node_stats_reassembled(self, mock_node_stats: dict):
        stats = NodeStats.new("10.0.0.1:80")
        stats.decode(json.dumps(mock_node_stats).encode())
        assert stats.statistics.bytes_in == 1 << 32
        assert stats.statistics.bytes_out == 4294967295
        assert stats.statistics.current_connections == 3
        assert stats.statistics.max_response_time == 120
        assert stats.statistics.state == "alive"

    def test_pool_stats_reassembled(self, mock_pool_stats: dict):
        stats = PoolStats.new("web")
        stats.decode(json.dumps(mock_pool_stats).encode())
        assert stats.statistics.bytes_in == (2 << 32) + 7
        assert stats.statistics.bytes_out == 42
        assert stats.statistics.node_count == 2
        assert stats.statistics.session_persistence == "none"

    def test_total_kept_without_halves(self):
        stats = NodeStats.new("n")
        stats.decode(b'{"statistics": {"bytes_from_node": 99}}')
        assert stats.statistics.bytes_in == 99

    def test_half_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            NodeStats.new("n").decode(b'{"statistics": {"bytes_from_node_hi": 4294967296}}')

    def test_encodes_wire_names(self, mock_node_stats: dict):
        stats = NodeStats.new("n")
        stats.decode(json.dumps(mock_node_stats).encode())
        body = json.loads(stats.encode())
        assert body["statistics"]["bytes_from_node"] == 1 << 32
        assert body["statistics"]["current_conn"] == 3


class TestResourceList:
    def test_names_keep_service_order(self, mock_listing: dict):
        listing = ResourceList.model_validate(mock_listing)
        assert listing.names() == ["a", "c", "b"]

    def test_duplicates_kept(self):
        listing = ResourceList.model_validate(
            {"children": [{"name": "x"}, {"name": "x"}]}
        )
        assert listing.names() == ["x", "x"]

    def test_empty(self):
        assert ResourceList.model_validate({}).names() == []
