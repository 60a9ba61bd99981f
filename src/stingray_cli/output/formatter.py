"""Output dispatcher: renders data as a table, JSON, YAML, or CSV."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console

from stingray_cli.models.base import JSONResource
from stingray_cli.output.tables import kv_table, make_table

console = Console()


def _plain(data: Any) -> Any:
    """Convert models to the wire-shaped dicts users see from the API."""
    if isinstance(data, JSONResource):
        return data.to_dict()
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    return data


def output_json(data: Any) -> None:
    console.print_json(json.dumps(_plain(data), default=str))


def output_yaml(data: Any) -> None:
    import yaml

    text = yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False)
    console.print(text, end="", markup=False, highlight=False)


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows([["" if v is None else str(v) for v in row] for row in rows])
    console.print(buf.getvalue(), end="", markup=False, highlight=False)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Dispatch output to the appropriate formatter.

    Tables use *columns*/*rows* when given, otherwise the data is shown as
    key/value pairs. CSV without rows falls back to JSON.
    """
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv" and columns and rows is not None:
        output_csv(columns, rows)
    elif fmt == "csv":
        output_json(data)
    elif columns and rows is not None:
        console.print(make_table(title, columns, rows))
    elif isinstance(_plain(data), dict):
        console.print(kv_table(_plain(data), title=title))
    else:
        console.print(data)
