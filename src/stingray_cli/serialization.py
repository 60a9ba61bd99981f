"""JSON encoding for request bodies sent to the appliance.

The Stingray REST API does not decode the ``\\u0026``, ``\\u003c`` and
``\\u003e`` escapes that HTML-safe JSON encoders emit for ``&``, ``<`` and
``>``.  Every outbound body goes through :func:`unescape_html_escapes` so
those characters reach the appliance verbatim.  Inbound bodies are decoded
with plain JSON semantics.
"""

from __future__ import annotations

import json
import re
from typing import Any

_ESCAPES = {b"26": b"&", b"3c": b"<", b"3e": b">"}

# An escape only counts when preceded by an even number of backslashes;
# ``\\u0026`` in the output is the literal text "&".
_ESCAPE_RE = re.compile(rb"(?<!\\)((?:\\\\)*)\\u00(26|3[ce])", re.IGNORECASE)

# Python strings can hold unpaired surrogates, which have no UTF-8 form.
_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def unescape_html_escapes(data: bytes) -> bytes:
    """Replace JSON escapes of ``&``, ``<`` and ``>`` with the raw characters."""
    return _ESCAPE_RE.sub(
        lambda m: m.group(1) + _ESCAPES[m.group(2).lower()], data,
    )


def json_marshal(value: Any) -> bytes:
    """Encode *value* as JSON bytes the appliance will accept."""
    data = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    data = _SURROGATE_RE.sub("\ufffd", data)
    return unescape_html_escapes(data.encode("utf-8"))


def json_unmarshal(data: bytes | str) -> Any:
    """Decode a JSON response body. Errors propagate to the caller."""
    return json.loads(data)
