"""Safe serialization of structured data for HTML embedding.

JSON-LD is embedded as the text content of a ``<script>`` element, so the
serialized JSON must not contain anything that closes the element early or
that some engines treat as a line terminator inside string literals.
Escaping is applied to the serialized JSON, never to the input values.
"""

from __future__ import annotations

import json
from typing import Any

# <, >, & and the U+2028/U+2029 separators, mapped to their \uXXXX JSON escapes.
# Lone surrogates are escaped too; they cannot be encoded as UTF-8.
_HTML_UNSAFE_CHARS = ("<", ">", "&", chr(0x2028), chr(0x2029), *map(chr, range(0xD800, 0xE000)))
_ESCAPE_TABLE = str.maketrans({ch: "\\u%04x" % ord(ch) for ch in _HTML_UNSAFE_CHARS})

JSON_LD_MIME_TYPE = "application/ld+json"


def escape_json_for_html(json_text: str) -> str:
    """Escape characters in serialized JSON that could break out of a script tag."""
    return json_text.translate(_ESCAPE_TABLE)


def sanitize_for_json_ld(value: Any) -> str:
    """Serialize ``value`` to compact JSON and escape it for a ``<script>`` body.

    Raises:
        TypeError: ``value`` is not JSON-serializable.
        ValueError: ``value`` contains NaN or an infinite float.
    """
    serialized = json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    return escape_json_for_html(serialized)


def json_ld_script(value: Any) -> str:
    """Render a complete ``<script type="application/ld+json">`` element."""
    return f'<script type="{JSON_LD_MIME_TYPE}">{sanitize_for_json_ld(value)}</script>'
