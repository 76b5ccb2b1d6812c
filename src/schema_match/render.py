"""Text rendering for values and paths used in mismatch descriptions.

``render_value`` is the default renderer: JSON-style text in which records
appear as objects in field-declaration order, e.g.::

    {"firstName": "John", "age": 21, "height": null}

Strings are double-quoted, ``None`` is ``null`` and non-finite doubles are
``NaN`` / ``Infinity`` / ``-Infinity``.  Bytes are decoded as ISO-8859-1 so
every byte maps to exactly one character.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

import numpy as np

from schema_match.record import Record

__all__ = ["format_path", "render_value"]


def _to_json_compatible(value: Any) -> Any:
    """``default`` hook for ``json.dumps``: called for anything json can't encode."""
    if isinstance(value, Record):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {str(k): v for k, v in value.items()}
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("iso-8859-1")
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, Iterable):
        return list(value)
    return str(value)


def render_value(value: Any) -> str:
    """Render any value compared by this package as JSON-style text."""
    return json.dumps(value, default=_to_json_compatible, ensure_ascii=False)


def format_path(path: Iterable[str]) -> str:
    """Join path segments with ``.``; the root path renders as ``""``."""
    return ".".join(path)
