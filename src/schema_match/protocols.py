"""Structural protocols for the package's extension points.

Callers plug in their own exclusion rules and per-path matchers without
inheriting from any base class; any object with the right methods passes
``isinstance`` checks.

Example::

    from schema_match.protocols import Excluder

    class SkipAuditFields:
        def is_excluded(self, record, path):
            return path[-1].startswith("audit")

    assert isinstance(SkipAuditFields(), Excluder)  # True - structural conformance
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from schema_match.mismatch import FieldPath

__all__ = ["Excluder", "Renderer", "ValueMatcher"]

Renderer = Callable[[Any], str]


@runtime_checkable
class Excluder(Protocol):
    """Decides whether a record field is left out of the comparison.

    ``record`` is the *expected* record that owns the field and ``path`` is the
    full path from the comparison root to the field (its last segment is the
    field name).  An excluded field's whole subtree is never visited.
    """

    def is_excluded(self, record: Any, path: FieldPath) -> bool: ...


@runtime_checkable
class ValueMatcher(Protocol):
    """Anything that can stand in for the generated matcher at a given path.

    - ``matches`` returns True when ``actual`` is acceptable.
    - ``describe`` returns what was expected, used in mismatch messages.
    """

    def matches(self, actual: Any) -> bool: ...

    def describe(self) -> str: ...
