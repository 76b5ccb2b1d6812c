"""Matcher: the immutable comparison node every variant derives from.

Each node is bound to one expected value at one path and is evaluated through
a single function, ``evaluate(actual, mismatches)``:

- ``mismatches is None`` -> boolean mode.  Children are visited in order and
  evaluation stops at the first failure; nothing is written.
- ``mismatches`` is a ``MismatchList`` -> diagnostic mode.  All children are
  visited and every failing node appends its own path-qualified entry.

Both public entry points, ``matches`` and ``describe_mismatch``, go through the
same ``evaluate`` so the two modes can never disagree about *whether* values
match.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from schema_match.mismatch import FieldPath, MismatchList
from schema_match.render import render_value

__all__ = ["Matcher", "expected_but_was"]


def expected_but_was(expected: str, actual: Any) -> str:
    """The generic mismatch message: ``Expected: <expected> but: was <actual>``."""
    return f"Expected: {expected} but: was {render_value(actual)}"


class Matcher(ABC):
    """Base class for all matcher tree nodes.

    Subclasses must not mutate their expected value or any state during
    evaluation: a tree may be evaluated concurrently against different actual
    values as long as each diagnostic call has its own ``MismatchList``.
    """

    __slots__ = ("_path",)

    def __init__(self, path: FieldPath) -> None:
        self._path = path

    @property
    def path(self) -> FieldPath:
        return self._path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def matches(self, actual: Any) -> bool:
        """Return True if ``actual`` matches.  Short-circuits on the first difference."""
        return self.evaluate(actual, None)

    def mismatches(self, actual: Any) -> MismatchList:
        """Return every difference between the expected value and ``actual``."""
        collected = MismatchList()
        self.evaluate(actual, collected)
        return collected

    def describe_mismatch(self, actual: Any) -> str:
        """Return the newline-joined, path-qualified report; ``""`` when matching."""
        return self.mismatches(actual).render()

    # ------------------------------------------------------------------
    # Subclass contract
    # ------------------------------------------------------------------

    @abstractmethod
    def evaluate(self, actual: Any, mismatches: MismatchList | None) -> bool:
        """Compare ``actual`` to the bound expected value.

        Args:
            actual:     The value at this node's path in the actual tree.
            mismatches: ``None`` for boolean mode, otherwise the accumulator
                        every failing node writes to.

        Returns:
            True if ``actual`` matches.
        """

    @abstractmethod
    def describe(self) -> str:
        """Describe the expected value, for use in mismatch messages."""

    def _fail(self, mismatches: MismatchList | None, message: str) -> bool:
        if mismatches is not None:
            mismatches.add(self._path, message)
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r}, expected={self.describe()})"
