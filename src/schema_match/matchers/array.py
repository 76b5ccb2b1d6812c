"""Array matchers: positional (ordered) and multiset (unordered).

Ordered comparison pairs expected index ``i`` with actual index ``i``.  Surplus
actual elements are reported once as ``had additional indices: ...``; when the
actual array is shorter, the first missing position is reported as a null
mismatch.  An empty expected array falls back to plain equality.

Unordered comparison is a greedy first-fit assignment with no backtracking:
each actual element, in iteration order, consumes the first still-unconsumed
expected matcher that accepts it.  This is deterministic for a given input
order but not globally optimal; a smarter assignment could sometimes pair a
"Not matched" element with a "No item matched" expectation.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import numpy as np

from schema_match.matchers.base import Matcher
from schema_match.mismatch import FieldPath, MismatchList
from schema_match.protocols import Renderer
from schema_match.record import Record
from schema_match.render import render_value

__all__ = ["OrderedArrayMatcher", "UnorderedArrayMatcher", "as_items"]


def as_items(value: Any) -> list[Any] | None:
    """Materialise an actual array value as a list; None if it isn't array-like."""
    if isinstance(value, np.ndarray):
        return value.tolist()  # type: ignore[no-any-return]
    if isinstance(value, (str, bytes, bytearray, Mapping, Record)):
        return None
    if isinstance(value, (Sequence, Iterable)):
        return list(value)
    return None


class _ArrayMatcher(Matcher):
    __slots__ = ("_elements", "_expected", "_renderer")

    def __init__(
        self,
        expected: Sequence[Any],
        elements: Sequence[Matcher],
        path: FieldPath,
        renderer: Renderer = render_value,
    ) -> None:
        super().__init__(path)
        self._expected = list(expected)
        self._elements = tuple(elements)
        self._renderer = renderer

    @property
    def elements(self) -> tuple[Matcher, ...]:
        return self._elements

    def describe(self) -> str:
        return self._renderer(self._expected)

    def _items_or_fail(
        self, actual: Any, mismatches: MismatchList | None
    ) -> list[Any] | None:
        if actual is None:
            self._fail(mismatches, f"Expected: {self.describe()} but: was null")
            return None
        items = as_items(actual)
        if items is None:
            self._fail(mismatches, "is not an array")
        return items


class OrderedArrayMatcher(_ArrayMatcher):
    """Positional comparison; the default array mode."""

    __slots__ = ()

    def evaluate(self, actual: Any, mismatches: MismatchList | None) -> bool:
        items = self._items_or_fail(actual, mismatches)
        if items is None:
            return False

        if not self._elements:
            if not items:
                return True
            return self._fail(
                mismatches,
                f"Expected: {self.describe()} but: was {self._renderer(items)}",
            )

        matched = True
        for index, matcher in enumerate(self._elements):
            if index >= len(items):
                if mismatches is None:
                    return False
                # A null expectation still matches None, but the position is missing.
                if matcher.evaluate(None, mismatches):
                    mismatches.add(matcher.path, "Expected: null but: was missing")
                matched = False
                break
            if not matcher.evaluate(items[index], mismatches):
                matched = False
                if mismatches is None:
                    return False

        if len(items) > len(self._elements):
            surplus = ", ".join(str(i) for i in range(len(self._elements), len(items)))
            return self._fail(mismatches, f"had additional indices: {surplus}")
        return matched


class UnorderedArrayMatcher(_ArrayMatcher):
    """Multiset comparison by greedy first-fit."""

    __slots__ = ()

    def evaluate(self, actual: Any, mismatches: MismatchList | None) -> bool:
        items = self._items_or_fail(actual, mismatches)
        if items is None:
            return False

        remaining = list(self._elements)
        matched = True
        for item in items:
            for position, matcher in enumerate(remaining):
                if matcher.matches(item):
                    del remaining[position]
                    break
            else:
                matched = False
                if mismatches is None:
                    return False
                mismatches.add(self._path, f"Not matched: {self._renderer(item)}")

        for matcher in remaining:
            matched = False
            if mismatches is None:
                return False
            mismatches.add(self._path, f"No item matched: {matcher.describe()}")
        return matched
