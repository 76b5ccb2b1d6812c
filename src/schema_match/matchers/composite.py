"""Record and map matchers.

RecordMatcher first checks the actual value is a record of the same schema
(by full name) and only then visits fields, in schema declaration order.

MapMatcher visits every key of the *expected* map (a key missing from the
actual map is compared against ``None``), then reports all actual keys that
were never looked at as one ``had additional keys`` entry at the map's path.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from schema_match.matchers.base import Matcher, expected_but_was
from schema_match.mismatch import FieldPath, MismatchList
from schema_match.protocols import Renderer
from schema_match.record import Record
from schema_match.render import render_value

__all__ = ["MapMatcher", "RecordMatcher"]


class RecordMatcher(Matcher):
    """Field-by-field comparison of a record."""

    __slots__ = ("_expected", "_fields", "_renderer")

    def __init__(
        self,
        expected: Record,
        fields: Sequence[tuple[str, Matcher]],
        path: FieldPath,
        renderer: Renderer = render_value,
    ) -> None:
        super().__init__(path)
        self._expected = expected
        self._fields = tuple(fields)
        self._renderer = renderer

    @property
    def fullname(self) -> str:
        return self._expected.schema.fullname

    @property
    def field_names(self) -> list[str]:
        """Fields that take part in the comparison (exclusions removed)."""
        return [name for name, _ in self._fields]

    def evaluate(self, actual: Any, mismatches: MismatchList | None) -> bool:
        if actual is None:
            return self._fail(mismatches, f"Expected: an instance of {self.fullname} but: was null")
        if not isinstance(actual, Record) or actual.schema.fullname != self.fullname:
            return self._fail(mismatches, f"is not an instance of {self.fullname}")

        matched = True
        for name, matcher in self._fields:
            if not matcher.evaluate(actual.get(name), mismatches):
                matched = False
                if mismatches is None:
                    return False
        return matched

    def describe(self) -> str:
        return f"{self._expected.schema.name}: {self._renderer(self._expected)}"


class MapMatcher(Matcher):
    """Key-by-key comparison of a map; surplus actual keys are one mismatch."""

    __slots__ = ("_entries", "_expected", "_keys", "_renderer")

    def __init__(
        self,
        expected: Mapping[Any, Any],
        entries: Sequence[tuple[Any, Matcher]],
        path: FieldPath,
        renderer: Renderer = render_value,
    ) -> None:
        super().__init__(path)
        self._expected = expected
        self._entries = tuple(entries)
        self._keys = frozenset(key for key, _ in self._entries)
        self._renderer = renderer

    def evaluate(self, actual: Any, mismatches: MismatchList | None) -> bool:
        if actual is None:
            return self._fail(mismatches, expected_but_was(self.describe(), None))
        if not isinstance(actual, Mapping):
            return self._fail(mismatches, "is not a map")

        matched = True
        for key, matcher in self._entries:
            if not matcher.evaluate(actual.get(key), mismatches):
                matched = False
                if mismatches is None:
                    return False

        # Every expected key counts as looked at, matched or not.
        additional = [key for key in actual if key not in self._keys]
        if additional:
            rendered = ", ".join(render_value(key) for key in additional)
            return self._fail(mismatches, f"had additional keys: {{{rendered}}}")
        return matched

    def describe(self) -> str:
        return self._renderer(self._expected)
