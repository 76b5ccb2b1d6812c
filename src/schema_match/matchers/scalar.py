"""Leaf matchers: exact equality, null, tolerant doubles and caller overrides.

Double tolerance policy (derived once from the *expected* value):

- NaN or +/-Infinity -> exact equality (NaN matches NaN)
- exactly 0.0        -> absolute tolerance 1e-6
- anything else      -> relative tolerance ``abs(expected) * 1e-8``
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

from schema_match.matchers.base import Matcher, expected_but_was
from schema_match.mismatch import FieldPath, MismatchList
from schema_match.protocols import ValueMatcher
from schema_match.render import render_value

__all__ = [
    "ABSOLUTE_ZERO_TOLERANCE",
    "RELATIVE_TOLERANCE",
    "DoubleMatcher",
    "EqualMatcher",
    "NullMatcher",
    "OverrideMatcher",
    "double_tolerance",
]

ABSOLUTE_ZERO_TOLERANCE = 1e-6
RELATIVE_TOLERANCE = 1e-8


def _normalise(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, bytearray):
        return bytes(value)
    return value


def _scalars_equal(expected: Any, actual: Any) -> bool:
    expected = _normalise(expected)
    actual = _normalise(actual)
    # True == 1 in Python; booleans only ever equal booleans
    if isinstance(expected, bool) != isinstance(actual, bool):
        return False
    result = expected == actual
    # an ndarray compares elementwise; only a scalar truth value counts
    if not isinstance(result, (bool, np.bool_)):
        return False
    return bool(result)


class EqualMatcher(Matcher):
    """Exact equality against a non-double scalar (string, int, enum symbol...)."""

    __slots__ = ("_expected",)

    def __init__(self, expected: Any, path: FieldPath) -> None:
        super().__init__(path)
        self._expected = expected

    def evaluate(self, actual: Any, mismatches: MismatchList | None) -> bool:
        if _scalars_equal(self._expected, actual):
            return True
        return self._fail(mismatches, expected_but_was(self.describe(), actual))

    def describe(self) -> str:
        return render_value(self._expected)


class NullMatcher(Matcher):
    """Matches only ``None``."""

    __slots__ = ()

    def evaluate(self, actual: Any, mismatches: MismatchList | None) -> bool:
        if actual is None:
            return True
        return self._fail(mismatches, expected_but_was("null", actual))

    def describe(self) -> str:
        return "null"


def double_tolerance(expected: float) -> float | None:
    """Return the allowed absolute difference for ``expected``; None means exact."""
    if np.isnan(expected) or np.isinf(expected):
        return None
    if expected == 0.0:
        return ABSOLUTE_ZERO_TOLERANCE
    return abs(expected) * RELATIVE_TOLERANCE


def _is_number(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


class DoubleMatcher(Matcher):
    """Tolerant comparison of a double-precision value."""

    __slots__ = ("_expected", "_tolerance")

    def __init__(self, expected: float, path: FieldPath) -> None:
        super().__init__(path)
        self._expected = float(expected)
        self._tolerance = double_tolerance(self._expected)

    @property
    def tolerance(self) -> float | None:
        return self._tolerance

    def evaluate(self, actual: Any, mismatches: MismatchList | None) -> bool:
        if not _is_number(actual):
            return self._fail(mismatches, expected_but_was(self.describe(), actual))

        value = float(actual)
        if self._tolerance is None:
            ok = value == self._expected or (
                bool(np.isnan(self._expected)) and bool(np.isnan(value))
            )
        else:
            ok = abs(value - self._expected) <= self._tolerance
        if ok:
            return True
        return self._fail(mismatches, expected_but_was(self.describe(), actual))

    def describe(self) -> str:
        if self._tolerance is None:
            return render_value(self._expected)
        return (
            f"a numeric value within {render_value(self._tolerance)} "
            f"of {render_value(self._expected)}"
        )


class OverrideMatcher(Matcher):
    """Delegates to a caller-supplied matcher registered for this exact path.

    When the override is itself a ``Matcher`` (for example one built by
    ``equal_to``), its own path-qualified mismatches are re-rooted under this
    node's path instead of being flattened into one message.
    """

    __slots__ = ("_override",)

    def __init__(self, override: ValueMatcher, path: FieldPath) -> None:
        super().__init__(path)
        self._override = override

    def evaluate(self, actual: Any, mismatches: MismatchList | None) -> bool:
        if mismatches is None:
            return bool(self._override.matches(actual))

        if isinstance(self._override, Matcher):
            nested = MismatchList()
            if self._override.evaluate(actual, nested):
                return True
            if nested:
                mismatches.extend_under(self._path, nested)
                return False
        elif self._override.matches(actual):
            return True
        return self._fail(mismatches, expected_but_was(self.describe(), actual))

    def describe(self) -> str:
        return self._override.describe()
