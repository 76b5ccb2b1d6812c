"""Tests for leaf matchers: EqualMatcher, NullMatcher, DoubleMatcher, OverrideMatcher.

Covers:
- Double tolerance policy: absolute near zero, relative elsewhere, exact for NaN/Infinity
- Tolerance derived from the expected value only
- bool is never equal to int; enum members equal their symbol; numpy scalars accepted
- Override matchers: protocol objects, plain predicates, re-rooted Matcher diagnostics
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np
import pytest

from schema_match import Record, close_to, equal_to, matching
from schema_match.matchers import DoubleMatcher, EqualMatcher, NullMatcher, OverrideMatcher
from schema_match.matchers.scalar import double_tolerance
from schema_match.schema import LONG, STRING, RecordSchema


class PhoneType(Enum):
    HOME = 1
    WORK = 2


# ---------------------------------------------------------------------------
# double_tolerance
# ---------------------------------------------------------------------------


class TestDoubleTolerance:
    def test_zero_uses_absolute_tolerance(self) -> None:
        assert double_tolerance(0.0) == 1e-6

    def test_negative_zero_uses_absolute_tolerance(self) -> None:
        assert double_tolerance(-0.0) == 1e-6

    def test_relative_tolerance_scales_with_magnitude(self) -> None:
        assert double_tolerance(100.0) == pytest.approx(1e-6)
        assert double_tolerance(-2.0) == pytest.approx(2e-8)

    def test_nan_and_infinity_are_exact(self) -> None:
        assert double_tolerance(math.nan) is None
        assert double_tolerance(math.inf) is None
        assert double_tolerance(-math.inf) is None


# ---------------------------------------------------------------------------
# DoubleMatcher
# ---------------------------------------------------------------------------


class TestDoubleMatcher:
    def test_within_absolute_tolerance_of_zero(self) -> None:
        matcher = DoubleMatcher(0.0, ())
        assert matcher.matches(5e-7) is True
        assert matcher.matches(-5e-7) is True
        assert matcher.matches(2e-6) is False

    def test_within_relative_tolerance(self) -> None:
        matcher = DoubleMatcher(1e10, ())
        assert matcher.tolerance == pytest.approx(100.0)
        assert matcher.matches(1e10 + 50.0) is True
        assert matcher.matches(1e10 + 200.0) is False

    def test_tolerance_ignores_actual_magnitude(self) -> None:
        # 1e-7 is within 1e-6 of zero, but zero is not within 1e-15 of 1e-7
        assert DoubleMatcher(0.0, ()).matches(1e-7) is True
        assert DoubleMatcher(1e-7, ()).matches(0.0) is False

    def test_nan_matches_only_nan(self) -> None:
        matcher = DoubleMatcher(math.nan, ())
        assert matcher.matches(math.nan) is True
        assert matcher.matches(0.0) is False
        assert matcher.describe_mismatch(1.0) == "Expected: NaN but: was 1.0"

    def test_infinity_is_exact(self) -> None:
        matcher = DoubleMatcher(math.inf, ())
        assert matcher.matches(math.inf) is True
        assert matcher.matches(-math.inf) is False
        assert matcher.matches(1e308) is False

    def test_finite_expected_rejects_nan(self) -> None:
        assert DoubleMatcher(1.0, ()).matches(math.nan) is False

    def test_numpy_values_accepted(self) -> None:
        matcher = DoubleMatcher(np.float64(2.5), ())
        assert matcher.matches(np.float64(2.5)) is True
        assert matcher.matches(np.float32(2.5)) is True
        assert matcher.matches(np.int64(2)) is False

    def test_integers_compared_numerically(self) -> None:
        assert DoubleMatcher(3.0, ()).matches(3) is True

    def test_non_numbers_mismatch(self) -> None:
        matcher = DoubleMatcher(1.0, ("height",))
        assert matcher.matches(True) is False
        assert matcher.matches("1.0") is False
        report = matcher.describe_mismatch(None)
        assert report.startswith("height Expected: a numeric value within ")
        assert report.endswith(" of 1.0 but: was null")


# ---------------------------------------------------------------------------
# EqualMatcher / NullMatcher
# ---------------------------------------------------------------------------


class TestEqualMatcher:
    def test_equal_strings(self) -> None:
        assert EqualMatcher("John", ()).matches("John") is True

    def test_message(self) -> None:
        matcher = EqualMatcher("John", ("firstName",))
        assert matcher.describe_mismatch("Jim") == 'firstName Expected: "John" but: was "Jim"'

    def test_bool_is_not_int(self) -> None:
        assert EqualMatcher(1, ()).matches(True) is False
        assert EqualMatcher(True, ()).matches(1) is False
        assert EqualMatcher(True, ()).matches(np.bool_(True)) is True

    def test_enum_member_equals_symbol(self) -> None:
        assert EqualMatcher("HOME", ()).matches(PhoneType.HOME) is True
        assert EqualMatcher(PhoneType.WORK, ()).matches("WORK") is True
        assert EqualMatcher("HOME", ()).matches(PhoneType.WORK) is False

    def test_numpy_integer(self) -> None:
        assert EqualMatcher(5, ()).matches(np.int64(5)) is True

    def test_bytes_and_bytearray(self) -> None:
        assert EqualMatcher(b"\x00\x01", ()).matches(bytearray(b"\x00\x01")) is True

    def test_none_actual(self) -> None:
        report = EqualMatcher(21, ("age",)).describe_mismatch(None)
        assert report == "age Expected: 21 but: was null"

    def test_numpy_array_actual_is_a_mismatch(self) -> None:
        matcher = EqualMatcher(5, ("count",))
        assert matcher.matches(np.array([1, 2])) is False
        assert matcher.matches(np.array([5])) is False
        report = matcher.describe_mismatch(np.array([1, 2]))
        assert report == "count Expected: 5 but: was [1, 2]"

    def test_numpy_array_in_record_field(self) -> None:
        tag = RecordSchema("Tag").add_field("name", STRING)
        matcher = equal_to(Record(tag, name="a"))
        actual = Record(tag, name=np.array(["a", "b"]))
        assert matcher.matches(actual) is False
        assert matcher.describe_mismatch(actual) == 'name Expected: "a" but: was ["a", "b"]'


class TestNullMatcher:
    def test_matches_none(self) -> None:
        assert NullMatcher(()).matches(None) is True

    def test_reports_actual(self) -> None:
        report = NullMatcher(("title",)).describe_mismatch("Mr")
        assert report == 'title Expected: null but: was "Mr"'

    def test_describe(self) -> None:
        assert NullMatcher(()).describe() == "null"


# ---------------------------------------------------------------------------
# OverrideMatcher
# ---------------------------------------------------------------------------


class TestOverrideMatcher:
    def test_protocol_matcher(self) -> None:
        matcher = OverrideMatcher(close_to(10.0, 0.5), ("score",))
        assert matcher.matches(10.4) is True
        assert matcher.describe_mismatch(11.0) == (
            "score Expected: a numeric value within 0.5 of 10.0 but: was 11.0"
        )

    def test_predicate_matcher(self) -> None:
        starts_with_zero = matching(lambda v: v.startswith("0"), "a number starting with 0")
        matcher = OverrideMatcher(starts_with_zero, ("digits",))
        assert matcher.matches("07654") is True
        assert matcher.describe_mismatch("12345") == (
            'digits Expected: a number starting with 0 but: was "12345"'
        )

    def test_matcher_override_is_rerooted(self) -> None:
        point = RecordSchema("Point").add_field("x", LONG).add_field("label", STRING)
        inner = equal_to(Record(point, x=1, label="a"))
        matcher = OverrideMatcher(inner, ("shape", "origin"))
        actual = Record(point, x=2, label="b")
        assert matcher.matches(actual) is False
        assert matcher.describe_mismatch(actual) == (
            "shape.origin.x Expected: 1 but: was 2\n"
            'shape.origin.label Expected: "a" but: was "b"'
        )

    def test_describe_delegates(self) -> None:
        assert OverrideMatcher(matching(bool, "truthy"), ()).describe() == "truthy"
