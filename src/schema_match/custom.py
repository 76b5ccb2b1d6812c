"""Ready-made ``ValueMatcher`` implementations for per-path overrides.

Example::

    options = (
        MatchOptions()
        .add_override("createdAt", anything())
        .add_override("score", close_to(0.5, 0.01))
        .add_override("email", matching(lambda v: v.endswith("@acme.com"), "an acme address"))
    )
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from schema_match.render import render_value

__all__ = ["CloseTo", "IsAnything", "PredicateMatcher", "anything", "close_to", "matching"]


@dataclass(frozen=True, slots=True)
class IsAnything:
    """Accepts every value, including ``None``."""

    def matches(self, actual: Any) -> bool:
        return True

    def describe(self) -> str:
        return "ANYTHING"


@dataclass(frozen=True, slots=True)
class CloseTo:
    """Accepts numbers within ``delta`` (inclusive) of ``value``."""

    value: float
    delta: float

    def __post_init__(self) -> None:
        if self.delta < 0.0:
            msg = f"delta must be >= 0.0, got {self.delta}"
            raise ValueError(msg)

    def matches(self, actual: Any) -> bool:
        try:
            return math.fabs(float(actual) - self.value) <= self.delta
        except (TypeError, ValueError):
            return False

    def describe(self) -> str:
        return f"a numeric value within {render_value(self.delta)} of {render_value(self.value)}"


@dataclass(frozen=True, slots=True)
class PredicateMatcher:
    """Adapts a plain ``predicate(actual) -> bool`` to the ``ValueMatcher`` protocol."""

    predicate: Callable[[Any], bool]
    description: str

    def matches(self, actual: Any) -> bool:
        return bool(self.predicate(actual))

    def describe(self) -> str:
        return self.description


def anything() -> IsAnything:
    return IsAnything()


def close_to(value: float, delta: float) -> CloseTo:
    return CloseTo(float(value), float(delta))


def matching(predicate: Callable[[Any], bool], description: str | None = None) -> PredicateMatcher:
    """Wrap ``predicate``; ``description`` defaults to the predicate's name."""
    if description is None:
        description = f"a value satisfying {getattr(predicate, '__name__', repr(predicate))}"
    return PredicateMatcher(predicate, description)
