"""matchers subpackage: the matcher tree node family and its factory.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from schema_match.matchers import MatcherFactory

    matcher = MatcherFactory().build(person_schema, expected_person)
    matcher.matches(actual_person)            # boolean, short-circuits
    matcher.describe_mismatch(actual_person)  # every difference, one per line
"""

from __future__ import annotations

from schema_match.matchers.array import OrderedArrayMatcher, UnorderedArrayMatcher
from schema_match.matchers.base import Matcher
from schema_match.matchers.composite import MapMatcher, RecordMatcher
from schema_match.matchers.factory import MatcherFactory
from schema_match.matchers.scalar import DoubleMatcher, EqualMatcher, NullMatcher, OverrideMatcher

__all__ = [
    "DoubleMatcher",
    "EqualMatcher",
    "MapMatcher",
    "Matcher",
    "MatcherFactory",
    "NullMatcher",
    "OrderedArrayMatcher",
    "OverrideMatcher",
    "RecordMatcher",
    "UnorderedArrayMatcher",
]
