"""Schema match - structural comparison of schema-described values for test assertions."""

from __future__ import annotations

from schema_match.api import assert_matches, contains, contains_in_any_order, equal_to
from schema_match.config import MatchOptions, exclude_fields, exclude_paths
from schema_match.custom import anything, close_to, matching
from schema_match.exceptions import MatcherConstructionError, UnresolvedUnionError
from schema_match.matchers import Matcher
from schema_match.mismatch import Mismatch, MismatchList
from schema_match.protocols import Excluder, ValueMatcher
from schema_match.record import Record

__version__: str = "0.1.0"
__all__: list[str] = [
    "Excluder",
    "MatchOptions",
    "Matcher",
    "MatcherConstructionError",
    "Mismatch",
    "MismatchList",
    "Record",
    "UnresolvedUnionError",
    "ValueMatcher",
    "anything",
    "assert_matches",
    "close_to",
    "contains",
    "contains_in_any_order",
    "equal_to",
    "exclude_fields",
    "exclude_paths",
    "matching",
]
