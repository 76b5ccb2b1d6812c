"""Public API functions for schema-match.

This module provides the three matcher entry points, equal_to, contains and
contains_in_any_order, plus assert_matches for plain ``assert``-style use.
Each call builds a fresh matcher tree; the tree can then be evaluated any
number of times against different actual values.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from schema_match.config import MatchOptions
from schema_match.matchers import (
    Matcher,
    MatcherFactory,
    OrderedArrayMatcher,
    UnorderedArrayMatcher,
)
from schema_match.record import Record
from schema_match.schema import Schema

logger = logging.getLogger(__name__)

__all__ = ["assert_matches", "contains", "contains_in_any_order", "equal_to"]


def _schema_of(value: Any, schema: Schema | None) -> Schema:
    if schema is not None:
        return schema
    if isinstance(value, Record):
        return value.schema
    msg = f"schema is required for non-record value {value!r}"
    raise TypeError(msg)


def _element_matchers(
    factory: MatcherFactory, expected: list[Any], schema: Schema | None
) -> list[Matcher]:
    return [
        factory.build(_schema_of(value, schema), value, (str(index),))
        for index, value in enumerate(expected)
    ]


def equal_to(
    expected: Any,
    options: MatchOptions | None = None,
    *,
    schema: Schema | None = None,
) -> Matcher:
    """Return a matcher for values structurally equal to ``expected``.

    Args:
        expected: The expected value, usually a ``Record``.
        options:  Comparison policy.  Defaults to ``MatchOptions()``.
        schema:   Schema of ``expected``.  Defaults to ``expected.schema``
                  for records and is required for anything else.

    Returns:
        A ``Matcher`` rooted at the empty path.

    Raises:
        UnresolvedUnionError: ``expected`` does not fit its schema's unions.
    """
    factory = MatcherFactory(options)
    return factory.build(_schema_of(expected, schema), expected)


def contains(
    expected: Iterable[Any],
    options: MatchOptions | None = None,
    *,
    schema: Schema | None = None,
) -> Matcher:
    """Return a matcher for sequences whose elements match ``expected`` in order.

    Mismatches are reported under the element index, e.g.
    ``1.firstName Expected: "Jim" but: was "Jason"``; a longer actual sequence
    is reported as ``had additional indices: 2``.

    Args:
        expected: Expected elements, usually records.
        options:  Comparison policy.  Defaults to ``MatchOptions()``.
        schema:   Element schema.  Defaults to each record's own schema.
    """
    factory = MatcherFactory(options)
    values = list(expected)
    elements = _element_matchers(factory, values, schema)
    return OrderedArrayMatcher(values, elements, (), factory.options.renderer)


def contains_in_any_order(
    expected: Iterable[Any],
    options: MatchOptions | None = None,
    *,
    schema: Schema | None = None,
) -> Matcher:
    """Return a matcher for sequences containing exactly ``expected``, in any order.

    Elements are paired greedily: each actual element consumes the first
    remaining expected element it matches.  Unpaired actual elements are
    reported as ``Not matched: ...`` and unpaired expected elements as
    ``No item matched: ...``.

    Args:
        expected: Expected elements, usually records.
        options:  Comparison policy.  Defaults to ``MatchOptions()``.
        schema:   Element schema.  Defaults to each record's own schema.
    """
    factory = MatcherFactory(options)
    values = list(expected)
    elements = _element_matchers(factory, values, schema)
    return UnorderedArrayMatcher(values, elements, (), factory.options.renderer)


def assert_matches(actual: Any, matcher: Matcher, reason: str = "") -> None:
    """Raise ``AssertionError`` with the full mismatch report unless ``actual`` matches.

    The message layout is::

        <reason>
        Expected: <description of the expected value>
             but: <one line per mismatch>
    """
    # a one-shot iterator would be exhausted by the boolean pass
    if isinstance(actual, Iterator):
        actual = list(actual)

    if matcher.matches(actual):
        return

    mismatches = matcher.mismatches(actual)
    logger.debug("assertion failed with %d mismatch(es)", len(mismatches))
    raise AssertionError(
        f"{reason}\nExpected: {matcher.describe()}\n     but: {mismatches.render()}"
    )
