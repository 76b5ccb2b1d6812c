"""MatcherFactory: builds a matcher tree mirroring a schema and an expected value.

Dispatch is on the schema variant.  The order of checks matters:

1. An override registered for the exact path wins unconditionally; nothing
   below it is built.
2. Unions are resolved to one member (or to null) before anything else, and
   an unresolvable union is a construction error, not a mismatch.
3. Any other schema with an expected ``None`` binds a ``NullMatcher``.
4. Records, maps and arrays recurse; doubles get the tolerance policy; every
   other scalar is compared exactly.

Excluded record fields are pruned here, so evaluation never visits them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, assert_never

from schema_match.config import MatchOptions
from schema_match.exceptions import MatcherConstructionError, UnresolvedUnionError
from schema_match.matchers.array import OrderedArrayMatcher, UnorderedArrayMatcher
from schema_match.matchers.base import Matcher
from schema_match.matchers.composite import MapMatcher, RecordMatcher
from schema_match.matchers.scalar import DoubleMatcher, EqualMatcher, NullMatcher, OverrideMatcher
from schema_match.mismatch import FieldPath
from schema_match.record import Record
from schema_match.schema import (
    NULL,
    ArraySchema,
    EnumSchema,
    MapSchema,
    PrimitiveSchema,
    RecordSchema,
    Schema,
    SchemaType,
    UnionSchema,
    conforms,
)

logger = logging.getLogger(__name__)

__all__ = ["MatcherFactory"]


class MatcherFactory:
    """Builds immutable matcher trees under one ``MatchOptions``.

    Example::

        factory = MatcherFactory(MatchOptions().with_excluder(exclude_fields("id")))
        matcher = factory.build(person_schema, expected_person)
        matcher.describe_mismatch(actual_person)
    """

    def __init__(self, options: MatchOptions | None = None) -> None:
        self._options = options if options is not None else MatchOptions()

    @property
    def options(self) -> MatchOptions:
        return self._options

    def build(self, schema: Schema, expected: Any, path: FieldPath = ()) -> Matcher:
        """Build the matcher for ``expected`` at ``path``.

        Raises:
            UnresolvedUnionError: A union in ``schema`` has no member matching
                the corresponding part of ``expected``.
        """
        override = self._options.override_for(path)
        if override is not None:
            logger.debug("using override at %s", ".".join(path) or "<root>")
            return OverrideMatcher(override, path)

        if isinstance(schema, UnionSchema):
            return self._build_union(schema, expected, path)

        if expected is None:
            return NullMatcher(path)

        if isinstance(schema, RecordSchema):
            return self._build_record(schema, expected, path)
        if isinstance(schema, MapSchema):
            return self._build_map(schema, expected, path)
        if isinstance(schema, ArraySchema):
            return self._build_array(schema, expected, path)
        if isinstance(schema, PrimitiveSchema):
            if schema.type == SchemaType.DOUBLE:
                return DoubleMatcher(expected, path)
            return EqualMatcher(expected, path)
        if isinstance(schema, EnumSchema):
            return EqualMatcher(expected, path)

        assert_never(schema)

    # ------------------------------------------------------------------
    # Per-variant builders
    # ------------------------------------------------------------------

    def _build_union(self, schema: UnionSchema, expected: Any, path: FieldPath) -> Matcher:
        if expected is None:
            if schema.is_nullable:
                return NullMatcher(path)
            raise UnresolvedUnionError(schema, expected, path)

        for member in schema.members:
            if member != NULL and conforms(expected, member):
                logger.debug("union at %s resolved to %s", ".".join(path) or "<root>", member)
                return self.build(member, expected, path)

        raise UnresolvedUnionError(schema, expected, path)

    def _build_record(self, schema: RecordSchema, expected: Record, path: FieldPath) -> Matcher:
        if not isinstance(expected, Record):
            location = ".".join(path) or "<root>"
            msg = f"expected value at {location} is not a {schema.fullname} record: {expected!r}"
            raise MatcherConstructionError(msg)

        excluder = self._options.excluder
        fields: list[tuple[str, Matcher]] = []
        for field in schema.fields:
            child_path = (*path, field.name)
            if excluder.is_excluded(expected, child_path):
                logger.debug("excluding %s", ".".join(child_path))
                continue
            value = expected.get(field.name)
            fields.append((field.name, self.build(field.schema, value, child_path)))
        return RecordMatcher(expected, fields, path, self._options.renderer)

    def _build_map(
        self, schema: MapSchema, expected: Mapping[Any, Any], path: FieldPath
    ) -> Matcher:
        if not isinstance(expected, Mapping):
            location = ".".join(path) or "<root>"
            msg = f"expected value at {location} is not a map: {expected!r}"
            raise MatcherConstructionError(msg)

        entries = [
            (key, self.build(schema.values, value, (*path, str(key))))
            for key, value in expected.items()
        ]
        return MapMatcher(expected, entries, path, self._options.renderer)

    def _build_array(
        self, schema: ArraySchema, expected: Sequence[Any], path: FieldPath
    ) -> Matcher:
        elements = [
            self.build(schema.items, value, (*path, str(index)))
            for index, value in enumerate(expected)
        ]
        if self._options.ignore_array_order:
            return UnorderedArrayMatcher(expected, elements, path, self._options.renderer)
        return OrderedArrayMatcher(expected, elements, path, self._options.renderer)
