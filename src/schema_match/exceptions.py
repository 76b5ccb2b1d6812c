"""Exceptions raised while building matchers.

Comparison mismatches are never raised; they are collected and reported.
These exceptions signal that the expected value itself is malformed for its
schema, which is a fixture bug rather than an assertion failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from schema_match.render import format_path

if TYPE_CHECKING:
    from schema_match.mismatch import FieldPath
    from schema_match.schema import UnionSchema

__all__ = ["MatcherConstructionError", "UnresolvedUnionError"]


class MatcherConstructionError(ValueError):
    """Base class for errors detected while building a matcher tree."""


class UnresolvedUnionError(MatcherConstructionError):
    """The expected value matches none of a union's members.

    Usually a required (non-nullable) field was left unset.
    """

    def __init__(self, schema: UnionSchema, value: Any, path: FieldPath) -> None:
        self.schema = schema
        self.value = value
        self.path = path
        location = format_path(path) or "<root>"
        super().__init__(
            f"Could not create matcher at {location}. "
            f"Was a non-nullable field left null? Schema: {schema} Value: {value!r}"
        )
