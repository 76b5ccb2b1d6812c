"""Tests for Record, the schema-carrying value type."""

from __future__ import annotations

from typing import Any

import pytest

from schema_match import Record
from schema_match.schema import LONG, NULL, STRING, RecordSchema, UnionSchema


@pytest.fixture
def point_schema() -> RecordSchema:
    return (
        RecordSchema("Point")
        .add_field("x", LONG, default=0)
        .add_field("y", LONG, default=0)
        .add_field("label", UnionSchema((NULL, STRING)))
    )


class TestRecord:
    def test_defaults_fill_missing_fields(self, point_schema: RecordSchema) -> None:
        point = Record(point_schema, y=5)
        assert point.to_dict() == {"x": 0, "y": 5, "label": None}

    def test_mapping_and_keywords_combine(self, point_schema: RecordSchema) -> None:
        point = Record(point_schema, {"x": 1, "y": 2}, y=3)
        assert (point["x"], point["y"]) == (1, 3)

    def test_unknown_field_rejected(self, point_schema: RecordSchema) -> None:
        with pytest.raises(ValueError, match="unknown field"):
            Record(point_schema, z=1)

    def test_setitem(self, point_schema: RecordSchema) -> None:
        point = Record(point_schema)
        point["label"] = "origin"
        assert point.get("label") == "origin"
        with pytest.raises(KeyError):
            point["z"] = 1

    def test_iteration_follows_declaration_order(self, point_schema: RecordSchema) -> None:
        point = Record(point_schema, label="a", y=1, x=2)
        assert list(point) == ["x", "y", "label"]
        assert len(point) == 3

    def test_replace_returns_copy(self, point_schema: RecordSchema) -> None:
        point = Record(point_schema, x=1)
        moved = point.replace(x=9)
        assert point["x"] == 1
        assert moved["x"] == 9
        assert moved.schema is point_schema

    def test_equality_by_fullname_and_values(self, point_schema: RecordSchema) -> None:
        twin_schema = RecordSchema("Point").add_field("x", LONG).add_field("y", LONG).add_field(
            "label", UnionSchema((NULL, STRING))
        )
        assert Record(point_schema, x=1, y=0) == Record(twin_schema, x=1, y=0)
        assert Record(point_schema, x=1) != Record(point_schema, x=2)
        assert Record(point_schema) != {"x": 0, "y": 0, "label": None}

    def test_unhashable(self, point_schema: RecordSchema) -> None:
        with pytest.raises(TypeError):
            hash(Record(point_schema))

    def test_repr(self, point_schema: RecordSchema) -> None:
        assert repr(Record(point_schema, x=1)) == "Record(Point, {'x': 1, 'y': 0, 'label': None})"

    def test_get_default(self, point_schema: RecordSchema) -> None:
        point: Any = Record(point_schema)
        assert point.get("nope", "fallback") == "fallback"
