"""Record: a schema-carrying structured value with named fields.

The Python counterpart of a generated record class.  Field values are kept in
schema declaration order; fields that are not supplied take the field's
declared default.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from schema_match.schema import RecordSchema

__all__ = ["Record"]


class Record:
    """A value of a ``RecordSchema``.

    Example::

        person = Record(person_schema, firstName="John", age=21)
        person["age"]                      # 21
        older = person.replace(age=22)     # new Record, person unchanged
    """

    __slots__ = ("_schema", "_values")

    def __init__(
        self,
        schema: RecordSchema,
        values: Mapping[str, Any] | None = None,
        /,
        **fields: Any,
    ) -> None:
        supplied = {**(values or {}), **fields}
        unknown = [name for name in supplied if schema.get_field(name) is None]
        if unknown:
            msg = f"unknown field(s) {unknown} for record {schema.fullname}"
            raise ValueError(msg)

        self._schema = schema
        self._values: dict[str, Any] = {
            f.name: supplied.get(f.name, f.default) for f in schema.fields
        }

    @property
    def schema(self) -> RecordSchema:
        return self._schema

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        if name not in self._values:
            msg = f"unknown field {name!r} for record {self._schema.fullname}"
            raise KeyError(msg)
        self._values[name] = value

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def replace(self, **changes: Any) -> Record:
        """Return a copy of this record with ``changes`` applied."""
        return Record(self._schema, {**self._values, **changes})

    def to_dict(self) -> dict[str, Any]:
        """Shallow field-name -> value mapping in declaration order."""
        return dict(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return (
            self._schema.fullname == other._schema.fullname
            and self._values == other._values
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Record({self._schema.fullname}, {self._values!r})"
