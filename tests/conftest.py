"""Shared schemas and record factories for the test suite.

The Person schema exercises every shape the matchers handle:

    Person
      firstName, lastName      string
      title                    [null, string]
      age                      long
      height                   [null, double]
      gender                   enum Gender
      email                    [null, string]
      telephoneNumbers         [null, array<PhoneNumber>]
      address                  [null, Address]
      familyMembers            [null, map<string>]
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from schema_match import Record
from schema_match.schema import (
    DOUBLE,
    LONG,
    NULL,
    STRING,
    ArraySchema,
    EnumSchema,
    MapSchema,
    RecordSchema,
    UnionSchema,
)


@pytest.fixture(scope="session")
def phone_schema() -> RecordSchema:
    phone_type = EnumSchema("PhoneNumberType", ("HOME", "MOBILE", "WORK", "TELEPHONE"))
    return (
        RecordSchema("PhoneNumber")
        .add_field("type", phone_type)
        .add_field("digits", STRING)
    )


@pytest.fixture(scope="session")
def address_schema() -> RecordSchema:
    return (
        RecordSchema("Address")
        .add_field("firstLine", STRING)
        .add_field("secondLine", UnionSchema((NULL, STRING)))
        .add_field("thirdLine", UnionSchema((NULL, STRING)))
        .add_field("county", UnionSchema((NULL, STRING)))
        .add_field("postCode", STRING)
        .add_field("countryId", UnionSchema((NULL, LONG)))
    )


@pytest.fixture(scope="session")
def person_schema(phone_schema: RecordSchema, address_schema: RecordSchema) -> RecordSchema:
    gender = EnumSchema("Gender", ("MALE", "FEMALE"))
    return (
        RecordSchema("Person")
        .add_field("firstName", STRING)
        .add_field("lastName", STRING)
        .add_field("title", UnionSchema((NULL, STRING)))
        .add_field("age", LONG)
        .add_field("height", UnionSchema((NULL, DOUBLE)))
        .add_field("gender", gender)
        .add_field("email", UnionSchema((NULL, STRING)))
        .add_field("telephoneNumbers", UnionSchema((NULL, ArraySchema(phone_schema))))
        .add_field("address", UnionSchema((NULL, address_schema)))
        .add_field("familyMembers", UnionSchema((NULL, MapSchema(STRING))))
    )


@pytest.fixture(scope="session")
def phone(phone_schema: RecordSchema) -> Callable[[str, str], Record]:
    def _phone(type_: str, digits: str) -> Record:
        return Record(phone_schema, type=type_, digits=digits)

    return _phone


@pytest.fixture(scope="session")
def address(address_schema: RecordSchema) -> Callable[..., Record]:
    def _address(**changes: Any) -> Record:
        fields: dict[str, Any] = {
            "firstLine": "High and Over",
            "secondLine": "Highover Park",
            "thirdLine": "Amersham",
            "county": "Buckinghamshire",
            "postCode": "HP7 0BP",
            "countryId": None,
        }
        return Record(address_schema, {**fields, **changes})

    return _address


@pytest.fixture(scope="session")
def john_smith(
    person_schema: RecordSchema,
    phone: Callable[[str, str], Record],
    address: Callable[..., Record],
) -> Callable[..., Record]:
    """Factory for a fully populated Person; keyword arguments override fields."""

    def _john_smith(**changes: Any) -> Record:
        fields: dict[str, Any] = {
            "firstName": "John",
            "lastName": "Smith",
            "title": "Mr",
            "age": 21,
            "height": None,
            "gender": "MALE",
            "email": "john.smith@acme.com",
            "telephoneNumbers": [
                phone("HOME", "12345"),
                phone("MOBILE", "07654"),
                phone("WORK", "23456"),
            ],
            "address": address(),
            "familyMembers": {"Sister": "Jane Smith"},
        }
        return Record(person_schema, {**fields, **changes})

    return _john_smith
