"""
describo — end-to-end smoke test

File: tests/smoke/test_end_to_end.py
Last updated: 2026-10-19

Purpose
- Build a small validator catalog, attach it to description classes, and validate
  structured records the way a consuming application would.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from describo import (
    DescriboConfig,
    Description,
    ObjectDescription,
    Validation,
    Validator,
    attach,
    detach,
)
from describo.config import load_config

if TYPE_CHECKING:
    from collections.abc import Iterator

_CATALOG = ("required", "min_length", "between")


@pytest.fixture
def catalog() -> Iterator[tuple[type[Description], type[ObjectDescription]]]:
    """Attach a validator catalog to fresh description classes."""

    class Field(Description):
        pass

    class Record(ObjectDescription):
        pass

    required = Validator(
        "required", "This field is required.", lambda value, cb: cb(None, bool(value))
    ).set_allows_empty(False)
    min_length = Validator(
        "min_length",
        lambda size: f"Must be at least {size} characters.",
        lambda value, size, cb: cb(None, len(value) >= size),
        param_count=1,
    )
    between = Validator(
        "between",
        "%s is out of range.",
        lambda value, low, high, cb: cb(None, low <= value <= high),
        param_count=2,
    )
    for validator in (required, min_length, between):
        attach(validator, [Field, Record])

    yield Field, Record

    for name in _CATALOG:
        detach(name, Field, Record)


def _collect(description: Description, value: Any) -> list[tuple[Any, ...]]:
    calls: list[tuple[Any, ...]] = []
    description.validate(value, lambda *result: calls.append(result))
    return calls


@pytest.mark.smoke
def test_signup_form(catalog: tuple[type[Description], type[ObjectDescription]]) -> None:
    field_cls, record_cls = catalog
    signup = record_cls()
    signup.add_property("name", field_cls()).required()
    signup.add_property("password", field_cls()).required().min_length(8)
    signup.add_property("age", field_cls()).between(18, 130)

    assert _collect(signup, {"name": "Ada", "password": "correct horse", "age": 36}) == [
        (None, True)
    ]
    assert _collect(signup, {"name": "", "password": "short", "age": 12}) == [
        (
            None,
            False,
            "One or more properties are invalid.",
            {
                "name": "This field is required.",
                "password": "Must be at least 8 characters.",
                "age": "12 is out of range.",
            },
        )
    ]


@pytest.mark.smoke
def test_required_name_and_age(catalog: tuple[type[Description], type[ObjectDescription]]) -> None:
    field_cls, record_cls = catalog
    person = record_cls()
    person.add_property("name", field_cls("A name is required.")).required()
    person.add_property("age", field_cls()).required()

    assert _collect(person, {"name": "", "age": 5}) == [
        (None, False, "One or more properties are invalid.", {"name": "A name is required."})
    ]


@pytest.mark.smoke
def test_negated_helpers_and_object_rules(
    catalog: tuple[type[Description], type[ObjectDescription]],
) -> None:
    field_cls, record_cls = catalog
    ordered = Validator(
        "ordered", lambda value, cb: cb(None, value["check_in"] < value["check_out"])
    )
    reservation = record_cls("Check-out must follow check-in.")
    reservation.add_property("guests", field_cls()).not_.between(0, 0, "At least one guest.")
    reservation.add_validation(Validation(ordered))

    assert _collect(reservation, {"guests": 0, "check_in": 1, "check_out": 2}) == [
        (None, False, "One or more properties are invalid.", {"guests": "At least one guest."})
    ]
    assert _collect(reservation, {"guests": 2, "check_in": 3, "check_out": 2}) == [
        (None, False, "Check-out must follow check-in.")
    ]
    assert _collect(reservation, {"guests": 2, "check_in": 1, "check_out": 2}) == [(None, True)]


@pytest.mark.smoke
def test_configuration_flows_through_descriptions(
    catalog: tuple[type[Description], type[ObjectDescription]],
) -> None:
    field_cls, record_cls = catalog
    config = load_config(
        {"invalid_properties_message": "Please fix the highlighted fields."},
        environ={"DESCRIBO_DEFAULT_MESSAGE": "Not valid."},
    )
    form = record_cls(config=config)
    form.add_property("email", field_cls(config=config)).required()
    form.add_property("nickname", field_cls(config=config)).add_validation(
        Validation(Validator("never", lambda value, cb: cb(None, False)))
    )

    assert isinstance(config, DescriboConfig)
    assert _collect(form, {"nickname": "x"}) == [
        (
            None,
            False,
            "Please fix the highlighted fields.",
            {"email": "This field is required.", "nickname": "Not valid."},
        )
    ]
