from __future__ import annotations

import pytest

from p9k.errors import EmptyNameError
from p9k.naming import camel_case, derive_names, pascal_case, screaming_snake_case


def test_derive_names_for_hyphenated_name():
    names = derive_names("foo-bar")
    assert names.raw == "foo-bar"
    assert names.screaming_snake == "FOO_BAR"
    assert names.camel == "fooBar"
    assert names.pascal == "FooBar"


def test_screaming_snake_replaces_only_first_hyphen():
    assert screaming_snake_case("foo-bar-baz") == "FOO_BAR-BAZ"
    assert derive_names("foo-bar-baz").camel == "fooBarBaz"


@pytest.mark.parametrize("value", ["widget", "Widget", "HTTPClient", "x"])
def test_names_without_hyphen(value):
    names = derive_names(value)
    assert names.camel == value.lower()
    assert names.pascal == value.lower()[0].upper() + value.lower()[1:]
    assert names.screaming_snake == value.upper()


@pytest.mark.parametrize(
    "value, expected",
    [
        ("MY-COOL-app", "myCoolApp"),
        ("foo--bar", "fooBar"),
        ("-foo", "Foo"),
        ("a-b-c", "aBC"),
    ],
)
def test_camel_case(value, expected):
    assert camel_case(value) == expected


def test_pascal_case_keeps_remainder_of_camel():
    assert pascal_case("user-id") == "UserId"
    assert pascal_case("") == ""


@pytest.mark.parametrize("value", ["", "-", "---"])
def test_derive_names_rejects_empty(value):
    with pytest.raises(EmptyNameError) as excinfo:
        derive_names(value)
    assert "empty project name" in str(excinfo.value)


def test_empty_name_error_is_value_error():
    with pytest.raises(ValueError):
        derive_names("")


def test_derived_names_are_frozen():
    names = derive_names("demo")
    with pytest.raises(AttributeError):
        names.camel = "other"  # type: ignore[misc]


def test_context_exposes_template_keys():
    assert derive_names("foo-bar").context() == {
        "raw": "foo-bar",
        "screaming": "FOO_BAR",
        "camel": "fooBar",
        "pascal": "FooBar",
    }
