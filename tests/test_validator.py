"""
Tests for the shopping form validation rules
"""
from decimal import Decimal

import pytest

from apps.shopping.models.shopping import ShoppingInputs
from apps.shopping.services.validator import (
    parse_number,
    validate_inputs,
    validate_shopping_form,
)


def test_all_valid_returns_none():
    assert validate_shopping_form("1", "1.00", "0.0", "0.0") is None


def test_empty_fields_are_required():
    errors = validate_shopping_form("", "  ", "", "")
    assert errors == {
        "quantity": ["Quantity can't be empty"],
        "price": ["Price can't be empty"],
        "tax": ["Tax can't be empty"],
        "discount": ["Discount can't be empty"],
    }


def test_quantity_must_be_integer():
    errors = validate_shopping_form("1.5", "1", "0", "0")
    assert errors == {"quantity": ["Quantity has to be an integer number"]}


@pytest.mark.parametrize("field", ["price", "tax", "discount"])
def test_amounts_must_be_numbers(field):
    form = {"quantity": "1", "price": "1", "tax": "0", "discount": "0"}
    form[field] = "foo"
    errors = validate_shopping_form(**form)
    assert errors == {field: [f"{field.capitalize()} has to be a number"]}


@pytest.mark.parametrize("field", ["quantity", "price", "tax", "discount"])
def test_negative_values_rejected(field):
    form = {"quantity": "1", "price": "1", "tax": "0", "discount": "0"}
    form[field] = "-5"
    errors = validate_shopping_form(**form)
    assert errors == {field: [f"{field.capitalize()} can't be negative"]}


def test_several_fields_reported_independently():
    errors = validate_shopping_form("abc", "-1", "", "2")
    assert set(errors) == {"quantity", "price", "tax"}
    assert "discount" not in errors


def test_report_keeps_codes_in_field_order():
    report = validate_inputs(ShoppingInputs(quantity="x", price="-1", tax="", discount="y"))
    assert report.has_errors
    assert [(i.field, i.code) for i in report.errors] == [
        ("quantity", "NOT_AN_INTEGER"),
        ("price", "NEGATIVE"),
        ("tax", "REQUIRED"),
        ("discount", "NOT_A_NUMBER"),
    ]


def test_missing_keys_default_to_empty():
    report = validate_inputs(ShoppingInputs.model_validate({"quantity": "1"}))
    assert {i.field for i in report.errors} == {"price", "tax", "discount"}


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1", Decimal("1")),
        (" 2.50 ", Decimal("2.50")),
        (".5", Decimal("0.5")),
        ("3.", Decimal("3")),
        ("-4", Decimal("-4")),
    ],
)
def test_parse_number_accepts_plain_literals(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", ["", "foo", "1e3", "NaN", "Infinity", "1,5", "1.2.3", "."])
def test_parse_number_rejects_everything_else(raw):
    assert parse_number(raw) is None


LARGEST_INTEGER = "9" * 14
LARGEST_AMOUNT = "9" * 14 + ".9999"


def test_largest_accepted_values_pass():
    assert validate_shopping_form(LARGEST_INTEGER, LARGEST_AMOUNT, LARGEST_AMOUNT, LARGEST_AMOUNT) is None


@pytest.mark.parametrize("field", ["quantity", "price", "tax", "discount"])
def test_fifteen_integer_digits_are_too_large(field):
    form = {"quantity": "1", "price": "1", "tax": "0", "discount": "0"}
    form[field] = "1" + "0" * 14
    errors = validate_shopping_form(**form)
    assert errors == {field: [f"{field.capitalize()} is too large"]}


def test_very_long_quantity_is_too_large():
    report = validate_inputs(ShoppingInputs(quantity="1" * 27, price="1", tax="0", discount="0"))
    assert [(i.field, i.code) for i in report.errors] == [("quantity", "TOO_LARGE")]


def test_negative_and_too_large_both_reported():
    errors = validate_shopping_form("1", "-" + "1" * 20, "0", "0")
    assert errors == {"price": ["Price can't be negative", "Price is too large"]}


@pytest.mark.parametrize("field", ["price", "tax", "discount"])
def test_five_decimal_places_are_too_precise(field):
    form = {"quantity": "1", "price": "1", "tax": "0", "discount": "0"}
    form[field] = "0.00001"
    report = validate_inputs(ShoppingInputs(**form))
    assert [(i.field, i.code) for i in report.errors] == [(field, "TOO_PRECISE")]


@pytest.mark.parametrize("raw", ["0" * 40 + "12", "1.5" + "0" * 40, "000.1234"])
def test_leading_and_trailing_zeros_do_not_count(raw):
    assert validate_shopping_form("1", raw, "0", "0") is None


@pytest.mark.parametrize("raw", ["١٢", "１２", "٣.٥"])
def test_non_ascii_digits_rejected(raw):
    assert parse_number(raw) is None
    errors = validate_shopping_form(raw, raw, "0", "0")
    assert errors == {
        "quantity": ["Quantity has to be an integer number"],
        "price": ["Price has to be a number"],
    }
