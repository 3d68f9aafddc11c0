import math

import pytest

from nexaops_api.app.services.validators import (
    DATE_ERROR,
    QUANTITY_ERROR,
    is_iso_date_string,
    validate_expense,
    validate_inventory_item,
    validate_notification,
    validate_sale,
)


@pytest.mark.parametrize(
    "value",
    [
        "2024-03-01",
        "2024-03-01T10:30",
        "2024-03-01T10:30:15",
        "2024-03-01T10:30:15Z",
        "2024-03-01T10:30+02:00",
        "2024-03-01T10:30:15-05:00",
    ],
)
def test_iso_dates_accepted(value):
    assert is_iso_date_string(value)


@pytest.mark.parametrize(
    "value",
    [
        "2024-3-1",
        "01/03/2024",
        "2024-03-01 10:30",
        "2024-03-01T10",
        "2024-03-01T10:30:15.123Z",
        "2024-03-01\n",
        "２０２４-03-01",
        "",
        None,
        20240301,
    ],
)
def test_iso_dates_rejected(value):
    assert not is_iso_date_string(value)


def test_valid_sale():
    result = validate_sale({"item_name": "Widget", "amount": 19.99, "date": "2024-03-01", "customer": "Acme"})
    assert result.valid
    assert result.errors == []


def test_sale_customer_is_optional():
    assert validate_sale({"item_name": "Widget", "amount": 1, "date": "2024-03-01"}).valid
    assert validate_sale({"item_name": "Widget", "amount": 1, "date": "2024-03-01", "customer": None}).valid


def test_sale_collects_every_error_in_field_order():
    result = validate_sale({"item_name": "  ", "amount": -10, "date": "invalid-date", "customer": ""})
    assert not result.valid
    assert result.errors == [
        "item_name is required and must be a non-empty string.",
        "amount is required and must be a non-negative number.",
        DATE_ERROR,
        "customer, if provided, must be a non-empty string.",
    ]


@pytest.mark.parametrize("payload", [None, [], "sale", 42])
def test_non_object_payload_returns_single_error(payload):
    result = validate_sale(payload)
    assert not result.valid
    assert result.errors == ["Sale payload must be an object."]


@pytest.mark.parametrize("amount", [0, 0.0, 19.99, 1000])
def test_amount_boundaries_accepted(amount):
    assert validate_expense({"description": "Rent", "amount": amount, "date": "2024-01-15"}).valid


@pytest.mark.parametrize("amount", [-0.01, math.nan, math.inf, "10", True, None])
def test_bad_amounts_rejected(amount):
    result = validate_expense({"description": "Rent", "amount": amount, "date": "2024-01-15"})
    assert result.errors == ["amount is required and must be a non-negative number."]


def test_expense_missing_fields():
    result = validate_expense({})
    assert result.errors == [
        "description is required and must be a non-empty string.",
        "amount is required and must be a non-negative number.",
        DATE_ERROR,
    ]
    assert validate_expense("rent").errors == ["Expense payload must be an object."]


@pytest.mark.parametrize("quantity", [0, 7, 3.0])
def test_inventory_quantity_accepted(quantity):
    assert validate_inventory_item({"item_name": "Gadget", "quantity": quantity, "price": 0}).valid


@pytest.mark.parametrize("quantity", [-1, 2.5, "3", True, None])
def test_inventory_quantity_rejected(quantity):
    result = validate_inventory_item({"item_name": "Gadget", "quantity": quantity, "price": 5})
    assert result.errors == [QUANTITY_ERROR]


def test_inventory_price_rule_is_separate_from_quantity():
    result = validate_inventory_item({"item_name": "", "quantity": -1, "price": -5})
    assert result.errors == [
        "item_name is required and must be a non-empty string.",
        QUANTITY_ERROR,
        "price is required and must be a non-negative number.",
    ]
    assert validate_inventory_item(None).errors == ["Inventory item payload must be an object."]


def test_valid_notification_is_case_insensitive():
    assert validate_notification({"type": "WhatsApp", "message": "hi", "recipient": "123", "priority": "HIGH"}).valid
    assert validate_notification({"type": "sms", "message": "hi", "recipient": "123", "priority": None}).valid


def test_notification_errors():
    result = validate_notification({"type": "pager", "message": " ", "recipient": 5, "priority": "urgent"})
    assert result.errors == [
        'type must be either "whatsapp" or "sms".',
        "message is required and must be a non-empty string.",
        "recipient is required and must be a non-empty string.",
        'priority must be "low", "medium", or "high" if provided.',
    ]


def test_notification_type_must_be_a_string():
    result = validate_notification({"type": 1, "message": "hi", "recipient": "123"})
    assert result.errors == ["type is required and must be a string."]


def test_integer_amount_past_double_range_rejected():
    result = validate_expense({"description": "Rent", "amount": 10**400, "date": "2024-01-15"})
    assert result.errors == ["amount is required and must be a non-negative number."]
    assert validate_expense({"description": "Rent", "amount": 10**20, "date": "2024-01-15"}).valid
