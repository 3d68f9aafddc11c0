"""
Validation rules for incoming payloads.

Each ``validate_*`` function is a pure function of the decoded JSON
body.  The first check makes sure the payload is an object; if it is
not, that single error is returned.  Otherwise every field rule runs
(no short‑circuiting) so the client learns about all problems in one
round trip.  Errors are reported in field declaration order.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping

DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
DATE_TIME_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2})?(Z|[+-]\d{2}:\d{2})?$", re.ASCII
)

NOTIFICATION_TYPES = ("whatsapp", "sms")
NOTIFICATION_PRIORITIES = ("low", "medium", "high")

DATE_ERROR = "date is required and must be ISO-8601 (YYYY-MM-DD or ISO datetime)."
QUANTITY_ERROR = "quantity is required and must be a non-negative integer."


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


def _result(errors: List[str]) -> ValidationResult:
    return ValidationResult(valid=not errors, errors=errors)


def _not_an_object(label: str) -> ValidationResult:
    return ValidationResult(valid=False, errors=[f"{label} payload must be an object."])


def is_iso_date_string(value: Any) -> bool:
    """Return ``True`` for ``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM[:SS][Z|±HH:MM]``."""
    if not isinstance(value, str):
        return False
    return bool(DATE_ONLY_RE.fullmatch(value) or DATE_TIME_RE.fullmatch(value))


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_non_negative_number(value: Any) -> bool:
    # bool is a subclass of int but ``true`` is not an amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        # integers past the double range are infinite once stored as REAL
        if not math.isfinite(float(value)):
            return False
    except OverflowError:
        return False
    return value >= 0


def is_non_negative_integer(value: Any) -> bool:
    """Accept ints and integral floats (``3.0``), reject bools and fractions."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and value >= 0
    return isinstance(value, int) and value >= 0


def _check_required_string(payload: Mapping[str, Any], name: str, errors: List[str]) -> None:
    if not is_non_empty_string(payload.get(name)):
        errors.append(f"{name} is required and must be a non-empty string.")


def _check_number(payload: Mapping[str, Any], name: str, errors: List[str]) -> None:
    if not is_non_negative_number(payload.get(name)):
        errors.append(f"{name} is required and must be a non-negative number.")


def _check_date(payload: Mapping[str, Any], errors: List[str]) -> None:
    if not is_iso_date_string(payload.get("date")):
        errors.append(DATE_ERROR)


def validate_sale(payload: Any) -> ValidationResult:
    if not isinstance(payload, dict):
        return _not_an_object("Sale")
    errors: List[str] = []
    _check_required_string(payload, "item_name", errors)
    _check_number(payload, "amount", errors)
    _check_date(payload, errors)
    customer = payload.get("customer")
    if customer is not None and not is_non_empty_string(customer):
        errors.append("customer, if provided, must be a non-empty string.")
    return _result(errors)


def validate_expense(payload: Any) -> ValidationResult:
    if not isinstance(payload, dict):
        return _not_an_object("Expense")
    errors: List[str] = []
    _check_required_string(payload, "description", errors)
    _check_number(payload, "amount", errors)
    _check_date(payload, errors)
    return _result(errors)


def validate_inventory_item(payload: Any) -> ValidationResult:
    if not isinstance(payload, dict):
        return _not_an_object("Inventory item")
    errors: List[str] = []
    _check_required_string(payload, "item_name", errors)
    if not is_non_negative_integer(payload.get("quantity")):
        errors.append(QUANTITY_ERROR)
    _check_number(payload, "price", errors)
    return _result(errors)


def validate_notification(payload: Any) -> ValidationResult:
    """Validate a demo notification request.

    ``type`` and ``priority`` are compared case‑insensitively.
    ``priority`` may be omitted or ``null``; any other value must be
    one of ``low``, ``medium`` or ``high``.
    """
    if not isinstance(payload, dict):
        return _not_an_object("Notification")
    errors: List[str] = []

    kind = payload.get("type")
    if not isinstance(kind, str) or not kind:
        errors.append("type is required and must be a string.")
    elif kind.lower() not in NOTIFICATION_TYPES:
        errors.append('type must be either "whatsapp" or "sms".')

    _check_required_string(payload, "message", errors)
    _check_required_string(payload, "recipient", errors)

    priority = payload.get("priority")
    if priority is not None and (
        not isinstance(priority, str) or priority.lower() not in NOTIFICATION_PRIORITIES
    ):
        errors.append('priority must be "low", "medium", or "high" if provided.')
    return _result(errors)
