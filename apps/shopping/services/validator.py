import re
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from ..models.shopping import FieldName, ShoppingInputs
from ..models.validation import ValidationIssue, ValidationReport

INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
DECIMAL_RE = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)$")

# Same bounds as a Decimal(max_digits=18, decimal_places=4) amount
MAX_INTEGER_DIGITS = 14
MAX_DECIMAL_PLACES = 4

# quantity counts items, everything else is a money/percentage amount
INTEGER_FIELDS = {FieldName.QUANTITY}


def parse_number(raw: str) -> Optional[Decimal]:
    """
    Parse a user-typed number. Returns None for anything that is not a plain
    integer or decimal literal (exponents, NaN and Infinity included).
    """
    text = (raw or "").strip()
    if not DECIMAL_RE.match(text):
        return None
    return Decimal(text)


def count_digits(text: str) -> Tuple[int, int]:
    """
    Significant integer digits and decimal places of a literal that already
    matched DECIMAL_RE. Leading and trailing zeros don't count.
    """
    whole, _, frac = text.strip().lstrip("+-").partition(".")
    return len(whole.lstrip("0")), len(frac.rstrip("0"))


def _check_field(name: FieldName, raw: str) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    text = (raw or "").strip()

    # 1) Presence
    if not text:
        issues.append(
            ValidationIssue(
                field=name.value,
                code="REQUIRED",
                message=f"{name.label} can't be empty",
            )
        )
        return issues

    # 2) Type
    if name in INTEGER_FIELDS:
        if not INTEGER_RE.match(text):
            issues.append(
                ValidationIssue(
                    field=name.value,
                    code="NOT_AN_INTEGER",
                    message=f"{name.label} has to be an integer number",
                )
            )
            return issues
    elif parse_number(text) is None:
        issues.append(
            ValidationIssue(
                field=name.value,
                code="NOT_A_NUMBER",
                message=f"{name.label} has to be a number",
            )
        )
        return issues

    # 3) Range
    if Decimal(text) < 0:
        issues.append(
            ValidationIssue(
                field=name.value,
                code="NEGATIVE",
                message=f"{name.label} can't be negative",
            )
        )

    # 4) Magnitude
    int_digits, places = count_digits(text)
    if int_digits > MAX_INTEGER_DIGITS:
        issues.append(
            ValidationIssue(
                field=name.value,
                code="TOO_LARGE",
                message=f"{name.label} is too large",
            )
        )
    elif places > MAX_DECIMAL_PLACES:
        issues.append(
            ValidationIssue(
                field=name.value,
                code="TOO_PRECISE",
                message=f"{name.label} can have at most {MAX_DECIMAL_PLACES} decimal places",
            )
        )

    return issues


def validate_inputs(inputs: ShoppingInputs) -> ValidationReport:
    """
    Run the presence, type, range and magnitude rules over every field.

    Each field is checked independently, so a single submission can carry
    issues for several fields. Within a field the issues keep rule order.
    A blank field is only reported as missing, and a field that is not a
    number is not range-checked.
    """
    errors: List[ValidationIssue] = []
    for name, raw in inputs.as_mapping().items():
        errors.extend(_check_field(name, raw))
    return ValidationReport(errors=errors)


def validate_shopping_form(
    quantity: str, price: str, tax: str, discount: str
) -> Optional[Dict[str, List[str]]]:
    """Field name -> messages for every invalid field, or None when all pass."""
    report = validate_inputs(
        ShoppingInputs(quantity=quantity, price=price, tax=tax, discount=discount)
    )
    return report.errors_by_field()
