from decimal import Context, Decimal, ROUND_HALF_UP, localcontext

from ..models.shopping import FieldName, ShoppingInputs
from .validator import parse_number

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")

# Validated fields carry at most 14 integer digits and 4 decimal places, so
# the exact total stays far below this many significant digits.
TOTAL_PRECISION = 100


def compute_total(inputs: ShoppingInputs) -> Decimal:
    """
    quantity * price * (1 + tax%) - discount, rounded half-up to cents.

    Callers must validate first; a non-numeric field raises ValueError.
    """
    values = {}
    for name, raw in inputs.as_mapping().items():
        number = parse_number(raw)
        if number is None:
            raise ValueError(f"{name.value} is not a number: {raw!r}")
        values[name] = number

    with localcontext(Context(prec=TOTAL_PRECISION)):
        gross = (
            values[FieldName.QUANTITY]
            * values[FieldName.PRICE]
            * (1 + values[FieldName.TAX] / HUNDRED)
        )
        total = (gross - values[FieldName.DISCOUNT]).quantize(CENTS, rounding=ROUND_HALF_UP)
    # a "-0" quantity would otherwise print as -0.00
    return total.copy_abs() if total.is_zero() else total


def format_total(total: Decimal) -> str:
    return f"{total:.2f}"
