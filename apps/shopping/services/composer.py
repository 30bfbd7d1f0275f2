import logging
from typing import Dict, List, Optional

from ..models.shopping import ShoppingInputs, ShoppingPage
from ..settings import Settings
from .calculator import compute_total, format_total
from .renderer import render_field

logger = logging.getLogger(__name__)


def compose_page(
    inputs: ShoppingInputs,
    errors: Optional[Dict[str, List[str]]] = None,
) -> ShoppingPage:
    """
    Build the per-field display decisions for one submission.

    The total is only computed when `errors` is empty; a page with any
    invalid field shows no total at all.
    """
    fields = {
        name: render_field(raw, (errors or {}).get(name.value))
        for name, raw in inputs.as_mapping().items()
    }

    total: Optional[str] = None
    if not errors:
        total = format_total(compute_total(inputs))
        logger.debug("Computed shopping total %s", total)
    else:
        logger.debug("Skipping total; invalid fields: %s", ", ".join(errors))

    return ShoppingPage(fields=fields, total=total)


def default_inputs(settings: Settings) -> ShoppingInputs:
    return ShoppingInputs(
        quantity=settings.DEFAULT_QUANTITY,
        price=settings.DEFAULT_PRICE,
        tax=settings.DEFAULT_TAX,
        discount=settings.DEFAULT_DISCOUNT,
    )


def blank_page(inputs: ShoppingInputs) -> ShoppingPage:
    """A form with values but neither annotations nor total."""
    return ShoppingPage(
        fields={name: render_field(raw) for name, raw in inputs.as_mapping().items()}
    )

