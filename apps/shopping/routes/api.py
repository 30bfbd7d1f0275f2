import logging

from fastapi import APIRouter, Body, HTTPException

from ..models.shopping import ShoppingInputs
from ..services.calculator import compute_total, format_total
from ..services.validator import validate_inputs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/shopping", tags=["api"])


@router.post("/calculate")
def calculate(inputs: ShoppingInputs = Body(...)):
    """
    JSON counterpart of the HTML form.

    Unlike the form, which only shows the first message per field, a 422
    here lists every issue the rules produced.
    """
    report = validate_inputs(inputs)
    if report.has_errors:
        raise HTTPException(
            status_code=422,
            detail=[
                {
                    "field": issue.field,
                    "code": issue.code,
                    "message": issue.message,
                }
                for issue in report.errors
            ],
        )

    total = format_total(compute_total(inputs))
    logger.debug("Computed shopping total %s via API", total)
    return {"total": total, "inputs": inputs.model_dump()}
