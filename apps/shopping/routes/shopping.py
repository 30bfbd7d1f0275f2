import logging

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..models.shopping import ShoppingInputs, ShoppingPage
from ..services.composer import blank_page, compose_page, default_inputs
from ..services.validator import validate_shopping_form
from ..settings import settings
from ..templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["shopping"])


def render_page(request: Request, page: ShoppingPage) -> HTMLResponse:
    try:
        return templates.TemplateResponse(
            request,
            "shopping.html",
            {"title": settings.APP_TITLE, "page": page},
        )
    except Exception as e:
        logger.exception("Failed to render shopping page.")
        raise HTTPException(status_code=500, detail=f"Template rendering failed: {e}")


@router.get("/", include_in_schema=False)
def index():
    return RedirectResponse(url="/shopping")


# Fresh form with configured defaults
@router.get("/shopping", response_class=HTMLResponse)
def shopping_form(request: Request):
    return render_page(request, blank_page(default_inputs(settings)))


# Form submission; always answers 200, errors are shown next to the fields
@router.post("/shopping", response_class=HTMLResponse)
def shopping_submit(
    request: Request,
    quantity: str = Form(""),
    price: str = Form(""),
    tax: str = Form(""),
    discount: str = Form(""),
):
    inputs = ShoppingInputs(quantity=quantity, price=price, tax=tax, discount=discount)
    errors = validate_shopping_form(quantity, price, tax, discount)
    if errors:
        logger.debug("Shopping form rejected; invalid fields: %s", sorted(errors))
    page = compose_page(inputs, errors)
    return render_page(request, page)
