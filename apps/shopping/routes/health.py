from fastapi import APIRouter

from ..settings import settings
from ..templating import templates_ok

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    ok_templates = templates_ok()
    return {"ok": ok_templates, "templates": ok_templates, "version": settings.APP_VERSION}
