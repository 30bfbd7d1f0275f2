import logging

from fastapi import FastAPI
from .settings import settings
from .routes.shopping import router as shopping_router
from .routes.api import router as api_router
from .routes.health import router as health_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.APP_TITLE,
    version=settings.APP_VERSION,
    description="Shopping calculator form with server-side validation."
)

app.include_router(shopping_router)
app.include_router(api_router)
app.include_router(health_router)
