"""
Jinja2 template setup shared by the HTML routes.
"""
from pathlib import Path

from fastapi.templating import Jinja2Templates

from .settings import settings

TEMPLATES_DIR = Path(settings.TEMPLATES_DIR)

# autoescape is on for .html templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def templates_ok() -> bool:
    return (TEMPLATES_DIR / "shopping.html").is_file()
