from pathlib import Path

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv(".env.local")

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    APP_TITLE: str = "Shopping Calculator"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")

    # Values shown on a fresh form
    DEFAULT_QUANTITY: str = "1"
    DEFAULT_PRICE: str = "1.00"
    DEFAULT_TAX: str = "0.0"
    DEFAULT_DISCOUNT: str = "0.0"

settings = Settings()
