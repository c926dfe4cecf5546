# livingroom/core/config.py
import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class Settings:
    PROJECT_NAME: str = "The Living Room Cafe"

    DATABASE_URL: str = os.getenv("DATABASE_URL")

    # Admin panel (single shared password)
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD")
    ADMIN_TOKEN_TTL_MS: int = 24 * 60 * 60 * 1000

    # Email (Resend) / WhatsApp
    RESEND_API_KEY: str = os.getenv("RESEND_API_KEY")
    EMAIL_FROM: str = os.getenv("EMAIL_FROM", "The Living Room Cafe <onboarding@resend.dev>")
    CAFE_EMAIL: str = os.getenv("CAFE_EMAIL", "thelivingroomcafe30@gmail.com")
    CAFE_PHONE: str = os.getenv("CAFE_PHONE", "919285555002")

    PUBLIC_BASE_URL: str = os.getenv("PUBLIC_BASE_URL", "http://localhost:3000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Billing
    GST_RATE: float = 0.05
    DELIVERY_FEE: int = 0
    COD_METHODS = ("cash on delivery", "cod")


settings = Settings()

if not settings.DATABASE_URL:
    # Fallback for local runs when .env is missing
    logger.warning("DATABASE_URL not found. Using SQLite for local testing.")
    settings.DATABASE_URL = "sqlite:///./local_test.db"
