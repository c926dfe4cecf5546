# livingroom/services/auth.py
"""
Admin and customer identification.

The admin token is ``base64("admin:<epoch_ms>")`` with no signature, so any
recent timestamp encoded the same way passes ``verify_admin_token``.
Customers are identified by phone number alone.
"""
import base64
import binascii
import logging
import time

from sqlalchemy.orm import Session

from livingroom.core.config import settings
from livingroom.models.sql_models import User

logger = logging.getLogger(__name__)


def check_admin_password(password: str) -> bool:
    return bool(settings.ADMIN_PASSWORD) and password == settings.ADMIN_PASSWORD


def issue_admin_token(now_ms: int = None) -> str:
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    return base64.b64encode(f"admin:{now_ms}".encode()).decode()


def verify_admin_token(token: str, now_ms: int = None) -> bool:
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    try:
        decoded = base64.b64decode(token, validate=True).decode()
        user, timestamp = decoded.split(":", 1)
        issued = int(timestamp)
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return False
    return user == "admin" and now_ms - issued < settings.ADMIN_TOKEN_TTL_MS


def identify_customer(db: Session, phone: str, name: str = None):
    """Returns (user, created). Creates the profile on first sight of a phone."""
    user = db.query(User).filter(User.phone == phone).first()
    if user:
        return user, False
    user = User(phone=phone, name=name or None)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("New customer profile id=%s", user.id)
    return user, True
