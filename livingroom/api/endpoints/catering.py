# livingroom/api/endpoints/catering.py
import logging
import random

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from livingroom.core.database import get_db
from livingroom.core.errors import ValidationFailed
from livingroom.core.utils import get_current_time_ms, is_valid_phone
from livingroom.models.schemas import CateringInquiryOut, CateringInquiryRequest
from livingroom.models.sql_models import CateringInquiry
from livingroom.services.notifications import notify_catering_inquiry

logger = logging.getLogger(__name__)

router = APIRouter()


def inquiry_number() -> str:
    return f"CAT{get_current_time_ms()}{random.randint(0, 999):03d}"


def parse_guest_count(value):
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationFailed("Invalid guest count")


@router.post("")
def create_inquiry(payload: CateringInquiryRequest, db: Session = Depends(get_db)):
    if not payload.name or not payload.phone or not payload.event_date:
        raise ValidationFailed("Missing required fields")
    if not is_valid_phone(payload.phone):
        raise ValidationFailed("Invalid phone number")

    inquiry = CateringInquiry(
        inquiry_number=inquiry_number(),
        customer_name=payload.name,
        customer_phone=payload.phone,
        customer_email=payload.email or None,
        event_type=payload.event_type,
        event_date=payload.event_date,
        guest_count=parse_guest_count(payload.guest_count),
        venue=payload.venue or None,
        budget=payload.budget or None,
        requirements=payload.requirements or None,
        status="pending",
    )
    db.add(inquiry)
    db.commit()
    db.refresh(inquiry)
    logger.info("Catering inquiry %s saved (id=%s)", inquiry.inquiry_number, inquiry.id)

    whatsapp_url, email_sent = notify_catering_inquiry(inquiry)

    return {
        "success": True,
        "inquiryNumber": inquiry.inquiry_number,
        "data": CateringInquiryOut.model_validate(inquiry).model_dump(),
        "whatsappUrl": whatsapp_url,
        "emailSent": email_sent,
    }


@router.get("")
def list_inquiries(db: Session = Depends(get_db)):
    rows = db.query(CateringInquiry).order_by(CateringInquiry.created_at.desc(), CateringInquiry.id.desc()).all()
    return {"success": True, "data": [CateringInquiryOut.model_validate(r).model_dump() for r in rows]}
