# livingroom/api/endpoints/addresses.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from livingroom.core.database import get_db
from livingroom.core.errors import NotFound, ValidationFailed
from livingroom.models.schemas import AddressOut, AddressWrite
from livingroom.models.sql_models import Address

router = APIRouter()

REQUIRED = ("user_id", "address_line1", "city", "state", "pincode")


def address_to_dict(address: Address) -> dict:
    return AddressOut.model_validate(address).model_dump()


def get_address_or_404(db: Session, address_id: int) -> Address:
    address = db.query(Address).filter(Address.id == address_id).first()
    if not address:
        raise NotFound("Address not found")
    return address


@router.get("")
def list_addresses(user_id: int = Query(None, alias="userId"), db: Session = Depends(get_db)):
    if not user_id:
        raise ValidationFailed("User ID required")
    addresses = (
        db.query(Address)
        .filter(Address.user_id == user_id)
        .order_by(Address.created_at.desc(), Address.id.desc())
        .all()
    )
    return {"success": True, "addresses": [address_to_dict(a) for a in addresses]}


@router.post("")
def create_address(payload: AddressWrite, db: Session = Depends(get_db)):
    if any(not getattr(payload, field) for field in REQUIRED):
        raise ValidationFailed("Missing required fields")
    # is_default is stored as sent; other addresses keep their flag
    address = Address(
        user_id=payload.user_id,
        label=payload.label or "Home",
        address_line1=payload.address_line1,
        address_line2=payload.address_line2 or None,
        city=payload.city,
        state=payload.state,
        pincode=payload.pincode,
        landmark=payload.landmark or None,
        is_default=bool(payload.is_default),
    )
    db.add(address)
    db.commit()
    db.refresh(address)
    return {"success": True, "address": address_to_dict(address), "message": "Address saved successfully"}


@router.put("/{address_id}")
def update_address(address_id: int, payload: AddressWrite, db: Session = Depends(get_db)):
    address = get_address_or_404(db, address_id)
    for key, value in payload.model_dump(exclude_unset=True, exclude={"user_id"}).items():
        setattr(address, key, value)
    db.commit()
    db.refresh(address)
    return {"success": True, "address": address_to_dict(address), "message": "Address saved successfully"}


@router.delete("/{address_id}")
def delete_address(address_id: int, db: Session = Depends(get_db)):
    address = get_address_or_404(db, address_id)
    db.delete(address)
    db.commit()
    return {"success": True, "message": "Address deleted"}
