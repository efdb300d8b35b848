from pydantic import Field
from typing import Annotated, List
from datetime import datetime, timezone
import uuid
from .base import CamelModel, RequiredStr
from .enums import BloodGroup

class BloodStock(CamelModel):
    """Units on hand for one blood type."""
    type: BloodGroup
    units: Annotated[int, Field(strict=True, ge=0)]

class Hospital(CamelModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    hospital_name: str
    email: str
    phone: str
    address: str
    city: str
    blood: List[BloodStock]
    password_hash: str
    is_admin: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class HospitalCreate(CamelModel):
    hospital_name: RequiredStr
    email: RequiredStr
    phone: RequiredStr
    address: RequiredStr
    city: RequiredStr
    blood: List[BloodStock] = Field(..., min_length=1)
    password: RequiredStr

class HospitalLogin(CamelModel):
    email: RequiredStr
    password: RequiredStr
