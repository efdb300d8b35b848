from pydantic import Field
from datetime import datetime, timezone
import uuid
from .base import CamelModel, RequiredStr
from .enums import BloodGroup

class Donor(CamelModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    email: str
    phone: str
    blood_group: BloodGroup
    location: str
    password_hash: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class DonorCreate(CamelModel):
    name: RequiredStr
    email: RequiredStr
    phone: RequiredStr
    blood_group: BloodGroup
    location: RequiredStr
    password: RequiredStr

class DonorLogin(CamelModel):
    email: RequiredStr
    password: RequiredStr
