"""
Claim Models
Identity carried inside a signed access token. A claim is either a donor or a
hospital; only hospital claims carry the admin flag.
"""
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import Annotated, Literal, Union


class DonorIdentity(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: str
    role: Literal["donor"] = "donor"


class HospitalIdentity(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    id: str
    role: Literal["hospital"] = "hospital"
    is_admin: bool = Field(False, alias="isAdmin")


Identity = Annotated[Union[DonorIdentity, HospitalIdentity], Field(discriminator="role")]

identity_adapter = TypeAdapter(Identity)
