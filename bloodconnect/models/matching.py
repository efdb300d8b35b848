from .base import CamelModel, RequiredStr

class BloodSearch(CamelModel):
    blood_group: RequiredStr
    location: RequiredStr
