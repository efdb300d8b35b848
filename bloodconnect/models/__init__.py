from .enums import BloodGroup
from .base import CamelModel, RequiredStr
from .donor import Donor, DonorCreate, DonorLogin
from .hospital import BloodStock, Hospital, HospitalCreate, HospitalLogin
from .claims import DonorIdentity, HospitalIdentity, Identity, identity_adapter
from .matching import BloodSearch
