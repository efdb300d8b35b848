from fastapi import Depends, Request

from ..database import get_db
from .records import DonorStore, HospitalStore, PUBLIC_PROJECTION
from .security import (
    PasswordHasher,
    TokenError,
    TokenService,
    donor_identity,
    hospital_identity,
)


def get_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


def get_donor_store(db=Depends(get_db)) -> DonorStore:
    return DonorStore(db)


def get_hospital_store(db=Depends(get_db)) -> HospitalStore:
    return HospitalStore(db)


__all__ = [
    'DonorStore',
    'HospitalStore',
    'PUBLIC_PROJECTION',
    'PasswordHasher',
    'TokenError',
    'TokenService',
    'donor_identity',
    'hospital_identity',
    'get_hasher',
    'get_token_service',
    'get_donor_store',
    'get_hospital_store',
]
