import logging

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from pymongo.errors import PyMongoError

from ..errors import Internal, InvalidCredentials, NotFound
from ..models import Hospital, HospitalCreate, HospitalLogin
from ..services import (
    HospitalStore, PasswordHasher, TokenService, hospital_identity,
    get_hasher, get_hospital_store, get_token_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Hospitals"])

@router.post("/register-hospital", status_code=status.HTTP_201_CREATED)
async def register_hospital(
    payload: HospitalCreate,
    store: HospitalStore = Depends(get_hospital_store),
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: TokenService = Depends(get_token_service)
):
    try:
        password_hash = await run_in_threadpool(hasher.hash, payload.password)
    except ValueError as e:
        logger.error(f"Hospital password hashing error: {e}", exc_info=True)
        raise Internal("Error registering hospital", error=str(e))

    hospital = Hospital(**payload.model_dump(exclude={"password"}), password_hash=password_hash)
    doc = hospital.to_document()

    try:
        await store.insert(doc)
    except PyMongoError as e:
        logger.error(f"Hospital registration error: {e}", exc_info=True)
        raise Internal("Error registering hospital", error=str(e))

    logger.info(f"Registered hospital {hospital.id}")
    token = tokens.issue(hospital_identity(doc))
    return {"message": "Hospital registered successfully", "token": token}

@router.post("/login-hospital")
async def login_hospital(
    payload: HospitalLogin,
    store: HospitalStore = Depends(get_hospital_store),
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: TokenService = Depends(get_token_service)
):
    try:
        hospital = await store.get_credentials(payload.email)
    except PyMongoError as e:
        logger.error(f"Hospital login error: {e}", exc_info=True)
        raise Internal("Server error", error=str(e))

    if not hospital:
        raise NotFound("Hospital not found")

    if not await run_in_threadpool(hasher.verify, payload.password, hospital["passwordHash"]):
        logger.warning(f"Failed login for hospital {hospital['id']}")
        raise InvalidCredentials()

    token = tokens.issue(hospital_identity(hospital))
    return {
        "message": "Login successful",
        "token": token,
        "hospitalName": hospital["hospitalName"],
        "blood": hospital.get("blood", [])
    }
