import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pymongo.errors import PyMongoError

from ..errors import Internal, InvalidCredentials, NotFound
from ..models import Donor, DonorCreate, DonorLogin
from ..services import (
    DonorStore, PasswordHasher, TokenService, donor_identity,
    get_donor_store, get_hasher, get_token_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Donors"])

@router.post("/api/donors/register")
async def register_donor(
    payload: DonorCreate,
    store: DonorStore = Depends(get_donor_store),
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: TokenService = Depends(get_token_service)
):
    try:
        password_hash = await run_in_threadpool(hasher.hash, payload.password)
    except ValueError as e:
        logger.error(f"Donor password hashing error: {e}", exc_info=True)
        raise Internal("Error registering donor", error=str(e))

    donor = Donor(**payload.model_dump(exclude={"password"}), password_hash=password_hash)
    doc = donor.to_document()

    try:
        await store.insert(doc)
    except PyMongoError as e:
        logger.error(f"Donor registration error: {e}", exc_info=True)
        raise Internal("Error registering donor", error=str(e))

    logger.info(f"Registered donor {donor.id}")
    token = tokens.issue(donor_identity(doc))
    return {"message": "Donor registered successfully", "token": token}

@router.post("/login-donor")
async def login_donor(
    payload: DonorLogin,
    store: DonorStore = Depends(get_donor_store),
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: TokenService = Depends(get_token_service)
):
    try:
        donor = await store.get_credentials(payload.email)
    except PyMongoError as e:
        logger.error(f"Donor login error: {e}", exc_info=True)
        raise Internal("Server error", error=str(e))

    if not donor:
        raise NotFound("Donor not found")

    if not await run_in_threadpool(hasher.verify, payload.password, donor["passwordHash"]):
        logger.warning(f"Failed login for donor {donor['id']}")
        raise InvalidCredentials()

    token = tokens.issue(donor_identity(donor))
    return {"message": "Login successful", "token": token, "name": donor["name"]}
