"""
Auth Gates
FastAPI dependencies that authenticate the caller from the raw token in the
``authorization`` header and restrict admin-only routes.
"""
import logging
from typing import Optional

from fastapi import Depends, Header

from ..errors import Forbidden, Unauthenticated
from ..models.claims import HospitalIdentity, Identity
from ..services import TokenError, TokenService, get_token_service

logger = logging.getLogger(__name__)


async def get_current_user(
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Verify the caller's token and return the identity it carries."""
    if not authorization:
        raise Unauthenticated("No token provided")
    try:
        return tokens.verify(authorization)
    except TokenError as e:
        logger.info(f"Rejected token: {e}")
        raise Unauthenticated("Invalid token") from e


async def require_admin(current_user: Identity = Depends(get_current_user)) -> HospitalIdentity:
    """Allow only hospital identities flagged as admin."""
    if not isinstance(current_user, HospitalIdentity) or not current_user.is_admin:
        raise Forbidden("Access denied: Admins only")
    return current_user
