"""Password hashing and access token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from pydantic import ValidationError

from ..errors import InvalidInput
from ..models.claims import DonorIdentity, HospitalIdentity, Identity, identity_adapter


class PasswordHasher:
    """One-way bcrypt hashing of account passwords."""

    def __init__(self, rounds: int = 10):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        try:
            return self.context.hash(password)
        except PasswordValueError as e:
            # bcrypt refuses NUL bytes
            raise InvalidInput("Invalid password") from e

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self.context.verify(plain_password, hashed_password)
        except PasswordValueError:
            return False


class TokenError(Exception):
    """Raised when an access token cannot be trusted."""


class TokenService:
    """Issues and verifies signed, time-limited identity claims."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, identity: Identity, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT for ``identity`` expiring after ``expires_delta`` (default: configured minutes)."""
        claims = identity.model_dump(by_alias=True)
        now = datetime.now(timezone.utc)
        claims["iat"] = now
        claims["exp"] = now + (expires_delta or timedelta(minutes=self.expire_minutes))
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        """Decode ``token`` back into an identity, raising TokenError on any failure."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise TokenError(str(e)) from e
        try:
            return identity_adapter.validate_python(payload)
        except ValidationError as e:
            raise TokenError("Malformed claims") from e


def donor_identity(donor: dict) -> DonorIdentity:
    return DonorIdentity(id=donor["id"])


def hospital_identity(hospital: dict) -> HospitalIdentity:
    return HospitalIdentity(id=hospital["id"], is_admin=bool(hospital.get("isAdmin", False)))
