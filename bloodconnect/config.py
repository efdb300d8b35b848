from pathlib import Path
from typing import Annotated, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """BloodConnect service configuration, loaded once at startup."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "BloodConnect API"
    DEBUG: bool = False

    # MongoDB
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "bloodconnectDB"

    # Security - the signing secret has no default and must come from the environment
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 10

    # CORS - comma separated string or list
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    # Front end
    PUBLIC_DIR: Optional[str] = str(Path(__file__).resolve().parent.parent / "public")

    HOST: str = "0.0.0.0"
    PORT: int = 5000

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
