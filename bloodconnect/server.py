import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import Settings
from .database import connect, ensure_indexes
from .errors import register_exception_handlers
from .routers import dashboard_router, donors_router, hospitals_router, matching_router
from .services import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None, db=None) -> FastAPI:
    """Build the API. ``db`` overrides the MongoDB database opened from settings."""
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 50)
        logger.info(f"{settings.APP_NAME} Starting...")
        client = None
        if db is None:
            client, app.state.db = connect(settings)
            logger.info(f"  MongoDB: {settings.MONGODB_DB}")
        else:
            app.state.db = db
        await ensure_indexes(app.state.db)
        logger.info(f"  CORS Origins: {settings.CORS_ORIGINS}")
        logger.info("=" * 50)

        yield

        logger.info(f"{settings.APP_NAME} shutting down...")
        if client is not None:
            client.close()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Donor and hospital registration with blood matching",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.tokens = TokenService(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(donors_router)
    app.include_router(hospitals_router)
    app.include_router(dashboard_router)
    app.include_router(matching_router)

    @app.get("/health")
    async def health_check():
        """Basic health check for load balancers."""
        return {"status": "healthy", "service": "bloodconnect"}

    # mounted last so API routes take precedence
    if settings.PUBLIC_DIR and Path(settings.PUBLIC_DIR).is_dir():
        app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True), name="public")
    else:
        logger.warning(f"Front end directory not found: {settings.PUBLIC_DIR}")

    return app


def main():
    import uvicorn

    settings = Settings()
    configure_logging(settings)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
