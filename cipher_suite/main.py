from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cipher_suite.api.v1.router import api_router
from cipher_suite.core.config import get_settings
from cipher_suite.core.logging_config import LoggingConfig

settings = get_settings()
logger = LoggingConfig.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    logger.info("%s starting (%s)", settings.app_name, settings.app_env)
    yield
    logger.info("%s shutting down", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    LoggingConfig.configure()

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical Cipher Suite API. "
            "Encrypt and decrypt text with the Caesar, Vigenère, "
            "A1Z26 and Atbash ciphers. For teaching only: none of them is secure."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "cipher_suite.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
