import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cipherlab import __version__
from cipherlab.api.v1.router import api_router
from cipherlab.core.config import Settings, get_settings

settings = get_settings()


def configure_logging(settings: Settings) -> None:
    """Set the package log level and attach a console handler."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.getLogger("cipherlab").setLevel(level)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical Cipher Lab API. "
            "Encrypt and decrypt short texts with a Cyrillic keyword "
            "substitution cipher and a Latin route transposition cipher."
        ),
        version=__version__,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
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
        "cipherlab.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
