from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from inventory.api.errors import register_exception_handlers
from inventory.api.v1.routers.auth import router as auth_router
from inventory.api.v1.routers.health import router as health_router
from inventory.api.v1.routers.products import router as products_router
from inventory.core.config import get_settings
from inventory.core.lifespan import lifespan
from inventory.core.logging import configure_logging


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    # ------- CORS -------
    # The web client sends a bearer header, no cookies
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        max_age=86400,
    )

    register_exception_handlers(app)

    # ------- Routes -------
    app.include_router(health_router)
    app.include_router(auth_router, prefix=settings.api_prefix)      # register / login
    app.include_router(products_router, prefix=settings.api_prefix)  # owner-scoped CRUD

    return app


app = create_app()
