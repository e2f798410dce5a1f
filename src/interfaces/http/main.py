from __future__ import annotations

from typing import Sequence

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config.logging_config import configure_logging
from src.config.settings import Settings, get_settings
from src.domain.models.breed import BreedRecord
from src.interfaces.http.routers import breeds, contacts
from src.interfaces.middleware.error_handler import register_error_handlers


def create_app(
    *,
    settings: Settings | None = None,
    breed_catalog: Sequence[BreedRecord] | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title="BitB Breeds & Contacts",
        version="0.1.0",
        description="Read-only breed catalog and contact link helpers for the BitB dashboard",
    )
    app.state.settings = settings
    # None means the generated catalog, loaded lazily on first request
    app.state.breed_catalog = tuple(breed_catalog) if breed_catalog is not None else None
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(breeds.router)
    api.include_router(contacts.router)

    @api.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    return app


app = create_app()
