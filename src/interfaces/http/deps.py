from __future__ import annotations

from fastapi import Request

from src.config.settings import Settings, get_settings
from src.domain.catalog.breeds import get_breeds
from src.domain.models.breed import BreedRecord


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()


def get_breed_catalog(request: Request) -> tuple[BreedRecord, ...]:
    catalog = getattr(request.app.state, "breed_catalog", None)
    if catalog is None:
        return get_breeds()
    return catalog
