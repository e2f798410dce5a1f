from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from src.domain.models.breed import BreedRecord


class TextFetcher(Protocol):
    async def fetch_text(self, url: str) -> str: ...


class CatalogPublisher(Protocol):
    def publish(self, records: Sequence[BreedRecord], *, generator_version: str) -> Path: ...
