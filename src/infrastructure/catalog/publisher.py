from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from src.domain.models.breed import BreedRecord
from src.infrastructure.catalog.renderer import CatalogRenderer
from src.infrastructure.catalog.writer import write_atomically


@dataclass(slots=True)
class FileCatalogPublisher:
    """Renders the catalog module and swaps it into place."""

    output_path: Path
    renderer: CatalogRenderer

    def publish(self, records: Sequence[BreedRecord], *, generator_version: str) -> Path:
        content = self.renderer.render(records, generator_version=generator_version)
        return write_atomically(self.output_path, content)
