from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Sequence

from src.application.interfaces.catalog import CatalogPublisher, TextFetcher
from src.domain.models.breed import BreedRecord
from src.domain.value_objects.breed_type import BreedType
from src.domain.value_objects.source_tag import SourceTag
from src.infrastructure.catalog.sources import AkcRow, FciRow, parse_akc_csv, parse_fci_csv
from src.utils.breed_names import (
    CROSS_BREED_LABEL,
    INDIE_LABEL,
    MIX_BREED_LABEL,
    collation_key,
    matching_key,
    slugify,
)

logger = logging.getLogger(__name__)

GENERATOR_VERSION = "bitb-breeds gen-breeds v5"

SYNTHETIC_BREEDS: tuple[BreedRecord, ...] = (
    BreedRecord(key=slugify(INDIE_LABEL), label=INDIE_LABEL, type=BreedType.PUREBRED),
    BreedRecord(key=slugify(MIX_BREED_LABEL), label=MIX_BREED_LABEL, type=BreedType.MIX_BREED),
    BreedRecord(
        key=slugify(CROSS_BREED_LABEL), label=CROSS_BREED_LABEL, type=BreedType.CROSS_BREED
    ),
)

# Alternate spellings clients commonly type, keyed by matching key
BREED_ALIASES: Mapping[str, tuple[str, ...]] = {
    "german shepherd dog": ("German Shepherd", "Alsatian"),
    "indie indian pariah": ("Indie", "Indian Pariah", "INDog"),
    "labrador retriever": ("Labrador",),
}


@dataclass(slots=True)
class BuildCatalogOutput:
    records: list[BreedRecord]
    fci_rows: int
    akc_rows: int
    output_path: Path | None = None

    @property
    def total(self) -> int:
        return len(self.records)


def _unique_key(base: str, taken: set[str]) -> str:
    key = base
    n = 2
    while key in taken:
        key = f"{base}-{n}"
        n += 1
    taken.add(key)
    return key


def merge_sources(
    fci_rows: Sequence[FciRow],
    akc_rows: Sequence[AkcRow],
    *,
    aliases: Mapping[str, tuple[str, ...]] = BREED_ALIASES,
) -> list[BreedRecord]:
    """Merge both breed lists into the ordered catalog.

    Labels with the same matching key collapse into one record. Synthetic
    entries come first; sourced records follow in label order.
    """
    merged: dict[str, BreedRecord] = {}

    for row in fci_rows:
        merged[matching_key(row.label)] = BreedRecord(
            key=slugify(row.label),
            label=row.label,
            sources=(SourceTag.FCI,),
            fci=row.fci,
        )

    for row in akc_rows:
        k = matching_key(row.label)
        existing = merged.get(k)
        if existing is not None:
            # AKC metadata replaces whatever an earlier AKC row attached
            merged[k] = replace(existing.with_source(SourceTag.AKC), akc=row.akc)
        else:
            merged[k] = BreedRecord(
                key=slugify(row.label),
                label=row.label,
                sources=(SourceTag.AKC,),
                akc=row.akc,
            )

    synthetic_labels = {b.label for b in SYNTHETIC_BREEDS}
    ordered = sorted(merged.values(), key=lambda b: collation_key(b.label))
    combined = [*SYNTHETIC_BREEDS, *(b for b in ordered if b.label not in synthetic_labels)]

    taken: set[str] = set()
    out: list[BreedRecord] = []
    for record in combined:
        out.append(
            replace(
                record,
                key=_unique_key(slugify(record.label), taken),
                aliases=aliases.get(matching_key(record.label), record.aliases),
            )
        )
    return out


async def execute(
    *,
    fetcher: TextFetcher,
    publisher: CatalogPublisher | None,
    fci_url: str,
    akc_url: str,
    generator_version: str = GENERATOR_VERSION,
) -> BuildCatalogOutput:
    """Fetch, merge and publish the breed catalog.

    Any failure propagates as a CatalogBuildError before anything is written.
    Passing no publisher performs a dry run.
    """
    logger.info("Fetching FCI CSV from %s", fci_url)
    logger.info("Fetching AKC CSV from %s", akc_url)
    fci_text, akc_text = await asyncio.gather(
        fetcher.fetch_text(fci_url), fetcher.fetch_text(akc_url)
    )

    fci_rows = parse_fci_csv(fci_text)
    akc_rows = parse_akc_csv(akc_text)
    logger.info("FCI rows: %d", len(fci_rows))
    logger.info("AKC rows: %d", len(akc_rows))

    records = merge_sources(fci_rows, akc_rows)
    output_path = None
    if publisher is not None:
        output_path = publisher.publish(records, generator_version=generator_version)
    logger.info("Final options (incl. Indie/Mix/Cross): %d", len(records))
    return BuildCatalogOutput(
        records=records,
        fci_rows=len(fci_rows),
        akc_rows=len(akc_rows),
        output_path=output_path,
    )
