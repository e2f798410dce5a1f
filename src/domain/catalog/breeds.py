from __future__ import annotations

from functools import lru_cache
from typing import Sequence

from src.domain.models.breed import BreedRecord
from src.utils.breed_names import (
    CROSS_BREED_LABEL,
    INDIE_LABEL,
    MIX_BREED_LABEL,
    collation_key,
    normalize_breed_label,
)

SPECIAL_BREEDS: tuple[str, ...] = (INDIE_LABEL, MIX_BREED_LABEL, CROSS_BREED_LABEL)

CAT_BREEDS: tuple[str, ...] = tuple(
    sorted(
        (
            "Domestic Short Hair (DSH)",
            "Domestic Medium Hair (DMH)",
            "Domestic Long Hair (DLH)",
            "Indian Domestic (Desi)",
            "Persian",
            "Himalayan",
            "Siamese",
            "Bengal",
            "Maine Coon",
            "Ragdoll",
            "British Shorthair",
            "Scottish Fold",
            "Sphynx",
            "Russian Blue",
            "Abyssinian",
            "Birman",
            "Oriental Shorthair",
            "Bombay",
            "American Shorthair",
        ),
        key=collation_key,
    )
)


@lru_cache(maxsize=1)
def get_breeds() -> tuple[BreedRecord, ...]:
    """The generated breed catalog, loaded once and never mutated."""
    from src.domain.catalog.breeds_generated import BREEDS

    return tuple(BreedRecord.from_dict(data) for data in BREEDS)


def _catalog(catalog: Sequence[BreedRecord] | None) -> Sequence[BreedRecord]:
    return get_breeds() if catalog is None else catalog


def find_breed_record_by_label(
    label: str | None, catalog: Sequence[BreedRecord] | None = None
) -> BreedRecord | None:
    if not label or not label.strip():
        return None
    for record in _catalog(catalog):
        if record.matches_label(label):
            return record
    return None


def get_breed_by_key(key: str, catalog: Sequence[BreedRecord] | None = None) -> BreedRecord | None:
    for record in _catalog(catalog):
        if record.key == key:
            return record
    return None


def dog_breed_options(catalog: Sequence[BreedRecord] | None = None) -> list[str]:
    """Display labels for the dog breed picker, deduplicated ignoring case."""
    seen: set[str] = set()
    options: list[str] = []
    for record in _catalog(catalog):
        label = normalize_breed_label(record.label)
        k = label.lower()
        if not label or k in seen:
            continue
        seen.add(k)
        options.append(label)
    return options


def dog_component_options(catalog: Sequence[BreedRecord] | None = None) -> list[str]:
    """Options for the components of a mixed breed (Mix/Cross markers excluded)."""
    excluded = {MIX_BREED_LABEL.lower(), CROSS_BREED_LABEL.lower()}
    return [b for b in dog_breed_options(catalog) if b.lower() not in excluded]
