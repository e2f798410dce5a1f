from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, Query

from src.application.errors import NotFound, ValidationError
from src.domain.catalog.breeds import (
    CAT_BREEDS,
    dog_breed_options,
    dog_component_options,
    find_breed_record_by_label,
    get_breed_by_key,
)
from src.domain.models.breed import BreedRecord
from src.domain.value_objects.breed_type import BreedType
from src.interfaces.http.deps import get_breed_catalog
from src.interfaces.http.schemas.breeds import (
    BreedLookupResponse,
    BreedOptionsResponse,
    BreedResponse,
)

router = APIRouter(prefix="/breeds", tags=["breeds"])


class Species(str, Enum):
    DOG = "dog"
    CAT = "cat"


@router.get("/", response_model=list[BreedResponse])
async def list_breeds(
    *,
    catalog: tuple[BreedRecord, ...] = Depends(get_breed_catalog),
    breed_type: BreedType | None = Query(None, alias="type"),
    q: str | None = Query(None, description="Case-insensitive substring of label or alias"),
):
    items = list(catalog)
    if breed_type is not None:
        items = [b for b in items if b.type is breed_type]
    if q and q.strip():
        needle = q.strip().lower()
        items = [
            b
            for b in items
            if needle in b.label.lower() or any(needle in a.lower() for a in b.aliases)
        ]
    return [BreedResponse.from_record(b) for b in items]


@router.get("/lookup", response_model=BreedLookupResponse)
async def lookup_breed(
    *,
    catalog: tuple[BreedRecord, ...] = Depends(get_breed_catalog),
    label: str = Query(...),
):
    if not label.strip():
        raise ValidationError("Breed label must not be blank")
    record = find_breed_record_by_label(label, catalog)
    if record is None:
        raise NotFound("Breed not found", details={"label": label})
    return BreedLookupResponse.from_record(record)


@router.get("/options", response_model=BreedOptionsResponse)
async def breed_options(
    *,
    catalog: tuple[BreedRecord, ...] = Depends(get_breed_catalog),
    species: Species = Query(Species.DOG),
    components: bool = Query(False, description="Options for Mix/Cross-breed components"),
):
    if species is Species.CAT:
        options = list(CAT_BREEDS)
    elif components:
        options = dog_component_options(catalog)
    else:
        options = dog_breed_options(catalog)
    return BreedOptionsResponse(species=species.value, options=options)


@router.get("/{key}", response_model=BreedResponse)
async def get_breed(key: str, *, catalog: tuple[BreedRecord, ...] = Depends(get_breed_catalog)):
    record = get_breed_by_key(key, catalog)
    if record is None:
        raise NotFound("Breed not found", details={"key": key})
    return BreedResponse.from_record(record)
