from __future__ import annotations

from pydantic import BaseModel

from src.domain.models.breed import BreedRecord
from src.domain.value_objects.breed_type import BreedType
from src.domain.value_objects.source_tag import SourceTag
from src.utils.breed_names import format_akc_text, format_fci_text


class FciInfoResponse(BaseModel):
    breed_no: int | None = None
    group_no: int | None = None
    group_name: str | None = None
    section_no: int | None = None
    section_name: str | None = None


class AkcInfoResponse(BaseModel):
    group_name: str | None = None


class BreedResponse(BaseModel):
    key: str
    label: str
    type: BreedType
    sources: list[SourceTag]
    fci: FciInfoResponse | None = None
    akc: AkcInfoResponse | None = None
    aliases: list[str] = []

    @classmethod
    def from_record(cls, b: BreedRecord) -> BreedResponse:
        return cls(
            key=b.key,
            label=b.label,
            type=b.type,
            sources=list(b.sources),
            fci=(
                FciInfoResponse(
                    breed_no=b.fci.breed_no,
                    group_no=b.fci.group_no,
                    group_name=b.fci.group_name,
                    section_no=b.fci.section_no,
                    section_name=b.fci.section_name,
                )
                if b.fci is not None
                else None
            ),
            akc=AkcInfoResponse(group_name=b.akc.group_name) if b.akc is not None else None,
            aliases=list(b.aliases),
        )


class BreedLookupResponse(BaseModel):
    breed: BreedResponse
    fci_text: str | None = None
    akc_text: str | None = None

    @classmethod
    def from_record(cls, b: BreedRecord) -> BreedLookupResponse:
        return cls(
            breed=BreedResponse.from_record(b),
            fci_text=format_fci_text(b.fci),
            akc_text=format_akc_text(b.akc),
        )


class BreedOptionsResponse(BaseModel):
    species: str
    options: list[str]
