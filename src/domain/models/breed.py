from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from src.domain.value_objects.breed_type import BreedType
from src.domain.value_objects.source_tag import SourceTag


@dataclass(frozen=True, slots=True)
class FciInfo:
    breed_no: int | None = None
    group_no: int | None = None
    group_name: str | None = None
    section_no: int | None = None
    section_name: str | None = None

    def as_dict(self) -> dict[str, Any]:
        data = {
            "breedNo": self.breed_no,
            "groupNo": self.group_no,
            "groupName": self.group_name,
            "sectionNo": self.section_no,
            "sectionName": self.section_name,
        }
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FciInfo:
        return cls(
            breed_no=data.get("breedNo"),
            group_no=data.get("groupNo"),
            group_name=data.get("groupName"),
            section_no=data.get("sectionNo"),
            section_name=data.get("sectionName"),
        )


@dataclass(frozen=True, slots=True)
class AkcInfo:
    group_name: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"groupName": self.group_name} if self.group_name is not None else {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AkcInfo:
        return cls(group_name=data.get("groupName"))


@dataclass(frozen=True, slots=True)
class BreedRecord:
    key: str
    label: str
    type: BreedType = BreedType.PUREBRED
    sources: tuple[SourceTag, ...] = ()
    fci: FciInfo | None = None
    akc: AkcInfo | None = None
    aliases: tuple[str, ...] = ()

    def with_source(self, tag: SourceTag) -> BreedRecord:
        if tag in self.sources:
            return self
        return replace(self, sources=(*self.sources, tag))

    def matches_label(self, label: str) -> bool:
        """Case-insensitive exact match against the label or any alias."""
        q = label.strip().lower()
        if not q:
            return False
        if self.label.lower() == q:
            return True
        return any(a.lower() == q for a in self.aliases)

    def as_dict(self) -> dict[str, Any]:
        """Serialize with the stable field order used by the generated catalog."""
        data: dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "type": self.type.value,
            "sources": [s.value for s in self.sources],
        }
        if self.fci is not None:
            data["fci"] = self.fci.as_dict()
        if self.akc is not None:
            data["akc"] = self.akc.as_dict()
        if self.aliases:
            data["aliases"] = list(self.aliases)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BreedRecord:
        fci = data.get("fci")
        akc = data.get("akc")
        return cls(
            key=data["key"],
            label=data["label"],
            type=BreedType(data.get("type", BreedType.PUREBRED.value)),
            sources=tuple(SourceTag(s) for s in data.get("sources", ())),
            fci=FciInfo.from_dict(fci) if fci is not None else None,
            akc=AkcInfo.from_dict(akc) if akc is not None else None,
            aliases=tuple(data.get("aliases", ())),
        )
