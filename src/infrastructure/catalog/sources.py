from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import Sequence

from src.application.errors import (
    EmptyDocumentError,
    HeaderResolutionError,
    MalformedDocumentError,
)
from src.domain.models.breed import AkcInfo, FciInfo
from src.infrastructure.catalog.csv_reader import (
    clean_text,
    field_at,
    normalize_header,
    parse_csv,
    parse_int,
    resolve_column,
)

FCI_SOURCE = "FCI"
AKC_SOURCE = "AKC"

FCI_NAME_CANDIDATES = ("name", "breed", "breedname", "breed_name")
FCI_BREED_NO_CANDIDATES = ("breedno", "breed_no", "no", "number", "id")
FCI_GROUP_NO_CANDIDATES = ("groupno", "group_no", "group number", "groupnumber")
FCI_GROUP_NAME_CANDIDATES = ("groupname", "group_name", "group")
FCI_SECTION_NO_CANDIDATES = ("sectionno", "section_no", "section number", "sectionnumber")
FCI_SECTION_NAME_CANDIDATES = ("sectionname", "section_name", "section")

AKC_NAME_CANDIDATES = ("breed", "name")
AKC_GROUP_CANDIDATES = ("group",)


@dataclass(frozen=True, slots=True)
class FciRow:
    label: str
    fci: FciInfo


@dataclass(frozen=True, slots=True)
class AkcRow:
    label: str
    akc: AkcInfo


@dataclass(frozen=True, slots=True)
class FciColumns:
    name: int
    breed_no: int | None = None
    group_no: int | None = None
    group_name: int | None = None
    section_no: int | None = None
    section_name: int | None = None

    @classmethod
    def from_header(cls, header: Sequence[str]) -> FciColumns:
        hl = [h.lower() for h in header]
        name = resolve_column(hl, FCI_NAME_CANDIDATES)
        if name is None:
            raise HeaderResolutionError(FCI_SOURCE, "breed name", header)
        return cls(
            name=name,
            breed_no=resolve_column(hl, FCI_BREED_NO_CANDIDATES),
            group_no=resolve_column(hl, FCI_GROUP_NO_CANDIDATES),
            group_name=resolve_column(hl, FCI_GROUP_NAME_CANDIDATES),
            section_no=resolve_column(hl, FCI_SECTION_NO_CANDIDATES),
            section_name=resolve_column(hl, FCI_SECTION_NAME_CANDIDATES),
        )


@dataclass(frozen=True, slots=True)
class AkcColumns:
    name: int
    group: int

    @classmethod
    def from_header(cls, header: Sequence[str]) -> AkcColumns:
        hl = [h.lower() for h in header]
        # Upstream leaves the first header cell blank; the breed name is column 0
        name = resolve_column(hl, AKC_NAME_CANDIDATES, allow_substring=False)
        group = resolve_column(hl, AKC_GROUP_CANDIDATES, allow_substring=False)
        if group is None:
            raise HeaderResolutionError(AKC_SOURCE, "'group'", header[:25])
        return cls(name=name if name is not None else 0, group=group)


def _header_and_body(text: str, source: str) -> tuple[list[str], list[list[str]]]:
    try:
        rows = parse_csv(text)
    except csv.Error as exc:
        raise MalformedDocumentError(source, str(exc)) from exc
    if len(rows) < 2:
        raise EmptyDocumentError(source)
    return normalize_header(rows[0]), rows[1:]


def parse_fci_csv(text: str) -> list[FciRow]:
    header, body = _header_and_body(text, FCI_SOURCE)
    cols = FciColumns.from_header(header)
    out: list[FciRow] = []
    for row in body:
        label = field_at(row, cols.name).strip()
        if not label:
            continue
        out.append(
            FciRow(
                label=label,
                fci=FciInfo(
                    breed_no=parse_int(field_at(row, cols.breed_no)),
                    group_no=parse_int(field_at(row, cols.group_no)),
                    group_name=clean_text(field_at(row, cols.group_name)),
                    section_no=parse_int(field_at(row, cols.section_no)),
                    section_name=clean_text(field_at(row, cols.section_name)),
                ),
            )
        )
    return out


def parse_akc_csv(text: str) -> list[AkcRow]:
    header, body = _header_and_body(text, AKC_SOURCE)
    cols = AkcColumns.from_header(header)
    out: list[AkcRow] = []
    for row in body:
        label = field_at(row, cols.name).strip()
        if not label:
            continue
        group_name = clean_text(field_at(row, cols.group))
        out.append(AkcRow(label=label, akc=AkcInfo(group_name=group_name)))
    return out
