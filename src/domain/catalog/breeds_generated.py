# AUTO-GENERATED FILE. DO NOT EDIT BY HAND.
# Generated by bitb-breeds gen-breeds v5
# Regenerate with: python scripts/gen_breeds.py
from __future__ import annotations

from typing import Literal, NotRequired, TypedDict

BreedType = Literal["Purebred", "Mix-breed", "Cross-breed"]
SourceTag = Literal["FCI", "AKC"]


class FciData(TypedDict, total=False):
    breedNo: int
    groupNo: int
    groupName: str
    sectionNo: int
    sectionName: str


class AkcData(TypedDict, total=False):
    groupName: str


class BreedRecordData(TypedDict):
    key: str
    label: str
    type: BreedType
    sources: list[SourceTag]
    fci: NotRequired[FciData]
    akc: NotRequired[AkcData]
    aliases: NotRequired[list[str]]


BREEDS: tuple[BreedRecordData, ...] = (
    {
        "key": "indie-indian-pariah",
        "label": "Indie (Indian Pariah)",
        "type": "Purebred",
        "sources": [],
        "aliases": ["Indie", "Indian Pariah", "INDog"],
    },
    {
        "key": "mix-breed",
        "label": "Mix-breed",
        "type": "Mix-breed",
        "sources": [],
    },
    {
        "key": "cross-breed",
        "label": "Cross-breed",
        "type": "Cross-breed",
        "sources": [],
    },
    {
        "key": "beagle",
        "label": "BEAGLE",
        "type": "Purebred",
        "sources": ["FCI", "AKC"],
        "fci": {"breedNo": 161, "groupNo": 6, "groupName": "Scent hounds and related breeds", "sectionNo": 1, "sectionName": "Scent hounds"},
        "akc": {"groupName": "Hound Group"},
    },
    {
        "key": "boykin-spaniel",
        "label": "Boykin Spaniel",
        "type": "Purebred",
        "sources": ["AKC"],
        "akc": {"groupName": "Sporting Group"},
    },
    {
        "key": "german-shepherd-dog",
        "label": "GERMAN SHEPHERD DOG",
        "type": "Purebred",
        "sources": ["FCI", "AKC"],
        "fci": {"breedNo": 166, "groupNo": 1, "groupName": "Sheepdogs and Cattledogs (except Swiss Cattledogs)", "sectionNo": 1, "sectionName": "Sheepdogs"},
        "akc": {"groupName": "Herding Group"},
        "aliases": ["German Shepherd", "Alsatian"],
    },
    {
        "key": "golden-retriever",
        "label": "GOLDEN RETRIEVER",
        "type": "Purebred",
        "sources": ["FCI", "AKC"],
        "fci": {"breedNo": 111, "groupNo": 8, "groupName": "Retrievers - Flushing Dogs - Water Dogs", "sectionNo": 1, "sectionName": "Retrievers"},
        "akc": {"groupName": "Sporting Group"},
    },
    {
        "key": "labrador-retriever",
        "label": "LABRADOR RETRIEVER",
        "type": "Purebred",
        "sources": ["FCI", "AKC"],
        "fci": {"breedNo": 122, "groupNo": 8, "groupName": "Retrievers - Flushing Dogs - Water Dogs", "sectionNo": 1, "sectionName": "Retrievers"},
        "akc": {"groupName": "Sporting Group"},
        "aliases": ["Labrador"],
    },
    {
        "key": "pug",
        "label": "PUG",
        "type": "Purebred",
        "sources": ["FCI", "AKC"],
        "fci": {"breedNo": 253, "groupNo": 9, "groupName": "Companion and Toy Dogs", "sectionNo": 11, "sectionName": "Small Molossian type Dogs"},
        "akc": {"groupName": "Toy Group"},
    },
    {
        "key": "shih-tzu",
        "label": "SHIH TZU",
        "type": "Purebred",
        "sources": ["FCI", "AKC"],
        "fci": {"breedNo": 208, "groupNo": 9, "groupName": "Companion and Toy Dogs", "sectionNo": 5, "sectionName": "Tibetan breeds"},
        "akc": {"groupName": "Toy Group"},
    },
)
