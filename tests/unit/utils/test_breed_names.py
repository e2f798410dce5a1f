from __future__ import annotations

import re

import pytest

from src.domain.models.breed import AkcInfo, FciInfo
from src.domain.value_objects.breed_type import BreedType
from src.utils.breed_names import (
    breed_type_from_label,
    collation_key,
    format_akc_text,
    format_fci_text,
    matching_key,
    normalize_breed_label,
    normalize_free_text_breed,
    slugify,
    to_title_case,
)

SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

LABELS = [
    "Golden Retriever",
    "GOLDEN RETRIEVER",
    "Indie (Indian Pariah)",
    "Mix-breed",
    "St. Bernard",
    "Cirneco dell'Etna",
    "Cirneco dell’Etna",
    "Löwchen (Little Lion Dog)",
    "Bichon & Poodle / Cross",
    "\ufeffAffenpinscher",
    "  Dandie   Dinmont Terrier ",
    "Perro de Presa Canario - Dogo Canario",
    "Xoloitzcuintli, Standard",
]


def test_matching_key_normalizes_case_and_punctuation():
    assert matching_key("\ufeffSt. Bernard's (Smooth) / Rough") == "st bernards smooth rough"
    assert matching_key("Bichon & Poodle") == "bichon and poodle"
    assert matching_key("GOLDEN  RETRIEVER") == matching_key("Golden Retriever")
    assert matching_key("Cirneco dell'Etna") == matching_key("Cirneco dell’Etna")
    assert matching_key(None) == ""


@pytest.mark.parametrize("label", LABELS)
def test_matching_key_is_idempotent(label):
    key = matching_key(label)
    assert matching_key(key) == key


@pytest.mark.parametrize("label", LABELS)
def test_slug_only_has_lowercase_digits_and_single_hyphens(label):
    assert SLUG_RE.match(slugify(label))


def test_slug_examples():
    assert slugify("Indie (Indian Pariah)") == "indie-indian-pariah"
    assert slugify("Mix-breed") == "mix-breed"
    assert slugify("GERMAN SHEPHERD DOG") == "german-shepherd-dog"
    assert slugify("Löwchen (Little Lion Dog)") == "lowchen-little-lion-dog"
    assert slugify(" -- Weird -- ") == "weird"


def test_collation_ignores_case_and_accents():
    labels = ["beagle", "Löwchen", "BOXER", "Lhasa Apso", "Akita"]
    expected = ["Akita", "beagle", "BOXER", "Lhasa Apso", "Löwchen"]
    assert sorted(labels, key=collation_key) == expected


def test_to_title_case():
    assert to_title_case("GERMAN SHEPHERD DOG") == "German Shepherd Dog"
    assert to_title_case("") == ""
    assert to_title_case(None) == ""


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("GOLDEN RETRIEVER", "Golden Retriever"),
        ("mix-breed", "Mix-breed"),
        ("CROSS-BREED", "Cross-breed"),
        ("INDIE (INDIAN PARIAH)", "Indie (Indian Pariah)"),
        ("Shih Tzu", "Shih Tzu"),
        ("labradoodle", "labradoodle"),
        ("   ", ""),
        (None, ""),
    ],
)
def test_normalize_breed_label(raw, expected):
    assert normalize_breed_label(raw) == expected


def test_normalize_free_text_breed_uppercases_known_codes():
    assert normalize_free_text_breed("domestic short hair (dsh)") == "Domestic Short Hair (DSH)"
    assert normalize_free_text_breed("  maine coon ") == "Maine Coon"
    assert normalize_free_text_breed("bengal akc") == "Bengal AKC"
    assert normalize_free_text_breed("") == ""


def test_breed_type_from_label():
    assert breed_type_from_label(" Mix-Breed ") is BreedType.MIX_BREED
    assert breed_type_from_label("cross-breed") is BreedType.CROSS_BREED
    assert breed_type_from_label("Pug") is BreedType.PUREBRED
    assert breed_type_from_label(None) is BreedType.PUREBRED


def test_format_fci_text():
    assert (
        format_fci_text(FciInfo(group_no=8, group_name="RETRIEVERS - FLUSHING DOGS"))
        == "FCI: Group 8 - Retrievers - Flushing Dogs"
    )
    assert format_fci_text(FciInfo(group_no=8)) == "FCI: Group 8"
    assert format_fci_text(FciInfo(group_name="companion and toy dogs")) == (
        "FCI: Companion And Toy Dogs"
    )
    assert format_fci_text(FciInfo()) is None
    assert format_fci_text(None) is None


def test_format_akc_text():
    assert format_akc_text(AkcInfo(group_name="sporting group")) == "AKC: Sporting Group"
    assert format_akc_text(AkcInfo()) is None
    assert format_akc_text(None) is None
