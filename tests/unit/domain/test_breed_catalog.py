from __future__ import annotations

import re

from src.domain.catalog.breeds import (
    CAT_BREEDS,
    SPECIAL_BREEDS,
    dog_breed_options,
    dog_component_options,
    find_breed_record_by_label,
    get_breed_by_key,
    get_breeds,
)
from src.domain.models.breed import BreedRecord
from src.domain.value_objects.source_tag import SourceTag
from src.utils.breed_names import collation_key


def test_generated_catalog_is_read_only_and_cached():
    breeds = get_breeds()
    assert isinstance(breeds, tuple)
    assert breeds is get_breeds()
    assert all(isinstance(b, BreedRecord) for b in breeds)


def test_generated_catalog_starts_with_special_breeds():
    labels = [b.label for b in get_breeds()]
    assert tuple(labels[: len(SPECIAL_BREEDS)]) == SPECIAL_BREEDS
    assert all(label not in SPECIAL_BREEDS for label in labels[len(SPECIAL_BREEDS) :])


def test_generated_catalog_keys_are_unique_slugs():
    keys = [b.key for b in get_breeds()]
    assert len(keys) == len(set(keys))
    assert all(re.fullmatch(r"[a-z0-9]+(-[a-z0-9]+)*", k) for k in keys)


def test_generated_catalog_sourced_entries_have_matching_metadata():
    for b in get_breeds()[len(SPECIAL_BREEDS) :]:
        assert b.sources
        assert (b.fci is not None) == (SourceTag.FCI in b.sources)
        assert (b.akc is not None) == (SourceTag.AKC in b.sources)


def test_find_by_label_is_case_insensitive(sample_catalog):
    record = find_breed_record_by_label("golden retriever", sample_catalog)
    assert record is not None
    assert record.label == "GOLDEN RETRIEVER"
    assert find_breed_record_by_label("  Golden Retriever ", sample_catalog) is record


def test_find_by_label_matches_aliases(sample_catalog):
    record = find_breed_record_by_label("german shepherd", sample_catalog)
    assert record is not None
    assert record.key == "german-shepherd-dog"
    assert find_breed_record_by_label("INDIE", sample_catalog).label == "Indie (Indian Pariah)"


def test_find_by_label_reports_no_match(sample_catalog):
    assert find_breed_record_by_label("Golden", sample_catalog) is None
    assert find_breed_record_by_label("Cavapoo (custom)", sample_catalog) is None
    assert find_breed_record_by_label("", sample_catalog) is None
    assert find_breed_record_by_label("   ", sample_catalog) is None
    assert find_breed_record_by_label(None, sample_catalog) is None


def test_find_by_label_uses_generated_catalog_by_default():
    assert find_breed_record_by_label("mix-breed") == get_breeds()[1]
    assert find_breed_record_by_label("definitely not a breed name") is None


def test_get_breed_by_key(sample_catalog):
    assert get_breed_by_key("pug", sample_catalog).label == "PUG"
    assert get_breed_by_key("nope", sample_catalog) is None


def test_dog_breed_options_are_display_normalized_and_deduplicated(sample_catalog):
    duplicate = BreedRecord(key="golden-retriever-2", label="Golden Retriever")
    options = dog_breed_options([*sample_catalog, duplicate])
    assert options == [
        "Indie (Indian Pariah)",
        "Mix-breed",
        "Cross-breed",
        "Boykin Spaniel",
        "German Shepherd Dog",
        "Golden Retriever",
        "Pug",
    ]


def test_dog_component_options_exclude_mixed_markers(sample_catalog):
    options = dog_component_options(sample_catalog)
    assert "Mix-breed" not in options
    assert "Cross-breed" not in options
    assert "Indie (Indian Pariah)" in options


def test_cat_breeds_sorted():
    assert list(CAT_BREEDS) == sorted(CAT_BREEDS, key=collation_key)
    assert "Domestic Short Hair (DSH)" in CAT_BREEDS
