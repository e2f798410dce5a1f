from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.application.use_cases.breeds.build_catalog import merge_sources
from src.config.settings import Settings
from src.domain.models.breed import AkcInfo, BreedRecord, FciInfo
from src.infrastructure.catalog.sources import AkcRow, FciRow
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    return Settings.model_validate(
        {
            "log_level": "INFO",
            "environment": "test",
            "default_country_code": "91",
            "breeds_fci_csv_url": "https://fci.test/breeds.csv",
            "breeds_akc_csv_url": "https://akc.test/breeds.csv",
            "breeds_output_path": str(tmp_path / "breeds_generated.py"),
        }
    )


@pytest.fixture()
def sample_catalog() -> tuple[BreedRecord, ...]:
    fci = [
        FciRow(
            "GOLDEN RETRIEVER",
            FciInfo(
                breed_no=111,
                group_no=8,
                group_name="Retrievers - Flushing Dogs - Water Dogs",
                section_no=1,
                section_name="Retrievers",
            ),
        ),
        FciRow(
            "GERMAN SHEPHERD DOG",
            FciInfo(
                breed_no=166,
                group_no=1,
                group_name="Sheepdogs and Cattledogs (except Swiss Cattledogs)",
            ),
        ),
        FciRow("PUG", FciInfo(breed_no=253, group_no=9, group_name="Companion and Toy Dogs")),
    ]
    akc = [
        AkcRow("Golden Retriever", AkcInfo(group_name="Sporting Group")),
        AkcRow("German Shepherd Dog", AkcInfo(group_name="Herding Group")),
        AkcRow("Boykin Spaniel", AkcInfo(group_name="Sporting Group")),
    ]
    return tuple(merge_sources(fci, akc))


@pytest.fixture()
def app(test_settings: Settings, sample_catalog: tuple[BreedRecord, ...]):
    return create_app(settings=test_settings, breed_catalog=sample_catalog)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
