#!/usr/bin/env python3
"""
Regenerate the static breed catalog module.

This script:
1. Downloads the FCI breed/group list and the AKC breed list (CSV)
2. Merges them by normalized breed name
3. Adds the Indie / Mix-breed / Cross-breed entries
4. Overwrites src/domain/catalog/breeds_generated.py in one step

Usage:
  python scripts/gen_breeds.py [--output PATH] [--fci-url URL] [--akc-url URL]

Any failure leaves the existing catalog untouched and exits with status 1.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import CatalogBuildError
from src.application.use_cases.breeds import build_catalog
from src.config.logging_config import configure_logging
from src.config.settings import get_settings
from src.infrastructure.catalog.fetcher import CsvFetcher
from src.infrastructure.catalog.publisher import FileCatalogPublisher
from src.infrastructure.catalog.renderer import CatalogRenderer

logger = logging.getLogger("gen_breeds")


async def generate(
    output: Path, fci_url: str, akc_url: str, *, dry_run: bool = False
) -> build_catalog.BuildCatalogOutput:
    settings = get_settings()
    fetcher = CsvFetcher(
        user_agent=settings.breeds_user_agent,
        timeout=settings.breeds_http_timeout_seconds,
    )
    publisher = None
    if not dry_run:
        publisher = FileCatalogPublisher(
            output_path=output, renderer=CatalogRenderer.create_default()
        )
    return await build_catalog.execute(
        fetcher=fetcher,
        publisher=publisher,
        fci_url=fci_url,
        akc_url=akc_url,
    )


def main(argv: list[str] | None = None) -> int:
    import argparse

    settings = get_settings()
    parser = argparse.ArgumentParser(description="Regenerate the static breed catalog")
    parser.add_argument("--output", type=Path, default=settings.breeds_output_path)
    parser.add_argument("--fci-url", default=settings.breeds_fci_csv_url)
    parser.add_argument("--akc-url", default=settings.breeds_akc_csv_url)
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument(
        "--dry-run", action="store_true", help="Fetch and merge without writing the catalog"
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    print("=" * 60)
    print(f"🐕 {build_catalog.GENERATOR_VERSION}")
    print("=" * 60)

    try:
        result = asyncio.run(
            generate(args.output, args.fci_url, args.akc_url, dry_run=args.dry_run)
        )
    except CatalogBuildError as exc:
        logger.error("%s failed: %s", build_catalog.GENERATOR_VERSION, exc.message)
        print(f"\n❌ {exc.message}")
        return 1

    if result.output_path is not None:
        print(f"\n✅ Wrote {result.output_path}")
    else:
        print("\nℹ️  Dry run, nothing written")
    print(f"   FCI rows: {result.fci_rows}")
    print(f"   AKC rows: {result.akc_rows}")
    print(f"   Final options (incl. Indie/Mix/Cross): {result.total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
