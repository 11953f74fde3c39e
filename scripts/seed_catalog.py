#!/usr/bin/env python3
"""Seed sample catalog script.

Creates the catalog tables if needed and fills them with sample
attributes, product types, products and variants.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-create-tables
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_api.application.seed_service import seed_sample_catalog
from catalog_api.infrastructure.database import async_session_factory, create_tables, engine
from catalog_api.infrastructure.log_config import configure_logging


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the sample product catalog",
    )
    parser.add_argument(
        "--no-create-tables",
        action="store_true",
        help="Don't create missing tables before seeding",
    )

    args = parser.parse_args()
    configure_logging(json_output=False)

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)

    if not args.no_create_tables:
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    try:
        async with async_session_factory() as session:
            result = await seed_sample_catalog(session)
            await session.commit()
    finally:
        await engine.dispose()

    print(f"  ✓ Attributes: {result['attributes_created']} created, "
          f"{result['attributes_skipped']} already present")
    print(f"  ✓ Product types: {result['product_types_created']}")
    print(f"  ✓ Products: {result['products_created']}")
    print(f"  ✓ Variants: {result['variants_created']}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
