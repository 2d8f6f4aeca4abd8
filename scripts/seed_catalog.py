#!/usr/bin/env python3
"""Seed garment catalog script.

Creates the database tables and seeds a demo hoodie with colors,
sizes and a few designs so the storefront customizer has something
to show.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --clear
    python scripts/seed_catalog.py --sku HOOD-DEMO-2 --base-price 24.99
"""

import argparse
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import delete

from app.catalog.models import Color, Design, Garment, GarmentDesign, Size
from app.catalog.service import CatalogService
from app.infrastructure.database import async_session_factory, create_tables, engine
from app.infrastructure.logging_config import configure_logging

DEMO_COLORS = [
    ("Black", "#000000"),
    ("Heather Grey", "#9E9E9E"),
    ("Navy", "#1F2A44"),
]

DEMO_SIZES = ["S", "M", "L", "XL"]

DEMO_DESIGNS = [
    # name, image, price modifier
    ("Mountain Sunrise", "https://images.example.com/designs/mountain-sunrise.png", Decimal("5.00")),
    ("Retro Wave", "https://images.example.com/designs/retro-wave.png", Decimal("0.00")),
    ("Minimal Logo", "https://images.example.com/designs/minimal-logo.png", Decimal("-3.50")),
]


async def clear_catalog() -> None:
    """Delete every garment, option, design and association."""
    async with async_session_factory() as session:
        for model in (GarmentDesign, Color, Size, Garment, Design):
            await session.execute(delete(model))
        await session.commit()


async def seed_demo_hoodie(sku: str, base_price: Decimal) -> dict:
    """Seed one hoodie with colors, sizes and attached designs.

    Args:
        sku: SKU for the demo garment.
        base_price: Base price for the demo garment.

    Returns:
        Seeding result.
    """
    async with async_session_factory() as session:
        service = CatalogService(session)
        garment = await service.create_garment(
            name="Classic Pullover Hoodie",
            sku=sku,
            base_price=base_price,
            description="Midweight fleece hoodie, printed to order.",
        )
        for name, hex_code in DEMO_COLORS:
            await service.add_color(garment.id, name=name, hex_code=hex_code)
        for label in DEMO_SIZES:
            await service.add_size(garment.id, size=label)
        for position, (name, image_url, modifier) in enumerate(DEMO_DESIGNS, start=1):
            design = await service.create_design(
                name=name,
                image_url=image_url,
                thumbnail_url=image_url.replace(".png", "-thumb.png"),
                price_modifier=modifier,
            )
            await service.attach_design(garment.id, design.id, display_order=position)
        await session.commit()

        return {
            "garment_id": garment.id,
            "colors": len(DEMO_COLORS),
            "sizes": len(DEMO_SIZES),
            "designs": len(DEMO_DESIGNS),
        }


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the garment catalog with a demo hoodie",
    )
    parser.add_argument(
        "--sku",
        default="HOOD-DEMO-1",
        help="SKU for the demo garment (default: HOOD-DEMO-1)",
    )
    parser.add_argument(
        "--base-price",
        type=Decimal,
        default=Decimal("19.99"),
        help="Base price for the demo garment (default: 19.99)",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete the existing catalog before seeding",
    )

    args = parser.parse_args()
    configure_logging()

    print("=" * 60)
    print("Garment Catalog Seeder")
    print("=" * 60)
    print(f"SKU: {args.sku}")
    print(f"Base price: {args.base_price}")
    print(f"Clear existing: {args.clear}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    if args.clear:
        print("Clearing catalog...")
        await clear_catalog()
        print()

    try:
        print("Seeding demo hoodie...")
        result = await seed_demo_hoodie(args.sku, args.base_price)
        print(f"  ✓ Garment: {result['garment_id']}")
        print(f"  ✓ Colors: {result['colors']}")
        print(f"  ✓ Sizes: {result['sizes']}")
        print(f"  ✓ Designs: {result['designs']}")
        print()
    finally:
        await engine.dispose()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
