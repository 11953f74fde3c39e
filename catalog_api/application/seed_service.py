"""Sample catalog seeding.

Populates an empty database with a small, realistic catalog so the API
can be explored locally. Everything goes through the regular services,
so seeded data obeys the same validation rules as API input.
"""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.application.attribute_service import get_attribute_service
from catalog_api.application.product_service import get_product_service
from catalog_api.application.product_type_service import get_product_type_service
from catalog_api.application.product_variant_service import get_product_variant_service

logger = structlog.get_logger()


SAMPLE_ATTRIBUTES: list[dict[str, Any]] = [
    {"name": "Color", "description": "Primary color", "data_type": "color"},
    {"name": "Size", "description": "Garment size", "data_type": "text"},
    {"name": "Length", "description": "Length in centimeters", "data_type": "number"},
    {"name": "Storage", "description": "Storage capacity in GB", "data_type": "number"},
]

SAMPLE_CATALOG: list[dict[str, Any]] = [
    {
        "name": "Electronics",
        "description": "Category for electronics",
        "products": [
            {
                "name": "Laptop",
                "description": "A high-end gaming laptop",
                "variants": [
                    {"sku": "LAP123", "price": 999.99, "stock": 10},
                    {"sku": "LAP456", "price": 899.99, "stock": 5},
                ],
            },
            {
                "name": "Wireless Headphones",
                "description": "Noise cancelling over-ear headphones",
                "variants": [
                    {"sku": "HP-BLK", "price": 79.99, "stock": 50},
                    {"sku": "HP-WHT", "price": 79.99, "stock": 30},
                ],
            },
        ],
    },
    {
        "name": "Apparel",
        "description": "Clothing and accessories",
        "products": [
            {
                "name": "Basic T-Shirt",
                "description": "Comfortable cotton t-shirt",
                "variants": [
                    {"sku": "TS-S", "price": 19.90, "stock": 100},
                    {"sku": "TS-M", "price": 19.90, "stock": 120},
                    {"sku": "TS-L", "price": 21.90, "stock": 80},
                ],
            },
            {
                "name": "Classic Jeans",
                "description": "Straight fit denim jeans",
                "variants": [
                    {"sku": "JN-32", "price": 49.50, "stock": 40},
                ],
            },
        ],
    },
]


async def seed_sample_catalog(session: AsyncSession) -> dict[str, int]:
    """Seed the sample attributes, product types, products and variants.

    Attributes that already exist (by name) are skipped, so running the
    seeder twice does not fail; product data is always added.

    Args:
        session: Database session; the caller commits.

    Returns:
        Counts of created records per entity.
    """
    attributes = get_attribute_service(session)
    product_types = get_product_type_service(session)
    products = get_product_service(session)
    variants = get_product_variant_service(session)

    result = {
        "attributes_created": 0,
        "attributes_skipped": 0,
        "product_types_created": 0,
        "products_created": 0,
        "variants_created": 0,
    }

    for data in SAMPLE_ATTRIBUTES:
        if await attributes.get_by_name(data["name"]):
            result["attributes_skipped"] += 1
            continue
        await attributes.create(data)
        result["attributes_created"] += 1

    for type_data in SAMPLE_CATALOG:
        product_type = await product_types.create(
            {"name": type_data["name"], "description": type_data["description"]}
        )
        result["product_types_created"] += 1

        for product_data in type_data["products"]:
            product = await products.create(
                {
                    "name": product_data["name"],
                    "description": product_data["description"],
                    "product_type_id": product_type.id,
                }
            )
            result["products_created"] += 1

            for variant_data in product_data["variants"]:
                await variants.create(dict(variant_data), product.id)
                result["variants_created"] += 1

    logger.info("Sample catalog seeded", **result)
    return result
