"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from catalog_api.api.attributes import router as attributes_router
from catalog_api.api.health import router as health_router
from catalog_api.api.product_types import router as product_types_router
from catalog_api.api.product_variants import router as product_variants_router
from catalog_api.api.products import router as products_router

__all__ = [
    "attributes_router",
    "health_router",
    "product_types_router",
    "product_variants_router",
    "products_router",
]
