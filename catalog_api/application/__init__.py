"""Application layer module.

Contains application services (use cases) that validate input and
orchestrate persistence for each catalog entity.
"""

from catalog_api.application.attribute_service import (
    AttributeService,
    get_attribute_service,
)
from catalog_api.application.product_service import (
    ProductService,
    get_product_service,
)
from catalog_api.application.product_type_service import (
    ProductTypeService,
    get_product_type_service,
)
from catalog_api.application.product_variant_service import (
    ProductVariantService,
    get_product_variant_service,
)

__all__ = [
    "AttributeService",
    "get_attribute_service",
    "ProductService",
    "get_product_service",
    "ProductTypeService",
    "get_product_type_service",
    "ProductVariantService",
    "get_product_variant_service",
]
