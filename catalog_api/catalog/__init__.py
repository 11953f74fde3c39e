"""Product catalog persistence.

ORM models for attributes, product types, products and variants, and
the generic repository the application services persist through.
"""

from catalog_api.catalog.models import Attribute, Product, ProductType, ProductVariant
from catalog_api.catalog.repository import Repository

__all__ = [
    # Models
    "Attribute",
    "Product",
    "ProductType",
    "ProductVariant",
    # Repository
    "Repository",
]
