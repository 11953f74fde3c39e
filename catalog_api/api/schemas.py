"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

T = TypeVar("T")


# ============================================================================
# Common Schemas
# ============================================================================


class Envelope(BaseModel, Generic[T]):
    """Standard response wrapper.

    Every API response, successful or not, follows this format.
    """

    success: bool = Field(..., description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable outcome")
    data: T | None = Field(default=None, description="Response payload")
    error: str | None = Field(default=None, description="Error detail, if any")


class ErrorEnvelope(BaseModel):
    """Envelope returned for failed requests."""

    success: bool = Field(default=False)
    message: str = Field(..., description="Human-readable error message")
    error: str | None = Field(default=None, description="Error detail, if any")


class Page(BaseModel, Generic[T]):
    """A page of items with the total number available."""

    items: list[T] = Field(..., description="Items in this page")
    total: int = Field(..., description="Total number of items")


class OrmSchema(BaseModel):
    """Base for schemas read from ORM objects."""

    model_config = ConfigDict(from_attributes=True)


def _blank_to_none(value: object) -> object:
    return None if value == "" else value


# Empty query values (`?limit=&offset=`) mean "not given"
PageLimit = Annotated[
    int | None,
    Query(ge=0, description="Maximum results"),
    BeforeValidator(_blank_to_none),
]
PageOffset = Annotated[
    int | None,
    Query(ge=0, description="Results to skip"),
    BeforeValidator(_blank_to_none),
]


# ============================================================================
# Attribute Schemas
# ============================================================================


class AttributeDataType(str, Enum):
    """Kind of value an attribute holds."""

    TEXT = "text"
    NUMBER = "number"
    DECIMAL = "decimal"
    COLOR = "color"


class AttributeCreateRequest(BaseModel):
    """Request to create an attribute."""

    name: str = Field(..., min_length=1, max_length=100, description="Unique attribute name")
    description: str | None = Field(default=None, description="Attribute description")
    data_type: AttributeDataType = Field(
        default=AttributeDataType.TEXT, description="Kind of value the attribute holds"
    )


class AttributeUpdateRequest(BaseModel):
    """Partial attribute update."""

    name: str | None = Field(default=None, max_length=100, description="New name")
    description: str | None = Field(default=None, description="New description")
    data_type: AttributeDataType | None = Field(default=None, description="New data type")


class AttributeResponse(OrmSchema):
    """Attribute representation."""

    id: int
    name: str
    description: str | None = None
    data_type: str
    created_at: datetime


# ============================================================================
# Product Type Schemas
# ============================================================================


class ProductTypeCreateRequest(BaseModel):
    """Request to create a product type."""

    name: str | None = Field(default=None, max_length=200, description="Product type name")
    description: str | None = Field(default=None, description="Product type description")


class ProductTypeUpdateRequest(BaseModel):
    """Partial product type update."""

    name: str | None = Field(default=None, max_length=200)
    description: str | None = None


class ProductTypeResponse(OrmSchema):
    """Product type representation."""

    id: int
    name: str
    description: str | None = None
    created_at: datetime


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(BaseModel):
    """Request to create a product."""

    name: str | None = Field(default=None, max_length=500, description="Product name")
    description: str | None = Field(default=None, description="Product description")
    product_type_id: int | None = Field(default=None, description="Owning product type")


class ProductUpdateRequest(BaseModel):
    """Partial product update."""

    name: str | None = Field(default=None, max_length=500)
    description: str | None = None
    product_type_id: int | None = None


class ProductSummary(OrmSchema):
    """Product fields without relationships."""

    id: int
    name: str
    description: str | None = None
    product_type_id: int | None = None
    created_at: datetime


class ProductResponse(ProductSummary):
    """Product representation with its product type."""

    product_type: ProductTypeResponse | None = None


# ============================================================================
# Product Variant Schemas
# ============================================================================


class ProductVariantCreateRequest(BaseModel):
    """Request to create a product variant."""

    product_id: int = Field(..., description="Parent product")
    sku: str | None = Field(default=None, max_length=100, description="Stock Keeping Unit")
    price: float = Field(default=0.0, allow_inf_nan=False, description="Unit price")
    stock: int = Field(default=0, description="Available quantity")


class ProductVariantUpdateRequest(BaseModel):
    """Partial product variant update."""

    product_id: int | None = None
    sku: str | None = Field(default=None, max_length=100)
    price: float | None = Field(default=None, allow_inf_nan=False)
    stock: int | None = None


class ProductVariantResponse(OrmSchema):
    """Product variant representation with its product."""

    id: int
    sku: str
    price: float
    stock: int
    product_id: int
    created_at: datetime
    product: ProductSummary | None = None

