"""Product API endpoints.

Provides CRUD endpoints for products and a listing of each product's
variants.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    Envelope,
    ErrorEnvelope,
    PageLimit,
    PageOffset,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
    ProductVariantResponse,
)
from catalog_api.application.product_service import ProductService, get_product_service
from catalog_api.application.product_variant_service import (
    ProductVariantService,
    get_product_variant_service,
)
from catalog_api.domain.exceptions import NotFoundError
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/products", tags=["Products"])

NOT_FOUND_MESSAGE = "Product Not Found"


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductService:
    """Get product service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_product_service(session, request_id=request_id)


def get_variants(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductVariantService:
    """Get product variant service sharing the request's session."""
    request_id = getattr(request.state, "request_id", None)
    return get_product_variant_service(session, request_id=request_id)


def _not_found(product_id: int) -> NotFoundError:
    return NotFoundError(NOT_FOUND_MESSAGE, entity_type="Product", entity_id=product_id)


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=Envelope[ProductResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Create product",
)
async def create_product(
    body: ProductCreateRequest,
    service: Annotated[ProductService, Depends(get_service)],
) -> Envelope[ProductResponse]:
    """Create a new product, optionally under a product type."""
    product = await service.create(body.model_dump(exclude_unset=True))
    return Envelope[ProductResponse](
        success=True,
        message="Product Created Successfully",
        data=ProductResponse.model_validate(product),
    )


@router.get(
    "",
    response_model=Envelope[list[ProductResponse]],
    summary="List products",
)
async def list_products(
    service: Annotated[ProductService, Depends(get_service)],
    limit: PageLimit = None,
    offset: PageOffset = None,
) -> Envelope[list[ProductResponse]]:
    """List products with optional limit/offset pagination."""
    products = await service.get_all(limit=limit, offset=offset)
    return Envelope[list[ProductResponse]](
        success=True,
        message="Products Retrieved Successfully",
        data=[ProductResponse.model_validate(p) for p in products],
    )


@router.get(
    "/{product_id}",
    response_model=Envelope[ProductResponse],
    responses={404: {"model": ErrorEnvelope}},
    summary="Get product",
)
async def get_product(
    product_id: int,
    service: Annotated[ProductService, Depends(get_service)],
) -> Envelope[ProductResponse]:
    """Get a product by ID."""
    product = await service.get_by_id(product_id)
    if product is None:
        raise _not_found(product_id)

    return Envelope[ProductResponse](
        success=True,
        message="Product Retrieved Successfully",
        data=ProductResponse.model_validate(product),
    )


@router.get(
    "/{product_id}/variants",
    response_model=Envelope[list[ProductVariantResponse]],
    responses={404: {"model": ErrorEnvelope}},
    summary="List product variants",
)
async def list_product_variants(
    product_id: int,
    variants: Annotated[ProductVariantService, Depends(get_variants)],
) -> Envelope[list[ProductVariantResponse]]:
    """List the variants of a product."""
    items = await variants.get_by_product(product_id)
    return Envelope[list[ProductVariantResponse]](
        success=True,
        message="Product Variants Retrieved Successfully",
        data=[ProductVariantResponse.model_validate(v) for v in items],
    )


@router.put(
    "/{product_id}",
    response_model=Envelope[ProductResponse],
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Update product",
)
async def update_product(
    product_id: int,
    body: ProductUpdateRequest,
    service: Annotated[ProductService, Depends(get_service)],
) -> Envelope[ProductResponse]:
    """Update a product with the fields present in the body."""
    product = await service.update(product_id, body.model_dump(exclude_unset=True))
    if product is None:
        raise _not_found(product_id)

    return Envelope[ProductResponse](
        success=True,
        message="Product Updated Successfully",
        data=ProductResponse.model_validate(product),
    )


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorEnvelope}},
    summary="Delete product",
)
async def delete_product(
    product_id: int,
    service: Annotated[ProductService, Depends(get_service)],
) -> Response:
    """Delete a product and its variants."""
    if not await service.delete(product_id):
        raise _not_found(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
