"""Product variant API endpoints.

Provides CRUD endpoints for product variants. Variants are created
under an existing product referenced by ``product_id`` in the body.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    Envelope,
    ErrorEnvelope,
    PageLimit,
    PageOffset,
    ProductVariantCreateRequest,
    ProductVariantResponse,
    ProductVariantUpdateRequest,
)
from catalog_api.application.product_variant_service import (
    ProductVariantService,
    get_product_variant_service,
)
from catalog_api.domain.exceptions import NotFoundError
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/product-variants", tags=["Product Variants"])

NOT_FOUND_MESSAGE = "Product Variant Not Found"


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductVariantService:
    """Get product variant service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_product_variant_service(session, request_id=request_id)


def _not_found(variant_id: int) -> NotFoundError:
    return NotFoundError(
        NOT_FOUND_MESSAGE, entity_type="ProductVariant", entity_id=variant_id
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=Envelope[ProductVariantResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Create product variant",
)
async def create_product_variant(
    body: ProductVariantCreateRequest,
    service: Annotated[ProductVariantService, Depends(get_service)],
) -> Envelope[ProductVariantResponse]:
    """Create a variant under an existing product.

    Fails with 404 when the product does not exist and with 400 when
    the SKU is missing or the price is negative.
    """
    data = body.model_dump(exclude={"product_id"})
    variant = await service.create(data, body.product_id)
    return Envelope[ProductVariantResponse](
        success=True,
        message="Product Variant Created Successfully",
        data=ProductVariantResponse.model_validate(variant),
    )


@router.get(
    "",
    response_model=Envelope[list[ProductVariantResponse]],
    summary="List product variants",
)
async def list_product_variants(
    service: Annotated[ProductVariantService, Depends(get_service)],
    limit: PageLimit = None,
    offset: PageOffset = None,
) -> Envelope[list[ProductVariantResponse]]:
    """List variants with their products."""
    variants = await service.get_all(limit=limit, offset=offset)
    return Envelope[list[ProductVariantResponse]](
        success=True,
        message="Product Variants Retrieved Successfully",
        data=[ProductVariantResponse.model_validate(v) for v in variants],
    )


@router.get(
    "/{variant_id}",
    response_model=Envelope[ProductVariantResponse],
    responses={404: {"model": ErrorEnvelope}},
    summary="Get product variant",
)
async def get_product_variant(
    variant_id: int,
    service: Annotated[ProductVariantService, Depends(get_service)],
) -> Envelope[ProductVariantResponse]:
    """Get a variant by ID."""
    variant = await service.get_by_id(variant_id)
    if variant is None:
        raise _not_found(variant_id)

    return Envelope[ProductVariantResponse](
        success=True,
        message="Product Variant Retrieved Successfully",
        data=ProductVariantResponse.model_validate(variant),
    )


@router.put(
    "/{variant_id}",
    response_model=Envelope[ProductVariantResponse],
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Update product variant",
)
async def update_product_variant(
    variant_id: int,
    body: ProductVariantUpdateRequest,
    service: Annotated[ProductVariantService, Depends(get_service)],
) -> Envelope[ProductVariantResponse]:
    """Update a variant with the fields present in the body.

    The merged SKU and price are validated as on create.
    """
    variant = await service.update(
        variant_id, body.model_dump(exclude_unset=True, exclude_none=True)
    )
    if variant is None:
        raise _not_found(variant_id)

    return Envelope[ProductVariantResponse](
        success=True,
        message="Product Variant Updated Successfully",
        data=ProductVariantResponse.model_validate(variant),
    )


@router.delete(
    "/{variant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorEnvelope}},
    summary="Delete product variant",
)
async def delete_product_variant(
    variant_id: int,
    service: Annotated[ProductVariantService, Depends(get_service)],
) -> Response:
    """Delete a variant."""
    if not await service.delete(variant_id):
        raise _not_found(variant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
