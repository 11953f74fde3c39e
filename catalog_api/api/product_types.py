"""Product type API endpoints.

Provides CRUD endpoints for product types and a paginated listing of
the products of one type.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    Envelope,
    ErrorEnvelope,
    Page,
    PageLimit,
    PageOffset,
    ProductResponse,
    ProductTypeCreateRequest,
    ProductTypeResponse,
    ProductTypeUpdateRequest,
)
from catalog_api.application.product_service import ProductService, get_product_service
from catalog_api.application.product_type_service import (
    ProductTypeService,
    get_product_type_service,
)
from catalog_api.domain.exceptions import NotFoundError
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/product-types", tags=["Product Types"])

NOT_FOUND_MESSAGE = "Product Type Not Found"


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductTypeService:
    """Get product type service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_product_type_service(session, request_id=request_id)


def get_products(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductService:
    """Get product service sharing the request's session."""
    request_id = getattr(request.state, "request_id", None)
    return get_product_service(session, request_id=request_id)


def _not_found(product_type_id: int) -> NotFoundError:
    return NotFoundError(
        NOT_FOUND_MESSAGE, entity_type="ProductType", entity_id=product_type_id
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=Envelope[ProductTypeResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorEnvelope}},
    summary="Create product type",
)
async def create_product_type(
    body: ProductTypeCreateRequest,
    service: Annotated[ProductTypeService, Depends(get_service)],
) -> Envelope[ProductTypeResponse]:
    """Create a new product type."""
    product_type = await service.create(body.model_dump(exclude_unset=True))
    return Envelope[ProductTypeResponse](
        success=True,
        message="Product Type Created Successfully",
        data=ProductTypeResponse.model_validate(product_type),
    )


@router.get(
    "",
    response_model=Envelope[list[ProductTypeResponse]],
    summary="List product types",
)
async def list_product_types(
    service: Annotated[ProductTypeService, Depends(get_service)],
    limit: PageLimit = None,
    offset: PageOffset = None,
) -> Envelope[list[ProductTypeResponse]]:
    """List product types with optional limit/offset pagination."""
    product_types = await service.get_all(limit=limit, offset=offset)
    return Envelope[list[ProductTypeResponse]](
        success=True,
        message="Product Types Retrieved Successfully",
        data=[ProductTypeResponse.model_validate(p) for p in product_types],
    )


@router.get(
    "/{product_type_id}",
    response_model=Envelope[ProductTypeResponse],
    responses={404: {"model": ErrorEnvelope}},
    summary="Get product type",
)
async def get_product_type(
    product_type_id: int,
    service: Annotated[ProductTypeService, Depends(get_service)],
) -> Envelope[ProductTypeResponse]:
    """Get a product type by ID."""
    product_type = await service.get_by_id(product_type_id)
    if product_type is None:
        raise _not_found(product_type_id)

    return Envelope[ProductTypeResponse](
        success=True,
        message="Product Type Retrieved Successfully",
        data=ProductTypeResponse.model_validate(product_type),
    )


@router.get(
    "/{product_type_id}/products",
    response_model=Envelope[Page[ProductResponse]],
    responses={404: {"model": ErrorEnvelope}},
    summary="List products of a product type",
)
async def list_product_type_products(
    product_type_id: int,
    products: Annotated[ProductService, Depends(get_products)],
    limit: PageLimit = None,
    offset: PageOffset = None,
) -> Envelope[Page[ProductResponse]]:
    """List a page of the products belonging to a product type."""
    items, total = await products.get_by_product_type(
        product_type_id, limit=limit, offset=offset
    )
    return Envelope[Page[ProductResponse]](
        success=True,
        message="Products Retrieved Successfully",
        data=Page[ProductResponse](
            items=[ProductResponse.model_validate(p) for p in items],
            total=total,
        ),
    )


@router.put(
    "/{product_type_id}",
    response_model=Envelope[ProductTypeResponse],
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Update product type",
)
async def update_product_type(
    product_type_id: int,
    body: ProductTypeUpdateRequest,
    service: Annotated[ProductTypeService, Depends(get_service)],
) -> Envelope[ProductTypeResponse]:
    """Update a product type with the fields present in the body."""
    product_type = await service.update(
        product_type_id, body.model_dump(exclude_unset=True)
    )
    if product_type is None:
        raise _not_found(product_type_id)

    return Envelope[ProductTypeResponse](
        success=True,
        message="Product Type Updated Successfully",
        data=ProductTypeResponse.model_validate(product_type),
    )


@router.delete(
    "/{product_type_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorEnvelope}},
    summary="Delete product type",
)
async def delete_product_type(
    product_type_id: int,
    service: Annotated[ProductTypeService, Depends(get_service)],
) -> Response:
    """Delete a product type."""
    if not await service.delete(product_type_id):
        raise _not_found(product_type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
