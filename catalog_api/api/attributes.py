"""Attribute API endpoints.

Provides CRUD endpoints for catalog attributes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    AttributeCreateRequest,
    AttributeResponse,
    AttributeUpdateRequest,
    Envelope,
    ErrorEnvelope,
    PageLimit,
    PageOffset,
)
from catalog_api.application.attribute_service import (
    NOT_FOUND_MESSAGE,
    AttributeService,
    get_attribute_service,
)
from catalog_api.domain.exceptions import NotFoundError
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/attributes", tags=["Attributes"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> AttributeService:
    """Get attribute service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_attribute_service(session, request_id=request_id)


def _not_found(attribute_id: int) -> NotFoundError:
    return NotFoundError(NOT_FOUND_MESSAGE, entity_type="Attribute", entity_id=attribute_id)


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=Envelope[AttributeResponse],
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
    summary="Create attribute",
)
async def create_attribute(
    body: AttributeCreateRequest,
    service: Annotated[AttributeService, Depends(get_service)],
) -> Envelope[AttributeResponse]:
    """Create a new attribute.

    Attribute names are unique; creating a second attribute with an
    existing name fails with 409.
    """
    attribute = await service.create(body.model_dump(mode="json"))
    return Envelope[AttributeResponse](
        success=True,
        message="Attribute Created Successfully",
        data=AttributeResponse.model_validate(attribute),
    )


@router.get(
    "",
    response_model=Envelope[list[AttributeResponse]],
    summary="List attributes",
)
async def list_attributes(
    service: Annotated[AttributeService, Depends(get_service)],
    limit: PageLimit = None,
    offset: PageOffset = None,
) -> Envelope[list[AttributeResponse]]:
    """List attributes with optional limit/offset pagination."""
    attributes = await service.get_all(limit=limit, offset=offset)
    return Envelope[list[AttributeResponse]](
        success=True,
        message="Attributes Retrieved Successfully",
        data=[AttributeResponse.model_validate(a) for a in attributes],
    )


@router.get(
    "/{attribute_id}",
    response_model=Envelope[AttributeResponse],
    responses={404: {"model": ErrorEnvelope}},
    summary="Get attribute",
)
async def get_attribute(
    attribute_id: int,
    service: Annotated[AttributeService, Depends(get_service)],
) -> Envelope[AttributeResponse]:
    """Get an attribute by ID."""
    attribute = await service.get_by_id(attribute_id)
    if attribute is None:
        raise _not_found(attribute_id)

    return Envelope[AttributeResponse](
        success=True,
        message="Attribute Retrieved Successfully",
        data=AttributeResponse.model_validate(attribute),
    )


@router.put(
    "/{attribute_id}",
    response_model=Envelope[AttributeResponse],
    responses={
        404: {"model": ErrorEnvelope},
        409: {"model": ErrorEnvelope},
    },
    summary="Update attribute",
)
async def update_attribute(
    attribute_id: int,
    body: AttributeUpdateRequest,
    service: Annotated[AttributeService, Depends(get_service)],
) -> Envelope[AttributeResponse]:
    """Update an attribute with the fields present in the body."""
    attribute = await service.update(
        attribute_id,
        body.model_dump(mode="json", exclude_unset=True, exclude_none=True),
    )
    return Envelope[AttributeResponse](
        success=True,
        message="Attribute Updated Successfully",
        data=AttributeResponse.model_validate(attribute),
    )


@router.delete(
    "/{attribute_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorEnvelope}},
    summary="Delete attribute",
)
async def delete_attribute(
    attribute_id: int,
    service: Annotated[AttributeService, Depends(get_service)],
) -> Response:
    """Delete an attribute."""
    if not await service.delete(attribute_id):
        raise _not_found(attribute_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
