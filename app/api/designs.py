"""Design API endpoints.

Provides CRUD for the design library. Listing returns only active
designs; retired designs stay addressable by id.
"""

from fastapi import APIRouter, status

from app.api.garments import CatalogServiceDep
from app.api.schemas import (
    DesignCreateRequest,
    DesignResponse,
    DesignUpdateRequest,
    ErrorResponse,
    MessageResponse,
)
from app.catalog.models import Design

router = APIRouter(prefix="/designs", tags=["Designs"])


def design_to_response(design: Design) -> DesignResponse:
    """Convert Design model to response schema."""
    return DesignResponse.model_validate(design.to_dict())


@router.get(
    "",
    response_model=list[DesignResponse],
    summary="List active designs",
    description="List designs marked active, newest first.",
)
async def list_designs(service: CatalogServiceDep) -> list[DesignResponse]:
    """List active designs."""
    return [design_to_response(d) for d in await service.list_active_designs()]


@router.get(
    "/{design_id}",
    response_model=DesignResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get design",
)
async def get_design(design_id: int, service: CatalogServiceDep) -> DesignResponse:
    """Get a design, active or not."""
    return design_to_response(await service.get_design(design_id))


@router.post(
    "",
    response_model=DesignResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create design",
)
async def create_design(
    request: DesignCreateRequest,
    service: CatalogServiceDep,
) -> DesignResponse:
    """Create a design.

    The thumbnail defaults to the full image and the price modifier
    defaults to zero.

    Args:
        request: Design fields.
        service: Catalog service.

    Returns:
        Created design.
    """
    design = await service.create_design(
        name=request.name,
        image_url=request.image_url,
        thumbnail_url=request.thumbnail_url,
        price_modifier=request.price_modifier,
    )
    return design_to_response(design)


@router.put(
    "/{design_id}",
    response_model=DesignResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update design",
)
async def update_design(
    design_id: int,
    request: DesignUpdateRequest,
    service: CatalogServiceDep,
) -> DesignResponse:
    """Replace a design's fields, including its active flag."""
    design = await service.update_design(
        design_id,
        name=request.name,
        image_url=request.image_url,
        thumbnail_url=request.thumbnail_url,
        price_modifier=request.price_modifier,
        is_active=request.is_active,
    )
    return design_to_response(design)


@router.delete(
    "/{design_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete design",
    description="Delete a design and detach it from every garment.",
)
async def delete_design(design_id: int, service: CatalogServiceDep) -> MessageResponse:
    """Delete a design."""
    await service.delete_design(design_id)
    return MessageResponse(message="Design deleted successfully")
