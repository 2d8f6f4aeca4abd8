"""Garment API endpoints.

Provides CRUD for garments plus the nested operations that act on one
garment: adding colors and sizes, attaching and detaching designs.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import (
    ColorRequest,
    ColorResponse,
    DesignLinkRequest,
    DesignLinkResponse,
    ErrorResponse,
    GarmentRequest,
    GarmentResponse,
    MessageResponse,
    SizeRequest,
    SizeResponse,
)
from app.catalog.models import Garment
from app.catalog.service import CatalogService
from app.infrastructure.database import get_session

router = APIRouter(prefix="/garments", tags=["Garments"])


# ============================================================================
# Dependencies
# ============================================================================


def get_catalog_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogService:
    """Get catalog service bound to the request's session."""
    return CatalogService(session)


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]


# ============================================================================
# Converters
# ============================================================================


def garment_to_response(garment: Garment) -> GarmentResponse:
    """Convert Garment model (with options loaded) to response schema."""
    return GarmentResponse.model_validate(garment.to_enriched_dict())


# ============================================================================
# Garment Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[GarmentResponse],
    summary="List garments",
    description="List all garments, newest first, with colors, sizes and designs.",
)
async def list_garments(service: CatalogServiceDep) -> list[GarmentResponse]:
    """List garments.

    Args:
        service: Catalog service.

    Returns:
        Garments with their options.
    """
    garments = await service.list_garments()
    return [garment_to_response(g) for g in garments]


@router.get(
    "/{garment_id}",
    response_model=GarmentResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get garment",
)
async def get_garment(garment_id: int, service: CatalogServiceDep) -> GarmentResponse:
    """Get a garment with its colors, sizes and designs.

    Args:
        garment_id: Garment identifier.
        service: Catalog service.

    Returns:
        Garment details.
    """
    return garment_to_response(await service.get_garment(garment_id))


@router.post(
    "",
    response_model=GarmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create garment",
)
async def create_garment(
    request: GarmentRequest,
    service: CatalogServiceDep,
) -> GarmentResponse:
    """Create a garment.

    Args:
        request: Garment fields.
        service: Catalog service.

    Returns:
        Created garment with empty option lists.
    """
    garment = await service.create_garment(
        name=request.name,
        sku=request.sku,
        base_price=request.base_price,
        description=request.description,
    )
    return garment_to_response(garment)


@router.put(
    "/{garment_id}",
    response_model=GarmentResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Update garment",
)
async def update_garment(
    garment_id: int,
    request: GarmentRequest,
    service: CatalogServiceDep,
) -> GarmentResponse:
    """Replace a garment's name, SKU, base price and description."""
    garment = await service.update_garment(
        garment_id,
        name=request.name,
        sku=request.sku,
        base_price=request.base_price,
        description=request.description,
    )
    return garment_to_response(garment)


@router.delete(
    "/{garment_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete garment",
    description="Delete a garment together with its colors, sizes and design associations.",
)
async def delete_garment(garment_id: int, service: CatalogServiceDep) -> MessageResponse:
    """Delete a garment."""
    await service.delete_garment(garment_id)
    return MessageResponse(message="Garment deleted successfully")


# ============================================================================
# Option Endpoints
# ============================================================================


@router.post(
    "/{garment_id}/colors",
    response_model=ColorResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Add color",
)
async def add_color(
    garment_id: int,
    request: ColorRequest,
    service: CatalogServiceDep,
) -> ColorResponse:
    """Add a color to a garment."""
    color = await service.add_color(garment_id, name=request.name, hex_code=request.hex_code)
    return ColorResponse.model_validate(color.to_dict())


@router.post(
    "/{garment_id}/sizes",
    response_model=SizeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Add size",
)
async def add_size(
    garment_id: int,
    request: SizeRequest,
    service: CatalogServiceDep,
) -> SizeResponse:
    """Add a size to a garment."""
    size = await service.add_size(garment_id, size=request.size)
    return SizeResponse.model_validate(size.to_dict())


# ============================================================================
# Design Association Endpoints
# ============================================================================


@router.post(
    "/{garment_id}/designs/{design_id}",
    response_model=DesignLinkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Attach design",
)
async def attach_design(
    garment_id: int,
    design_id: int,
    service: CatalogServiceDep,
    request: DesignLinkRequest | None = None,
) -> DesignLinkResponse:
    """Attach a design to a garment.

    Args:
        garment_id: Garment identifier.
        design_id: Design identifier.
        service: Catalog service.
        request: Optional display order.

    Returns:
        The created association.
    """
    link = await service.attach_design(
        garment_id,
        design_id,
        display_order=request.display_order if request else None,
    )
    return DesignLinkResponse.model_validate(link.to_dict())


@router.delete(
    "/{garment_id}/designs/{design_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Detach design",
)
async def detach_design(
    garment_id: int,
    design_id: int,
    service: CatalogServiceDep,
) -> MessageResponse:
    """Remove a design from a garment."""
    await service.detach_design(garment_id, design_id)
    return MessageResponse(message="Design removed from garment successfully")
