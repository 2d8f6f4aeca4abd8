"""Color and size API endpoints.

Colors and sizes are created through their garment; once created they
are addressed by their own id.
"""

from fastapi import APIRouter

from app.api.garments import CatalogServiceDep
from app.api.schemas import (
    ColorRequest,
    ColorResponse,
    ErrorResponse,
    MessageResponse,
    SizeRequest,
    SizeResponse,
)

router = APIRouter(tags=["Options"])


# ============================================================================
# Colors
# ============================================================================


@router.get(
    "/colors/{color_id}",
    response_model=ColorResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get color",
)
async def get_color(color_id: int, service: CatalogServiceDep) -> ColorResponse:
    """Get a color."""
    color = await service.get_color(color_id)
    return ColorResponse.model_validate(color.to_dict())


@router.put(
    "/colors/{color_id}",
    response_model=ColorResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update color",
)
async def update_color(
    color_id: int,
    request: ColorRequest,
    service: CatalogServiceDep,
) -> ColorResponse:
    """Replace a color's name and swatch."""
    color = await service.update_color(color_id, name=request.name, hex_code=request.hex_code)
    return ColorResponse.model_validate(color.to_dict())


@router.delete(
    "/colors/{color_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete color",
)
async def delete_color(color_id: int, service: CatalogServiceDep) -> MessageResponse:
    """Delete a color."""
    await service.delete_color(color_id)
    return MessageResponse(message="Color deleted successfully")


# ============================================================================
# Sizes
# ============================================================================


@router.get(
    "/sizes/{size_id}",
    response_model=SizeResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get size",
)
async def get_size(size_id: int, service: CatalogServiceDep) -> SizeResponse:
    """Get a size."""
    size = await service.get_size(size_id)
    return SizeResponse.model_validate(size.to_dict())


@router.put(
    "/sizes/{size_id}",
    response_model=SizeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update size",
)
async def update_size(
    size_id: int,
    request: SizeRequest,
    service: CatalogServiceDep,
) -> SizeResponse:
    """Replace a size label."""
    size = await service.update_size(size_id, size=request.size)
    return SizeResponse.model_validate(size.to_dict())


@router.delete(
    "/sizes/{size_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete size",
)
async def delete_size(size_id: int, service: CatalogServiceDep) -> MessageResponse:
    """Delete a size."""
    await service.delete_size(size_id)
    return MessageResponse(message="Size deleted successfully")
