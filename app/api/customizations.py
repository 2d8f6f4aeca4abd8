"""Customization API endpoints.

Records finalized shopper selections and reads them back joined with
the current catalog.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import (
    CustomizationCreateRequest,
    CustomizationDetailResponse,
    CustomizationResponse,
    ErrorResponse,
)
from app.application.customization_service import CustomizationService
from app.infrastructure.database import get_session

router = APIRouter(prefix="/customizations", tags=["Customizations"])


def get_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CustomizationService:
    """Get customization service bound to the request's session."""
    return CustomizationService(session)


@router.post(
    "",
    response_model=CustomizationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Record customization",
    description=(
        "Record a finalized selection. The total price must equal the "
        "garment base price plus the design price modifier."
    ),
)
async def create_customization(
    request: CustomizationCreateRequest,
    service: Annotated[CustomizationService, Depends(get_service)],
) -> CustomizationResponse:
    """Record a customization.

    Args:
        request: Chosen references, total and descriptive snapshot.
        service: Customization service.

    Returns:
        The stored customization with its generated id.
    """
    customization = await service.record(
        garment_id=request.garment_id,
        design_id=request.design_id,
        color_id=request.selected_color_id,
        size_id=request.selected_size_id,
        total_price=request.total_price,
        customization_data=request.customization_data,
    )
    return CustomizationResponse.model_validate(customization.to_dict())


@router.get(
    "/{customization_id}",
    response_model=CustomizationDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get customization",
)
async def get_customization(
    customization_id: str,
    service: Annotated[CustomizationService, Depends(get_service)],
) -> CustomizationDetailResponse:
    """Get a customization with current garment, design, color and size names."""
    return CustomizationDetailResponse.model_validate(await service.get(customization_id))
