"""Customization application service.

Records finalized shopper selections and reads them back:
- Validating that the referenced catalog entities exist and belong together
- Re-checking the submitted total against the current catalog price
- Joining a stored customization with the current catalog names
"""

from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import Color, Design, Garment, Size
from app.catalog.repository import DesignRepository, GarmentRepository
from app.domain.exceptions import NotFoundError, PriceMismatchError, ValidationError
from app.domain.value_objects import CustomizationId, Money
from app.infrastructure.config import settings
from app.infrastructure.models import CustomizationModel

logger = structlog.get_logger()


# ============================================================================
# Repository
# ============================================================================


class CustomizationRepository:
    """Repository for the append-only customizations table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, customization: CustomizationModel) -> CustomizationModel:
        """Insert a customization row."""
        self.session.add(customization)
        await self.session.flush()
        return customization

    async def get_with_catalog(self, customization_id: str) -> dict[str, Any] | None:
        """Get a customization joined with the current catalog rows.

        Outer joins keep the customization visible after any referenced
        catalog entity has been deleted; the joined columns are then None.

        Args:
            customization_id: Customization ID.

        Returns:
            Flat dictionary, or None if the customization does not exist.
        """
        query = (
            select(
                CustomizationModel,
                Garment.name.label("garment_name"),
                Garment.sku.label("garment_sku"),
                Garment.base_price.label("base_price"),
                Design.name.label("design_name"),
                Design.thumbnail_url.label("thumbnail_url"),
                Color.name.label("color_name"),
                Size.size.label("size_label"),
            )
            .outerjoin(Garment, Garment.id == CustomizationModel.garment_id)
            .outerjoin(Design, Design.id == CustomizationModel.design_id)
            .outerjoin(Color, Color.id == CustomizationModel.selected_color_id)
            .outerjoin(Size, Size.id == CustomizationModel.selected_size_id)
            .where(CustomizationModel.id == customization_id)
        )
        row = (await self.session.execute(query)).one_or_none()
        if row is None:
            return None

        return {
            **row.CustomizationModel.to_dict(),
            "garment_name": row.garment_name,
            "garment_sku": row.garment_sku,
            "base_price": row.base_price,
            "design_name": row.design_name,
            "thumbnail_url": row.thumbnail_url,
            "color_name": row.color_name,
            "size_label": row.size_label,
        }


# ============================================================================
# Service
# ============================================================================


class CustomizationService:
    """Service for the customization log.

    A customization is created once per completed selection and is never
    updated; catalog edits made afterwards only show up in the joined
    fields returned by ``get``.
    """

    def __init__(self, session: AsyncSession, currency: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Async SQLAlchemy session.
            currency: Currency used for price comparison.
        """
        self.session = session
        self.currency = currency or settings.currency
        self.customizations = CustomizationRepository(session)
        self.garments = GarmentRepository(session)
        self.designs = DesignRepository(session)

    async def record(
        self,
        garment_id: int,
        design_id: int,
        color_id: int,
        size_id: int,
        total_price: Decimal,
        customization_data: dict[str, Any] | None = None,
    ) -> CustomizationModel:
        """Record a finalized selection.

        Args:
            garment_id: Chosen garment.
            design_id: Chosen design.
            color_id: Chosen color.
            size_id: Chosen size.
            total_price: Total shown to the shopper.
            customization_data: Descriptive snapshot (names, thumbnail).

        Returns:
            The stored customization.

        Raises:
            NotFoundError: If a referenced entity does not exist.
            ValidationError: If the options do not belong to the garment.
            PriceMismatchError: If total_price differs from the catalog price.
        """
        garment = await self.garments.get_by_id(garment_id, enriched=False)
        if garment is None:
            raise NotFoundError("Garment", garment_id)
        design = await self.designs.get_by_id(design_id)
        if design is None:
            raise NotFoundError("Design", design_id)
        color = await self.garments.get_color(color_id)
        if color is None:
            raise NotFoundError("Color", color_id)
        size = await self.garments.get_size(size_id)
        if size is None:
            raise NotFoundError("Size", size_id)

        if color.garment_id != garment_id:
            raise _not_offered("color", color_id, garment_id)
        if size.garment_id != garment_id:
            raise _not_offered("size", size_id, garment_id)
        if await self.garments.get_design_link(garment_id, design_id) is None:
            raise _not_offered("design", design_id, garment_id)

        expected = Money.of(garment.base_price, self.currency) + Money.of(
            design.price_modifier, self.currency
        )
        submitted = Money.of(total_price, self.currency)
        if submitted != expected:
            raise PriceMismatchError(submitted.amount_str, expected.amount_str)

        customization = await self.customizations.save(
            CustomizationModel(
                id=str(CustomizationId.generate()),
                garment_id=garment_id,
                design_id=design_id,
                selected_color_id=color_id,
                selected_size_id=size_id,
                total_price=submitted.amount,
                customization_data=dict(customization_data or {}),
            )
        )

        logger.info(
            "Customization recorded",
            customization_id=customization.id,
            garment_id=garment_id,
            design_id=design_id,
            total_price=submitted.amount_str,
        )
        return customization

    async def get(self, customization_id: str) -> dict[str, Any]:
        """Get a customization with the current catalog names.

        Args:
            customization_id: Customization ID.

        Returns:
            Customization fields plus garment_name, garment_sku, base_price,
            design_name, thumbnail_url, color_name and size_label.

        Raises:
            NotFoundError: If the customization does not exist.
        """
        customization = await self.customizations.get_with_catalog(customization_id)
        if customization is None:
            raise NotFoundError("Customization", customization_id)
        return customization


def _not_offered(option_type: str, option_id: int, garment_id: int) -> ValidationError:
    return ValidationError(
        f"The {option_type} {option_id} is not offered for garment {garment_id}",
        details={
            "option_type": option_type,
            "option_id": option_id,
            "garment_id": garment_id,
        },
    )
