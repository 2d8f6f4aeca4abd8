"""Catalog service for garment and design management.

High-level service that combines repository operations with the
catalog's rules: required fields must be present, SKUs and
garment/design pairs are unique, and referenced ids must exist.
"""

from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import Color, Design, Garment, GarmentDesign, Size
from app.catalog.repository import DesignRepository, GarmentRepository
from app.domain.exceptions import ConflictError, NotFoundError, ValidationError

logger = structlog.get_logger()


def _require(entity_type: str, **fields: Any) -> None:
    """Raise if any required field is absent or blank.

    Args:
        entity_type: Entity being validated, for the error message.
        **fields: Field name to submitted value.

    Raises:
        ValidationError: Listing every missing field.
    """
    missing = [
        name
        for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise ValidationError.missing_fields(entity_type, missing)


def _non_negative(field: str, value: Decimal) -> None:
    if Decimal(value) < 0:
        raise ValidationError(
            f"{field} must not be negative",
            details={"field": field, "value": str(value)},
        )


class CatalogService:
    """Service for catalog operations.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)
            garment = await service.create_garment(
                name="Classic Hoodie", sku="HOOD-001", base_price=Decimal("19.99")
            )
            await service.add_color(garment.id, name="Black", hex_code="#000000")
            await session.commit()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session
        self.garments = GarmentRepository(session)
        self.designs = DesignRepository(session)

    # -------------------------------------------------------------------------
    # Garments
    # -------------------------------------------------------------------------

    async def list_garments(self) -> list[Garment]:
        """List garments newest first, each with colors, sizes and designs.

        Returns:
            List of garments.
        """
        return list(await self.garments.find_all())

    async def get_garment(self, garment_id: int) -> Garment:
        """Get a garment with its colors, sizes and designs.

        Args:
            garment_id: Garment ID.

        Returns:
            The garment.

        Raises:
            NotFoundError: If the garment does not exist.
        """
        garment = await self.garments.get_by_id(garment_id)
        if garment is None:
            raise NotFoundError("Garment", garment_id)
        return garment

    async def create_garment(
        self,
        name: str,
        sku: str,
        base_price: Decimal,
        description: str | None = None,
    ) -> Garment:
        """Create a garment.

        Args:
            name: Display name.
            sku: Unique stock keeping unit.
            base_price: Non-negative base price.
            description: Optional description.

        Returns:
            The created garment (with empty option lists).

        Raises:
            ValidationError: If a required field is missing.
            ConflictError: If the SKU is already used.
        """
        _require("Garment", name=name, sku=sku, base_price=base_price)
        _non_negative("base_price", base_price)
        await self._ensure_sku_free(sku)

        garment = Garment(name=name, sku=sku, base_price=base_price, description=description)
        await self._flush_unique(self.garments.save(garment), f"SKU already exists: {sku}")

        logger.info("Garment created", garment_id=garment.id, sku=sku)
        return await self.get_garment(garment.id)

    async def update_garment(
        self,
        garment_id: int,
        name: str,
        sku: str,
        base_price: Decimal,
        description: str | None = None,
    ) -> Garment:
        """Replace a garment's name, SKU, base price and description.

        Raises:
            ValidationError: If a required field is missing.
            NotFoundError: If the garment does not exist.
            ConflictError: If the SKU belongs to another garment.
        """
        _require("Garment", name=name, sku=sku, base_price=base_price)
        _non_negative("base_price", base_price)
        garment = await self.garments.get_by_id(garment_id, enriched=False)
        if garment is None:
            raise NotFoundError("Garment", garment_id)
        await self._ensure_sku_free(sku, exclude_id=garment_id)

        garment.name = name
        garment.sku = sku
        garment.base_price = base_price
        garment.description = description
        await self._flush_unique(self.session.flush(), f"SKU already exists: {sku}")

        logger.info("Garment updated", garment_id=garment_id)
        return await self.get_garment(garment_id)

    async def delete_garment(self, garment_id: int) -> None:
        """Delete a garment with its colors, sizes and design associations.

        Raises:
            NotFoundError: If the garment does not exist.
        """
        if not await self.garments.delete(garment_id):
            raise NotFoundError("Garment", garment_id)
        logger.info("Garment deleted", garment_id=garment_id)

    # -------------------------------------------------------------------------
    # Colors
    # -------------------------------------------------------------------------

    async def add_color(self, garment_id: int, name: str, hex_code: str | None = None) -> Color:
        """Add a color to a garment.

        Raises:
            ValidationError: If the name is missing.
            NotFoundError: If the garment does not exist.
        """
        _require("Color", name=name)
        await self._ensure_garment_exists(garment_id)
        color = await self.garments.add_color(
            Color(garment_id=garment_id, name=name, hex_code=hex_code or None)
        )
        logger.info("Color added", garment_id=garment_id, color_id=color.id)
        return color

    async def get_color(self, color_id: int) -> Color:
        """Get a color.

        Raises:
            NotFoundError: If the color does not exist.
        """
        color = await self.garments.get_color(color_id)
        if color is None:
            raise NotFoundError("Color", color_id)
        return color

    async def update_color(self, color_id: int, name: str, hex_code: str | None = None) -> Color:
        """Replace a color's name and swatch.

        Raises:
            ValidationError: If the name is missing.
            NotFoundError: If the color does not exist.
        """
        _require("Color", name=name)
        color = await self.get_color(color_id)
        color.name = name
        color.hex_code = hex_code or None
        await self.session.flush()
        return color

    async def delete_color(self, color_id: int) -> None:
        """Delete a color.

        Raises:
            NotFoundError: If the color does not exist.
        """
        if not await self.garments.delete_color(color_id):
            raise NotFoundError("Color", color_id)
        logger.info("Color deleted", color_id=color_id)

    # -------------------------------------------------------------------------
    # Sizes
    # -------------------------------------------------------------------------

    async def add_size(self, garment_id: int, size: str) -> Size:
        """Add a size to a garment.

        Raises:
            ValidationError: If the size label is missing.
            NotFoundError: If the garment does not exist.
        """
        _require("Size", size=size)
        await self._ensure_garment_exists(garment_id)
        row = await self.garments.add_size(Size(garment_id=garment_id, size=size))
        logger.info("Size added", garment_id=garment_id, size_id=row.id)
        return row

    async def get_size(self, size_id: int) -> Size:
        """Get a size.

        Raises:
            NotFoundError: If the size does not exist.
        """
        row = await self.garments.get_size(size_id)
        if row is None:
            raise NotFoundError("Size", size_id)
        return row

    async def update_size(self, size_id: int, size: str) -> Size:
        """Replace a size label.

        Raises:
            ValidationError: If the size label is missing.
            NotFoundError: If the size does not exist.
        """
        _require("Size", size=size)
        row = await self.get_size(size_id)
        row.size = size
        await self.session.flush()
        return row

    async def delete_size(self, size_id: int) -> None:
        """Delete a size.

        Raises:
            NotFoundError: If the size does not exist.
        """
        if not await self.garments.delete_size(size_id):
            raise NotFoundError("Size", size_id)
        logger.info("Size deleted", size_id=size_id)

    # -------------------------------------------------------------------------
    # Designs
    # -------------------------------------------------------------------------

    async def list_active_designs(self) -> list[Design]:
        """List designs marked active, newest first."""
        return list(await self.designs.find_active())

    async def get_design(self, design_id: int) -> Design:
        """Get a design.

        Raises:
            NotFoundError: If the design does not exist.
        """
        design = await self.designs.get_by_id(design_id)
        if design is None:
            raise NotFoundError("Design", design_id)
        return design

    async def create_design(
        self,
        name: str,
        image_url: str,
        thumbnail_url: str | None = None,
        price_modifier: Decimal | None = None,
    ) -> Design:
        """Create an active design.

        The thumbnail defaults to the full image and the price modifier
        defaults to zero.

        Raises:
            ValidationError: If name or image_url is missing.
        """
        _require("Design", name=name, image_url=image_url)
        design = await self.designs.save(
            Design(
                name=name,
                image_url=image_url,
                thumbnail_url=thumbnail_url or image_url,
                price_modifier=price_modifier if price_modifier is not None else Decimal("0"),
                is_active=True,
            )
        )
        logger.info("Design created", design_id=design.id, name=name)
        return design

    async def update_design(
        self,
        design_id: int,
        name: str,
        image_url: str,
        thumbnail_url: str | None = None,
        price_modifier: Decimal | None = None,
        is_active: bool | None = None,
    ) -> Design:
        """Replace a design's fields.

        Raises:
            ValidationError: If name or image_url is missing.
            NotFoundError: If the design does not exist.
        """
        _require("Design", name=name, image_url=image_url)
        design = await self.get_design(design_id)
        design.name = name
        design.image_url = image_url
        design.thumbnail_url = thumbnail_url or image_url
        design.price_modifier = price_modifier if price_modifier is not None else Decimal("0")
        design.is_active = True if is_active is None else is_active
        await self.session.flush()

        logger.info("Design updated", design_id=design_id, is_active=design.is_active)
        return design

    async def delete_design(self, design_id: int) -> None:
        """Delete a design and detach it from every garment.

        Raises:
            NotFoundError: If the design does not exist.
        """
        if not await self.designs.delete(design_id):
            raise NotFoundError("Design", design_id)
        logger.info("Design deleted", design_id=design_id)

    # -------------------------------------------------------------------------
    # Garment <-> Design
    # -------------------------------------------------------------------------

    async def attach_design(
        self,
        garment_id: int,
        design_id: int,
        display_order: int | None = None,
    ) -> GarmentDesign:
        """Attach a design to a garment.

        Raises:
            NotFoundError: If the garment or design does not exist.
            ConflictError: If the design is already attached to the garment.
        """
        await self._ensure_garment_exists(garment_id)
        await self.get_design(design_id)
        if await self.garments.get_design_link(garment_id, design_id) is not None:
            raise _association_conflict(garment_id, design_id)

        link = GarmentDesign(
            garment_id=garment_id,
            design_id=design_id,
            display_order=display_order,
        )
        await self._flush_unique(
            self.garments.add_design_link(link),
            "Design already associated with this garment",
        )
        logger.info(
            "Design attached",
            garment_id=garment_id,
            design_id=design_id,
            display_order=display_order,
        )
        return link

    async def detach_design(self, garment_id: int, design_id: int) -> None:
        """Remove a design from a garment.

        Raises:
            NotFoundError: If the design is not attached to the garment.
        """
        if not await self.garments.delete_design_link(garment_id, design_id):
            raise NotFoundError("Association", f"garment {garment_id} / design {design_id}")
        logger.info("Design detached", garment_id=garment_id, design_id=design_id)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _ensure_garment_exists(self, garment_id: int) -> None:
        if await self.garments.get_by_id(garment_id, enriched=False) is None:
            raise NotFoundError("Garment", garment_id)

    async def _ensure_sku_free(self, sku: str, exclude_id: int | None = None) -> None:
        existing = await self.garments.get_by_sku(sku)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(f"SKU already exists: {sku}", details={"sku": sku})

    async def _flush_unique(self, operation: Any, message: str) -> Any:
        """Await a flushing operation, mapping uniqueness violations to conflicts."""
        try:
            return await operation
        except IntegrityError as e:
            logger.warning("Uniqueness violation", message=message, error=str(e.orig))
            raise ConflictError(message) from e


def _association_conflict(garment_id: int, design_id: int) -> ConflictError:
    return ConflictError(
        "Design already associated with this garment",
        details={"garment_id": garment_id, "design_id": design_id},
    )
