"""Catalog repositories for database operations.

Provide CRUD operations for garments (with their colors, sizes and
design associations) and for designs.
"""

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.catalog.models import Color, Design, Garment, GarmentDesign, Size


def _enriched_options() -> list:
    return [
        selectinload(Garment.colors),
        selectinload(Garment.sizes),
        selectinload(Garment.design_links).selectinload(GarmentDesign.design),
    ]


class GarmentRepository:
    """Repository for Garment database operations.

    Colors, sizes and design associations belong to a garment and are
    managed through this repository as well.

    Example usage:
        async with async_session_factory() as session:
            repo = GarmentRepository(session)
            garments = await repo.find_all()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    # -------------------------------------------------------------------------
    # Garments
    # -------------------------------------------------------------------------

    async def save(self, garment: Garment) -> Garment:
        """Save a garment to database.

        Args:
            garment: Garment to save.

        Returns:
            Saved garment.
        """
        self.session.add(garment)
        await self.session.flush()
        return garment

    async def get_by_id(self, garment_id: int, enriched: bool = True) -> Garment | None:
        """Get garment by ID.

        Args:
            garment_id: Garment ID.
            enriched: Whether to eagerly load colors, sizes and designs.

        Returns:
            Garment if found, None otherwise.
        """
        query = select(Garment).where(Garment.id == garment_id)

        if enriched:
            query = query.options(*_enriched_options()).execution_options(
                populate_existing=True
            )

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_sku(self, sku: str) -> Garment | None:
        """Get garment by SKU.

        Args:
            sku: Garment SKU.

        Returns:
            Garment if found, None otherwise.
        """
        result = await self.session.execute(select(Garment).where(Garment.sku == sku))
        return result.scalar_one_or_none()

    async def find_all(self) -> Sequence[Garment]:
        """List all garments, newest first, with their options loaded.

        Returns:
            Sequence of garments.
        """
        query = (
            select(Garment)
            .options(*_enriched_options())
            .order_by(Garment.created_at.desc(), Garment.id.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def delete(self, garment_id: int) -> bool:
        """Delete a garment with its colors, sizes and design associations.

        Args:
            garment_id: Garment ID.

        Returns:
            True if a garment was deleted.
        """
        await self.session.execute(delete(Color).where(Color.garment_id == garment_id))
        await self.session.execute(delete(Size).where(Size.garment_id == garment_id))
        await self.session.execute(
            delete(GarmentDesign).where(GarmentDesign.garment_id == garment_id)
        )
        result = await self.session.execute(delete(Garment).where(Garment.id == garment_id))
        return result.rowcount > 0

    # -------------------------------------------------------------------------
    # Colors & Sizes
    # -------------------------------------------------------------------------

    async def add_color(self, color: Color) -> Color:
        """Save a color."""
        self.session.add(color)
        await self.session.flush()
        return color

    async def get_color(self, color_id: int) -> Color | None:
        """Get color by ID."""
        return await self.session.get(Color, color_id)

    async def delete_color(self, color_id: int) -> bool:
        """Delete a color.

        Returns:
            True if a color was deleted.
        """
        result = await self.session.execute(delete(Color).where(Color.id == color_id))
        return result.rowcount > 0

    async def add_size(self, size: Size) -> Size:
        """Save a size."""
        self.session.add(size)
        await self.session.flush()
        return size

    async def get_size(self, size_id: int) -> Size | None:
        """Get size by ID."""
        return await self.session.get(Size, size_id)

    async def delete_size(self, size_id: int) -> bool:
        """Delete a size.

        Returns:
            True if a size was deleted.
        """
        result = await self.session.execute(delete(Size).where(Size.id == size_id))
        return result.rowcount > 0

    # -------------------------------------------------------------------------
    # Design Associations
    # -------------------------------------------------------------------------

    async def get_design_link(self, garment_id: int, design_id: int) -> GarmentDesign | None:
        """Get the association row for a garment/design pair.

        Args:
            garment_id: Garment ID.
            design_id: Design ID.

        Returns:
            GarmentDesign if the design is attached to the garment.
        """
        result = await self.session.execute(
            select(GarmentDesign).where(
                GarmentDesign.garment_id == garment_id,
                GarmentDesign.design_id == design_id,
            )
        )
        return result.scalar_one_or_none()

    async def add_design_link(self, link: GarmentDesign) -> GarmentDesign:
        """Save a garment/design association."""
        self.session.add(link)
        await self.session.flush()
        return link

    async def delete_design_link(self, garment_id: int, design_id: int) -> bool:
        """Remove a garment/design association.

        Returns:
            True if an association was removed.
        """
        result = await self.session.execute(
            delete(GarmentDesign).where(
                GarmentDesign.garment_id == garment_id,
                GarmentDesign.design_id == design_id,
            )
        )
        return result.rowcount > 0


class DesignRepository:
    """Repository for Design database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, design: Design) -> Design:
        """Save a design to database.

        Args:
            design: Design to save.

        Returns:
            Saved design.
        """
        self.session.add(design)
        await self.session.flush()
        return design

    async def get_by_id(self, design_id: int) -> Design | None:
        """Get design by ID.

        Args:
            design_id: Design ID.

        Returns:
            Design if found, None otherwise.
        """
        return await self.session.get(Design, design_id)

    async def find_active(self) -> Sequence[Design]:
        """List active designs, newest first.

        Returns:
            Sequence of active designs.
        """
        query = (
            select(Design)
            .where(Design.is_active.is_(True))
            .order_by(Design.created_at.desc(), Design.id.desc())
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def delete(self, design_id: int) -> bool:
        """Delete a design and its garment associations.

        Args:
            design_id: Design ID.

        Returns:
            True if a design was deleted.
        """
        await self.session.execute(
            delete(GarmentDesign).where(GarmentDesign.design_id == design_id)
        )
        result = await self.session.execute(delete(Design).where(Design.id == design_id))
        return result.rowcount > 0
