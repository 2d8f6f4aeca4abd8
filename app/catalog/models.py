"""SQLAlchemy models for the garment catalog.

Defines Garment, Color, Size, Design and the Garment-Design
association table for persistent storage.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Garment(Base):
    """A sellable base product (e.g., a hoodie).

    Attributes:
        id: Garment identifier.
        name: Display name.
        sku: Stock Keeping Unit (unique across all garments).
        base_price: Price before any design modifier.
        description: Optional long description.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "garments"
    __table_args__ = (
        UniqueConstraint("sku", name="uq_garments_sku"),
        CheckConstraint("base_price >= 0", name="ck_garments_base_price_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sku: Mapped[str] = mapped_column(String(100), nullable=False)
    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    # Relationships
    colors: Mapped[list["Color"]] = relationship(
        "Color",
        back_populates="garment",
        order_by="Color.id",
        passive_deletes=True,
    )
    sizes: Mapped[list["Size"]] = relationship(
        "Size",
        back_populates="garment",
        order_by="Size.id",
        passive_deletes=True,
    )
    design_links: Mapped[list["GarmentDesign"]] = relationship(
        "GarmentDesign",
        back_populates="garment",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Garment(id={self.id}, sku={self.sku}, name={self.name[:30]})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary without related options."""
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "base_price": self.base_price,
            "description": self.description,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def to_enriched_dict(self) -> dict[str, Any]:
        """Convert to dictionary with colors, sizes and attached designs.

        Designs are ordered by display_order (unset last), then id.

        Returns:
            Dictionary representation; option lists may be empty.
        """
        links = sorted(
            self.design_links,
            key=lambda link: (
                link.display_order is None,
                link.display_order or 0,
                link.design_id,
            ),
        )
        return {
            **self.to_dict(),
            "colors": [c.to_dict() for c in self.colors],
            "sizes": [s.to_dict() for s in self.sizes],
            "designs": [
                {**link.design.to_dict(), "display_order": link.display_order}
                for link in links
            ],
        }


class Color(Base):
    """A color offered for one garment.

    Attributes:
        id: Color identifier.
        garment_id: Owning garment.
        name: Display name.
        hex_code: Optional swatch color (e.g., "#1A1A1A").
    """

    __tablename__ = "colors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    garment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("garments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    hex_code: Mapped[str | None] = mapped_column(String(7), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    garment: Mapped["Garment"] = relationship("Garment", back_populates="colors")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Color(id={self.id}, name={self.name})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "garment_id": self.garment_id,
            "name": self.name,
            "hex_code": self.hex_code,
        }


class Size(Base):
    """A size offered for one garment.

    Attributes:
        id: Size identifier.
        garment_id: Owning garment.
        size: Size label (e.g., "M", "XL").
    """

    __tablename__ = "sizes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    garment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("garments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    size: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    garment: Mapped["Garment"] = relationship("Garment", back_populates="sizes")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Size(id={self.id}, size={self.size})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "garment_id": self.garment_id,
            "size": self.size,
        }


class Design(Base):
    """A decorative graphic that can be printed on garments.

    Attributes:
        id: Design identifier.
        name: Display name.
        image_url: Full-size artwork URL.
        thumbnail_url: Preview URL (defaults to image_url on create).
        price_modifier: Amount added to the garment base price (may be negative).
        is_active: Whether the design is offered to shoppers.
    """

    __tablename__ = "designs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_modifier: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False, default=Decimal("0")
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    garment_links: Mapped[list["GarmentDesign"]] = relationship(
        "GarmentDesign",
        back_populates="design",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Design(id={self.id}, name={self.name})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "image_url": self.image_url,
            "thumbnail_url": self.thumbnail_url,
            "price_modifier": self.price_modifier,
            "is_active": self.is_active,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


class GarmentDesign(Base):
    """Association of a design with a garment.

    A design attaches to a given garment at most once.

    Attributes:
        id: Row identifier.
        garment_id: Garment side of the pair.
        design_id: Design side of the pair.
        display_order: Optional position among the garment's designs.
    """

    __tablename__ = "garment_designs"
    __table_args__ = (
        UniqueConstraint("garment_id", "design_id", name="uq_garment_designs_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    garment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("garments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    design_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("designs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    display_order: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    garment: Mapped["Garment"] = relationship("Garment", back_populates="design_links")
    design: Mapped["Design"] = relationship("Design", back_populates="garment_links")

    def __repr__(self) -> str:
        """String representation."""
        return f"<GarmentDesign(garment_id={self.garment_id}, design_id={self.design_id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "garment_id": self.garment_id,
            "design_id": self.design_id,
            "display_order": self.display_order,
        }
