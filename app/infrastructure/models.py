"""SQLAlchemy models for database tables.

Provides the ORM model for the customizations log.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import JSONB

from app.infrastructure.database import Base


# ============================================================================
# Customization Models
# ============================================================================


class CustomizationModel(Base):
    """Customization model for database persistence.

    Append-only record of one finalized shopper selection. The catalog
    references are plain ids so that catalog edits and deletes never
    alter a logged customization; ``customization_data`` is the
    descriptive snapshot taken at finalize time.
    """

    __tablename__ = "customizations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    garment_id = Column(Integer, nullable=False, index=True)
    design_id = Column(Integer, nullable=False)
    selected_color_id = Column(Integer, nullable=False)
    selected_size_id = Column(Integer, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    customization_data = Column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        default=dict,
    )

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Customization(id={self.id}, garment_id={self.garment_id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "garment_id": self.garment_id,
            "design_id": self.design_id,
            "selected_color_id": self.selected_color_id,
            "selected_size_id": self.selected_size_id,
            "total_price": self.total_price,
            "customization_data": dict(self.customization_data or {}),
            "created_at": self.created_at,
        }
