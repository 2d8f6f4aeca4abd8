"""Domain events for selection sessions.

Domain events record what a shopper did during a session. They are
collected by the storefront customizer and written to the log, and
give tests a precise trace of each choice and of the finalize step.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from app.domain.base import DomainEvent


@dataclass(frozen=True)
class DesignChosen(DomainEvent):
    """Event raised when the shopper picks (or re-picks) a design."""

    event_type: ClassVar[str] = "selection.design_chosen"

    design_id: int = 0
    design_name: str = ""
    total_price: str = ""

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {
            "design_id": self.design_id,
            "design_name": self.design_name,
            "total_price": self.total_price,
        }


@dataclass(frozen=True)
class ColorChosen(DomainEvent):
    """Event raised when the shopper picks a color."""

    event_type: ClassVar[str] = "selection.color_chosen"

    color_id: int = 0
    color_name: str = ""

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {"color_id": self.color_id, "color_name": self.color_name}


@dataclass(frozen=True)
class SizeChosen(DomainEvent):
    """Event raised when the shopper picks a size."""

    event_type: ClassVar[str] = "selection.size_chosen"

    size_id: int = 0
    size_name: str = ""

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {"size_id": self.size_id, "size_name": self.size_name}


@dataclass(frozen=True)
class SelectionFinalized(DomainEvent):
    """Event raised when the selection is recorded as a customization."""

    event_type: ClassVar[str] = "selection.finalized"

    customization_id: str = ""
    garment_id: int = 0
    total_price: str = ""

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {
            "customization_id": self.customization_id,
            "garment_id": self.garment_id,
            "total_price": self.total_price,
        }


@dataclass(frozen=True)
class SelectionFailed(DomainEvent):
    """Event raised when a session cannot be initialized."""

    event_type: ClassVar[str] = "selection.failed"

    garment_id: int = 0
    reason: str = ""

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {"garment_id": self.garment_id, "reason": self.reason}


# Registry of all event types for deserialization
EVENT_REGISTRY: dict[str, type[DomainEvent]] = {
    DesignChosen.event_type: DesignChosen,
    ColorChosen.event_type: ColorChosen,
    SizeChosen.event_type: SizeChosen,
    SelectionFinalized.event_type: SelectionFinalized,
    SelectionFailed.event_type: SelectionFailed,
}


def get_event_class(event_type: str) -> type[DomainEvent] | None:
    """Get event class by event type string.

    Args:
        event_type: Event type identifier (e.g., 'selection.finalized').

    Returns:
        Event class if found, None otherwise.
    """
    return EVENT_REGISTRY.get(event_type)
