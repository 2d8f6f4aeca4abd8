"""Domain layer - Selection engine, value objects, state machine, domain events.

This module exports the core domain building blocks:

- **Selection Engine**: the per-session aggregate that validates and prices
  a shopper's design/color/size choice
- **Value Objects**: Money, typed IDs, catalog options, customization snapshot
- **State Machine**: SelectionStatus transitions
- **Domain Events**: what the shopper did during a session
- **Exceptions**: validation, conflict, not-found and transport errors

Example usage:
    from app.domain import GarmentSnapshot, SelectionEngine

    engine = SelectionEngine.create(garment_id=1)
    engine.load(GarmentSnapshot.from_payload(garment_json))

    engine.choose_design(3)
    engine.choose_color(7)
    engine.choose_size(12)
    print(engine.total.amount_str)  # "24.99"

    draft = engine.begin_finalize()
"""

# Base classes
from app.domain.base import AggregateRoot, DomainEvent, ValueObject

# Domain Events
from app.domain.events import (
    EVENT_REGISTRY,
    ColorChosen,
    DesignChosen,
    SelectionFailed,
    SelectionFinalized,
    SizeChosen,
    get_event_class,
)

# Exceptions
from app.domain.exceptions import (
    ConflictError,
    DomainError,
    InvalidStateTransitionError,
    NotFoundError,
    OptionNotAvailableError,
    PriceMismatchError,
    SelectionIncompleteError,
    SessionBusyError,
    TransportError,
    ValidationError,
)

# Selection Engine
from app.domain.selection import SelectionEngine

# State Machines
from app.domain.state_machines import SelectionStatus, validate_selection_transition

# Value Objects
from app.domain.value_objects import (
    ColorOption,
    CustomizationDetails,
    CustomizationDraft,
    CustomizationId,
    DesignOption,
    GarmentSnapshot,
    Money,
    SessionId,
    SizeOption,
)

__all__ = [
    # Base classes
    "AggregateRoot",
    "DomainEvent",
    "ValueObject",
    # Selection Engine
    "SelectionEngine",
    # Value Objects
    "ColorOption",
    "CustomizationDetails",
    "CustomizationDraft",
    "CustomizationId",
    "DesignOption",
    "GarmentSnapshot",
    "Money",
    "SessionId",
    "SizeOption",
    # State Machines
    "SelectionStatus",
    "validate_selection_transition",
    # Domain Events
    "ColorChosen",
    "DesignChosen",
    "SelectionFailed",
    "SelectionFinalized",
    "SizeChosen",
    "EVENT_REGISTRY",
    "get_event_class",
    # Exceptions
    "DomainError",
    "ValidationError",
    "SelectionIncompleteError",
    "OptionNotAvailableError",
    "PriceMismatchError",
    "ConflictError",
    "NotFoundError",
    "TransportError",
    "InvalidStateTransitionError",
    "SessionBusyError",
]
