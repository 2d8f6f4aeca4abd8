"""Selection engine for one shopper session.

The engine tracks a shopper's in-progress choice of design, color and
size for a single garment, prices it, and produces the customization
draft that gets recorded when the shopper adds the item to the cart.
It performs no I/O; the storefront customizer feeds it catalog data
and persists what it produces.
"""

from dataclasses import dataclass
from typing import Any

from app.domain.base import AggregateRoot
from app.domain.events import (
    ColorChosen,
    DesignChosen,
    SelectionFailed,
    SelectionFinalized,
    SizeChosen,
)
from app.domain.exceptions import (
    OptionNotAvailableError,
    SelectionIncompleteError,
    SessionBusyError,
    ValidationError,
)
from app.domain.state_machines import SelectionStatus, validate_selection_transition
from app.domain.value_objects import (
    ColorOption,
    CustomizationDetails,
    CustomizationDraft,
    DesignOption,
    GarmentSnapshot,
    Money,
    SessionId,
    SizeOption,
)

ADD_TO_CART_LABEL = "Add to Cart"
INCOMPLETE_LABEL = "Select All Options"


@dataclass(kw_only=True, eq=False)
class SelectionEngine(AggregateRoot[SessionId]):
    """Selection session aggregate root.

    Choosing a design, color or size is independent and order-insensitive;
    re-choosing overwrites the prior choice on that axis. The total is
    always the garment base price plus the chosen design's modifier.

    Attributes:
        id: Session identifier.
        garment_id: Garment the session is scoped to.
        currency: Currency of every amount in the session.
        status: Current session status (state machine).
        garment: Catalog data, set once the garment is loaded.
        design_id: Chosen design, if any.
        color_id: Chosen color, if any.
        size_id: Chosen size, if any.
        customization_id: Recorded customization after finalize.
        error: Failure reason when the session could not start.
    """

    id: SessionId
    garment_id: int
    currency: str = "USD"
    status: SelectionStatus = SelectionStatus.INITIALIZING
    garment: GarmentSnapshot | None = None
    design_id: int | None = None
    color_id: int | None = None
    size_id: int | None = None
    customization_id: str | None = None
    error: str | None = None

    @classmethod
    def create(
        cls,
        garment_id: int,
        currency: str = "USD",
        session_id: SessionId | None = None,
    ) -> "SelectionEngine":
        """Create a session waiting for its garment to load.

        Args:
            garment_id: Garment the shopper is customizing.
            currency: Currency code.
            session_id: Optional pre-generated session ID.

        Returns:
            New SelectionEngine in INITIALIZING status.
        """
        return cls(
            id=session_id or SessionId.generate(),
            garment_id=garment_id,
            currency=currency,
        )

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self, garment: GarmentSnapshot) -> None:
        """Hold the garment's base price and available options.

        Args:
            garment: Catalog data for the session's garment.

        Raises:
            InvalidStateTransitionError: If the session is not initializing.
            ValidationError: If the garment is not the session's garment.
        """
        validate_selection_transition(str(self.id), self.status, SelectionStatus.READY)
        if garment.id != self.garment_id:
            raise ValidationError(
                f"Loaded garment {garment.id} does not match session garment {self.garment_id}",
                details={"expected": self.garment_id, "received": garment.id},
            )
        self.garment = garment
        self.status = SelectionStatus.READY
        self._touch()

    def fail(self, reason: str) -> None:
        """Put the session into its terminal error state.

        Args:
            reason: Human-readable failure message for display.
        """
        validate_selection_transition(str(self.id), self.status, SelectionStatus.FAILED)
        self.status = SelectionStatus.FAILED
        self.error = reason
        self._touch()
        self._record_event(
            SelectionFailed(
                aggregate_id=str(self.id),
                aggregate_type="SelectionSession",
                garment_id=self.garment_id,
                reason=reason,
            )
        )

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    @property
    def designs(self) -> tuple[DesignOption, ...]:
        """Designs the shopper can choose from."""
        return self.garment.designs if self.garment else ()

    @property
    def colors(self) -> tuple[ColorOption, ...]:
        """Colors the shopper can choose from."""
        return self.garment.colors if self.garment else ()

    @property
    def sizes(self) -> tuple[SizeOption, ...]:
        """Sizes the shopper can choose from."""
        return self.garment.sizes if self.garment else ()

    @property
    def selected_design(self) -> DesignOption | None:
        """The chosen design, if any."""
        return _find(self.designs, self.design_id)

    @property
    def selected_color(self) -> ColorOption | None:
        """The chosen color, if any."""
        return _find(self.colors, self.color_id)

    @property
    def selected_size(self) -> SizeOption | None:
        """The chosen size, if any."""
        return _find(self.sizes, self.size_id)

    @property
    def base_price(self) -> Money:
        """Garment base price (zero until loaded)."""
        return self.garment.base_price if self.garment else Money.zero(self.currency)

    @property
    def design_surcharge(self) -> Money:
        """Price modifier of the chosen design, or zero if none is chosen."""
        design = self.selected_design
        return design.price_modifier if design else Money.zero(self.currency)

    @property
    def total(self) -> Money:
        """Base price plus the chosen design's price modifier."""
        return self.base_price + self.design_surcharge

    @property
    def is_ready_to_finalize(self) -> bool:
        """Check that a design, a color and a size have all been chosen."""
        return not self.missing_options()

    def missing_options(self) -> list[str]:
        """List the option axes that are still unset.

        Returns:
            Subset of ["design", "color", "size"] in that order.
        """
        chosen = {"design": self.design_id, "color": self.color_id, "size": self.size_id}
        return [axis for axis, value in chosen.items() if value is None]

    def price_summary(self) -> dict[str, Any]:
        """Build the price panel shown next to the options.

        The design surcharge line is only shown for positive modifiers.

        Returns:
            Display values for base price, surcharge, total and the button.
        """
        surcharge = self.design_surcharge
        ready = self.is_ready_to_finalize
        return {
            "base_price": self.base_price.amount_str,
            "design_surcharge": surcharge.amount_str if surcharge.is_positive() else None,
            "total": self.total.amount_str,
            "currency": self.currency,
            "ready": ready,
            "button_label": ADD_TO_CART_LABEL if ready else INCOMPLETE_LABEL,
        }

    # -------------------------------------------------------------------------
    # Choices
    # -------------------------------------------------------------------------

    def choose_design(self, design_id: int) -> Money:
        """Choose the design and reprice the selection.

        Args:
            design_id: Design to put on the garment.

        Returns:
            New total price.

        Raises:
            OptionNotAvailableError: If the design is not offered.
            SessionBusyError: If a boundary call is in flight.
            InvalidStateTransitionError: If the session no longer accepts choices.
        """
        self._ensure_accepts_choices()
        design = _find(self.designs, design_id)
        if design is None:
            raise OptionNotAvailableError("design", design_id, self.garment_id)

        self.design_id = design.id
        self._after_choice()
        total = self.total
        self._record_event(
            DesignChosen(
                aggregate_id=str(self.id),
                aggregate_type="SelectionSession",
                design_id=design.id,
                design_name=design.name,
                total_price=total.amount_str,
            )
        )
        return total

    def choose_color(self, color_id: int) -> None:
        """Choose the garment color.

        Args:
            color_id: Color to use.

        Raises:
            OptionNotAvailableError: If the color is not offered.
            SessionBusyError: If a boundary call is in flight.
            InvalidStateTransitionError: If the session no longer accepts choices.
        """
        self._ensure_accepts_choices()
        color = _find(self.colors, color_id)
        if color is None:
            raise OptionNotAvailableError("color", color_id, self.garment_id)

        self.color_id = color.id
        self._after_choice()
        self._record_event(
            ColorChosen(
                aggregate_id=str(self.id),
                aggregate_type="SelectionSession",
                color_id=color.id,
                color_name=color.name,
            )
        )

    def choose_size(self, size_id: int) -> None:
        """Choose the garment size.

        Args:
            size_id: Size to use.

        Raises:
            OptionNotAvailableError: If the size is not offered.
            SessionBusyError: If a boundary call is in flight.
            InvalidStateTransitionError: If the session no longer accepts choices.
        """
        self._ensure_accepts_choices()
        size = _find(self.sizes, size_id)
        if size is None:
            raise OptionNotAvailableError("size", size_id, self.garment_id)

        self.size_id = size.id
        self._after_choice()
        self._record_event(
            SizeChosen(
                aggregate_id=str(self.id),
                aggregate_type="SelectionSession",
                size_id=size.id,
                size_name=size.label,
            )
        )

    # -------------------------------------------------------------------------
    # Finalize
    # -------------------------------------------------------------------------

    def begin_finalize(self) -> CustomizationDraft:
        """Lock the selection and snapshot it for recording.

        Returns:
            Draft with the chosen references, total and descriptive payload.

        Raises:
            SelectionIncompleteError: If design, color or size is unset.
            SessionBusyError: If a boundary call is already in flight.
            InvalidStateTransitionError: If the session was already finalized.
        """
        if self.status.is_busy():
            raise SessionBusyError(str(self.id), self.status.value)
        if self.status.accepts_choices() and not self.is_ready_to_finalize:
            raise SelectionIncompleteError(str(self.id), self.missing_options())
        validate_selection_transition(str(self.id), self.status, SelectionStatus.FINALIZING)

        design = self.selected_design
        color = self.selected_color
        size = self.selected_size
        if design is None or color is None or size is None:
            unresolved = [
                axis
                for axis, option in (("design", design), ("color", color), ("size", size))
                if option is None
            ]
            raise SelectionIncompleteError(str(self.id), unresolved)

        draft = CustomizationDraft(
            garment_id=self.garment_id,
            design_id=design.id,
            color_id=color.id,
            size_id=size.id,
            total_price=self.total,
            details=CustomizationDetails(
                design_name=design.name,
                design_thumbnail=design.preview_url,
                color_name=color.name,
                size_name=size.label,
            ),
        )
        self.status = SelectionStatus.FINALIZING
        self._touch()
        return draft

    def abort_finalize(self) -> None:
        """Return to COMPLETE after the customization could not be recorded."""
        validate_selection_transition(str(self.id), self.status, SelectionStatus.COMPLETE)
        self.status = SelectionStatus.COMPLETE
        self._touch()

    def complete_finalize(self, customization_id: str) -> None:
        """Mark the selection as recorded.

        Args:
            customization_id: Identifier assigned by the customization log.
        """
        validate_selection_transition(str(self.id), self.status, SelectionStatus.FINALIZED)
        self.customization_id = customization_id
        self.status = SelectionStatus.FINALIZED
        self._touch()
        self._record_event(
            SelectionFinalized(
                aggregate_id=str(self.id),
                aggregate_type="SelectionSession",
                customization_id=customization_id,
                garment_id=self.garment_id,
                total_price=self.total.amount_str,
            )
        )

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Convert session state to a JSON-compatible dictionary."""
        return {
            "id": str(self.id),
            "garment_id": self.garment_id,
            "currency": self.currency,
            "status": self.status.value,
            "garment": self.garment.to_payload() if self.garment else None,
            "design_id": self.design_id,
            "color_id": self.color_id,
            "size_id": self.size_id,
            "customization_id": self.customization_id,
            "error": self.error,
            "total": self.total.amount_str,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SelectionEngine":
        """Restore a session from ``to_dict`` output.

        Args:
            data: Serialized session state.

        Returns:
            SelectionEngine with the same state.
        """
        currency = data.get("currency", "USD")
        garment = data.get("garment")
        return cls(
            id=SessionId.from_string(data["id"]),
            garment_id=data["garment_id"],
            currency=currency,
            status=SelectionStatus(data["status"]),
            garment=GarmentSnapshot.from_payload(garment, currency) if garment else None,
            design_id=data.get("design_id"),
            color_id=data.get("color_id"),
            size_id=data.get("size_id"),
            customization_id=data.get("customization_id"),
            error=data.get("error"),
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _ensure_accepts_choices(self) -> None:
        if self.status.is_busy():
            raise SessionBusyError(str(self.id), self.status.value)
        if not self.status.accepts_choices():
            validate_selection_transition(str(self.id), self.status, SelectionStatus.SELECTING)

    def _after_choice(self) -> None:
        target = (
            SelectionStatus.COMPLETE if self.is_ready_to_finalize else SelectionStatus.SELECTING
        )
        validate_selection_transition(str(self.id), self.status, target)
        self.status = target
        self._touch()


def _find(options: tuple[Any, ...], option_id: int | None) -> Any | None:
    """Find an option by id, comparing ids as integers."""
    if option_id is None:
        return None
    try:
        wanted = int(option_id)
    except (TypeError, ValueError):
        return None
    return next((option for option in options if option.id == wanted), None)
