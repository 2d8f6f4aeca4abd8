"""Storefront garment customizer.

Drives one shopper session: loads the garment from the Catalog Service,
feeds the shopper's choices to the selection engine, records the
finalized customization and hands the line item to the cart.
"""

from dataclasses import dataclass
from typing import Any

import structlog

from app.domain.base import DomainEvent
from app.domain.exceptions import DomainError, SessionBusyError, TransportError, ValidationError
from app.domain.selection import SelectionEngine
from app.domain.state_machines import SelectionStatus, validate_selection_transition
from app.domain.value_objects import CustomizationDetails, Money
from app.infrastructure.config import settings
from app.storefront.api_client import CatalogAPIClient
from app.storefront.cart_client import CartClient

logger = structlog.get_logger()


@dataclass
class AddToCartResult:
    """Result of adding a customized garment to the cart.

    The customization is recorded whenever a result is returned;
    ``cart_added`` only reports the downstream cart handoff.
    """

    customization_id: str
    total_price: str
    cart_added: bool
    cart_error: str | None = None
    cart_response: dict[str, Any] | None = None


class GarmentCustomizer:
    """One shopper's customization session for one garment.

    Example usage:
        async with GarmentCustomizer(garment_id=1) as customizer:
            if await customizer.start():
                customizer.choose_design(3)
                customizer.choose_color(7)
                customizer.choose_size(12)
                result = await customizer.add_to_cart()
    """

    def __init__(
        self,
        garment_id: int,
        api_client: CatalogAPIClient | None = None,
        cart_client: CartClient | None = None,
        variant_id: int | str | None = None,
        currency: str | None = None,
    ) -> None:
        """Initialize customizer.

        Args:
            garment_id: Garment to customize.
            api_client: Catalog API client.
            cart_client: Cart platform client.
            variant_id: Cart variant to add (defaults to the garment id).
            currency: Currency code for prices.
        """
        self.currency = currency or settings.currency
        self.api_client = api_client or CatalogAPIClient(currency=self.currency)
        self.cart_client = cart_client or CartClient()
        self.variant_id = variant_id if variant_id is not None else garment_id
        self.engine = SelectionEngine.create(garment_id, currency=self.currency)

        self._details: CustomizationDetails | None = None
        self._result: AddToCartResult | None = None
        self._cart_in_flight = False

    async def __aenter__(self) -> "GarmentCustomizer":
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP clients."""
        await self.api_client.close()
        await self.cart_client.close()

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    @property
    def status(self) -> SelectionStatus:
        """Get the session status."""
        return self.engine.status

    @property
    def error(self) -> str | None:
        """Get the failure message when the garment could not be loaded."""
        return self.engine.error

    async def start(self) -> bool:
        """Load the garment and its options.

        A load failure puts the session into its terminal error state
        with the failure message instead of raising.

        Returns:
            True if the garment loaded and choices can be made.
        """
        engine = self.engine
        validate_selection_transition(str(engine.id), engine.status, SelectionStatus.READY)

        try:
            garment = await self.api_client.get_garment(engine.garment_id)
            engine.load(garment)
        except DomainError as e:
            logger.warning(
                "Garment failed to load",
                session_id=str(engine.id),
                garment_id=engine.garment_id,
                error=e.message,
            )
            engine.fail(e.message)
            return False

        logger.info(
            "Customizer ready",
            session_id=str(engine.id),
            garment_id=garment.id,
            designs=len(garment.designs),
            colors=len(garment.colors),
            sizes=len(garment.sizes),
        )
        return True

    # -------------------------------------------------------------------------
    # Choices
    # -------------------------------------------------------------------------

    def choose_design(self, design_id: int) -> Money:
        """Choose a design and return the new total."""
        return self.engine.choose_design(design_id)

    def choose_color(self, color_id: int) -> None:
        """Choose a color."""
        self.engine.choose_color(color_id)

    def choose_size(self, size_id: int) -> None:
        """Choose a size."""
        self.engine.choose_size(size_id)

    def summary(self) -> dict[str, Any]:
        """Build the display model for the customizer panel.

        Returns:
            Status, garment, selected option names and price panel values.
        """
        engine = self.engine
        design = engine.selected_design
        color = engine.selected_color
        size = engine.selected_size
        return {
            "session_id": str(engine.id),
            "status": engine.status.value,
            "error": engine.error,
            "garment_name": engine.garment.name if engine.garment else None,
            "design": design.name if design else None,
            "design_preview": design.preview_url if design else None,
            "color": color.name if color else None,
            "size": size.label if size else None,
            "missing": engine.missing_options(),
            **engine.price_summary(),
        }

    def collect_events(self) -> list[DomainEvent]:
        """Collect the session's domain events."""
        return self.engine.collect_events()

    # -------------------------------------------------------------------------
    # Finalize & Cart
    # -------------------------------------------------------------------------

    async def add_to_cart(self) -> AddToCartResult:
        """Record the customization, then hand the line item to the cart.

        Returns:
            Result with the customization id and the cart handoff outcome.

        Raises:
            SelectionIncompleteError: If design, color or size is unset.
            SessionBusyError: If a boundary call is in flight.
            DomainError: If the customization could not be recorded; the
                session returns to COMPLETE and nothing is stored.
        """
        engine = self.engine
        draft = engine.begin_finalize()

        try:
            customization = await self.api_client.create_customization(draft)
            if not isinstance(customization, dict):
                raise TransportError("Customization response was not an object")
            customization_id = customization.get("id")
            if not customization_id:
                raise TransportError("Customization response did not include an id")
        except DomainError as e:
            engine.abort_finalize()
            logger.warning(
                "Customization not recorded",
                session_id=str(engine.id),
                error=e.message,
            )
            raise

        engine.complete_finalize(str(customization_id))
        self._details = draft.details
        self._result = AddToCartResult(
            customization_id=str(customization_id),
            total_price=draft.total_price.amount_str,
            cart_added=False,
        )
        return await self._hand_off(self._result, draft.details)

    async def retry_cart_handoff(self) -> AddToCartResult:
        """Retry the cart handoff for an already recorded customization.

        Returns:
            Updated result; unchanged if the item is already in the cart.

        Raises:
            ValidationError: If nothing has been recorded yet.
        """
        if self._result is None or self._details is None:
            raise ValidationError(
                "Nothing to hand off: the selection has not been finalized",
                details={"session_id": str(self.engine.id)},
            )
        if self._result.cart_added:
            return self._result
        return await self._hand_off(self._result, self._details)

    async def _hand_off(
        self, result: AddToCartResult, details: CustomizationDetails
    ) -> AddToCartResult:
        if self._cart_in_flight:
            raise SessionBusyError(str(self.engine.id), "cart_handoff")

        properties = details.to_line_item_properties(result.customization_id)
        self._cart_in_flight = True
        try:
            response = await self.cart_client.add_line_item(
                self.variant_id, properties, quantity=1
            )
        except TransportError as e:
            logger.warning(
                "Cart handoff failed",
                session_id=str(self.engine.id),
                customization_id=result.customization_id,
                error=e.message,
            )
            result.cart_added = False
            result.cart_error = e.message
            return result
        finally:
            self._cart_in_flight = False

        result.cart_added = True
        result.cart_error = None
        result.cart_response = response
        return result
