"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. Money lives here together with the typed session
and customization identifiers and the catalog options a shopper picks from.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Self
from uuid import UUID, uuid4

from app.domain.base import ValueObject
from app.domain.exceptions import ValidationError

CENT = Decimal("0.01")


# ============================================================================
# Typed Identifiers
# ============================================================================


@dataclass(frozen=True)
class SessionId(ValueObject):
    """Strongly-typed selection session identifier."""

    value: UUID

    @classmethod
    def generate(cls) -> Self:
        """Generate a new session ID.

        Returns:
            New SessionId with random UUID.
        """
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create SessionId from string representation.

        Args:
            value: String UUID representation.

        Returns:
            SessionId instance.
        """
        return cls(value=UUID(value))

    def __str__(self) -> str:
        """Return UUID as string."""
        return str(self.value)


@dataclass(frozen=True)
class CustomizationId(ValueObject):
    """Strongly-typed customization identifier.

    Customization IDs are generated UUID strings assigned when a
    finalized selection is recorded.
    """

    value: str

    @classmethod
    def generate(cls) -> Self:
        """Generate a new customization ID.

        Returns:
            New CustomizationId with random UUID.
        """
        return cls(value=str(uuid4()))

    def __post_init__(self) -> None:
        """Validate customization ID format."""
        if not self.value or not self.value.strip():
            raise ValueError("Customization ID cannot be empty")

    def __str__(self) -> str:
        """Return customization ID value."""
        return self.value


# ============================================================================
# Money Value Object
# ============================================================================


@dataclass(frozen=True)
class Money(ValueObject):
    """Represents a monetary amount with currency.

    Amounts are held as ``Decimal`` quantized to cents so that adding a
    base price and a price modifier never drifts the way binary floats do.
    Amounts may be negative: design price modifiers can be discounts.

    Attributes:
        amount: Decimal amount in major units (e.g., dollars).
        currency: ISO 4217 currency code (e.g., 'USD', 'EUR').
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        """Normalize amount to cents and currency to uppercase."""
        object.__setattr__(
            self, "amount", Decimal(self.amount).quantize(CENT, rounding=ROUND_HALF_UP)
        )
        object.__setattr__(self, "currency", self.currency.upper())

    @classmethod
    def zero(cls, currency: str = "USD") -> Self:
        """Create zero amount money.

        Args:
            currency: Currency code.

        Returns:
            Money with zero amount.
        """
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def of(cls, value: Any, currency: str = "USD") -> Self:
        """Create money from a decimal string, int, float or Decimal.

        Floats are converted through their shortest string form, so
        ``19.99`` becomes exactly ``Decimal("19.99")``.

        Args:
            value: Amount in major units.
            currency: Currency code.

        Returns:
            Money instance.

        Raises:
            ValidationError: If the value is not a number or has sub-cent digits.
        """
        if isinstance(value, bool) or value is None:
            raise ValidationError(f"Invalid money amount: {value!r}")
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValidationError(f"Invalid money amount: {value!r}") from e
        if not amount.is_finite():
            raise ValidationError(f"Invalid money amount: {value!r}")
        if amount != amount.quantize(CENT):
            raise ValidationError(
                f"Money amount has more than two decimal places: {value!r}",
                details={"value": str(value)},
            )
        return cls(amount=amount, currency=currency)

    @property
    def amount_str(self) -> str:
        """Get the amount as a two-decimal string (e.g., '24.99')."""
        return f"{self.amount:.2f}"

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine money with different currencies: "
                f"{self.currency} and {other.currency}",
                details={"currency1": self.currency, "currency2": other.currency},
            )

    def __add__(self, other: "Money") -> "Money":
        """Add two money amounts.

        Raises:
            ValidationError: If currencies don't match.
        """
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract money amounts.

        Raises:
            ValidationError: If currencies don't match.
        """
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __str__(self) -> str:
        """Return formatted string representation (e.g., '$24.99')."""
        symbol = {"USD": "$", "EUR": "€", "GBP": "£"}.get(self.currency, "")
        sign = "-" if self.is_negative() else ""
        return f"{sign}{symbol}{abs(self.amount):.2f}"

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0

    def is_negative(self) -> bool:
        """Check if amount is below zero."""
        return self.amount < 0

    def is_positive(self) -> bool:
        """Check if amount is above zero."""
        return self.amount > 0


# ============================================================================
# Catalog Options
# ============================================================================


@dataclass(frozen=True)
class DesignOption(ValueObject):
    """A design the shopper may put on the garment.

    Attributes:
        id: Design identifier.
        name: Display name.
        image_url: Full-size artwork URL.
        thumbnail_url: Preview URL (falls back to image_url).
        price_modifier: Amount added to the garment base price.
        is_active: Whether the design is currently offered.
        display_order: Optional position within the garment's designs.
    """

    id: int
    name: str
    image_url: str
    price_modifier: Money
    thumbnail_url: str | None = None
    is_active: bool = True
    display_order: int | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any], currency: str = "USD") -> Self:
        """Build a design option from a catalog design response."""
        return cls(
            id=int(payload["id"]),
            name=payload["name"],
            image_url=payload["image_url"],
            thumbnail_url=payload.get("thumbnail_url"),
            price_modifier=Money.of(payload.get("price_modifier") or 0, currency),
            is_active=payload.get("is_active", True),
            display_order=payload.get("display_order"),
        )

    @property
    def preview_url(self) -> str:
        """Get the thumbnail, or the full image when no thumbnail is set."""
        return self.thumbnail_url or self.image_url


@dataclass(frozen=True)
class ColorOption(ValueObject):
    """A garment color.

    Attributes:
        id: Color identifier.
        name: Display name (e.g., "Black").
        hex_code: Optional swatch color (e.g., "#000000").
    """

    id: int
    name: str
    hex_code: str | None = None


@dataclass(frozen=True)
class SizeOption(ValueObject):
    """A garment size.

    Attributes:
        id: Size identifier.
        label: Size label (e.g., "M").
    """

    id: int
    label: str


@dataclass(frozen=True)
class GarmentSnapshot(ValueObject):
    """Everything a selection session needs to know about one garment.

    Built from the catalog's enriched garment payload. Designs that are
    marked inactive are dropped so the shopper never sees them.

    Attributes:
        id: Garment identifier.
        name: Garment name.
        sku: Stock keeping unit.
        base_price: Price before any design modifier.
        designs: Designs attached to the garment.
        colors: Colors offered for the garment.
        sizes: Sizes offered for the garment.
    """

    id: int
    name: str
    base_price: Money
    sku: str | None = None
    designs: tuple[DesignOption, ...] = field(default_factory=tuple)
    colors: tuple[ColorOption, ...] = field(default_factory=tuple)
    sizes: tuple[SizeOption, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, payload: dict[str, Any], currency: str = "USD") -> Self:
        """Build a snapshot from a catalog garment response.

        Args:
            payload: Enriched garment JSON (base_price as decimal string or number).
            currency: Currency code for all amounts.

        Returns:
            GarmentSnapshot instance.

        Raises:
            ValidationError: If the payload lacks required garment fields.
        """
        missing = [key for key in ("id", "name", "base_price") if payload.get(key) in (None, "")]
        if missing:
            raise ValidationError.missing_fields("Garment", missing)

        designs = tuple(
            DesignOption.from_payload(d, currency)
            for d in payload.get("designs") or []
            if d.get("is_active", True)
        )
        colors = tuple(
            ColorOption(id=int(c["id"]), name=c["name"], hex_code=c.get("hex_code"))
            for c in payload.get("colors") or []
        )
        sizes = tuple(
            SizeOption(id=int(s["id"]), label=s["size"])
            for s in payload.get("sizes") or []
        )

        return cls(
            id=int(payload["id"]),
            name=payload["name"],
            sku=payload.get("sku"),
            base_price=Money.of(payload["base_price"], currency),
            designs=designs,
            colors=colors,
            sizes=sizes,
        )

    def to_payload(self) -> dict[str, Any]:
        """Convert back to the catalog garment payload shape."""
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "base_price": self.base_price.amount_str,
            "designs": [
                {
                    "id": d.id,
                    "name": d.name,
                    "image_url": d.image_url,
                    "thumbnail_url": d.thumbnail_url,
                    "price_modifier": d.price_modifier.amount_str,
                    "is_active": d.is_active,
                    "display_order": d.display_order,
                }
                for d in self.designs
            ],
            "colors": [
                {"id": c.id, "name": c.name, "hex_code": c.hex_code} for c in self.colors
            ],
            "sizes": [{"id": s.id, "size": s.label} for s in self.sizes],
        }


# ============================================================================
# Customization Snapshot
# ============================================================================


@dataclass(frozen=True)
class CustomizationDetails(ValueObject):
    """Descriptive payload captured when a selection is finalized.

    This is a snapshot: later edits to the catalog never change it.

    Attributes:
        design_name: Name of the chosen design.
        design_thumbnail: Preview URL of the chosen design.
        color_name: Name of the chosen color.
        size_name: Label of the chosen size.
    """

    design_name: str
    design_thumbnail: str
    color_name: str
    size_name: str

    def to_dict(self) -> dict[str, str]:
        """Convert to the JSON payload stored with the customization."""
        return {
            "design_name": self.design_name,
            "design_thumbnail": self.design_thumbnail,
            "color_name": self.color_name,
            "size_name": self.size_name,
        }

    def to_line_item_properties(self, customization_id: str) -> dict[str, str]:
        """Build the named properties sent with the cart line item.

        Args:
            customization_id: Identifier of the recorded customization.

        Returns:
            Property name to value mapping.
        """
        return {
            "Customization ID": customization_id,
            "Design": self.design_name,
            "Design Thumbnail": self.design_thumbnail,
            "Color": self.color_name,
            "Size": self.size_name,
        }


@dataclass(frozen=True)
class CustomizationDraft(ValueObject):
    """A finalized selection ready to be recorded.

    Attributes:
        garment_id: Garment the selection is for.
        design_id: Chosen design.
        color_id: Chosen color.
        size_id: Chosen size.
        total_price: Base price plus the design's price modifier.
        details: Descriptive snapshot for fulfillment and display.
    """

    garment_id: int
    design_id: int
    color_id: int
    size_id: int
    total_price: Money
    details: CustomizationDetails

    def to_request(self) -> dict[str, Any]:
        """Convert to the customization create request body."""
        return {
            "garment_id": self.garment_id,
            "design_id": self.design_id,
            "selected_color_id": self.color_id,
            "selected_size_id": self.size_id,
            "total_price": self.total_price.amount_str,
            "customization_data": self.details.to_dict(),
        }
