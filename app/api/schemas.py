"""API schemas for the Garment Customizer API.

Pydantic models for request/response validation and serialization.
Money fields are decimals and serialize as two-decimal strings.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | dict[str, Any] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class MessageResponse(BaseModel):
    """Confirmation message for deletes and detaches."""

    message: str = Field(..., description="Human-readable confirmation")


# ============================================================================
# Color & Size Schemas
# ============================================================================


class ColorRequest(BaseModel):
    """Request to create or replace a color."""

    name: str = Field(..., max_length=100, description="Color display name")
    hex_code: str | None = Field(
        default=None,
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Swatch color (e.g., '#1A1A1A')",
    )


class ColorResponse(BaseModel):
    """Color offered for a garment."""

    id: int = Field(..., description="Color identifier")
    garment_id: int = Field(..., description="Owning garment")
    name: str = Field(..., description="Color display name")
    hex_code: str | None = Field(default=None, description="Swatch color")


class SizeRequest(BaseModel):
    """Request to create or replace a size."""

    size: str = Field(..., max_length=50, description="Size label (e.g., 'M')")


class SizeResponse(BaseModel):
    """Size offered for a garment."""

    id: int = Field(..., description="Size identifier")
    garment_id: int = Field(..., description="Owning garment")
    size: str = Field(..., description="Size label")


# ============================================================================
# Design Schemas
# ============================================================================


class DesignCreateRequest(BaseModel):
    """Request to create a design."""

    name: str = Field(..., max_length=255, description="Design display name")
    image_url: str = Field(..., description="Full-size artwork URL")
    thumbnail_url: str | None = Field(
        default=None, description="Preview URL (defaults to image_url)"
    )
    price_modifier: Decimal | None = Field(
        default=None,
        max_digits=10,
        decimal_places=2,
        description="Amount added to the garment base price; negative for discounts",
    )


class DesignUpdateRequest(DesignCreateRequest):
    """Request to replace a design."""

    is_active: bool | None = Field(
        default=None, description="Whether the design is offered to shoppers"
    )


class DesignResponse(BaseModel):
    """Design details."""

    id: int = Field(..., description="Design identifier")
    name: str = Field(..., description="Design display name")
    image_url: str = Field(..., description="Full-size artwork URL")
    thumbnail_url: str | None = Field(default=None, description="Preview URL")
    price_modifier: Decimal = Field(..., description="Price modifier")
    is_active: bool = Field(..., description="Whether the design is offered")
    created_at: datetime = Field(..., description="When the design was created")
    updated_at: datetime = Field(..., description="When the design was last updated")


class GarmentDesignResponse(DesignResponse):
    """Design as attached to a garment."""

    display_order: int | None = Field(
        default=None, description="Position among the garment's designs"
    )


class DesignLinkRequest(BaseModel):
    """Request to attach a design to a garment."""

    display_order: int | None = Field(
        default=None, description="Position among the garment's designs"
    )


class DesignLinkResponse(BaseModel):
    """Garment/design association."""

    id: int = Field(..., description="Association identifier")
    garment_id: int = Field(..., description="Garment identifier")
    design_id: int = Field(..., description="Design identifier")
    display_order: int | None = Field(default=None, description="Display position")


# ============================================================================
# Garment Schemas
# ============================================================================


class GarmentRequest(BaseModel):
    """Request to create or replace a garment."""

    name: str = Field(..., max_length=255, description="Garment display name")
    sku: str = Field(..., max_length=100, description="Unique stock keeping unit")
    base_price: Decimal = Field(
        ...,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Price before any design modifier",
    )
    description: str | None = Field(default=None, description="Long description")


class GarmentResponse(BaseModel):
    """Garment with its colors, sizes and attached designs."""

    id: int = Field(..., description="Garment identifier")
    name: str = Field(..., description="Garment display name")
    sku: str = Field(..., description="Stock keeping unit")
    base_price: Decimal = Field(..., description="Price before any design modifier")
    description: str | None = Field(default=None, description="Long description")
    colors: list[ColorResponse] = Field(default_factory=list, description="Colors")
    sizes: list[SizeResponse] = Field(default_factory=list, description="Sizes")
    designs: list[GarmentDesignResponse] = Field(
        default_factory=list, description="Attached designs, in display order"
    )
    created_at: datetime = Field(..., description="When the garment was created")
    updated_at: datetime = Field(..., description="When the garment was last updated")


# ============================================================================
# Customization Schemas
# ============================================================================


class CustomizationCreateRequest(BaseModel):
    """Request to record a finalized selection."""

    garment_id: int = Field(..., description="Chosen garment")
    design_id: int = Field(..., description="Chosen design")
    selected_color_id: int = Field(..., description="Chosen color")
    selected_size_id: int = Field(..., description="Chosen size")
    total_price: Decimal = Field(
        ..., max_digits=10, decimal_places=2, description="Total shown to the shopper"
    )
    customization_data: dict[str, Any] = Field(
        default_factory=dict,
        description="Descriptive snapshot (design name, thumbnail, color, size)",
    )


class CustomizationResponse(BaseModel):
    """Recorded customization."""

    id: str = Field(..., description="Customization identifier (UUID)")
    garment_id: int = Field(..., description="Chosen garment")
    design_id: int = Field(..., description="Chosen design")
    selected_color_id: int = Field(..., description="Chosen color")
    selected_size_id: int = Field(..., description="Chosen size")
    total_price: Decimal = Field(..., description="Total at finalize time")
    customization_data: dict[str, Any] = Field(
        default_factory=dict, description="Snapshot taken at finalize time"
    )
    created_at: datetime = Field(..., description="When the customization was recorded")


class CustomizationDetailResponse(CustomizationResponse):
    """Customization joined with the current catalog.

    Joined fields are None when the referenced entity has been deleted.
    """

    garment_name: str | None = Field(default=None, description="Current garment name")
    garment_sku: str | None = Field(default=None, description="Current garment SKU")
    base_price: Decimal | None = Field(default=None, description="Current base price")
    design_name: str | None = Field(default=None, description="Current design name")
    thumbnail_url: str | None = Field(default=None, description="Current design thumbnail")
    color_name: str | None = Field(default=None, description="Current color name")
    size_label: str | None = Field(default=None, description="Current size label")
