"""Cart platform client.

Hands a finalized customization to the external cart as a line item
with named properties.
"""

from typing import Any

import httpx
import structlog

from app.domain.exceptions import TransportError
from app.infrastructure.config import settings

logger = structlog.get_logger()


class CartClient:
    """HTTP client for the external cart's add-to-cart endpoint.

    The handoff is binary: it either succeeds or raises TransportError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        add_path: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize cart client.

        Args:
            base_url: Storefront base URL (defaults to settings).
            add_path: Add-to-cart endpoint path.
            timeout: Request timeout in seconds.
        """
        self.base_url = (base_url or settings.cart_url).rstrip("/")
        self.add_path = add_path or settings.cart_add_path
        self.timeout = timeout if timeout is not None else settings.cart_timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def add_line_item(
        self,
        variant_id: int | str,
        properties: dict[str, str],
        quantity: int = 1,
    ) -> dict[str, Any]:
        """Add one line item to the shopper's cart.

        Args:
            variant_id: Cart platform variant to add.
            properties: Named line item properties shown on the order.
            quantity: Number of units.

        Returns:
            The cart's response body (empty when it returned none).

        Raises:
            TransportError: If the cart rejects the item or is unreachable.
        """
        payload = {"id": variant_id, "quantity": quantity, "properties": properties}

        try:
            client = await self._get_client()
            response = await client.post(self.add_path, json=payload)
        except httpx.RequestError as e:
            logger.error("Cart request failed", variant_id=variant_id, error=str(e))
            raise TransportError(f"Cart request failed: {str(e)}") from e

        if response.status_code not in (200, 201):
            logger.warning(
                "Cart rejected line item",
                variant_id=variant_id,
                status_code=response.status_code,
            )
            raise TransportError(
                f"Failed to add item to cart: {response.text}",
                status_code=response.status_code,
            )

        logger.info(
            "Line item added to cart",
            variant_id=variant_id,
            customization_id=properties.get("Customization ID"),
        )
        if not response.content:
            return {}
        return response.json()
