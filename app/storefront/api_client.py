"""Catalog API Client.

Thin HTTP client the storefront customizer uses to reach the Catalog
Service. Error responses are raised as the matching domain errors so
callers handle remote and local failures the same way.
"""

from typing import Any

import httpx
import structlog

from app.domain.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from app.domain.value_objects import CustomizationDraft, DesignOption, GarmentSnapshot
from app.infrastructure.config import settings

logger = structlog.get_logger()


class CatalogAPIClient:
    """HTTP client for the Catalog Service REST API.

    Example usage:
        client = CatalogAPIClient()
        try:
            garment = await client.get_garment(1)
        finally:
            await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        currency: str | None = None,
        request_id: str | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Catalog API base URL (defaults to settings).
            timeout: Request timeout in seconds.
            currency: Currency attached to parsed prices.
            request_id: Optional request ID for correlation.
        """
        self.base_url = (base_url or settings.catalog_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.catalog_api_timeout
        self.currency = currency or settings.currency
        self.request_id = request_id
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
            if self.request_id:
                headers["X-Request-ID"] = self.request_id
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogAPIClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Context manager exit."""
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an API request.

        Args:
            method: HTTP method.
            path: API endpoint path.
            json: Request body as JSON.

        Returns:
            Decoded JSON response body.

        Raises:
            NotFoundError: On 404.
            ConflictError: On 409.
            ValidationError: On 400 or 422.
            TransportError: On any other failure, timeout or network error.
        """
        client = await self._get_client()

        try:
            logger.debug(
                "Making catalog API request",
                method=method,
                path=path,
                has_body=json is not None,
            )
            response = await client.request(method=method, url=path, json=json)
        except httpx.TimeoutException as e:
            logger.error("Catalog API request timeout", path=path, error=str(e))
            raise TransportError(f"Request timed out: {path}", status_code=504) from e
        except httpx.RequestError as e:
            logger.error("Catalog API request failed", path=path, error=str(e))
            raise TransportError(f"Request failed: {str(e)}") from e

        if response.status_code >= 400:
            raise _error_from_response(response)

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "Catalog API returned invalid body",
                path=path,
                status_code=response.status_code,
            )
            raise TransportError(
                "Invalid response body",
                status_code=response.status_code,
                details={"path": path},
            ) from e

    # =========================================================================
    # Catalog Endpoints
    # =========================================================================

    async def get_garment(self, garment_id: int) -> GarmentSnapshot:
        """Fetch one garment with its designs, colors and sizes.

        Args:
            garment_id: Garment identifier.

        Returns:
            Snapshot of the garment; inactive designs are dropped.
        """
        data = await self._request("GET", f"/garments/{garment_id}")
        try:
            return GarmentSnapshot.from_payload(data, self.currency)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("Malformed garment payload", garment_id=garment_id, error=str(e))
            raise TransportError(
                f"Malformed garment response: {garment_id}",
                details={"garment_id": garment_id},
            ) from e

    async def list_designs(self) -> list[DesignOption]:
        """List the active design library."""
        data = await self._request("GET", "/designs")
        try:
            return [DesignOption.from_payload(d, self.currency) for d in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("Malformed design list payload", error=str(e))
            raise TransportError("Malformed design list response") from e

    async def create_customization(self, draft: CustomizationDraft) -> dict[str, Any]:
        """Record a finalized selection.

        Args:
            draft: References, total price and descriptive snapshot.

        Returns:
            The stored customization, including its generated ``id``.
        """
        data = await self._request("POST", "/customizations", json=draft.to_request())
        if not isinstance(data, dict):
            logger.error("Malformed customization payload", garment_id=draft.garment_id)
            raise TransportError("Customization response was not an object")
        logger.info(
            "Customization created",
            customization_id=data.get("id"),
            garment_id=draft.garment_id,
        )
        return data


def _error_from_response(response: httpx.Response) -> DomainError:
    """Map an error response to the matching domain error."""
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    message = body.get("message") or response.text or f"HTTP {response.status_code}"
    details = body.get("details")
    details = details if isinstance(details, dict) else {"errors": details or []}

    status_code = response.status_code
    if status_code == 404:
        return NotFoundError(
            details.get("entity_type", "Resource"),
            details.get("entity_id", ""),
            message=message,
        )
    if status_code == 409:
        return ConflictError(message, details=details)
    if status_code in (400, 422):
        return ValidationError(message, details=details)
    return TransportError(message, status_code=status_code, details=details)

