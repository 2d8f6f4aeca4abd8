"""Tests for the Catalog API client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from app.domain import CustomizationDetails, CustomizationDraft, Money
from app.domain.exceptions import (
    ConflictError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from app.storefront.api_client import CatalogAPIClient


class TestCatalogAPIClient:
    """Tests for CatalogAPIClient."""

    @pytest.fixture
    def client(self) -> CatalogAPIClient:
        """Create a test client."""
        return CatalogAPIClient(base_url="http://catalog.test/api/", currency="USD")

    @pytest.mark.asyncio
    async def test_client_initialization(self, client: CatalogAPIClient) -> None:
        """Trailing slash is stripped and no HTTP client is opened yet."""
        assert client.base_url == "http://catalog.test/api"
        assert client._client is None

    @pytest.mark.asyncio
    async def test_get_garment(self, client: CatalogAPIClient, hoodie_payload: dict) -> None:
        """Garment payload is parsed into a snapshot."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                return_value=httpx.Response(200, json=hoodie_payload)
            )
            mock_get_client.return_value = mock_http_client

            garment = await client.get_garment(1)

            mock_http_client.request.assert_awaited_once_with(
                method="GET", url="/garments/1", json=None
            )
            assert garment.base_price.amount_str == "19.99"
            assert [d.name for d in garment.designs] == ["Design A", "Design B"]

    @pytest.mark.asyncio
    async def test_get_garment_not_found(self, client: CatalogAPIClient) -> None:
        """404 becomes NotFoundError with the server's message."""
        body = {
            "error_code": "NOT_FOUND",
            "message": "Garment not found: 7",
            "details": {"entity_type": "Garment", "entity_id": "7"},
            "request_id": None,
        }
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(return_value=httpx.Response(404, json=body))
            mock_get_client.return_value = mock_http_client

            with pytest.raises(NotFoundError) as exc_info:
                await client.get_garment(7)

            assert exc_info.value.message == "Garment not found: 7"
            assert exc_info.value.details["entity_type"] == "Garment"

    @pytest.mark.asyncio
    async def test_list_designs(self, client: CatalogAPIClient) -> None:
        """Design library is parsed into options."""
        designs = [
            {"id": 1, "name": "A", "image_url": "https://img/a.png", "price_modifier": "2.50"}
        ]
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(return_value=httpx.Response(200, json=designs))
            mock_get_client.return_value = mock_http_client

            result = await client.list_designs()

            assert result[0].price_modifier == Money.of("2.50")

    @pytest.mark.asyncio
    async def test_create_customization(self, client: CatalogAPIClient) -> None:
        """Draft is posted as the customization body."""
        draft = CustomizationDraft(
            garment_id=2,
            design_id=60,
            color_id=40,
            size_id=50,
            total_price=Money.of("16.50"),
            details=CustomizationDetails(
                design_name="Discount Design",
                design_thumbnail="https://img.example.com/d.png",
                color_name="White",
                size_name="L",
            ),
        )
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                return_value=httpx.Response(201, json={"id": "cust-1", "total_price": "16.50"})
            )
            mock_get_client.return_value = mock_http_client

            result = await client.create_customization(draft)

            assert result["id"] == "cust-1"
            sent = mock_http_client.request.call_args.kwargs
            assert sent["method"] == "POST"
            assert sent["url"] == "/customizations"
            assert sent["json"]["total_price"] == "16.50"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status_code", "error_type"),
        [(400, ValidationError), (409, ConflictError), (500, TransportError)],
    )
    async def test_error_status_mapping(
        self, client: CatalogAPIClient, status_code: int, error_type: type
    ) -> None:
        """Error statuses map to the matching domain error."""
        body = {"error_code": "X", "message": "Nope", "details": []}
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                return_value=httpx.Response(status_code, json=body)
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(error_type) as exc_info:
                await client.list_designs()

            assert exc_info.value.message == "Nope"

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, client: CatalogAPIClient) -> None:
        """Gateway pages without JSON still produce a TransportError."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                return_value=httpx.Response(502, text="Bad Gateway")
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError) as exc_info:
                await client.get_garment(1)

            assert exc_info.value.status_code == 502
            assert exc_info.value.message == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_non_json_success_body(self, client: CatalogAPIClient) -> None:
        """A 200 that is not JSON becomes a TransportError."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                return_value=httpx.Response(200, text="<html>maintenance</html>")
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError) as exc_info:
                await client.get_garment(1)

            assert exc_info.value.message == "Invalid response body"
            assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"id": 1, "name": "Hoodie", "base_price": "1.00", "colors": [{"id": 1}]},
            {"id": 1, "name": "Hoodie", "base_price": "1.00", "sizes": [{"id": "x"}]},
            [{"id": 1}],
        ],
    )
    async def test_malformed_garment_payload(
        self, client: CatalogAPIClient, payload: object
    ) -> None:
        """A garment body with the wrong shape becomes a TransportError."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                return_value=httpx.Response(200, json=payload)
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError) as exc_info:
                await client.get_garment(1)

            assert exc_info.value.details == {"garment_id": 1}

    @pytest.mark.asyncio
    async def test_malformed_design_list(self, client: CatalogAPIClient) -> None:
        """A design list entry without a name becomes a TransportError."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                return_value=httpx.Response(200, json=[{"id": 1, "image_url": "a.png"}])
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError):
                await client.list_designs()

    @pytest.mark.asyncio
    async def test_customization_body_not_an_object(self, client: CatalogAPIClient) -> None:
        """A customization response that is not an object becomes a TransportError."""
        draft = CustomizationDraft(
            garment_id=1,
            design_id=31,
            color_id=10,
            size_id=21,
            total_price=Money.of("24.99"),
            details=CustomizationDetails(
                design_name="Design B",
                design_thumbnail="https://img.example.com/b-thumb.png",
                color_name="Black",
                size_name="M",
            ),
        )
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                return_value=httpx.Response(201, json=["cust-1"])
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError):
                await client.create_customization(draft)

    @pytest.mark.asyncio
    async def test_request_timeout(self, client: CatalogAPIClient) -> None:
        """Timeouts become a 504 TransportError."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                side_effect=httpx.TimeoutException("Connection timeout")
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError) as exc_info:
                await client.get_garment(1)

            assert exc_info.value.status_code == 504

    @pytest.mark.asyncio
    async def test_request_error(self, client: CatalogAPIClient) -> None:
        """Network errors become a TransportError."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request = AsyncMock(
                side_effect=httpx.RequestError("Connection failed")
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError):
                await client.get_garment(1)

    @pytest.mark.asyncio
    async def test_close_without_client(self, client: CatalogAPIClient) -> None:
        """Closing before any request is a no-op."""
        await client.close()
        assert client._client is None
