"""Tests for the cart platform client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from app.domain.exceptions import TransportError
from app.storefront.cart_client import CartClient

PROPERTIES = {
    "Customization ID": "cust-1",
    "Design": "Design B",
    "Design Thumbnail": "https://img.example.com/b-thumb.png",
    "Color": "Black",
    "Size": "M",
}


class TestCartClient:
    """Tests for CartClient.add_line_item."""

    @pytest.fixture
    def client(self) -> CartClient:
        """Create a test client."""
        return CartClient(base_url="http://shop.test", add_path="/cart/add.js")

    @pytest.mark.asyncio
    async def test_add_line_item(self, client: CartClient) -> None:
        """Line item is posted with id, quantity and properties."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(
                return_value=httpx.Response(200, json={"id": 123, "quantity": 1})
            )
            mock_get_client.return_value = mock_http_client

            result = await client.add_line_item(123, PROPERTIES)

            mock_http_client.post.assert_awaited_once_with(
                "/cart/add.js",
                json={"id": 123, "quantity": 1, "properties": PROPERTIES},
            )
            assert result == {"id": 123, "quantity": 1}

    @pytest.mark.asyncio
    async def test_empty_response_body(self, client: CartClient) -> None:
        """A success without a body returns an empty dict."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(return_value=httpx.Response(201))
            mock_get_client.return_value = mock_http_client

            assert await client.add_line_item(123, PROPERTIES) == {}

    @pytest.mark.asyncio
    async def test_rejected_line_item(self, client: CartClient) -> None:
        """A non-success status raises TransportError with the status."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(
                return_value=httpx.Response(422, text="Variant sold out")
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError) as exc_info:
                await client.add_line_item(123, PROPERTIES)

            assert exc_info.value.status_code == 422
            assert "Variant sold out" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_network_error(self, client: CartClient) -> None:
        """An unreachable cart raises TransportError."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(side_effect=httpx.ConnectError("refused"))
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError):
                await client.add_line_item(123, PROPERTIES)
