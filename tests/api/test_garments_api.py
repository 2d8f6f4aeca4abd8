"""Tests for garment, color and size API endpoints."""

from decimal import Decimal

import pytest
from httpx import AsyncClient


class TestGarmentCrud:
    """Tests for /api/garments."""

    @pytest.mark.asyncio
    async def test_create_garment(self, api_client: AsyncClient) -> None:
        """Creating a garment returns it with empty option lists."""
        response = await api_client.post(
            "/api/garments",
            json={"name": "Tee", "sku": "TEE-1", "base_price": "12.50", "description": "Soft"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["sku"] == "TEE-1"
        assert Decimal(data["base_price"]) == Decimal("12.50")
        assert data["colors"] == []
        assert data["sizes"] == []
        assert data["designs"] == []

    @pytest.mark.asyncio
    async def test_create_missing_fields(self, api_client: AsyncClient) -> None:
        """Missing required fields are a 400 with per-field details."""
        response = await api_client.post("/api/garments", json={"name": "Tee"})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_FAILED"
        fields = {d["field"] for d in data["details"]}
        assert {"sku", "base_price"} <= fields

    @pytest.mark.asyncio
    async def test_create_blank_name_rejected(self, api_client: AsyncClient) -> None:
        """Blank strings count as missing."""
        response = await api_client.post(
            "/api/garments", json={"name": " ", "sku": "TEE-1", "base_price": "1.00"}
        )
        assert response.status_code == 400
        assert response.json()["details"]["missing_fields"] == ["name"]

    @pytest.mark.asyncio
    async def test_negative_price_rejected(self, api_client: AsyncClient) -> None:
        """Negative base price is rejected."""
        response = await api_client.post(
            "/api/garments", json={"name": "Tee", "sku": "TEE-1", "base_price": "-1.00"}
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_duplicate_sku(self, api_client: AsyncClient, hoodie: dict) -> None:
        """A duplicate SKU is a 409 conflict."""
        response = await api_client.post(
            "/api/garments",
            json={"name": "Another", "sku": "HOOD-001", "base_price": "5.00"},
        )
        assert response.status_code == 409
        assert response.json()["error_code"] == "CONFLICT"

    @pytest.mark.asyncio
    async def test_get_enriched_garment(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Garment detail includes colors, sizes and ordered designs."""
        response = await api_client.get(f"/api/garments/{hoodie['garment']['id']}")

        assert response.status_code == 200
        data = response.json()
        assert [c["name"] for c in data["colors"]] == ["Black", "Navy"]
        assert [s["size"] for s in data["sizes"]] == ["S", "M"]
        assert [d["name"] for d in data["designs"]] == ["Design A", "Design B"]
        assert [d["display_order"] for d in data["designs"]] == [1, 2]
        assert Decimal(data["designs"][1]["price_modifier"]) == Decimal("5.00")

    @pytest.mark.asyncio
    async def test_get_missing_garment(self, api_client: AsyncClient) -> None:
        """Unknown garment is a 404 in the error format."""
        response = await api_client.get("/api/garments/999")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "NOT_FOUND"
        assert data["message"] == "Garment not found: 999"
        assert "request_id" in data

    @pytest.mark.asyncio
    async def test_list_garments(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Listing returns garments with their options."""
        response = await api_client.get("/api/garments")

        assert response.status_code == 200
        garments = response.json()
        assert len(garments) == 1
        assert len(garments[0]["colors"]) == 2

    @pytest.mark.asyncio
    async def test_update_garment(self, api_client: AsyncClient, hoodie: dict) -> None:
        """PUT replaces the garment fields."""
        garment_id = hoodie["garment"]["id"]
        response = await api_client.put(
            f"/api/garments/{garment_id}",
            json={"name": "Heavy Hoodie", "sku": "HOOD-001", "base_price": "24.00"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Heavy Hoodie"
        assert Decimal(data["base_price"]) == Decimal("24.00")
        assert len(data["designs"]) == 2

    @pytest.mark.asyncio
    async def test_update_missing_garment(self, api_client: AsyncClient) -> None:
        """PUT on an unknown garment is a 404."""
        response = await api_client.put(
            "/api/garments/999", json={"name": "X", "sku": "X", "base_price": "1.00"}
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_garment(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Deleting a garment removes it and its options."""
        garment_id = hoodie["garment"]["id"]
        color_id = hoodie["colors"][0]["id"]

        response = await api_client.delete(f"/api/garments/{garment_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Garment deleted successfully"}
        assert (await api_client.get(f"/api/garments/{garment_id}")).status_code == 404
        assert (await api_client.get(f"/api/colors/{color_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_garment(self, api_client: AsyncClient) -> None:
        """Deleting an unknown garment is a 404."""
        response = await api_client.delete("/api/garments/999")
        assert response.status_code == 404


class TestOptionsApi:
    """Tests for colors and sizes."""

    @pytest.mark.asyncio
    async def test_add_color_to_missing_garment(self, api_client: AsyncClient) -> None:
        """Adding a color to an unknown garment is a 404."""
        response = await api_client.post("/api/garments/999/colors", json={"name": "Red"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_hex_code(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Swatch must be a #RRGGBB value."""
        response = await api_client.post(
            f"/api/garments/{hoodie['garment']['id']}/colors",
            json={"name": "Red", "hex_code": "red"},
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_and_delete_color(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Colors can be replaced and deleted by id."""
        color_id = hoodie["colors"][1]["id"]

        response = await api_client.put(
            f"/api/colors/{color_id}", json={"name": "Midnight", "hex_code": "#101030"}
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Midnight"

        response = await api_client.delete(f"/api/colors/{color_id}")
        assert response.json() == {"message": "Color deleted successfully"}
        assert (await api_client.get(f"/api/colors/{color_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_update_and_delete_size(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Sizes can be replaced and deleted by id."""
        size_id = hoodie["sizes"][0]["id"]

        response = await api_client.put(f"/api/sizes/{size_id}", json={"size": "XS"})
        assert response.status_code == 200
        assert response.json()["size"] == "XS"

        response = await api_client.delete(f"/api/sizes/{size_id}")
        assert response.json() == {"message": "Size deleted successfully"}
        assert (await api_client.delete(f"/api/sizes/{size_id}")).status_code == 404


class TestDesignAssociationApi:
    """Tests for attaching and detaching designs."""

    @pytest.mark.asyncio
    async def test_attach_twice_conflicts(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Attaching an already attached design is a 409."""
        garment_id = hoodie["garment"]["id"]
        design_id = hoodie["designs"][0]["id"]

        response = await api_client.post(f"/api/garments/{garment_id}/designs/{design_id}")

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_attach_without_body(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Display order is optional."""
        design = (
            await api_client.post(
                "/api/designs", json={"name": "C", "image_url": "https://img.example.com/c.png"}
            )
        ).json()

        response = await api_client.post(
            f"/api/garments/{hoodie['garment']['id']}/designs/{design['id']}"
        )

        assert response.status_code == 201
        assert response.json()["display_order"] is None

    @pytest.mark.asyncio
    async def test_detach(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Detaching removes the design from the garment only."""
        garment_id = hoodie["garment"]["id"]
        design_id = hoodie["designs"][0]["id"]

        response = await api_client.delete(f"/api/garments/{garment_id}/designs/{design_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Design removed from garment successfully"}
        garment = (await api_client.get(f"/api/garments/{garment_id}")).json()
        assert [d["name"] for d in garment["designs"]] == ["Design B"]
        assert (await api_client.get(f"/api/designs/{design_id}")).status_code == 200

    @pytest.mark.asyncio
    async def test_detach_unattached(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Detaching a design that is not attached is a 404."""
        response = await api_client.delete(
            f"/api/garments/{hoodie['garment']['id']}/designs/999"
        )
        assert response.status_code == 404
