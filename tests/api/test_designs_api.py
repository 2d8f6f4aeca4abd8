"""Tests for design API endpoints."""

from decimal import Decimal

import pytest
from httpx import AsyncClient


class TestDesignsApi:
    """Tests for /api/designs."""

    @pytest.mark.asyncio
    async def test_create_design_defaults(self, api_client: AsyncClient) -> None:
        """Thumbnail defaults to the image and modifier to zero."""
        response = await api_client.post(
            "/api/designs",
            json={"name": "Wave", "image_url": "https://img.example.com/wave.png"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["thumbnail_url"] == "https://img.example.com/wave.png"
        assert Decimal(data["price_modifier"]) == Decimal("0")
        assert data["is_active"] is True

    @pytest.mark.asyncio
    async def test_negative_modifier_allowed(self, api_client: AsyncClient) -> None:
        """Designs may carry a discount."""
        response = await api_client.post(
            "/api/designs",
            json={
                "name": "Minimal",
                "image_url": "https://img.example.com/m.png",
                "price_modifier": "-3.50",
            },
        )

        assert response.status_code == 201
        assert Decimal(response.json()["price_modifier"]) == Decimal("-3.50")

    @pytest.mark.asyncio
    async def test_create_requires_image(self, api_client: AsyncClient) -> None:
        """image_url is required."""
        response = await api_client.post("/api/designs", json={"name": "Wave"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_FAILED"

    @pytest.mark.asyncio
    async def test_list_only_active(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Deactivated designs drop out of the list."""
        design = hoodie["designs"][0]
        response = await api_client.put(
            f"/api/designs/{design['id']}",
            json={"name": design["name"], "image_url": design["image_url"], "is_active": False},
        )
        assert response.status_code == 200
        assert response.json()["is_active"] is False

        listed = (await api_client.get("/api/designs")).json()

        assert [d["name"] for d in listed] == ["Design B"]

    @pytest.mark.asyncio
    async def test_get_missing_design(self, api_client: AsyncClient) -> None:
        """Unknown design is a 404."""
        response = await api_client.get("/api/designs/999")

        assert response.status_code == 404
        assert response.json()["message"] == "Design not found: 999"

    @pytest.mark.asyncio
    async def test_delete_design_detaches(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Deleting a design removes it from garments too."""
        design_id = hoodie["designs"][1]["id"]

        response = await api_client.delete(f"/api/designs/{design_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Design deleted successfully"}
        garment = (await api_client.get(f"/api/garments/{hoodie['garment']['id']}")).json()
        assert [d["name"] for d in garment["designs"]] == ["Design A"]
        assert (await api_client.delete(f"/api/designs/{design_id}")).status_code == 404
