"""Tests for customization API endpoints."""

from decimal import Decimal

import pytest
from httpx import AsyncClient


def _request(hoodie: dict, design_index: int = 1, total: str = "24.99") -> dict:
    """Build a create body for the hoodie in Black, size M."""
    design = hoodie["designs"][design_index]
    return {
        "garment_id": hoodie["garment"]["id"],
        "design_id": design["id"],
        "selected_color_id": hoodie["colors"][0]["id"],
        "selected_size_id": hoodie["sizes"][1]["id"],
        "total_price": total,
        "customization_data": {
            "design_name": design["name"],
            "design_thumbnail": design["thumbnail_url"],
            "color_name": "Black",
            "size_name": "M",
        },
    }


class TestRecordCustomization:
    """Tests for POST /api/customizations."""

    @pytest.mark.asyncio
    async def test_record(self, api_client: AsyncClient, hoodie: dict) -> None:
        """A priced selection is stored with a generated id."""
        response = await api_client.post("/api/customizations", json=_request(hoodie))

        assert response.status_code == 201
        data = response.json()
        assert len(data["id"]) == 36
        assert Decimal(data["total_price"]) == Decimal("24.99")
        assert data["customization_data"]["design_name"] == "Design B"
        assert data["created_at"]

    @pytest.mark.asyncio
    async def test_price_mismatch(self, api_client: AsyncClient, hoodie: dict) -> None:
        """A total that does not match base plus modifier is rejected."""
        response = await api_client.post(
            "/api/customizations", json=_request(hoodie, total="19.99")
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_FAILED"
        assert data["details"] == {"submitted": "19.99", "expected": "24.99"}

    @pytest.mark.asyncio
    async def test_unknown_design(self, api_client: AsyncClient, hoodie: dict) -> None:
        """A design that does not exist is a 404."""
        body = _request(hoodie)
        body["design_id"] = 999

        response = await api_client.post("/api/customizations", json=body)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_color_of_other_garment(self, api_client: AsyncClient, hoodie: dict) -> None:
        """A color that belongs to another garment is rejected."""
        other = (
            await api_client.post(
                "/api/garments", json={"name": "Tee", "sku": "TEE-1", "base_price": "10.00"}
            )
        ).json()
        red = (
            await api_client.post(f"/api/garments/{other['id']}/colors", json={"name": "Red"})
        ).json()
        body = _request(hoodie)
        body["selected_color_id"] = red["id"]

        response = await api_client.post("/api/customizations", json=body)

        assert response.status_code == 400
        assert response.json()["details"]["option_type"] == "color"

    @pytest.mark.asyncio
    async def test_missing_fields(self, api_client: AsyncClient) -> None:
        """Missing references are a 400 with field details."""
        response = await api_client.post("/api/customizations", json={"garment_id": 1})

        assert response.status_code == 400
        fields = {d["field"] for d in response.json()["details"]}
        assert "design_id" in fields
        assert "total_price" in fields


class TestGetCustomization:
    """Tests for GET /api/customizations/{id}."""

    @pytest.mark.asyncio
    async def test_get_joined(self, api_client: AsyncClient, hoodie: dict) -> None:
        """Detail carries the current catalog names."""
        created = (await api_client.post("/api/customizations", json=_request(hoodie))).json()

        response = await api_client.get(f"/api/customizations/{created['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["garment_name"] == "Classic Hoodie"
        assert data["garment_sku"] == "HOOD-001"
        assert Decimal(data["base_price"]) == Decimal("19.99")
        assert data["design_name"] == "Design B"
        assert data["thumbnail_url"] == "https://img.example.com/b-thumb.png"
        assert data["color_name"] == "Black"
        assert data["size_label"] == "M"

    @pytest.mark.asyncio
    async def test_snapshot_survives_catalog_changes(
        self, api_client: AsyncClient, hoodie: dict
    ) -> None:
        """Catalog edits and deletes never alter the stored customization."""
        created = (await api_client.post("/api/customizations", json=_request(hoodie))).json()
        design = hoodie["designs"][1]
        garment = hoodie["garment"]

        await api_client.put(
            f"/api/garments/{garment['id']}",
            json={"name": "Renamed Hoodie", "sku": "HOOD-001", "base_price": "99.00"},
        )
        await api_client.delete(f"/api/designs/{design['id']}")

        data = (await api_client.get(f"/api/customizations/{created['id']}")).json()

        assert Decimal(data["total_price"]) == Decimal("24.99")
        assert data["design_id"] == design["id"]
        assert data["customization_data"]["design_name"] == "Design B"
        assert data["design_name"] is None
        assert data["thumbnail_url"] is None
        assert data["garment_name"] == "Renamed Hoodie"

    @pytest.mark.asyncio
    async def test_get_missing(self, api_client: AsyncClient) -> None:
        """Unknown customization id is a 404."""
        response = await api_client.get("/api/customizations/does-not-exist")

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"
