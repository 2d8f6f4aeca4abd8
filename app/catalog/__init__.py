"""Garment Catalog Service.

Provides the persistent catalog of garments, their colors and sizes,
decorative designs, and the associations between garments and designs.
"""

from app.catalog.models import Color, Design, Garment, GarmentDesign, Size
from app.catalog.repository import DesignRepository, GarmentRepository
from app.catalog.service import CatalogService

__all__ = [
    # Models
    "Color",
    "Design",
    "Garment",
    "GarmentDesign",
    "Size",
    # Repository
    "DesignRepository",
    "GarmentRepository",
    # Service
    "CatalogService",
]
