"""Storefront customizer.

Client-side session driver: talks to the Catalog Service and the
external cart, and keeps the shopper's choice in a SelectionEngine.
"""

from app.storefront.api_client import CatalogAPIClient
from app.storefront.cart_client import CartClient
from app.storefront.customizer import AddToCartResult, GarmentCustomizer

__all__ = [
    "AddToCartResult",
    "CartClient",
    "CatalogAPIClient",
    "GarmentCustomizer",
]
