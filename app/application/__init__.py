"""Application layer module.

Contains application services (use cases) that orchestrate
domain logic and infrastructure.
"""

from app.application.customization_service import (
    CustomizationRepository,
    CustomizationService,
)

__all__ = [
    "CustomizationRepository",
    "CustomizationService",
]
