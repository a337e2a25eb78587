"""Water Retention Domain Layer.

This package contains the core business logic organized by bounded contexts:
- hydrology: Landscapes, regions, retained water volume
"""

from domain import hydrology

__all__ = ["hydrology"]
