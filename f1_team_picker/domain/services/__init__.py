"""Domain services for business logic."""

from .optimization_service import OptimizationService

__all__ = ["OptimizationService"]
