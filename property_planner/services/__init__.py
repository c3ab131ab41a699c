"""Services coordinating the projection models."""

from .projection_service import ProjectionService, ScenarioSummary

__all__ = ["ProjectionService", "ScenarioSummary"]
