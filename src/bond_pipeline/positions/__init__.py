"""Position keeping module."""

from bond_pipeline.positions.service import PositionService

__all__ = ["PositionService"]
