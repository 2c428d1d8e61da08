"""Risk aggregation module."""

from bond_pipeline.risk.service import RiskService

__all__ = ["RiskService"]
