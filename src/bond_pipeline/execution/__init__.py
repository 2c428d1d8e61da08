"""Execution module.

Spread-crossing execution algorithm and the execution order store.
"""

from bond_pipeline.execution.algo import DEFAULT_SPREAD_THRESHOLD, AlgoExecutionService
from bond_pipeline.execution.service import ExecutionService

__all__ = [
    "DEFAULT_SPREAD_THRESHOLD",
    "AlgoExecutionService",
    "ExecutionService",
]
