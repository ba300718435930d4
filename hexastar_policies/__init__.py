"""
hexastar policies - Centralized policy definitions for hexagon pathfinding.

This package provides the policy dataclasses used by the search engine.
All policies are JSON-serializable and support the "requested vs effective"
pattern through OperationReport.

Usage:
    from hexastar_policies import SearchPolicy, OperationReport
"""

from .base import (
    OperationReport,
    alias_fields,
)

from .pathfinding import (
    SearchPolicy,
)

__all__ = [
    # Base
    "OperationReport",
    "alias_fields",
    # Search policies
    "SearchPolicy",
]
