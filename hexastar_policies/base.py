"""
Base utilities for hexastar policies.

This module provides shared helpers and the OperationReport dataclass
used by policy-driven search operations.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List
import json


def alias_fields(d: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    """
    Apply field aliases to a dictionary.
    
    This allows legacy field names to be mapped to canonical names.
    
    Parameters
    ----------
    d : dict
        Input dictionary
    aliases : dict
        Mapping of legacy_name -> canonical_name
        
    Returns
    -------
    dict
        Dictionary with aliases applied
    """
    result = d.copy()
    for legacy_name, canonical_name in aliases.items():
        if legacy_name in result and canonical_name not in result:
            result[canonical_name] = result.pop(legacy_name)
    return result


@dataclass
class OperationReport:
    """
    Standard report structure for search operations.
    
    Every report carries the requested vs effective policy, warnings,
    errors and operation-specific metadata.
    
    The "requested vs effective" pattern allows tracking of runtime
    adjustments (e.g. a heuristic weight clamped to a legal value).
    """
    operation: str = "unknown"
    success: bool = True
    requested_policy: Dict[str, Any] = field(default_factory=dict)
    effective_policy: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
    
    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
    
    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)


__all__ = [
    "OperationReport",
    "alias_fields",
]
