"""
Search policies for hexagonal A* pathfinding.

This module contains the policy dataclass that configures search limits
and scoring for the generic hexagon A* engine.

All policies are JSON-serializable and support from_dict/to_dict methods.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import alias_fields


# Legacy field names accepted by from_dict
_SEARCH_POLICY_ALIASES = {
    "max_nodes": "max_expansions",
    "start_half_cost": "count_start_half_cost",
}


@dataclass
class SearchPolicy:
    """
    Policy for hexagon A* search configuration.
    
    Controls search limits and the scoring conventions of the engine.
    The defaults reproduce the plain algorithm: no limits, an unscaled
    hop-count heuristic and a start node that costs nothing to stand on.
    
    A ``heuristic_weight`` above 1.0 trades optimality for speed; the
    returned path is then no longer guaranteed to be the cheapest.
    
    JSON Schema:
    {
        "max_expansions": int | null,
        "timeout_s": float | null,
        "heuristic_weight": float,
        "count_start_half_cost": bool
    }
    """
    max_expansions: Optional[int] = None
    timeout_s: Optional[float] = None
    heuristic_weight: float = 1.0
    count_start_half_cost: bool = False
    
    def validate(self) -> List[str]:
        """
        Check the policy for illegal values.
        
        Returns
        -------
        List[str]
            Validation error messages (empty if valid)
        """
        errors = []
        if self.max_expansions is not None and self.max_expansions < 1:
            errors.append(f"max_expansions must be >= 1, got {self.max_expansions}")
        if self.timeout_s is not None and self.timeout_s <= 0:
            errors.append(f"timeout_s must be > 0, got {self.timeout_s}")
        if self.heuristic_weight < 0:
            errors.append(f"heuristic_weight must be >= 0, got {self.heuristic_weight}")
        return errors
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_expansions": self.max_expansions,
            "timeout_s": self.timeout_s,
            "heuristic_weight": self.heuristic_weight,
            "count_start_half_cost": self.count_start_half_cost,
        }
    
    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SearchPolicy":
        d = alias_fields(d, _SEARCH_POLICY_ALIASES)
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


__all__ = [
    "SearchPolicy",
]
