"""
Generic A* pathfinding over weighted hexagon grids.

This module holds the one search engine shared by every coordinate system.
It finds the cheapest route between two cells, moving from the centre of one
hexagon to the centre of the next across a shared edge.

COST CONVENTIONS
----------------
Every cell carries a complexity: the cost of crossing it. Stepping from a
cell to its neighbour costs half the complexity of each, i.e. the walk from
the first centre to the shared edge plus the walk from that edge to the
second centre. The heuristic is the hop count to the goal, which never
overestimates while every complexity is at least 1.

Cells missing from the cost map are impassable.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple
import heapq
import itertools
import logging
import time

import numpy as np

from hexastar_policies import OperationReport, SearchPolicy

from ...core.errors import (
    InvalidCostError,
    MissingNodeError,
    OutOfBoundsError,
    SearchLimitError,
    UnreachableError,
)
from ...core.types import Coordinate, CostMap
from ...geometry.cubic import cubic_distances
from ...spatial.systems import HexCoordinateSystem

logger = logging.getLogger(__name__)


@dataclass
class PathfindingResult:
    """Result of a successful hexagon search."""
    path: List[Coordinate]
    cost: float = 0.0
    nodes_explored: int = 0
    time_elapsed: float = 0.0
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": [list(n) if isinstance(n, tuple) else n for n in self.path],
            "cost": self.cost,
            "nodes_explored": self.nodes_explored,
            "time_elapsed": self.time_elapsed,
            "warnings": self.warnings,
            "metadata": self.metadata,
        }

    def to_report(
        self,
        requested_policy: Optional[SearchPolicy] = None,
        effective_policy: Optional[SearchPolicy] = None,
    ) -> OperationReport:
        """Wrap this result in an OperationReport."""
        requested_policy = requested_policy or SearchPolicy()
        effective_policy = effective_policy or requested_policy
        report = OperationReport(
            operation="find_path",
            success=True,
            requested_policy=requested_policy.to_dict(),
            effective_policy=effective_policy.to_dict(),
            metadata={
                **self.metadata,
                "path_length": len(self.path),
                "cost": self.cost,
                "nodes_explored": self.nodes_explored,
                "time_elapsed": self.time_elapsed,
            },
        )
        for warning in self.warnings:
            report.add_warning(warning)
        return report


class _FrontierEntry:
    """Pending route to a node: ``(node, f, g, path-so-far)``."""

    __slots__ = ['node', 'f', 'g', 'path', 'seq', 'superseded']

    def __init__(
        self,
        node: Coordinate,
        f: float,
        g: float,
        path: Tuple[Coordinate, ...],
        seq: int,
    ):
        self.node = node
        self.f = f
        self.g = g
        self.path = path
        self.seq = seq
        self.superseded = False


def find_path(
    system: HexCoordinateSystem,
    start: Coordinate,
    goal: Coordinate,
    costs: CostMap,
    policy: Optional[SearchPolicy] = None,
) -> PathfindingResult:
    """
    Find the cheapest path from start to goal using A*.

    Parameters
    ----------
    system : HexCoordinateSystem
        Addressing scheme and search bound of the grid
    start : coordinate
        Start node, must be a key of ``costs`` and inside the bound
    goal : coordinate
        Goal node, must be a key of ``costs`` and inside the bound
    costs : mapping
        Complexity of every traversable node; read-only during the search
    policy : SearchPolicy, optional
        Search limits and scoring options

    Returns
    -------
    PathfindingResult
        Path from start to goal inclusive, its cost and search statistics

    Raises
    ------
    MissingNodeError
        If start or goal is absent from ``costs``
    OutOfBoundsError
        If start or goal lies outside the bound of ``system``
    InvalidCostError
        If any complexity is negative or not finite
    UnreachableError
        If no path joins start and goal
    SearchLimitError
        If the policy's expansion or time budget runs out
    """
    if policy is None:
        policy = SearchPolicy()
    policy_errors = policy.validate()
    if policy_errors:
        raise ValueError(f"Invalid SearchPolicy: {'; '.join(policy_errors)}")

    start_time = time.time()

    start, goal = _check_endpoints(system, start, goal, costs)
    heuristics = _node_weights(system, costs, goal, policy.heuristic_weight)

    logger.debug(
        f"A* {system.name} search from {start!r} to {goal!r} "
        f"over {len(heuristics)} nodes"
    )

    path, cost, nodes_explored = _astar_search(
        system=system,
        start=start,
        goal=goal,
        costs=costs,
        heuristics=heuristics,
        policy=policy,
        start_time=start_time,
    )

    time_elapsed = time.time() - start_time
    logger.debug(
        f"A* found path of {len(path)} nodes, cost {cost:g}, "
        f"{nodes_explored} nodes explored"
    )

    warnings = []
    if policy.heuristic_weight > 1.0:
        warnings.append(
            f"heuristic_weight {policy.heuristic_weight} > 1; path may not be optimal"
        )

    return PathfindingResult(
        path=path,
        cost=cost,
        nodes_explored=nodes_explored,
        time_elapsed=time_elapsed,
        warnings=warnings,
        metadata=system.to_dict(),
    )


def path_cost(
    path: List[Coordinate],
    costs: CostMap,
    count_start_half_cost: bool = False,
) -> float:
    """
    Total cost of walking ``path`` under the half-cost convention.

    Each step between neighbours costs half of each cell's complexity. With
    ``count_start_half_cost`` the walk out of the start cell's centre is
    charged as well.
    """
    for node in path:
        if node not in costs:
            raise MissingNodeError("path", node)
    if not path:
        return 0.0
    total = 0.5 * costs[path[0]] if count_start_half_cost else 0.0
    for a, b in zip(path, path[1:]):
        total += 0.5 * costs[a] + 0.5 * costs[b]
    return total


def _check_endpoints(
    system: HexCoordinateSystem,
    start: Coordinate,
    goal: Coordinate,
    costs: CostMap,
) -> Tuple[Coordinate, Coordinate]:
    """
    Ensure the cost map holds both endpoints and both sit inside the bound.

    Returns the endpoints in the normalised form produced by
    ``system.validate``.
    """
    if start not in costs:
        raise MissingNodeError("start", start)
    if goal not in costs:
        raise MissingNodeError("goal", goal)
    endpoints = []
    for role, node in (("start", start), ("goal", goal)):
        normalised = system.validate(node)
        if not system.contains(normalised):
            raise OutOfBoundsError(role, node, system.bound)
        endpoints.append(normalised)
    return endpoints[0], endpoints[1]


def _node_weights(
    system: HexCoordinateSystem,
    costs: CostMap,
    goal: Coordinate,
    heuristic_weight: float,
) -> Dict[Coordinate, float]:
    """
    Heuristic weight of every node: its hop count to the goal.

    The hop count is the ring the node sits on when the goal is taken as the
    centre. All nodes are converted and measured in one vectorised pass.
    """
    nodes = list(costs.keys())
    values = np.fromiter((costs[n] for n in nodes), dtype=float, count=len(nodes))
    bad = np.flatnonzero(~np.isfinite(values) | (values < 0))
    if bad.size:
        i = int(bad[0])
        raise InvalidCostError(nodes[i], costs[nodes[i]])

    hops = cubic_distances(system.to_cubic_array(nodes), system.to_cubic(goal))
    weights = hops.astype(float) * heuristic_weight
    return dict(zip(nodes, weights.tolist()))


def _astar_search(
    system: HexCoordinateSystem,
    start: Coordinate,
    goal: Coordinate,
    costs: CostMap,
    heuristics: Dict[Coordinate, float],
    policy: SearchPolicy,
    start_time: float,
) -> Tuple[List[Coordinate], float, int]:
    """
    Run A* over the hexagon grid.

    The frontier is a binary heap ordered by ``(f, seq)`` where ``seq`` is the
    order in which a node's route entered the frontier, so equal scores pop
    in discovery order. ``pending`` indexes the live entry of every node still
    on the frontier; a better or equal route replaces that entry in place,
    keeping its ``seq``, and the stale heap item is skipped when popped.
    Among equal-cost routes this may pick a different one than a linear-scan
    frontier that swap-removes its head and re-sorts.

    Returns (path, cost, nodes_explored).
    """
    start_g = 0.5 * costs[start] if policy.count_start_half_cost else 0.0
    seqs = itertools.count()
    pushes = itertools.count()

    root = _FrontierEntry(start, start_g + heuristics[start], start_g, (), next(seqs))
    open_set: List[Tuple[float, int, int, _FrontierEntry]] = [
        (root.f, root.seq, next(pushes), root)
    ]
    pending: Dict[Coordinate, _FrontierEntry] = {start: root}

    # best f seen per node; only decides whether a rediscovered route is worth keeping
    best_scores: Dict[Coordinate, float] = {start: root.f}
    expanded: Set[Coordinate] = set()

    nodes_explored = 0

    while open_set:
        if policy.timeout_s is not None and time.time() - start_time > policy.timeout_s:
            logger.warning("A* search timed out")
            raise SearchLimitError("timed out", nodes_explored, policy.timeout_s)

        current = heapq.heappop(open_set)[3]
        if current.superseded:
            continue
        del pending[current.node]

        if current.node == goal:
            return list(current.path) + [goal], current.g, nodes_explored

        if policy.max_expansions is not None and nodes_explored >= policy.max_expansions:
            logger.warning("A* search exceeded max expansions")
            raise SearchLimitError(
                "exceeded max expansions", nodes_explored, policy.max_expansions
            )

        nodes_explored += 1
        expanded.add(current.node)

        half_current = 0.5 * costs[current.node]
        path = current.path + (current.node,)

        for neighbour in system.neighbors(current.node):
            neighbour_cost = costs.get(neighbour)
            if neighbour_cost is None:
                continue

            g = current.g + half_current + 0.5 * neighbour_cost
            f = g + heuristics[neighbour]

            existing = pending.get(neighbour)
            if existing is not None:
                if f <= existing.f:
                    existing.superseded = True
                    entry = _FrontierEntry(neighbour, f, g, path, existing.seq)
                    pending[neighbour] = entry
                    best_scores[neighbour] = f
                    heapq.heappush(open_set, (f, entry.seq, next(pushes), entry))
                continue

            best = best_scores.get(neighbour)
            if best is not None:
                if f > best:
                    continue
                # closed nodes only reopen on a strictly better route
                if neighbour in expanded and f == best:
                    continue

            entry = _FrontierEntry(neighbour, f, g, path, next(seqs))
            pending[neighbour] = entry
            best_scores[neighbour] = f
            heapq.heappush(open_set, (f, entry.seq, next(pushes), entry))

    raise UnreachableError(start, goal, nodes_explored)


__all__ = [
    "find_path",
    "path_cost",
    "PathfindingResult",
]
