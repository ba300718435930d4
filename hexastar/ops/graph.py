"""
Graph export of hexagon cost maps.

Builds a networkx DiGraph whose edges carry the same step cost the A* engine
charges, so paths can be cross-checked with networkx's own algorithms.
"""

import networkx as nx

from ..core.types import CostMap
from ..spatial.systems import HexCoordinateSystem


def build_cost_graph(
    system: HexCoordinateSystem,
    costs: CostMap,
) -> nx.DiGraph:
    """
    Build a directed graph of the traversable cells of ``costs``.

    Parameters
    ----------
    system : HexCoordinateSystem
        Addressing scheme and bound of the grid
    costs : mapping
        Complexity of every traversable node

    Returns
    -------
    nx.DiGraph
        One node per in-bound key of ``costs`` with a ``cost`` attribute, and
        an edge between every pair of neighbours weighted
        ``(cost(a) + cost(b)) / 2``
    """
    graph = nx.DiGraph(system=system.name)
    for node, cost in costs.items():
        if system.contains(system.validate(node)):
            graph.add_node(node, cost=cost)

    for node in graph.nodes:
        for neighbour in system.neighbors(node):
            if neighbour in graph:
                weight = 0.5 * costs[node] + 0.5 * costs[neighbour]
                graph.add_edge(node, neighbour, weight=weight)
    return graph


__all__ = ["build_cost_graph"]
