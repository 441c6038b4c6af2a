"""
Precomputation of direct edges for every unit pair.
"""
import logging
from itertools import combinations
from typing import List, Optional, Tuple

from unit_graph.conversion.resolver import MultiplierResolver
from unit_graph.graph.unit_graph import UnitGraph

logger = logging.getLogger(__name__)


class GraphOptimizer:
    """
    Inserts a direct edge for every unit pair lacking one.

    Optimization can take a while on large graphs but makes every later
    lookup a single edge read. It is never run implicitly.
    """

    def __init__(self, resolver: Optional[MultiplierResolver] = None):
        self.resolver = resolver or MultiplierResolver()

    def optimize(self, graph: UnitGraph) -> UnitGraph:
        """
        Optimize a graph in place.

        Args:
            graph: Graph to complete

        Returns:
            The same graph, now holding a direct edge for every unit pair
        """
        self.optimize_with_stats(graph)
        return graph

    def optimize_with_stats(self, graph: UnitGraph) -> int:
        """
        Optimize a graph in place and report how many edges were inserted.

        All pairs are evaluated against the graph as it was before the pass;
        insertions are buffered and applied at the end, so the result does
        not depend on pair order.

        Returns:
            Number of directed edges inserted
        """
        units = graph.unit_names()
        pairs = list(combinations(units, 2))
        pending: List[Tuple[str, str, float]] = []

        for unit_a, unit_b in pairs:
            forward = graph.get_weight(unit_a, unit_b)
            backward = graph.get_weight(unit_b, unit_a)
            if forward is not None and backward is not None:
                continue
            if forward is not None:
                pending.append((unit_b, unit_a, 1.0 / forward))
            elif backward is not None:
                pending.append((unit_a, unit_b, 1.0 / backward))
            else:
                multiplier = self.resolver.resolve(graph, unit_a, unit_b).multiplier
                pending.append((unit_a, unit_b, multiplier))
                pending.append((unit_b, unit_a, 1.0 / multiplier))

        for source, target, weight in pending:
            graph.add_edge(source, target, weight)

        if pending:
            logger.info(
                "Optimized graph %r: inserted %d edges over %d unit pairs",
                graph.name,
                len(pending),
                len(pairs),
            )
        else:
            logger.debug("Graph %r already has a direct edge for every pair", graph.name)
        return len(pending)


def optimize_graph(graph: UnitGraph) -> UnitGraph:
    return GraphOptimizer().optimize(graph)
