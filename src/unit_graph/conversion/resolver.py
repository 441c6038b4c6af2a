"""
Multiplier resolution between units of one graph.
"""
import logging
from numbers import Real
from typing import List

import networkx as nx
import numpy as np

from unit_graph.errors import InvalidValue, NoPathFound, UnitNotFound
from unit_graph.graph.unit_graph import UnitGraph
from unit_graph.schema.graph import PathResult

logger = logging.getLogger(__name__)


class MultiplierResolver:
    """Finds the multiplier converting a value from one unit to another."""

    def resolve(self, graph: UnitGraph, unit_from: str, unit_to: str) -> PathResult:
        """
        Resolve the multiplier between two units.

        A direct edge always wins over path search, even when another route
        exists. Without one, the multiplier is the product of the weights
        along an unweighted shortest path. Among several shortest paths any
        one may be returned.

        Args:
            graph: Unit graph of one property
            unit_from: Unit converted from
            unit_to: Unit converted to

        Returns:
            PathResult with the multiplier and the units traversed
        """
        self._require_unit(graph, unit_from)
        self._require_unit(graph, unit_to)

        if unit_from == unit_to:
            return PathResult(multiplier=1.0, path=[unit_from])

        weight = graph.get_weight(unit_from, unit_to)
        if weight is not None:
            return PathResult(multiplier=weight, path=[unit_from, unit_to])

        path = self.shortest_path(graph, unit_from, unit_to)
        weights = [graph.get_weight(a, b) for a, b in zip(path[:-1], path[1:])]
        multiplier = float(np.prod(weights))
        logger.debug(
            "Composed multiplier %s for %r -> %r via %s", multiplier, unit_from, unit_to, path
        )
        return PathResult(multiplier=multiplier, path=path)

    def shortest_path(self, graph: UnitGraph, unit_from: str, unit_to: str) -> List[str]:
        """Breadth-first shortest path, ignoring edge weights."""
        try:
            return nx.shortest_path(graph.graph, unit_from, unit_to, weight=None)
        except nx.NetworkXNoPath as exc:
            raise NoPathFound(
                f"No conversion path from {unit_from!r} to {unit_to!r} in {graph.name!r}",
                context={"property": graph.name, "unit_from": unit_from, "unit_to": unit_to},
            ) from exc

    def convert(self, value: float, unit_from: str, unit_to: str, graph: UnitGraph) -> float:
        """
        Convert a value between two units of a graph.

        Returns:
            ``value`` times the resolved multiplier
        """
        check_value(value)
        return value * self.resolve(graph, unit_from, unit_to).multiplier

    def _require_unit(self, graph: UnitGraph, unit: str):
        if unit not in graph:
            available = ", ".join(graph.unit_names()) or "<none>"
            raise UnitNotFound(
                f"Unit {unit!r} not found in {graph.name!r}. Available: {available}",
                context={"property": graph.name, "unit": unit},
            )


def check_value(value) -> None:
    """Raise InvalidValue unless ``value`` is a real number."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (Real, np.number)):
        raise InvalidValue(f"Value to convert must be a real number, got {value!r}")
    if isinstance(value, np.complexfloating):
        raise InvalidValue(f"Value to convert must be a real number, got {value!r}")


_DEFAULT_RESOLVER = MultiplierResolver()


def resolve(graph: UnitGraph, unit_from: str, unit_to: str) -> PathResult:
    return _DEFAULT_RESOLVER.resolve(graph, unit_from, unit_to)


def convert(value: float, unit_from: str, unit_to: str, graph: UnitGraph) -> float:
    return _DEFAULT_RESOLVER.convert(value, unit_from, unit_to, graph)
