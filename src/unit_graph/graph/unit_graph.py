"""
Unit graph implementation using NetworkX.

Each physical property (length, pressure, ...) owns one UnitGraph. Nodes are
unit names carrying an optional full name; a directed edge (A, B) stores the
multiplier that converts a value expressed in A into B.

Architecture:
- Storage: a NetworkX DiGraph with a ``full_name`` node attribute and a
  ``weight`` edge attribute
- Symmetry: conversions are always added in pairs, (A, B, w) and (B, A, 1/w)
- Rendering: ``units()``, ``edges()`` and ``edge_labels()`` expose everything a
  plotting collaborator needs without touching the NetworkX object
"""
import json
import logging
from itertools import combinations
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import networkx as nx
import numpy as np

from unit_graph.errors import InvalidFactor, InvalidRecord
from unit_graph.schema.graph import Edge
from unit_graph.schema.unit import UnitInfo

logger = logging.getLogger(__name__)


def coerce_factor(value: Any) -> float:
    """
    Validate a conversion factor.

    Args:
        value: Raw factor, possibly a string read from a table

    Returns:
        The factor as a float

    Raises:
        InvalidFactor: If the factor is zero, non-numeric or non-finite
    """
    if isinstance(value, (bool, np.bool_)) or value is None:
        raise InvalidFactor(f"Conversion factor must be a number, got {value!r}")
    try:
        factor = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidFactor(f"Conversion factor must be a number, got {value!r}") from exc
    if not np.isfinite(factor):
        raise InvalidFactor(f"Conversion factor must be finite, got {value!r}")
    if factor == 0.0:
        raise InvalidFactor("Conversion factor must be nonzero")
    return factor


class UnitGraph:
    """Directed, edge-weighted graph over the units of one property."""

    def __init__(self, name: Optional[str] = None):
        """
        Initialize an empty unit graph.

        Args:
            name: Optional property name, used in log and error messages
        """
        self.name = name
        self.graph = nx.DiGraph()
        # Bumped on every unit or edge change made through this class
        self.version = 0

    def __contains__(self, unit: str) -> bool:
        return unit in self.graph

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def __iter__(self) -> Iterator[str]:
        return iter(self.unit_names())

    def __repr__(self) -> str:
        return (
            f"UnitGraph(name={self.name!r}, units={self.number_of_units()}, "
            f"edges={self.number_of_edges()})"
        )

    def add_unit(self, unit: str, full_name: Optional[str] = None) -> bool:
        """
        Add a unit to the graph.

        An existing unit keeps its full name; a later, different full name is
        ignored.

        Args:
            unit: Unit name, unique within the graph
            full_name: Optional display name

        Returns:
            True if the unit was new
        """
        if unit in self.graph:
            if self.graph.nodes[unit].get("full_name") is None and full_name is not None:
                self.graph.nodes[unit]["full_name"] = full_name
                self.version += 1
            return False
        self.graph.add_node(unit, full_name=full_name)
        self.version += 1
        return True

    def add_edge(self, source: str, target: str, weight: float):
        """
        Add a single directed edge, creating missing units.

        Args:
            source: Unit converted from
            target: Unit converted to
            weight: Multiplier from ``source`` to ``target``

        Raises:
            InvalidRecord: On a self-loop
            InvalidFactor: If the weight is zero, non-numeric or non-finite
        """
        weight = self._check_edge(source, target, weight)
        self.add_unit(source)
        self.add_unit(target)
        self.graph.add_edge(source, target, weight=weight)
        self.version += 1

    def add_conversion(self, source: str, target: str, factor: float):
        """Add the edge ``source -> target`` and its inverse."""
        factor = self._check_edge(source, target, factor)
        inverse = self._check_edge(target, source, 1.0 / factor)
        self.add_edge(source, target, factor)
        self.add_edge(target, source, inverse)

    def _check_edge(self, source: str, target: str, weight: Any) -> float:
        if source == target:
            raise InvalidRecord(
                f"Self-loop on unit {source!r} is not allowed",
                context={"property": self.name, "unit": source},
            )
        try:
            return coerce_factor(weight)
        except InvalidFactor as exc:
            raise InvalidFactor(
                f"{exc} (edge {source!r} -> {target!r} in {self.name!r})",
                context={"property": self.name, "unit_from": source, "unit_to": target},
            ) from exc

    def has_unit(self, unit: str) -> bool:
        return unit in self.graph

    def has_edge(self, source: str, target: str) -> bool:
        return self.graph.has_edge(source, target)

    def get_weight(self, source: str, target: str) -> Optional[float]:
        """
        Get the multiplier stored on a direct edge.

        Returns:
            Edge weight, or None if no direct edge exists
        """
        if self.graph.has_edge(source, target):
            return self.graph[source][target]["weight"]
        return None

    def full_name(self, unit: str) -> Optional[str]:
        if unit not in self.graph:
            return None
        return self.graph.nodes[unit].get("full_name")

    def unit_names(self) -> List[str]:
        """Unit names in sorted order."""
        return sorted(self.graph.nodes())

    def units(self) -> List[UnitInfo]:
        """Units with their full names, sorted by name."""
        return [
            UnitInfo(name=unit, full_name=self.full_name(unit), property=self.name)
            for unit in self.unit_names()
        ]

    def edges(self) -> List[Edge]:
        """Directed weighted edges, sorted by (source, target)."""
        return [
            Edge(source=source, target=target, weight=data["weight"])
            for source, target, data in sorted(
                self.graph.edges(data=True), key=lambda item: (item[0], item[1])
            )
        ]

    def edge_labels(self, fmt: str = "%0.2g") -> Dict[Tuple[str, str], str]:
        """
        Format edge weights for drawing.

        Args:
            fmt: printf-style format applied to each weight

        Returns:
            Mapping of (source, target) to the formatted weight
        """
        return {
            (edge.source, edge.target): fmt % edge.weight for edge in self.edges()
        }

    def number_of_units(self) -> int:
        return self.graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self.graph.number_of_edges()

    def is_weakly_connected(self) -> bool:
        """True if every unit is reachable from every other, ignoring direction."""
        if self.graph.number_of_nodes() == 0:
            return False
        return nx.is_weakly_connected(self.graph)

    def components(self) -> List[List[str]]:
        """Weakly connected groups of units, largest first."""
        groups = [sorted(group) for group in nx.weakly_connected_components(self.graph)]
        return sorted(groups, key=lambda group: (-len(group), group))

    def missing_pairs(self) -> List[Tuple[str, str]]:
        """Unordered unit pairs without a direct edge in both directions."""
        return [
            (a, b)
            for a, b in combinations(self.unit_names(), 2)
            if not (self.graph.has_edge(a, b) and self.graph.has_edge(b, a))
        ]

    def is_complete(self) -> bool:
        """True if every pair of units has a direct edge both ways."""
        return not self.missing_pairs()

    def copy(self) -> "UnitGraph":
        clone = UnitGraph(self.name)
        clone.graph = self.graph.copy()
        clone.version = self.version
        return clone

    def get_stats(self) -> Dict[str, int]:
        """
        Get graph statistics.

        Returns:
            Dictionary with unit count, edge count and completeness flag
        """
        return {
            "units": self.number_of_units(),
            "edges": self.number_of_edges(),
            "complete": int(self.is_complete()),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation of units and edges."""
        return {
            "property": self.name,
            "units": [unit.model_dump(exclude={"property"}) for unit in self.units()],
            "edges": [edge.model_dump() for edge in self.edges()],
        }

    def export(self, output_path: Path) -> None:
        """
        Export the graph as JSONL files for external renderers.

        Writes ``units.jsonl`` (one unit per line) and ``edges.jsonl`` (one
        directed edge per line) into ``output_path``.

        Args:
            output_path: Directory to write into, created if missing
        """
        output_path = Path(output_path)
        output_path.mkdir(parents=True, exist_ok=True)

        units_file = output_path / "units.jsonl"
        with open(units_file, "w", encoding="utf-8") as f:
            for unit in self.units():
                f.write(json.dumps(unit.model_dump(), ensure_ascii=False) + "\n")

        edges_file = output_path / "edges.jsonl"
        with open(edges_file, "w", encoding="utf-8") as f:
            for edge in self.edges():
                f.write(json.dumps(edge.model_dump(), ensure_ascii=False) + "\n")

        logger.debug(
            "Exported graph %r to %s (%d units, %d edges)",
            self.name,
            output_path,
            self.number_of_units(),
            self.number_of_edges(),
        )
