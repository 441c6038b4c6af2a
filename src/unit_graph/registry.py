"""
Registry of property graphs and the cross-property units table.
"""
import logging
from typing import Dict, Iterable, List, Optional, Set

from unit_graph.errors import AmbiguousProperty, PropertyNotFound, UnitsNotRelated
from unit_graph.graph.builder import validate_connectivity
from unit_graph.graph.unit_graph import UnitGraph
from unit_graph.schema.unit import UnitInfo

logger = logging.getLogger(__name__)


def _validate_key(label: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise TypeError(f"{label} must be a non-empty string.")
    return value


def _format_options(options: Iterable[str]) -> str:
    values = list(options)
    if not values:
        return "<none>"
    return ", ".join(sorted(values))


class PropertyRegistry:
    """Maps property names to their unit graphs."""

    def __init__(self):
        self._graphs: Dict[str, UnitGraph] = {}
        # Derived from the graphs; rebuilt after a registration or a graph change
        self._units: Optional[List[UnitInfo]] = None
        # Graph versions the cached table was built from
        self._units_versions: Dict[str, int] = {}

    def __contains__(self, property_name: str) -> bool:
        return property_name in self._graphs

    def __len__(self) -> int:
        return len(self._graphs)

    def register(self, property_name: str, graph: UnitGraph, *, overwrite: bool = False) -> None:
        """
        Register the graph of a property.

        Args:
            property_name: Property name, e.g. "length"
            graph: Unit graph of that property
            overwrite: Replace an existing graph of the same name

        Raises:
            DisconnectedGraph: If the graph is empty or not weakly connected
        """
        property_name = _validate_key("property", property_name)
        if property_name in self._graphs and not overwrite:
            raise ValueError(
                f"Property {property_name!r} is already registered; use overwrite=True to replace."
            )
        validate_connectivity(graph, property_name)
        graph.name = property_name
        self._graphs[property_name] = graph
        self._units = None
        logger.info(
            "Registered property %r with %d units", property_name, graph.number_of_units()
        )

    def get_graph(self, property_name: str) -> UnitGraph:
        if property_name not in self._graphs:
            available = _format_options(self._graphs.keys())
            raise PropertyNotFound(
                f"Property {property_name!r} is not registered. Available: {available}.",
                context={"property": property_name},
            )
        return self._graphs[property_name]

    def get_properties(self) -> Set[str]:
        return set(self._graphs)

    def get_units(self, property_name: Optional[str] = None) -> List[UnitInfo]:
        """
        Get the units table.

        Args:
            property_name: Optional property to filter on

        Returns:
            Rows sorted by property, then unit name
        """
        if property_name is not None:
            self.get_graph(property_name)
        if self._units is None or self._units_versions != self._graph_versions():
            self._units = self._collect_units()
            self._units_versions = self._graph_versions()
        if property_name is None:
            return list(self._units)
        return [unit for unit in self._units if unit.property == property_name]

    def find_properties_for_unit_pair(self, unit_from: str, unit_to: str) -> Set[str]:
        """Properties in which both unit names exist."""
        from_properties = {unit.property for unit in self.get_units() if unit.name == unit_from}
        to_properties = {unit.property for unit in self.get_units() if unit.name == unit_to}
        return from_properties & to_properties

    def resolve_property(self, unit_from: str, unit_to: str) -> str:
        """
        Pick the single property containing both units.

        Raises:
            UnitsNotRelated: If no property contains both units
            AmbiguousProperty: If several do; the caller must name one
        """
        candidates = self.find_properties_for_unit_pair(unit_from, unit_to)
        if len(candidates) == 1:
            return next(iter(candidates))
        if not candidates:
            raise UnitsNotRelated(
                f"Units {unit_from!r} and {unit_to!r} are not found in the same property",
                context={"unit_from": unit_from, "unit_to": unit_to},
            )
        raise AmbiguousProperty(
            f"Units {unit_from!r} and {unit_to!r} exist in more than one property "
            f"({_format_options(candidates)}); choose a specific property",
            candidates,
            context={"unit_from": unit_from, "unit_to": unit_to},
        )

    def _collect_units(self) -> List[UnitInfo]:
        rows: List[UnitInfo] = []
        for property_name in sorted(self._graphs):
            graph = self._graphs[property_name]
            rows.extend(
                UnitInfo(name=unit.name, full_name=unit.full_name, property=property_name)
                for unit in graph.units()
            )
        return rows

    def _graph_versions(self) -> Dict[str, int]:
        return {name: graph.version for name, graph in self._graphs.items()}
