"""
Unit conversion facade.

Typical use::

    converter = UnitConverter.from_folder()
    result = converter.convert(1, "m", "ft")
    result.value, result.multiplier, result.property, result.path

Only one conversion factor is needed to add a unit to a property: every other
conversion is derived from the graph. When the property is omitted it is
looked up from the unit names; ambiguous lookups raise ``AmbiguousProperty``
and must be repeated with an explicit property.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Union

from unit_graph.config import Config
from unit_graph.conversion.optimizer import GraphOptimizer
from unit_graph.conversion.resolver import MultiplierResolver, check_value
from unit_graph.graph.builder import GraphBuilder, RecordLike
from unit_graph.graph.unit_graph import UnitGraph
from unit_graph.ingest.csv_loader import default_graphs_folder, load_folder
from unit_graph.registry import PropertyRegistry
from unit_graph.schema.conversion import ConversionResult, MultiplierResult
from unit_graph.schema.unit import UnitInfo

logger = logging.getLogger(__name__)


class UnitConverter:
    """Converts values between units of registered properties."""

    def __init__(
        self,
        registry: Optional[PropertyRegistry] = None,
        config: Optional[Config] = None,
    ):
        """
        Initialize converter.

        Args:
            registry: Registry of property graphs; empty if omitted
            config: Configuration object
        """
        self.config = config or Config()
        self.registry = registry or PropertyRegistry()
        self.resolver = MultiplierResolver()
        self.optimizer = GraphOptimizer(self.resolver)

    @classmethod
    def from_records(
        cls,
        tables: Mapping[str, Iterable[RecordLike]],
        optimize: bool = False,
        config: Optional[Config] = None,
    ) -> "UnitConverter":
        """
        Create a converter from in-memory records.

        Args:
            tables: Mapping of property name to its conversion records
            optimize: Precompute every pairwise multiplier
            config: Configuration object
        """
        converter = cls(config=config)
        for property_name, records in tables.items():
            converter.add_property(property_name, records)
        if optimize:
            converter.optimize()
        return converter

    @classmethod
    def from_folder(
        cls,
        folder: Optional[Union[str, Path]] = None,
        optimize: bool = False,
        config: Optional[Config] = None,
    ) -> "UnitConverter":
        """
        Create a converter from a folder of ``<property>.csv`` tables.

        Args:
            folder: Tables folder; the bundled tables if omitted
            optimize: Precompute every pairwise multiplier
            config: Configuration object
        """
        config = config or Config()
        folder = Path(folder) if folder is not None else default_graphs_folder()
        converter = cls(config=config)
        for property_name, graph in load_folder(folder, encoding=config.csv_encoding).items():
            converter.registry.register(property_name, graph)
        logger.info(
            "Loaded %d properties from %s", len(converter.registry), folder
        )
        if optimize:
            converter.optimize()
        return converter

    @classmethod
    def from_config(cls, config: Config) -> "UnitConverter":
        return cls.from_folder(
            config.graphs_folder, optimize=config.optimize_on_load, config=config
        )

    def add_property(
        self,
        property_name: str,
        records: Iterable[RecordLike],
        *,
        overwrite: bool = False,
    ) -> UnitGraph:
        """
        Build, validate and register the graph of one property.

        Returns:
            The registered graph
        """
        graph = GraphBuilder(property_name).build(records)
        self.registry.register(property_name, graph, overwrite=overwrite)
        return graph

    def get_graph(self, property_name: str) -> UnitGraph:
        return self.registry.get_graph(property_name)

    def get_units(self, property_name: Optional[str] = None) -> List[UnitInfo]:
        return self.registry.get_units(property_name)

    def get_properties(self) -> List[str]:
        return sorted(self.registry.get_properties())

    def convert(
        self,
        value: float,
        unit_from: str,
        unit_to: str,
        property_name: Optional[str] = None,
    ) -> ConversionResult:
        """
        Convert a value from one unit to another.

        Args:
            value: Value expressed in ``unit_from``
            unit_from: Unit converted from
            unit_to: Unit converted to
            property_name: Property to use; looked up from the units if omitted

        Returns:
            ConversionResult with the converted value, multiplier, property
            and the units traversed
        """
        check_value(value)
        found = self.get_multiplier(unit_from, unit_to, property_name)
        return ConversionResult(
            value=value * found.multiplier,
            multiplier=found.multiplier,
            property=found.property,
            path=found.path,
        )

    def get_multiplier(
        self,
        unit_from: str,
        unit_to: str,
        property_name: Optional[str] = None,
    ) -> MultiplierResult:
        """Multiplier converting ``unit_from`` to ``unit_to``."""
        if property_name is None:
            property_name = self.registry.resolve_property(unit_from, unit_to)
        graph = self.registry.get_graph(property_name)
        result = self.resolver.resolve(graph, unit_from, unit_to)
        return MultiplierResult(
            multiplier=result.multiplier, property=property_name, path=result.path
        )

    def optimize(self) -> None:
        """
        Precompute direct edges in every property graph.

        This may take time but makes later conversions a single edge lookup.
        """
        self.optimize_with_stats()

    def optimize_with_stats(self) -> Dict[str, int]:
        """Optimize every graph and return the edges inserted per property."""
        return {
            property_name: self.optimizer.optimize_with_stats(self.registry.get_graph(property_name))
            for property_name in self.get_properties()
        }
