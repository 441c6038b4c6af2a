"""
Construction of unit graphs from sparse conversion records.
"""
import logging
import math
from numbers import Real
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from unit_graph.errors import DisconnectedGraph, InvalidFactor, InvalidRecord
from unit_graph.graph.unit_graph import UnitGraph, coerce_factor
from unit_graph.schema.unit import ConversionRecord

logger = logging.getLogger(__name__)

RecordLike = Union[ConversionRecord, Sequence[Any], Mapping[str, Any]]

RECORD_FIELDS = ("unit_from", "label_from", "unit_to", "label_to", "factor")


def _coerce_label(value: Any) -> Optional[str]:
    # Empty cells come back from pandas as NaN.
    if value is None or (isinstance(value, Real) and math.isnan(value)):
        return None
    label = str(value).strip()
    return label or None


def _coerce_unit(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecord(f"{field} must be a non-empty string, got {value!r}")
    return value.strip()


def normalize_record(record: RecordLike) -> ConversionRecord:
    """
    Turn a record, tuple or mapping into a validated ConversionRecord.

    Args:
        record: ConversionRecord, 5-item sequence
            ``(unit_from, label_from, unit_to, label_to, factor)`` or mapping
            with those keys

    Returns:
        Validated ConversionRecord
    """
    if isinstance(record, ConversionRecord):
        values: Dict[str, Any] = record.model_dump()
    elif isinstance(record, Mapping):
        missing = [key for key in ("unit_from", "unit_to", "factor") if key not in record]
        if missing:
            raise InvalidRecord(f"Record is missing fields: {', '.join(missing)}")
        values = {key: record.get(key) for key in RECORD_FIELDS}
    elif isinstance(record, Sequence) and not isinstance(record, str):
        if len(record) != len(RECORD_FIELDS):
            raise InvalidRecord(
                f"Record must have {len(RECORD_FIELDS)} items "
                f"(unit_from, label_from, unit_to, label_to, factor), got {len(record)}"
            )
        values = dict(zip(RECORD_FIELDS, record))
    else:
        raise InvalidRecord(f"Unsupported record type: {type(record).__name__}")

    unit_from = _coerce_unit(values["unit_from"], "unit_from")
    unit_to = _coerce_unit(values["unit_to"], "unit_to")
    if unit_from == unit_to:
        raise InvalidRecord(
            f"Record converts unit {unit_from!r} to itself",
            context={"unit": unit_from},
        )
    try:
        factor = coerce_factor(values["factor"])
    except InvalidFactor as exc:
        raise InvalidFactor(
            f"{exc} (record {unit_from!r} -> {unit_to!r})",
            context={"unit_from": unit_from, "unit_to": unit_to},
        ) from exc

    return ConversionRecord(
        unit_from=unit_from,
        label_from=_coerce_label(values["label_from"]),
        unit_to=unit_to,
        label_to=_coerce_label(values["label_to"]),
        factor=factor,
    )


class GraphBuilder:
    """Builds a UnitGraph from conversion records and their inverses."""

    def __init__(self, name: Optional[str] = None):
        """
        Initialize graph builder.

        Args:
            name: Property name given to the built graphs
        """
        self.name = name

    def build(self, records: Iterable[RecordLike]) -> UnitGraph:
        """
        Build a unit graph.

        Each record adds the edge ``unit_from -> unit_to`` weighted by its
        factor and the inverse edge weighted by ``1 / factor``. A unit's full
        name comes from the first record that lists it as ``unit_from``; units
        that never appear there take the label of the first record listing
        them as ``unit_to``. Connectivity is not checked here.

        Args:
            records: Conversion records

        Returns:
            The constructed graph
        """
        normalized = [normalize_record(record) for record in records]
        graph = UnitGraph(self.name)

        labels: Dict[str, Optional[str]] = {}
        for record in normalized:
            self._claim_label(labels, record.unit_from, record.label_from)
        for record in normalized:
            self._claim_label(labels, record.unit_to, record.label_to)
        for unit, label in labels.items():
            graph.add_unit(unit, label)

        for record in normalized:
            if graph.has_edge(record.unit_from, record.unit_to):
                logger.warning(
                    "Ignoring duplicate factor %s for %r -> %r in %r; keeping %s",
                    record.factor,
                    record.unit_from,
                    record.unit_to,
                    self.name,
                    graph.get_weight(record.unit_from, record.unit_to),
                )
                continue
            graph.add_conversion(record.unit_from, record.unit_to, record.factor)

        logger.debug(
            "Built graph %r with %d units and %d edges",
            self.name,
            graph.number_of_units(),
            graph.number_of_edges(),
        )
        return graph

    def _claim_label(self, labels: Dict[str, Optional[str]], unit: str, label: Optional[str]):
        if unit not in labels:
            labels[unit] = label
            return
        if label is not None and labels[unit] is not None and labels[unit] != label:
            logger.warning(
                "Ignoring label %r for unit %r in %r; keeping %r",
                label,
                unit,
                self.name,
                labels[unit],
            )


def build_graph(records: Iterable[RecordLike], name: Optional[str] = None) -> UnitGraph:
    """Build a unit graph from records (see ``GraphBuilder.build``)."""
    return GraphBuilder(name).build(records)


def validate_connectivity(graph: UnitGraph, property_name: Optional[str] = None) -> None:
    """
    Check that a unit graph is weakly connected.

    Args:
        graph: Graph to check
        property_name: Property name for the error message

    Raises:
        DisconnectedGraph: If the graph has no units or several components
    """
    name = property_name if property_name is not None else graph.name
    if graph.number_of_units() == 0:
        raise DisconnectedGraph(
            f"Graph {name!r} has no units",
            context={"property": name},
        )
    if not graph.is_weakly_connected():
        groups: List[List[str]] = graph.components()
        raise DisconnectedGraph(
            f"Graph {name!r} is not connected; make sure the input data is correct. "
            f"Unit groups: {groups}",
            context={"property": name, "components": len(groups)},
        )
