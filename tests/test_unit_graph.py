import json
import math

import pytest

from unit_graph.errors import InvalidFactor, InvalidRecord
from unit_graph.graph import UnitGraph, build_graph


@pytest.fixture
def graph():
    return build_graph(
        [
            ("m", "meter", "ft", "foot", 3.28084),
            ("ft", "foot", "in", "inch", 12),
        ],
        name="length",
    )


def test_units_and_edges_for_rendering(graph) -> None:
    assert [(unit.name, unit.full_name) for unit in graph.units()] == [
        ("ft", "foot"),
        ("in", "inch"),
        ("m", "meter"),
    ]
    assert [(edge.source, edge.target) for edge in graph.edges()] == [
        ("ft", "in"),
        ("ft", "m"),
        ("in", "ft"),
        ("m", "ft"),
    ]
    labels = graph.edge_labels()
    assert labels[("m", "ft")] == "3.3"
    assert labels[("ft", "m")] == "0.3"
    assert graph.edge_labels("%.3f")[("ft", "in")] == "12.000"


def test_self_loop_rejected() -> None:
    with pytest.raises(InvalidRecord):
        UnitGraph("demo").add_edge("a", "a", 1.0)


def test_add_unit_keeps_first_full_name() -> None:
    graph = UnitGraph("demo")

    assert graph.add_unit("m") is True
    assert graph.add_unit("m", "meter") is False
    assert graph.add_unit("m", "metre") is False
    assert graph.full_name("m") == "meter"
    assert graph.full_name("ft") is None


def test_stats_and_missing_pairs(graph) -> None:
    assert graph.get_stats() == {"units": 3, "edges": 4, "complete": 0}
    assert graph.missing_pairs() == [("in", "m")]
    assert len(graph) == 3
    assert list(graph) == ["ft", "in", "m"]


def test_copy_is_independent(graph) -> None:
    clone = graph.copy()
    clone.add_conversion("in", "m", 0.0254)

    assert clone.has_edge("in", "m")
    assert not graph.has_edge("in", "m")
    assert clone.name == "length"


def test_to_dict(graph) -> None:
    data = graph.to_dict()

    assert data["property"] == "length"
    assert {"name": "m", "full_name": "meter"} in data["units"]
    assert {"source": "ft", "target": "in", "weight": 12.0} in data["edges"]


def test_export_writes_jsonl(graph, tmp_path) -> None:
    output = tmp_path / "export"

    graph.export(output)

    units = [json.loads(line) for line in (output / "units.jsonl").read_text().splitlines()]
    edges = [json.loads(line) for line in (output / "edges.jsonl").read_text().splitlines()]
    assert [unit["name"] for unit in units] == ["ft", "in", "m"]
    assert units[0]["property"] == "length"
    assert len(edges) == 4
    assert edges[0] == {"source": "ft", "target": "in", "weight": 12.0}


@pytest.mark.parametrize("weight", [0, math.nan, math.inf, "abc", None])
def test_add_edge_validates_weight(weight) -> None:
    graph = UnitGraph("demo")

    with pytest.raises(InvalidFactor):
        graph.add_edge("a", "b", weight)

    assert graph.number_of_units() == 0
    assert graph.number_of_edges() == 0


def test_add_conversion_rejects_zero_without_partial_write(graph) -> None:
    edges = graph.number_of_edges()

    with pytest.raises(InvalidFactor) as exc:
        graph.add_conversion("m", "in", 0)

    assert "'m' -> 'in'" in str(exc.value)
    assert not graph.has_edge("m", "in")
    assert not graph.has_edge("in", "m")
    assert graph.number_of_edges() == edges


def test_version_tracks_changes(graph) -> None:
    version = graph.version

    graph.add_unit("m")
    assert graph.version == version

    graph.add_conversion("in", "yd", 1 / 36)
    assert graph.version > version
    assert graph.copy().version == graph.version
