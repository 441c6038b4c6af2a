import pytest
from fastapi.testclient import TestClient

from unit_graph import UnitConverter
from unit_graph.api import main as api_main


@pytest.fixture
def client(monkeypatch, ton_tables, length_records):
    converter = UnitConverter.from_records(dict(ton_tables, length=length_records))
    monkeypatch.setattr(api_main, "converter", converter)
    return TestClient(api_main.app)


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_properties_and_units(client) -> None:
    assert client.get("/properties").json() == {"properties": ["force", "length", "mass"]}

    units = client.get("/units", params={"property": "mass"}).json()["units"]
    assert [unit["name"] for unit in units] == ["kg", "lb", "ton"]
    assert units[0] == {"name": "kg", "full_name": "kilogram", "property": "mass"}


def test_convert(client) -> None:
    response = client.post("/convert", json={"value": 2, "unit_from": "m", "unit_to": "in"})

    assert response.status_code == 200
    body = response.json()
    assert body["value"] == pytest.approx(2 * 39.37008)
    assert body["property"] == "length"
    assert body["path"] == ["m", "ft", "in"]


def test_multiplier_with_explicit_property(client) -> None:
    response = client.post(
        "/multiplier", json={"unit_from": "ton", "unit_to": "lb", "property": "force"}
    )

    assert response.status_code == 200
    assert response.json()["multiplier"] == pytest.approx(2240)


def test_ambiguous_property_is_conflict(client) -> None:
    response = client.post("/convert", json={"value": 1, "unit_from": "ton", "unit_to": "lb"})

    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "AmbiguousProperty"
    assert body["candidates"] == ["force", "mass"]


@pytest.mark.parametrize(
    "payload, status, error",
    [
        ({"value": 1, "unit_from": "kg", "unit_to": "N"}, 400, "UnitsNotRelated"),
        ({"value": 1, "unit_from": "kg", "unit_to": "N", "property": "mass"}, 404, "UnitNotFound"),
        ({"value": 1, "unit_from": "m", "unit_to": "ft", "property": "time"}, 404, "PropertyNotFound"),
    ],
)
def test_conversion_errors(client, payload, status, error) -> None:
    response = client.post("/convert", json=payload)

    assert response.status_code == status
    assert response.json()["error"] == error


def test_graph_and_optimize(client) -> None:
    graph = client.get("/graphs/length").json()

    assert graph["stats"] == {"units": 5, "edges": 8, "complete": 0}
    assert len(graph["edge_labels"]) == len(graph["edges"])
    first = graph["edges"][0]
    assert (first["source"], first["target"]) == ("ft", "in")
    assert graph["edge_labels"][0] == "12"

    response = client.post("/optimize")
    assert response.status_code == 200
    assert response.json()["edges_added"] == {"force": 2, "length": 12, "mass": 2}

    assert client.get("/graphs/length").json()["stats"]["complete"] == 1
    assert client.get("/graphs/unknown").status_code == 404


def test_uninitialized_service(monkeypatch) -> None:
    monkeypatch.setattr(api_main, "converter", None)
    client = TestClient(api_main.app)

    assert client.get("/properties").status_code == 500
