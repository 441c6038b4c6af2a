import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_path = str(src_root)
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


@pytest.fixture
def length_records():
    return [
        ("m", "meter", "ft", "foot", 3.28084),
        ("ft", "foot", "in", "inch", 12),
        ("km", "kilometer", "m", "meter", 1000),
        ("mi", "mile", "ft", "foot", 5280),
    ]


@pytest.fixture
def ton_tables():
    # "ton" and "lb" exist in both properties with different factors
    return {
        "mass": [
            ("ton", "short ton", "lb", "pound", 2000),
            ("lb", "pound", "kg", "kilogram", 0.45359237),
        ],
        "force": [
            ("ton", "ton-force", "lb", "pound-force", 2240),
            ("lb", "pound-force", "N", "newton", 4.4482216152605),
        ],
    }


@pytest.fixture
def write_table(tmp_path):
    def _write(name, rows, header="unit_from,label_from,unit_to,label_to,factor"):
        folder = tmp_path / "graphs"
        folder.mkdir(exist_ok=True)
        path = folder / f"{name}.csv"
        lines = [header] + [",".join(str(value) for value in row) for row in rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
