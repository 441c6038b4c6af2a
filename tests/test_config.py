import pytest

from unit_graph import UnitConverter
from unit_graph.config import Config
from unit_graph.errors import ConfigError


def test_from_yaml(tmp_path, write_table) -> None:
    table = write_table("length", [("m", "meter", "ft", "foot", 3.28084)])
    path = tmp_path / "config.yaml"
    path.write_text(
        f"graphs_folder: {table.parent}\noptimize_on_load: true\nlog_level: DEBUG\n",
        encoding="utf-8",
    )

    config = Config.from_yaml(path)

    assert config.graphs_folder == table.parent
    assert config.optimize_on_load is True
    assert config.log_level == "DEBUG"
    converter = UnitConverter.from_config(config)
    assert converter.get_properties() == ["length"]


def test_missing_yaml_raises_config_error(tmp_path) -> None:
    missing = tmp_path / "missing.yaml"

    with pytest.raises(ConfigError) as exc:
        Config.from_yaml(missing)

    assert "Config not found" in str(exc.value)
    assert str(missing) in str(exc.value)


def test_invalid_yaml_values(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("api_port: not-a-port\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        Config.from_yaml(path)

    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Config.from_yaml(path)


def test_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("UNIT_GRAPH_FOLDER", str(tmp_path))
    monkeypatch.setenv("UNIT_GRAPH_OPTIMIZE", "true")
    monkeypatch.setenv("API_PORT", "9000")

    config = Config.from_env()

    assert config.graphs_folder == tmp_path
    assert config.optimize_on_load is True
    assert config.api_port == 9000


def test_from_env_defaults(monkeypatch) -> None:
    for name in ("UNIT_GRAPH_FOLDER", "UNIT_GRAPH_OPTIMIZE", "API_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = Config.from_env()

    assert config.graphs_folder is None
    assert config.optimize_on_load is False
    assert config.edge_label_format == "%0.2g"


def test_default_prefers_config_yaml(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("api_port: 8123\n", encoding="utf-8")

    assert Config.default().api_port == 8123
