"""
Configuration management for Mini Unit Graph.
"""
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError

from unit_graph.errors import ConfigError


class Config(BaseModel):
    """Configuration class for the unit conversion service."""

    # Conversion tables
    graphs_folder: Optional[Path] = None  # None selects the bundled tables
    csv_encoding: str = "utf-8"

    # Graphs
    optimize_on_load: bool = False
    edge_label_format: str = "%0.2g"

    # Logging
    log_level: str = "INFO"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @classmethod
    def from_yaml(cls, path: Path) -> "Config":
        """Load configuration from YAML file."""
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config not found: {path}", context={"path": str(path)})
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config is not valid YAML: {path}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping: {path}")
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config values in {path}: {exc}") from exc

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        folder = os.getenv("UNIT_GRAPH_FOLDER")
        try:
            return cls(
                graphs_folder=Path(folder) if folder else None,
                csv_encoding=os.getenv("UNIT_GRAPH_CSV_ENCODING", "utf-8"),
                optimize_on_load=os.getenv("UNIT_GRAPH_OPTIMIZE", "false").lower() == "true",
                edge_label_format=os.getenv("UNIT_GRAPH_EDGE_LABEL_FORMAT", "%0.2g"),
                log_level=os.getenv("LOG_LEVEL", "INFO"),
                api_host=os.getenv("API_HOST", "0.0.0.0"),
                api_port=int(os.getenv("API_PORT", "8000")),
            )
        except ValueError as exc:
            raise ConfigError(f"Invalid config value in environment: {exc}") from exc

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        config_path = Path("config.yaml")
        if config_path.exists():
            return cls.from_yaml(config_path)
        return cls.from_env()
