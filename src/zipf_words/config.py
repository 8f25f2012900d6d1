from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True, frozen=True)
class ZipfConfig:
    """Configuration options for a single word-frequency run."""

    top_count: int = 20
    files_path: str = "./txtfiles"
    file_pattern: str = "*.txt"
    no_graph: bool = False
    graph_path: str = "./zipf.png"
    cli_out: bool = False
    table_path: str | None = None
    chart_title: str = "Words by occurrence"

    def __post_init__(self) -> None:
        if isinstance(self.top_count, bool) or not isinstance(self.top_count, int):
            raise ValueError(f"top_count must be an integer, got {self.top_count!r}")
        if self.top_count < 1:
            raise ValueError(f"top_count must be positive, got {self.top_count}")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ZipfConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> ZipfConfig:
    """Build a ZipfConfig from a dictionary-like input."""
    if data is None:
        return ZipfConfig()
    return ZipfConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ZipfConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ZipfConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ZipfConfig()
    return config_from_yaml(path)
