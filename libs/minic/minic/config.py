"""Pipeline configuration loaded from an optional YAML file.

Example ``minic.yaml``::

    legacy: false
    escape: true
    show_locations: true
    trace: false
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "legacy": {"type": "boolean"},
        "escape": {"type": "boolean"},
        "show_locations": {"type": "boolean"},
        "trace": {"type": "boolean"},
    },
}


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded or is invalid."""


@dataclass(frozen=True)
class PipelineConfig:
    """Options for one pipeline run."""

    legacy: bool = False  # punctuation is UNKNOWN, tokenizing stops at the first one
    escape: bool = False  # JSON-escape serialized strings
    show_locations: bool = False  # prefix diagnostics with file:line:col
    trace: bool = True  # print visitor trace lines

    def override(self, **changes: bool | None) -> PipelineConfig:
        """Return a copy with every non-``None`` value in *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def config_from_mapping(data: dict[str, Any] | None) -> PipelineConfig:
    """Validate *data* against :data:`CONFIG_SCHEMA` and build a config."""
    if data is None:
        return PipelineConfig()
    try:
        jsonschema.validate(instance=data, schema=CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        where = " -> ".join(str(p) for p in e.path)
        suffix = f" (at {where})" if where else ""
        raise ConfigError(f"Invalid configuration: {e.message}{suffix}") from e
    known = {f.name for f in fields(PipelineConfig)}
    return PipelineConfig(**{k: v for k, v in data.items() if k in known})


def load_config(path: str | Path) -> PipelineConfig:
    """Load a YAML configuration file."""
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    return config_from_mapping(data)
