"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from sln_depends.deep_merge import ADDITIVE_KEYS, deep_merge
from sln_depends.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "project_extensions": [".csproj", ".vbproj"],
    "solution_extensions": [".sln"],
    "check_project_content": True,
    "resolution": {
        "load_dependencies": True,
    },
    "ordering": {
        "strict": False,
    },
}

SECTIONS = ("resolution", "ordering")


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Raises ConfigError for unparsable YAML or a merged result of the wrong shape.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                msg = f"Invalid YAML in configuration file {p}: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"Configuration file must contain a mapping: {p}"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
            _validate(config, p)
    return config


def _validate(config: dict[str, Any], path: Path) -> None:
    """Check the types of the keys the pipeline reads."""
    for section in SECTIONS:
        if not isinstance(config.get(section), dict):
            msg = f"'{section}' must be a mapping in configuration file {path}"
            raise ConfigError(msg)
    for key in sorted(ADDITIVE_KEYS):
        if not isinstance(config.get(key), list):
            msg = f"'{key}' must be a list in configuration file {path}"
            raise ConfigError(msg)
