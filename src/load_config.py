"""Logic for loading and merging alias configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge
from src.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "aliases": {},
    "terminal": [],
    "strict": True,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"Invalid YAML in {p}: {e}"
                raise ConfigError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Config root in {p} must be a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found. Using defaults.", p)
    return config


def validate_aliases(aliases: Any) -> dict[str, list[str]]:
    """Check the `aliases` section: identifier -> non-empty list of identifiers."""
    if not isinstance(aliases, dict):
        msg = "'aliases' must be a mapping of identifier to list of identifiers"
        raise ConfigError(msg)
    for name, targets in aliases.items():
        if (
            not isinstance(targets, list)
            or not targets
            or not all(isinstance(t, str) for t in targets)
        ):
            msg = f"Alias {name!r} must map to a non-empty list of identifiers"
            raise ConfigError(msg)
    return {str(name): targets for name, targets in aliases.items()}
