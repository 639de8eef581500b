"""Build the resolution rule chain from a loaded configuration."""

from typing import Any

from src.alias_map_rule import alias_map_rule, terminal_rule
from src.errors import ConfigError
from src.load_config import validate_aliases
from src.resolution_rule import ResolutionRule


def build_rules(config: dict[str, Any]) -> list[ResolutionRule]:
    """Return [terminal rule, alias table rule] for config.

    Terminal identifiers come first so pinning a name wins over an alias of
    the same name.
    """
    terminal = config.get("terminal") or []
    if not isinstance(terminal, list) or not all(isinstance(t, str) for t in terminal):
        msg = "'terminal' must be a list of identifiers"
        raise ConfigError(msg)

    aliases = validate_aliases(config.get("aliases") or {})
    return [terminal_rule(terminal), alias_map_rule(aliases)]
