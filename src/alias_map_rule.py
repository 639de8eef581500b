"""Resolution rules backed by static tables."""

from collections.abc import Iterable, Mapping, Sequence

from src.resolution_rule import ResolutionRule


def alias_map_rule(aliases: Mapping[str, Sequence[str]]) -> ResolutionRule:
    """Build a rule that expands names found in an alias table.

    The table is copied, so later changes to aliases do not affect the rule.
    """
    table = {name: tuple(targets) for name, targets in aliases.items()}

    def expand_alias_from_config(identifier: str) -> list[str] | None:
        targets = table.get(identifier)
        return list(targets) if targets else None

    return expand_alias_from_config


def terminal_rule(identifiers: Iterable[str]) -> ResolutionRule:
    """Build a rule that declares identifiers terminal (mapped to themselves)."""
    pinned = frozenset(identifiers)

    def keep_terminal(identifier: str) -> list[str] | None:
        return [identifier] if identifier in pinned else None

    return keep_terminal
