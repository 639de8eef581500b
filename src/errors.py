"""Exceptions raised while building rule chains and resolving aliases."""

from typing import Any


class AliasResolutionError(Exception):
    """Base class for all alias resolution failures."""


class InvalidRuleResultError(AliasResolutionError):
    """A resolution rule returned something other than None or identifiers."""

    def __init__(self, rule_name: str, identifier: str, result: Any) -> None:
        """Record the offending rule, the identifier it was given and its result."""
        self.rule_name = rule_name
        self.identifier = identifier
        self.result = result
        super().__init__(
            f"Rule {rule_name!r} returned an invalid result for {identifier!r}: "
            f"{result!r}"
        )


class AliasCycleError(AliasResolutionError):
    """A chain of non-self rewrites led back to an identifier already on it."""

    def __init__(self, cycle: list[str]) -> None:
        """Record the cycle, first and last elements being the same identifier."""
        self.cycle = cycle
        super().__init__("Alias cycle detected: " + " -> ".join(cycle))


class ConfigError(AliasResolutionError):
    """The alias configuration is malformed."""
