"""Alias resolution engine.

A resolver expands every requested identifier through an ordered chain of
resolution rules until each leaf is terminal, merging descriptors of leaves
reached more than once and recording which aliases led to them.
"""

import logging
from collections.abc import Callable, Mapping, Sequence

from src.errors import AliasCycleError
from src.merge_descriptor import Descriptor, merge_descriptor
from src.resolution_rule import ResolutionRule, first_match

logger = logging.getLogger(__name__)

Resolver = Callable[[Mapping[str, Descriptor]], dict[str, Descriptor]]


def build_resolver(
    rules: Sequence[ResolutionRule],
    *,
    strict: bool = True,
) -> Resolver:
    """Build a resolver over rules, evaluated first-match-wins, left to right.

    With strict=False, empty or partly malformed rule results and alias
    cycles are logged and skipped instead of raised.
    """
    chain = tuple(rules)

    def resolve(requested: Mapping[str, Descriptor]) -> dict[str, Descriptor]:
        """Expand every alias in requested and return the merged mapping."""
        resolved: dict[str, Descriptor] = {}
        for identifier, descriptor in requested.items():
            _expand(chain, identifier, descriptor, resolved, strict=strict)
        return resolved

    return resolve


def _expand(
    rules: Sequence[ResolutionRule],
    identifier: str,
    descriptor: Descriptor,
    resolved: dict[str, Descriptor],
    *,
    strict: bool,
) -> None:
    """Depth-first expansion of one requested identifier into resolved."""
    stack: list[tuple[str, tuple[str, ...]]] = [(identifier, ())]
    while stack:
        current, alias_chain = stack.pop()
        targets = first_match(rules, current, strict=strict)

        if targets is None or targets == [current]:
            merge_descriptor(resolved, current, descriptor, alias_chain)
            continue

        logger.debug("Expanding %s -> %s", current, ", ".join(targets))
        next_chain = (*alias_chain, current)
        # Reversed so targets are visited in the order the rule gave them
        for target in reversed(targets):
            if target in next_chain:
                cycle = [*next_chain[next_chain.index(target) :], target]
                if strict:
                    raise AliasCycleError(cycle)
                logger.warning("Skipping alias cycle: %s", " -> ".join(cycle))
                continue
            stack.append((target, next_chain))
