"""Resolution rule type and first-match evaluation over a rule chain."""

import logging
from collections.abc import Callable, Sequence

from src.errors import InvalidRuleResultError

logger = logging.getLogger(__name__)

# identifier -> None ("no opinion") or the identifiers it stands for
ResolutionRule = Callable[[str], Sequence[str] | None]


def rule_name(rule: ResolutionRule) -> str:
    """Return a readable name for a rule, used in logs and errors."""
    return getattr(rule, "__name__", None) or repr(rule)


def validate_result(
    rule: ResolutionRule,
    identifier: str,
    result: object,
    *,
    strict: bool = True,
) -> list[str] | None:
    """Check a present rule result and return it as a list of identifiers.

    Returns None when a lenient check decides the result means "no opinion".
    Results that are not sequences (bare strings, awaitables, mappings) are
    always rejected.
    """
    if isinstance(result, (str, bytes)) or not isinstance(result, Sequence):
        raise InvalidRuleResultError(rule_name(rule), identifier, result)

    targets = [t for t in result if isinstance(t, str)]
    if len(targets) != len(result):
        if strict:
            raise InvalidRuleResultError(rule_name(rule), identifier, result)
        logger.warning(
            "Rule %s returned non-string targets for %s; dropping them",
            rule_name(rule),
            identifier,
        )

    if not targets:
        if strict:
            raise InvalidRuleResultError(rule_name(rule), identifier, result)
        logger.warning(
            "Rule %s returned no targets for %s; treating as no opinion",
            rule_name(rule),
            identifier,
        )
        return None

    return targets


def first_match(
    rules: Sequence[ResolutionRule],
    identifier: str,
    *,
    strict: bool = True,
) -> list[str] | None:
    """Return the result of the first rule with an opinion on identifier.

    Rules after the first present result are not called.
    """
    for rule in rules:
        result = rule(identifier)
        if result is None:
            continue
        targets = validate_result(rule, identifier, result, strict=strict)
        if targets is not None:
            return targets
    return None
