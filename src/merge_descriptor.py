"""Logic for merging a resolved descriptor into the output mapping."""

import copy
from collections.abc import Iterable
from typing import Any

Descriptor = dict[str, Any]


def _is_list(value: object) -> bool:
    return isinstance(value, (list, tuple))


def merge_descriptor(
    resolved: dict[str, Descriptor],
    identifier: str,
    descriptor: Descriptor,
    alias_chain: Iterable[str],
) -> None:
    """Merge descriptor into resolved[identifier].

    - A new entry is a deep copy of the descriptor, so nested fields are never
      shared with the input or with other entries.
    - An existing entry gets the new `flags` appended (no deduplication).
    - `flags` that are not a list (None, a string) are opaque: they pass
      through as given and are never merged.
    - `aliasOf` is the sorted, deduplicated union of every contributing chain,
      omitted while empty.
    - Other fields keep the values of the first occurrence.
    """
    existing = resolved.get(identifier)
    if existing is None:
        existing = copy.deepcopy(descriptor)
        if _is_list(existing.get("flags")):
            existing["flags"] = list(existing["flags"])
        resolved[identifier] = existing
    elif _is_list(descriptor.get("flags")):
        if "flags" not in existing:
            existing["flags"] = []
        if _is_list(existing["flags"]):
            existing["flags"].extend(descriptor["flags"])

    # Provenance already carried by the input (e.g. a re-resolved output) is kept
    aliases: set[str] = set()
    for carried in (existing.get("aliasOf"), descriptor.get("aliasOf")):
        if _is_list(carried):
            aliases.update(carried)
    aliases.update(alias_chain)
    if aliases:
        existing["aliasOf"] = sorted(aliases)
