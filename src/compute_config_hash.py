"""Stable fingerprint of the alias configuration."""

import hashlib
import json
from typing import Any

HASHED_KEYS = ("aliases", "terminal", "strict")


def compute_config_hash(config: dict[str, Any]) -> str:
    """Hash the sections of config that affect resolution output.

    Key order does not matter; canonical JSON (sorted keys) is hashed.
    """
    relevant = {key: config.get(key) for key in HASHED_KEYS}
    payload = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
