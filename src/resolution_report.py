"""JSON report of a resolution run: provenance per identifier plus stats."""

import json
import time
from pathlib import Path
from typing import Any

from src.merge_descriptor import Descriptor, merge_descriptor


class ResolutionReport:
    """Collects resolver output and writes it out with run metadata."""

    def __init__(self, config_hash: str, *, strict: bool = True) -> None:
        """Initialize an empty report for a given configuration."""
        self.config_hash = config_hash
        self.strict = strict
        self.requested: list[str] = []
        self.resolved: dict[str, Descriptor] = {}
        self.start_time = time.time()

    def add_run(
        self, requested: list[str], resolved: dict[str, Descriptor]
    ) -> None:
        """Record the requested identifiers and what they resolved to.

        Entries seen in an earlier run are merged, not replaced.
        """
        self.requested.extend(requested)
        for identifier, descriptor in resolved.items():
            merge_descriptor(self.resolved, identifier, descriptor, ())

    def generate_report(self, path: str | Path) -> None:
        """Write the report as JSON to path."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "strict": self.strict,
                "total_requested": len(self.requested),
                "total_resolved": len(self.resolved),
            },
            "results": [
                {
                    "identifier": identifier,
                    "flags": descriptor.get("flags", []),
                    "aliasOf": descriptor.get("aliasOf", []),
                }
                for identifier, descriptor in self.resolved.items()
            ],
            "stats": self._compute_stats(),
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        direct = sum(1 for d in self.resolved.values() if not d.get("aliasOf"))
        aliases: set[str] = set()
        for d in self.resolved.values():
            aliases.update(d.get("aliasOf") or [])
        return {
            "direct": direct,
            "aliased": len(self.resolved) - direct,
            "aliases_expanded": sorted(aliases),
        }
