"""Resolve a polyfill request file against the configured alias rules.

Usage:
    python -m src.resolve_aliases requests.yml --config aliases.yml

The request file is YAML or JSON: either a mapping of identifier to
descriptor (`{flags: [...]}`) or a plain list of identifiers.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from src.build_resolver import build_resolver
from src.build_rules import build_rules
from src.compute_config_hash import compute_config_hash
from src.errors import AliasResolutionError
from src.load_config import load_config
from src.merge_descriptor import Descriptor
from src.resolution_report import ResolutionReport

logger = logging.getLogger(__name__)


def load_requests(path: Path) -> dict[str, Descriptor]:
    """Load requested identifiers and their descriptors from path."""
    if not path.exists():
        msg = f"Request file not found: {path}"
        raise SystemExit(msg)
    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        msg = f"Could not parse {path}: {e}"
        raise SystemExit(msg) from e

    if data is None:
        return {}
    if isinstance(data, list):
        return {str(name): {"flags": []} for name in data}
    if isinstance(data, dict):
        requests: dict[str, Descriptor] = {}
        for name, descriptor in data.items():
            if descriptor is None:
                descriptor = {"flags": []}
            if not isinstance(descriptor, dict):
                msg = f"Descriptor for {name!r} must be a mapping"
                raise SystemExit(msg)
            requests[str(name)] = descriptor
        return requests
    msg = f"{path} must contain a mapping or a list of identifiers"
    raise SystemExit(msg)


def run_resolution(args: argparse.Namespace) -> int:
    """Resolve the requested identifiers and emit the result."""
    try:
        config = load_config(args.config)
        rules = build_rules(config)
    except AliasResolutionError as e:
        raise SystemExit(str(e)) from e

    strict = bool(config["strict"]) and not args.lenient
    resolve = build_resolver(rules, strict=strict)
    requests = load_requests(args.requests)
    logger.info("Resolving %d requested identifiers", len(requests))

    try:
        resolved = resolve(requests)
    except AliasResolutionError as e:
        raise SystemExit(str(e)) from e

    output = json.dumps(resolved, indent=2)
    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        print(
            f"Resolved {len(requests)} identifiers into {len(resolved)}: "
            f"{args.output}"
        )
    else:
        print(output)

    if args.report:
        report = ResolutionReport(compute_config_hash(config), strict=strict)
        report.add_run(list(requests), resolved)
        report.generate_report(args.report)
        logger.info("Wrote resolution report to %s", args.report)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the alias resolver CLI."""
    ap = argparse.ArgumentParser(
        description="Expand polyfill aliases into the identifiers they stand for.",
    )
    ap.add_argument(
        "requests",
        type=Path,
        help="YAML/JSON file of requested identifiers (mapping or list)",
    )
    ap.add_argument(
        "--config",
        help="Path to alias configuration file (YAML)",
    )
    ap.add_argument(
        "--output",
        type=Path,
        help="Write resolved JSON here instead of stdout",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON resolution report with provenance and stats",
    )
    ap.add_argument(
        "--lenient",
        action="store_true",
        help="Skip malformed rule results and alias cycles instead of failing",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every alias expansion",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())
