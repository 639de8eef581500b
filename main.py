"""Entry point: optionally run development checks, then resolve a request file."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the alias resolution pipeline."""
    parser = argparse.ArgumentParser(
        description="Resolve polyfill aliases from a request file."
    )
    parser.add_argument(
        "requests",
        help="YAML/JSON file of requested identifiers",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before resolving",
    )
    parser.add_argument(
        "--config",
        help="Path to alias configuration file",
    )
    parser.add_argument(
        "--output",
        help="Write resolved JSON to this path",
    )
    parser.add_argument(
        "--report",
        help="Write a JSON resolution report to this path",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip malformed rule results and alias cycles instead of failing",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every alias expansion",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\n✅ Development checks passed. Proceeding with resolution.\n")

    cmd: list[str] = [sys.executable, "-m", "src.resolve_aliases", args.requests]
    if args.config:
        cmd.extend(["--config", args.config])
    if args.output:
        cmd.extend(["--output", args.output])
    if args.report:
        cmd.extend(["--report", args.report])
    if args.lenient:
        cmd.append("--lenient")
    if args.verbose:
        cmd.append("--verbose")

    run_command(cmd, cwd=root_dir)


if __name__ == "__main__":
    main()
