"""Tests for the resolve_aliases CLI."""

import json
from pathlib import Path

import pytest
import yaml

from src.resolve_aliases import load_requests, main


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Fixture providing an alias configuration file."""
    path = tmp_path / "aliases.yml"
    path.write_text(
        yaml.dump(
            {
                "aliases": {
                    "es6": ["Promise", "Map"],
                    "default": ["es6", "fetch"],
                }
            }
        )
    )
    return path


def test_load_requests_mapping(tmp_path: Path) -> None:
    """Verify mapping request files keep their descriptors."""
    path = tmp_path / "req.yml"
    path.write_text("fetch:\n  flags: [gated]\nes6:\n")
    assert load_requests(path) == {
        "fetch": {"flags": ["gated"]},
        "es6": {"flags": []},
    }


def test_load_requests_list(tmp_path: Path) -> None:
    """Verify list request files get empty flags."""
    path = tmp_path / "req.json"
    path.write_text(json.dumps(["fetch", "es6"]))
    assert load_requests(path) == {"fetch": {"flags": []}, "es6": {"flags": []}}


def test_load_requests_missing_file(tmp_path: Path) -> None:
    """Verify a missing request file exits with a message."""
    with pytest.raises(SystemExit, match="not found"):
        load_requests(tmp_path / "missing.yml")


def test_load_requests_bad_descriptor(tmp_path: Path) -> None:
    """Verify descriptors must be mappings."""
    path = tmp_path / "req.yml"
    path.write_text("fetch: gated\n")
    with pytest.raises(SystemExit, match="must be a mapping"):
        load_requests(path)


def test_main_prints_resolved_json(
    tmp_path: Path, config_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify the CLI prints the expanded mapping to stdout."""
    requests = tmp_path / "req.yml"
    requests.write_text("default:\n  flags: [always]\n")

    assert main([str(requests), "--config", str(config_file)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == {
        "Promise": {"flags": ["always"], "aliasOf": ["default", "es6"]},
        "Map": {"flags": ["always"], "aliasOf": ["default", "es6"]},
        "fetch": {"flags": ["always"], "aliasOf": ["default"]},
    }


def test_main_writes_output_and_report(tmp_path: Path, config_file: Path) -> None:
    """Verify --output and --report write their files."""
    requests = tmp_path / "req.json"
    requests.write_text(json.dumps(["es6", "fetch"]))
    output = tmp_path / "out.json"
    report = tmp_path / "report.json"

    main(
        [
            str(requests),
            "--config",
            str(config_file),
            "--output",
            str(output),
            "--report",
            str(report),
        ]
    )

    assert set(json.loads(output.read_text())) == {"Promise", "Map", "fetch"}
    data = json.loads(report.read_text())
    assert data["stats"]["direct"] == 1
    assert data["stats"]["aliases_expanded"] == ["es6"]


def test_main_reports_cycles(tmp_path: Path) -> None:
    """Verify an alias cycle exits with the cycle path."""
    config = tmp_path / "aliases.yml"
    config.write_text(yaml.dump({"aliases": {"a": ["b"], "b": ["a"]}}))
    requests = tmp_path / "req.json"
    requests.write_text(json.dumps(["a"]))

    with pytest.raises(SystemExit, match="a -> b -> a"):
        main([str(requests), "--config", str(config)])


def test_main_lenient_skips_cycles(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify --lenient drops cyclic branches instead of failing."""
    config = tmp_path / "aliases.yml"
    config.write_text(yaml.dump({"aliases": {"a": ["b", "x"], "b": ["a"]}}))
    requests = tmp_path / "req.json"
    requests.write_text(json.dumps(["a"]))

    main([str(requests), "--config", str(config), "--lenient"])

    assert json.loads(capsys.readouterr().out) == {
        "x": {"flags": [], "aliasOf": ["a"]}
    }


def test_main_rejects_bad_config(tmp_path: Path) -> None:
    """Verify malformed alias tables exit before resolving."""
    config = tmp_path / "aliases.yml"
    config.write_text(yaml.dump({"aliases": {"a": "b"}}))
    requests = tmp_path / "req.json"
    requests.write_text(json.dumps(["a"]))

    with pytest.raises(SystemExit, match="non-empty list"):
        main([str(requests), "--config", str(config)])


def test_main_null_flags_pass_through(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify an empty `flags:` entry in YAML is passed through untouched."""
    requests = tmp_path / "req.yml"
    requests.write_text("fetch:\n  flags:\n")

    assert main([str(requests)]) == 0

    assert json.loads(capsys.readouterr().out) == {"fetch": {"flags": None}}
