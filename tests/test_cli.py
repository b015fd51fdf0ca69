"""Tests for the storeverify command-line interface."""

import json
import tempfile
from pathlib import Path

from click.testing import CliRunner

from storeverify.cli import main
from storeverify.config import DEFAULT_GENESIS_ADMIN

A0 = DEFAULT_GENESIS_ADMIN
OWNER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


def _run(state: str, *args: str):
    runner = CliRunner()
    return runner.invoke(main, ["--state-file", state, *args], env={})


def test_register_verify_and_status():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = str(Path(tmpdir) / "state.json")

        result = _run(state, "register", "Test Store", "123 Main St", "--as", OWNER)
        assert result.exit_code == 0, result.output
        assert "Registered store 0" in result.output

        result = _run(state, "status", "0")
        assert result.exit_code == 0
        assert "unverified" in result.output

        result = _run(state, "verify", "0", "--as", A0)
        assert result.exit_code == 0, result.output

        result = _run(state, "status", "0")
        assert result.exit_code == 0
        assert "unverified" not in result.output
        assert "verified" in result.output


def test_verify_by_non_admin_fails():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = str(Path(tmpdir) / "state.json")
        _run(state, "register", "Test Store", "123 Main St", "--as", OWNER)

        result = _run(state, "verify", "0", "--as", OWNER)
        assert result.exit_code == 1
        assert "NOT_AUTHORIZED" in result.output


def test_status_of_missing_store_fails_but_show_does_not():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = str(Path(tmpdir) / "state.json")

        result = _run(state, "status", "5")
        assert result.exit_code == 1
        assert "STORE_NOT_FOUND" in result.output

        result = _run(state, "show", "5")
        assert result.exit_code == 0
        assert "No store with id 5" in result.output


def test_show_store():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = str(Path(tmpdir) / "state.json")
        _run(state, "register", "Test Store", "123 Main St", "--as", OWNER)

        result = _run(state, "show", "0")
        assert result.exit_code == 0
        assert "Test Store" in result.output
        assert "123 Main St" in result.output


def test_set_admin_and_admin():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = str(Path(tmpdir) / "state.json")

        result = _run(state, "admin")
        assert A0 in result.output

        result = _run(state, "set-admin", "NEW-ADMIN", "--as", A0)
        assert result.exit_code == 0, result.output

        result = _run(state, "admin")
        assert "NEW-ADMIN" in result.output

        result = _run(state, "set-admin", "OTHER", "--as", A0)
        assert result.exit_code == 1
        assert "NOT_AUTHORIZED" in result.output


def test_malformed_state_file_is_reported():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "state.json"
        path.write_text(json.dumps({
            "next_id": 1,
            "admin": A0,
            "stores": {"0": {"id": 0, "address": "x", "owner": "o"}},
        }))

        result = _run(str(path), "admin")
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "has no name" in result.output


def test_unknown_log_level_is_a_usage_error():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = str(Path(tmpdir) / "state.json")
        runner = CliRunner()
        result = runner.invoke(
            main, ["--state-file", state, "admin"], env={"STOREVERIFY_LOG_LEVEL": "LOUD"}
        )
        assert result.exit_code == 2
        assert "Unknown log_level" in result.output


def test_unwritable_state_file_is_reported():
    with tempfile.TemporaryDirectory() as tmpdir:
        blocker = Path(tmpdir) / "blocker"
        blocker.write_text("not a directory")
        state = str(blocker / "state.json")

        result = _run(state, "register", "Test Store", "123 Main St", "--as", OWNER)
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Could not save state" in result.output
