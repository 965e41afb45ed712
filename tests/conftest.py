"""Shared test fixtures and utilities."""

import pytest
from click.testing import CliRunner

from cmdwatch.config import WatchConfig
from cmdwatch.runner import ExecutionResult


@pytest.fixture
def runner():
    """Click CLI test runner.

    Example:
        def test_command(runner):
            result = runner.invoke(main, ['-n', '2', '--', 'echo', 'hi'])
            assert result.exit_code == 0
    """
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from CMDWATCH_* variables and any local .envrc file."""
    monkeypatch.delenv("CMDWATCH_INTERVAL", raising=False)
    monkeypatch.delenv("CMDWATCH_NO_TITLE", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_config():
    """Factory for WatchConfig objects with test-friendly defaults."""

    def _make(command=("echo", "hello"), interval_ms=1000, hostname="testhost", show_title=True):
        return WatchConfig(
            interval_ms=interval_ms,
            command=tuple(command),
            hostname=hostname,
            show_title=show_title,
        )

    return _make


def create_result(stdout=b"", stderr=b"", returncode=0, signal=None, elapsed_ms=5):
    """Factory function to create ExecutionResult objects.

    Pass ``returncode=None`` together with ``signal`` for a killed child.
    """
    return ExecutionResult(
        stdout=stdout,
        stderr=stderr,
        returncode=returncode,
        signal=signal,
        elapsed_ms=elapsed_ms,
    )
