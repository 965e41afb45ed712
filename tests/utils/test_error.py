"""Tests for error types and the CLI error handler."""

import errno
from unittest.mock import patch

import pytest

from cmdwatch.utils.error import (
    ConfigError,
    IntervalError,
    SpawnError,
    WatchError,
    handle_watch_error,
)


class TestSpawnError:
    def test_message_names_command(self):
        cause = FileNotFoundError(errno.ENOENT, "No such file or directory")
        err = SpawnError(["nosuchcmd", "-x"], cause)

        assert "nosuchcmd" in str(err)
        assert "No such file or directory" in str(err)
        assert err.command == ["nosuchcmd", "-x"]
        assert err.cause is cause


class TestHandleWatchError:
    """Test suite for handle_watch_error decorator."""

    @pytest.fixture
    def mock_emit_error(self):
        """Mock emit_error for capturing error calls."""
        with patch("cmdwatch.utils.error.emit_error") as mock:
            yield mock

    def test_successful_call_no_error(self, mock_emit_error):
        @handle_watch_error
        def successful_func(a, b=None):
            return f"{a}-{b}"

        assert successful_func("x", b="y") == "x-y"
        mock_emit_error.assert_not_called()

    def test_interval_error_exits_with_config_error(self, mock_emit_error):
        @handle_watch_error
        def bad_interval():
            raise IntervalError("Interval must not be negative: '-1'")

        with pytest.raises(SystemExit) as exc_info:
            bad_interval()

        assert exc_info.value.code == 4
        mock_emit_error.assert_called_once_with(
            "Configuration error: Interval must not be negative: '-1'",
            "Interval must be a non-negative number of seconds",
        )

    def test_config_error_without_hint(self, mock_emit_error):
        @handle_watch_error
        def bad_config():
            raise ConfigError("command: too short")

        with pytest.raises(SystemExit) as exc_info:
            bad_config()

        assert exc_info.value.code == 4
        mock_emit_error.assert_called_once_with("Configuration error: command: too short", "")

    def test_spawn_error_not_found(self, mock_emit_error):
        @handle_watch_error
        def missing():
            raise SpawnError(["nosuchcmd"], FileNotFoundError(errno.ENOENT, "No such file"))

        with pytest.raises(SystemExit) as exc_info:
            missing()

        assert exc_info.value.code == 127
        mock_emit_error.assert_called_once()
        assert "nosuchcmd" in mock_emit_error.call_args[0][0]

    def test_spawn_error_not_executable(self, mock_emit_error):
        @handle_watch_error
        def not_executable():
            raise SpawnError(["./script"], PermissionError(errno.EACCES, "Permission denied"))

        with pytest.raises(SystemExit) as exc_info:
            not_executable()

        assert exc_info.value.code == 126

    def test_keyboard_interrupt_exits_cleanly(self, mock_emit_error):
        @handle_watch_error
        def interrupted():
            raise KeyboardInterrupt

        with pytest.raises(SystemExit) as exc_info:
            interrupted()

        assert exc_info.value.code == 0
        mock_emit_error.assert_not_called()

    def test_other_watch_error(self, mock_emit_error):
        @handle_watch_error
        def generic():
            raise WatchError("boom")

        with pytest.raises(SystemExit) as exc_info:
            generic()

        assert exc_info.value.code == 1
        mock_emit_error.assert_called_once_with("Unexpected error: boom")

    def test_unrelated_exceptions_propagate(self, mock_emit_error):
        @handle_watch_error
        def broken():
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            broken()
        mock_emit_error.assert_not_called()
