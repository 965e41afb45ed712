"""Error types and the CLI error handler."""

import sys
from functools import wraps

from cmdwatch.utils.exit_codes import (
    CONFIG_ERROR,
    GENERAL_ERROR,
    SUCCESS,
    exit_code_for_spawn_error,
)
from cmdwatch.utils.output import emit_error


class WatchError(Exception):
    """Base class for errors that stop the watch process."""


class ConfigError(WatchError):
    """Invalid configuration detected before the loop starts."""


class IntervalError(ConfigError, ValueError):
    """Interval string is not a non-negative decimal number."""


class SpawnError(WatchError):
    """The target command could not be started."""

    def __init__(self, command, cause: OSError):
        self.command = list(command)
        self.cause = cause
        reason = cause.strerror or cause
        super().__init__(f"Failed to execute command {self.command[0]!r}: {reason}")


def handle_watch_error(func):
    """Decorator mapping watch errors to messages and semantic exit codes."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigError as e:
            hint = ""
            if isinstance(e, IntervalError):
                hint = "Interval must be a non-negative number of seconds"
            emit_error(f"Configuration error: {e}", hint)
            sys.exit(CONFIG_ERROR)
        except SpawnError as e:
            emit_error(str(e), "Check that the command exists and is executable")
            sys.exit(exit_code_for_spawn_error(e.cause))
        except KeyboardInterrupt:
            sys.exit(SUCCESS)
        except WatchError as e:
            emit_error(f"Unexpected error: {e}")
            sys.exit(GENERAL_ERROR)

    return wrapper
