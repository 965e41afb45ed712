"""Semantic exit codes for the watch process."""

import errno

# Success (loop interrupted with Ctrl+C)
SUCCESS = 0

# General/unexpected error
GENERAL_ERROR = 1

# Command-line usage error (reported by click)
USAGE_ERROR = 2

# Configuration error (invalid interval, bad environment default)
CONFIG_ERROR = 4

# Command found but could not be executed
NOT_EXECUTABLE = 126

# Command not found
COMMAND_NOT_FOUND = 127


def exit_code_for_spawn_error(err: OSError) -> int:
    """Map an OSError raised while spawning the child to an exit code.

    Follows the shell convention: 127 when the executable does not exist,
    126 when it exists but cannot be run.

    Args:
        err: Exception raised by subprocess when launching the command

    Returns:
        Semantic exit code
    """
    if isinstance(err, FileNotFoundError) or err.errno == errno.ENOENT:
        return COMMAND_NOT_FOUND
    elif isinstance(err, PermissionError) or err.errno in (errno.EACCES, errno.ENOEXEC):
        return NOT_EXECUTABLE
    else:
        return GENERAL_ERROR
