"""Child process execution for the watch loop."""

import logging
import subprocess
import time
from dataclasses import dataclass

from cmdwatch.utils.error import SpawnError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    """Output and terminal status of one run of the watched command.

    Exactly one of ``returncode`` and ``signal`` is set.
    """

    stdout: bytes = b""
    stderr: bytes = b""
    returncode: int | None = None
    signal: int | None = None
    elapsed_ms: int = 0


def run_command(command) -> ExecutionResult:
    """Run the command to completion, capturing stdout, stderr and exit status.

    The command is executed directly (no shell). There is no timeout: a
    command that never exits blocks the caller.

    Raises:
        SpawnError: If the executable cannot be found or started
    """
    argv = list(command)
    logger.debug("Running %s", argv)

    start = time.monotonic()
    try:
        proc = subprocess.run(argv, capture_output=True, check=False)
    except OSError as e:
        raise SpawnError(argv, e) from e
    elapsed_ms = int((time.monotonic() - start) * 1000)

    # subprocess reports death by signal N as returncode -N
    if proc.returncode < 0:
        result = ExecutionResult(
            stdout=proc.stdout,
            stderr=proc.stderr,
            signal=-proc.returncode,
            elapsed_ms=elapsed_ms,
        )
    else:
        result = ExecutionResult(
            stdout=proc.stdout,
            stderr=proc.stderr,
            returncode=proc.returncode,
            elapsed_ms=elapsed_ms,
        )

    logger.debug(
        "Command finished in %dms (returncode=%s, signal=%s)",
        elapsed_ms,
        result.returncode,
        result.signal,
    )
    return result
