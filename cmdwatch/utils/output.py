"""Terminal output helpers for the watch display."""

from datetime import datetime

# ANSI: clear screen, then move the cursor to row 1, column 1
CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_command(command) -> str:
    """Join the command and its arguments with single spaces."""
    return " ".join(command)


def render_header(
    hostname: str, interval_label: str, command, now: datetime | None = None
) -> str:
    """Build the two header lines shown above the command output.

    Args:
        hostname: Host name shown on the first line
        interval_label: Human-readable interval (e.g. "1s", "2.5s")
        command: Command and arguments being watched
        now: Timestamp to display (default: current local time)

    Returns:
        Header text followed by a blank separator line
    """
    if now is None:
        now = datetime.now()
    return (
        f"Hostname: {hostname}  Time: {now.strftime(TIME_FORMAT)}\n"
        f"Every {interval_label}: {format_command(command)}\n"
    )


def status_line(returncode: int | None, signal: int | None) -> str | None:
    """Return the status line for a finished child, or None on success."""
    if returncode is not None:
        if returncode != 0:
            return f"watch command exited with return code: {returncode}"
        return None
    if signal is not None:
        return f"watch command killed by signal: {signal}"
    return None


def decode_output(data: bytes) -> str:
    """Decode captured output, replacing invalid UTF-8 and trimming trailing whitespace."""
    return data.decode("utf-8", errors="replace").rstrip()


def emit_error(message: str, hint: str = "") -> None:
    """Emit an error on stderr using a Rich console.

    The message and hint are escaped so paths or arguments containing
    square brackets are not read as Rich markup.
    """
    from rich.console import Console
    from rich.markup import escape

    console = Console(stderr=True)
    console.print(f"[red]{escape(message)}[/red]", highlight=False)
    if hint:
        console.print(f"[dim]{escape(hint)}[/dim]", highlight=False)
