"""Watch loop: run a command, redraw the terminal, sleep, repeat."""

import logging
import time

import click
from rich.console import Console

from cmdwatch.runner import run_command
from cmdwatch.utils.output import (
    CLEAR_SCREEN,
    decode_output,
    render_header,
    status_line,
)

logger = logging.getLogger(__name__)


def render_result(config, result, now=None) -> None:
    """Redraw the screen with the header, status line and captured output."""
    click.echo(CLEAR_SCREEN, nl=False, color=True)

    if config.show_title:
        click.echo(render_header(config.hostname, config.interval_label, config.command, now))

    status = status_line(result.returncode, result.signal)
    if status:
        click.echo(status)

    stdout = decode_output(result.stdout)
    if stdout:
        click.echo(stdout, color=True)
    stderr = decode_output(result.stderr)
    if stderr:
        click.echo(stderr, err=True, color=True)


def watch_loop(config, console=None):
    """Run the configured command forever, redrawing after each run.

    Each iteration sleeps for whatever is left of the interval once the
    command has finished. A command slower than the interval is re-run
    immediately. Exits cleanly on KeyboardInterrupt (Ctrl+C).

    Args:
        config: WatchConfig with the command, interval and header settings
        console: Optional Rich Console for the stop notice (default: stderr)

    Raises:
        SpawnError: If the command cannot be started
    """
    if console is None:
        console = Console(stderr=True)

    try:
        while True:
            start = time.monotonic()
            result = run_command(config.command)
            render_result(config, result)

            elapsed_ms = int((time.monotonic() - start) * 1000)
            remaining_ms = config.interval_ms - elapsed_ms
            if remaining_ms > 0:
                logger.debug("Sleeping %dms", remaining_ms)
                time.sleep(remaining_ms / 1000)
            else:
                logger.debug(
                    "Run took %dms, interval is %dms; not sleeping", elapsed_ms, config.interval_ms
                )
    except KeyboardInterrupt:
        console.print("\n[dim]Watch stopped[/dim]")
