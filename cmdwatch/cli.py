"""Main CLI entry point for cmdwatch."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from cmdwatch.config import load_config
from cmdwatch.utils.error import IntervalError, handle_watch_error
from cmdwatch.utils.interval import parse_interval
from cmdwatch.utils.watch import watch_loop


class IntervalType(click.ParamType):
    """Click parameter type converting seconds (e.g. "1.5") to milliseconds."""

    name = "seconds"

    def convert(self, value, param, ctx):
        try:
            return parse_interval(value)
        except IntervalError as e:
            self.fail(str(e), param, ctx)


INTERVAL = IntervalType()


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.command(context_settings={"allow_interspersed_args": False})
@click.version_option(version="1.0.0", prog_name="cmdwatch")
@click.option(
    "-n",
    "--interval",
    "interval_ms",
    type=INTERVAL,
    default=None,
    help="Seconds between updates (default: 1, or CMDWATCH_INTERVAL).",
)
@click.option(
    "-s",
    "--sub-interval",
    "sub_interval_ms",
    type=INTERVAL,
    default=None,
    help="Sub-second interval in decimal seconds, to the nearest thousandth. Overrides --interval.",
)
@click.option("-t", "--no-title", is_flag=True, help="Do not show the header lines.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@handle_watch_error
def main(interval_ms, sub_interval_ms, no_title, verbose, command):
    """Execute a command at a regular interval, showing output fullscreen.

    The screen is cleared before each run and a header shows the host,
    the current time, the interval and the command line. A status line
    reports a non-zero exit code or the signal that killed the command.

    Examples:
        cmdwatch -n 2 -- df -h
        cmdwatch -s 0.5 -- date +%T.%N
        cmdwatch ls -l /tmp
    """
    setup_logging(verbose)

    config = load_config(
        command,
        interval_ms=interval_ms,
        sub_interval_ms=sub_interval_ms,
        no_title=True if no_title else None,
    )
    watch_loop(config)


if __name__ == "__main__":
    main()
