"""Interval parsing utilities."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from cmdwatch.utils.error import IntervalError

DEFAULT_INTERVAL = "1"

# time.sleep overflows its internal deadline a few billion seconds out
MAX_INTERVAL_SECONDS = 10**9


def parse_interval(value) -> int:
    """Parse an interval in seconds to whole milliseconds.

    Supported formats:
    - "1" (whole seconds)
    - "1.5" (fractional seconds, rounded to the nearest millisecond)
    - "0" (no delay between runs)

    Bytes are accepted and must be valid UTF-8.

    Returns:
        Interval in milliseconds

    Raises:
        IntervalError: If the value is not a non-negative decimal number of at
            most MAX_INTERVAL_SECONDS
    """
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError:
            raise IntervalError("Character set not supported in interval")

    text = str(value).strip()
    try:
        seconds = Decimal(text)
    except InvalidOperation:
        raise IntervalError(f"Invalid interval: {value!r}")

    if not seconds.is_finite():
        raise IntervalError(f"Invalid interval: {value!r}")
    if seconds < 0:
        raise IntervalError(f"Interval must not be negative: {value!r}")
    if seconds > MAX_INTERVAL_SECONDS:
        raise IntervalError(
            f"Interval too large: {value!r} (maximum {MAX_INTERVAL_SECONDS} seconds)"
        )

    millis = (seconds * 1000).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(millis)


def format_interval(millis: int, sub_second: bool = False) -> str:
    """Format an interval for the header.

    Seconds by default ("1s", "2.5s"); milliseconds ("500ms") when the
    interval was given with --sub-interval.
    """
    if sub_second:
        return f"{millis}ms"
    seconds = Decimal(millis) / 1000
    text = format(seconds.normalize(), "f")
    return f"{text}s"
