"""Formatting helpers for solver reports."""

from datetime import datetime

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def time_str(seconds: float) -> str:
    """Format a duration as "HH:MM:SS.ss".

    Args:
        seconds: Duration in seconds.
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


def timestamp_str(timestamp: float) -> str:
    """Format a UNIX timestamp in the local timezone."""
    return datetime.fromtimestamp(timestamp).astimezone().strftime(TIMESTAMP_FMT)
