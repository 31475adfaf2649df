"""Structured debug lines written to standard error."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from typing import TextIO, Union

Duration = Union[timedelta, int, float]

_SECOND_NS = 1_000_000_000


def _to_nanoseconds(duration: Duration) -> int:
    if isinstance(duration, timedelta):
        return (
            (duration.days * 86_400 + duration.seconds) * _SECOND_NS
            + duration.microseconds * 1_000
        )
    return round(duration * _SECOND_NS)


def _with_fraction(value: int, digits: int) -> str:
    whole, frac = divmod(value, 10**digits)
    frac_text = f"{frac:0{digits}d}".rstrip("0")
    return f"{whole}.{frac_text}" if frac_text else str(whole)


def format_duration(duration: Duration) -> str:
    """Format a duration (timedelta or seconds) as "150ms", "1.5s" or "1h2m3s"."""
    nanos = _to_nanoseconds(duration)
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)

    if nanos < _SECOND_NS:
        if nanos < 1_000:
            return f"{sign}{nanos}ns"
        if nanos < 1_000_000:
            return f"{sign}{_with_fraction(nanos, 3)}µs"
        return f"{sign}{_with_fraction(nanos, 6)}ms"

    whole_seconds, frac = divmod(nanos, _SECOND_NS)
    seconds = _with_fraction((whole_seconds % 60) * _SECOND_NS + frac, 9)
    text = f"{seconds}s"
    minutes = whole_seconds // 60
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


class DebugLogger:
    """Writes "TIMESTAMP DEBUG category key=value ..." lines when enabled."""

    def __init__(self, enabled: bool, stream: TextIO | None = None) -> None:
        self._enabled = enabled
        self._stream = stream

    @property
    def enabled(self) -> bool:
        return self._enabled

    def _log(self, category: str, **fields: str) -> None:
        if not self._enabled:
            return
        stream = self._stream if self._stream is not None else sys.stderr
        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        parts = [f"{stamp} DEBUG {category}"]
        parts.extend(f"{key}={value}" for key, value in fields.items())
        stream.write(" ".join(parts) + "\n")

    def log_api_call(self, method, resource_type, url, duration, status_code) -> None:
        """Log an API call with its method, resource, duration and status."""
        self._log(
            "api_call",
            method=method,
            resource=resource_type,
            duration=format_duration(duration),
            status=str(status_code),
        )

    def log_retry_attempt(self, operation, attempt, max_retries, backoff, error) -> None:
        """Log a retry attempt with its backoff and the error that caused it."""
        self._log(
            "retry",
            operation=operation,
            attempt=f"{attempt}/{max_retries}",
            backoff=format_duration(backoff),
            error=str(error),
        )

    def log_data_processing(self, step, count) -> None:
        """Log a processing step and the number of items it produced."""
        self._log("data_processing", step=step, count=str(count))

    def log_filter_sort(self, operation, detail, input_count, output_count) -> None:
        """Log a filter or sort with its input and output counts."""
        self._log(
            "filter_sort",
            operation=operation,
            detail=detail,
            input=str(input_count),
            output=str(output_count),
        )

    def log_terminal_width(self, width, detected) -> None:
        """Log the terminal width and whether it was detected."""
        self._log("terminal", width=str(width), detected=str(bool(detected)).lower())

    def log_output_format(self, format) -> None:
        """Log the output format in use."""
        self._log("output", format=format)