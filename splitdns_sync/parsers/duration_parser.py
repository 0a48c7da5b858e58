"""
Duration parser for the daemon interval.

Accepts Go-style duration strings as well as bare numbers of seconds:
- 90s, 5m, 1h, 1h30m, 1.5h, 250ms
- 300 (seconds)
- 0 or an empty string (one-shot mode)
"""

import re
from typing import Optional

from ..exceptions import InvalidIntervalError


class DurationParser:
    """Parser for interval strings, returning seconds as a float"""

    UNITS = {
        "ns": 1e-9,
        "us": 1e-6,
        "µs": 1e-6,
        "ms": 1e-3,
        "s": 1.0,
        "m": 60.0,
        "h": 3600.0,
    }

    # One <number><unit> component; units are tried longest first
    COMPONENT_PATTERN = re.compile(r'(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)')
    NUMBER_PATTERN = re.compile(r'^[+-]?(\d+(?:\.\d*)?|\.\d+)$')

    @classmethod
    def parse(cls, value: Optional[str]) -> float:
        """
        Parse an interval string.

        Args:
            value: Duration string, bare seconds, or None/empty

        Returns:
            Interval in seconds (0 means one-shot)

        Raises:
            InvalidIntervalError: If the string is not a valid duration

        Examples:
            >>> DurationParser.parse('5m')
            300.0
            >>> DurationParser.parse('1h30m')
            5400.0
            >>> DurationParser.parse('45')
            45.0
        """
        if value is None:
            return 0.0

        text = value.strip()
        if not text or text in ("0", "+0", "-0"):
            return 0.0

        if cls.NUMBER_PATTERN.match(text):
            return float(text)

        sign = 1.0
        if text[0] in "+-":
            sign = -1.0 if text[0] == "-" else 1.0
            text = text[1:]

        total = 0.0
        pos = 0
        while pos < len(text):
            match = cls.COMPONENT_PATTERN.match(text, pos)
            if not match:
                raise InvalidIntervalError(f"invalid duration {value!r}")
            number, unit = match.groups()
            total += float(number) * cls.UNITS[unit]
            pos = match.end()

        if pos == 0:
            raise InvalidIntervalError(f"invalid duration {value!r}")

        return sign * total

    @classmethod
    def format(cls, seconds: float) -> str:
        """Render seconds back as a compact duration for log messages"""
        if seconds <= 0:
            return "0s"

        whole = int(seconds)
        if whole != seconds:
            return f"{seconds:g}s"

        hours, rest = divmod(whole, 3600)
        minutes, secs = divmod(rest, 60)
        parts = []
        if hours:
            parts.append(f"{hours}h")
        if minutes:
            parts.append(f"{minutes}m")
        if secs or not parts:
            parts.append(f"{secs}s")
        return "".join(parts)
