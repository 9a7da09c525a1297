"""Parse kubectl's compact duration notation (``2h45m``, ``3d2h``, ``10s``)."""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Union

# Short unit -> full word.
UNIT_WORDS: dict[str, str] = {
    "ns": "nanoseconds",
    "µs": "microseconds",
    "us": "microseconds",
    "\u03bcs": "microseconds",
    "ms": "milliseconds",
    "sec": "seconds",
    "s": "seconds",
    "min": "minutes",
    "m": "minutes",
    "hr": "hours",
    "h": "hours",
    "day": "days",
    "d": "days",
    "y": "years",
}

# Longest spellings first so "min" and "ms" win over "m".
_UNIT_ALT = "|".join(sorted(UNIT_WORDS, key=len, reverse=True))
_PAIR_RE = re.compile(rf"(\d+)({_UNIT_ALT})")
_FULL_RE = re.compile(rf"(?:\d+(?:{_UNIT_ALT}))+")


def expand_units(text: str) -> str | None:
    """Rewrite ``2h45m`` as ``2hours 45minutes``.

    Returns None when *text* is not entirely made of ``<int><unit>`` pairs.
    """
    text = text.strip()
    if not text or not _FULL_RE.fullmatch(text):
        return None
    return " ".join(f"{num}{UNIT_WORDS[unit]}" for num, unit in _PAIR_RE.findall(text))


def _to_timedelta(expanded: str) -> timedelta:
    total = timedelta()
    for token in expanded.split():
        match = re.fullmatch(r"(\d+)([a-z]+)", token)
        if match is None:
            raise ValueError(f"bad duration token: {token!r}")
        value, word = int(match.group(1)), match.group(2)
        if word == "nanoseconds":
            total += timedelta(microseconds=value // 1000)
        elif word == "years":
            total += timedelta(days=365 * value)
        else:
            total += timedelta(**{word: value})
    return total


def parse_duration(text: str) -> Union[timedelta, str]:
    """Convert a compact duration to a timedelta, or return *text* unchanged."""
    expanded = expand_units(text)
    if expanded is None:
        return text
    try:
        return _to_timedelta(expanded)
    except OverflowError:
        return text


def format_duration(value: timedelta) -> str:
    """Render a timedelta the way kubectl prints ages (two most significant units)."""
    seconds = int(value.total_seconds())
    if seconds < 0:
        return "0s"
    days, rem = divmod(seconds, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, secs = divmod(rem, 60)
    years, days = divmod(days, 365)
    parts = [
        (years, "y"), (days, "d"), (hours, "h"), (minutes, "m"), (secs, "s"),
    ]
    significant = [(n, u) for n, u in parts if n]
    if not significant:
        return "0s"
    return "".join(f"{n}{u}" for n, u in significant[:2])
