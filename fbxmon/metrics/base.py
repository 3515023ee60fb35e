"""Shared types and text helpers for metric extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Callable, Iterable, NamedTuple, Union

Number = Union[int, Decimal]

SECONDS_PER_DAY = 86400
_TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class MetricSample:
    """A single named value, ready to be printed as ``name.value N``."""
    name: str
    value: Number = 0


# ── Line / token helpers ─────────────────────────────────────────────

def tokens(line: str) -> list[str]:
    """Split a line on runs of whitespace."""
    return line.split()


def find_line(
    lines: Iterable[str],
    predicate: Callable[[list[str]], bool],
) -> list[str] | None:
    """Return the tokens of the first line accepted by *predicate*."""
    for line in lines:
        parts = tokens(line)
        if parts and predicate(parts):
            return parts
    return None


def token_at(parts: list[str] | None, position: int) -> str | None:
    """1-based positional token lookup, ``None`` when out of range."""
    if parts is None or position < 1 or position > len(parts):
        return None
    return parts[position - 1]


# ── Numeric helpers ──────────────────────────────────────────────────

def parse_int(text: str | None, default: int = 0) -> int:
    """Parse an integer field, falling back to *default*."""
    if not text:
        return default
    try:
        return int(text)
    except ValueError:
        return default


def parse_decimal(text: str | None) -> Number:
    """Parse a number that may use ``,`` or ``.`` as decimal separator.

    Values without a separator stay ``int``; others become ``Decimal`` so
    the number of decimals shown on the page is kept.  Returns ``0`` when
    the field cannot be read.
    """
    if not text:
        return 0
    normalized = text.replace(",", ".")
    if "." not in normalized:
        return parse_int(normalized)
    try:
        value = Decimal(normalized)
    except InvalidOperation:
        return 0
    if not value.is_finite():
        return 0
    return value


def unit_count(text: str, unit: str) -> int:
    """Integer immediately preceding *unit* in free text, 0 when absent.

    *unit* is a regex fragment, e.g. ``r"jours?"``.
    """
    m = re.search(rf"(\d+)\s*{unit}\b", text, re.IGNORECASE)
    return int(m.group(1)) if m else 0


def negate(value: Number) -> Number:
    return -value


class DurationComponents(NamedTuple):
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def total_seconds(self) -> int:
        return (self.days * SECONDS_PER_DAY + self.hours * 3600
                + self.minutes * 60 + self.seconds)

    def total_days(self) -> Decimal:
        """Fractional days, rounded half-up to two decimals."""
        days = Decimal(self.total_seconds()) / Decimal(SECONDS_PER_DAY)
        return days.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
