"""Uptime extractor — free-text French duration to fractional days."""

from __future__ import annotations

from fbxmon.device.models import RawPage
from fbxmon.metrics.base import DurationComponents, MetricSample, unit_count

UPTIME_LABEL = "Temps depuis la mise en route"

_UNITS = {
    "days": r"jours?",
    "hours": r"heures?",
    "minutes": r"minutes?",
    "seconds": r"secondes?",
}


def extract_uptime_metrics(page: RawPage) -> list[MetricSample]:
    phrase = uptime_phrase(page)
    duration = parse_duration(phrase) if phrase else DurationComponents()
    return [MetricSample("uptime", duration.total_days())]


def uptime_phrase(page: RawPage) -> str | None:
    """Text following the uptime label, e.g. ``6 jours, 0 heure, 11 minutes``."""
    for line in page:
        idx = line.find(UPTIME_LABEL)
        if idx >= 0:
            return line[idx + len(UPTIME_LABEL):].strip()
    return None


def parse_duration(phrase: str) -> DurationComponents:
    return DurationComponents(**{
        field: unit_count(phrase, pattern) for field, pattern in _UNITS.items()
    })
