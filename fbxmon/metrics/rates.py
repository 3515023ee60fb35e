"""Interface rate extractor — in/out ko/s per network interface."""

from __future__ import annotations

from fbxmon.device.models import RawPage
from fbxmon.metrics.base import (
    MetricSample,
    find_line,
    negate,
    parse_decimal,
    token_at,
)

RATE_UNIT = "ko/s"
INTERFACES = ("WAN", "Ethernet", "USB", "Switch")


def extract_rate_metrics(page: RawPage) -> list[MetricSample]:
    """``WAN  Ok  1 ko/s  0 ko/s`` per interface.

    Outbound values are negated so they graph below the axis.  An interface
    without a rate (``USB  Non connecté``) reports 0 both ways.
    """
    metrics: list[MetricSample] = []
    for iface in INTERFACES:
        parts = find_line(
            page, lambda p, name=iface: p[0] == name and RATE_UNIT in p,
        )
        rate_in = parse_decimal(token_at(parts, 3))
        rate_out = parse_decimal(token_at(parts, 5))
        name = iface.lower()
        metrics.append(MetricSample(f"{name}_in", rate_in))
        metrics.append(MetricSample(f"{name}_out", negate(rate_out)))
    return metrics
