"""ADSL line extractors — ATM bandwidth, attenuation, SNR margin, error counters."""

from __future__ import annotations

from fbxmon.device.models import RawPage
from fbxmon.metrics.base import (
    MetricSample,
    Number,
    find_line,
    parse_decimal,
    parse_int,
    token_at,
)

ATM_MARKER = "ATM"
ATTENUATION_LABEL = "Atténuation"
MARGIN_LABEL = "Marge"
KILO = 1024


def _down_up(prefix: str, down: Number, up: Number) -> list[MetricSample]:
    return [
        MetricSample(f"{prefix}_down", down),
        MetricSample(f"{prefix}_up", up),
    ]


def extract_atm_metrics(page: RawPage) -> list[MetricSample]:
    """``Débit ATM  16353 kb/s  1136 kb/s`` — scaled by 1024."""
    parts = find_line(page, lambda p: token_at(p, 2) == ATM_MARKER)
    down = parse_decimal(token_at(parts, 3))
    up = parse_decimal(token_at(parts, 5))
    return _down_up("atm", down * KILO, up * KILO)


def extract_attenuation_metrics(page: RawPage) -> list[MetricSample]:
    """``Atténuation  31.50 dB  19.20 dB``"""
    parts = find_line(page, lambda p: p[0] == ATTENUATION_LABEL)
    return _down_up(
        "attenuation",
        parse_decimal(token_at(parts, 2)),
        parse_decimal(token_at(parts, 4)),
    )


def extract_snr_metrics(page: RawPage) -> list[MetricSample]:
    """``Marge de bruit  6.30 dB  6.80 dB``"""
    parts = find_line(page, lambda p: p[0] == MARGIN_LABEL)
    return _down_up(
        "snr",
        parse_decimal(token_at(parts, 4)),
        parse_decimal(token_at(parts, 6)),
    )


def _counter_extractor(label: str):
    prefix = label.lower()

    def extract(page: RawPage) -> list[MetricSample]:
        parts = find_line(page, lambda p: p[0] == label)
        return _down_up(
            prefix,
            parse_int(token_at(parts, 2)),
            parse_int(token_at(parts, 3)),
        )

    extract.__name__ = f"extract_{prefix}_metrics"
    extract.__doc__ = f"``{label}  <down>  <up>`` error counters."
    return extract


extract_fec_metrics = _counter_extractor("FEC")
extract_hec_metrics = _counter_extractor("HEC")
extract_crc_metrics = _counter_extractor("CRC")
