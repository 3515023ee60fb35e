"""Metric extraction — maps metric families to extractor functions."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from fbxmon.device.models import RawPage
from fbxmon.errors import UnrecognizedFamily
from fbxmon.metrics.base import MetricSample
from fbxmon.metrics.line import (
    extract_atm_metrics,
    extract_attenuation_metrics,
    extract_crc_metrics,
    extract_fec_metrics,
    extract_hec_metrics,
    extract_snr_metrics,
)
from fbxmon.metrics.rates import extract_rate_metrics
from fbxmon.metrics.status import extract_status_metrics
from fbxmon.metrics.uptime import extract_uptime_metrics

ExtractorFunc = Callable[[RawPage], list[MetricSample]]


class MetricFamily(str, Enum):
    STATUS = "status"
    UPTIME = "uptime"
    ATM = "atm"
    ATTENUATION = "attenuation"
    SNR = "snr"
    FEC = "fec"
    HEC = "hec"
    CRC = "crc"
    RATES = "rates"

    @classmethod
    def names(cls) -> list[str]:
        return [family.value for family in cls]

    @classmethod
    def parse(cls, name: str) -> MetricFamily:
        try:
            return cls(name)
        except ValueError:
            raise UnrecognizedFamily(name, cls.names()) from None


EXTRACTORS: dict[MetricFamily, ExtractorFunc] = {
    MetricFamily.STATUS: extract_status_metrics,
    MetricFamily.UPTIME: extract_uptime_metrics,
    MetricFamily.ATM: extract_atm_metrics,
    MetricFamily.ATTENUATION: extract_attenuation_metrics,
    MetricFamily.SNR: extract_snr_metrics,
    MetricFamily.FEC: extract_fec_metrics,
    MetricFamily.HEC: extract_hec_metrics,
    MetricFamily.CRC: extract_crc_metrics,
    MetricFamily.RATES: extract_rate_metrics,
}


def extract(family: MetricFamily, page: RawPage) -> list[MetricSample]:
    return EXTRACTORS[family](page)
