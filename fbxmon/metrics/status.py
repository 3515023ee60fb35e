"""Connection and phone handset state flags."""

from __future__ import annotations

import logging

from fbxmon.device.models import RawPage
from fbxmon.metrics.base import MetricSample

logger = logging.getLogger(__name__)

STATE_LABEL = "Etat"
STATE_OK = "Ok"
HANDSET_LABEL = "Etat du combiné"
HANDSET_HUNG_UP = "Raccroché"


def extract_status_metrics(page: RawPage) -> list[MetricSample]:
    return [
        MetricSample("status", _connection_flag(page)),
        MetricSample("phone", _handset_flag(page)),
    ]


def _connection_flag(page: RawPage) -> int:
    """1 when an ``Etat  Ok`` line is present, 0 otherwise."""
    for line in page:
        parts = line.split()
        if len(parts) >= 2 and parts[0] == STATE_LABEL and parts[1] == STATE_OK:
            return 1
    return 0


def _handset_flag(page: RawPage) -> int:
    """0 when the handset is on hook, 1 otherwise.

    A page without the handset line reads as active (1), unlike the
    connection flag which reads as down.
    """
    for line in page:
        stripped = line.strip()
        if not stripped.startswith(HANDSET_LABEL):
            continue
        state = stripped[len(HANDSET_LABEL):].strip()
        logger.debug("Handset state: %r", state)
        if state == HANDSET_HUNG_UP:
            return 0
        return 1
    return 1
