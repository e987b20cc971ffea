"""Parse human-readable delay expressions such as 500ms, 2s, 1m."""
from __future__ import annotations

import logging
import re
from typing import Optional

logger = logging.getLogger("slack_revoke.duration")

DEFAULT_DELAY_MS = 100

_DURATION_RE = re.compile(r"(\d+(?:\.\d+)?)(ms|s|m|h)?", re.IGNORECASE | re.ASCII)

_UNIT_MULTIPLIERS = {
    "ms": 1,
    "s": 1000,
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
}


def parse_duration(duration: Optional[str]) -> float:
    """Return the duration in milliseconds, falling back to 100ms."""
    if not duration:
        return DEFAULT_DELAY_MS

    match = _DURATION_RE.fullmatch(str(duration))
    if not match:
        logger.warning(f"Invalid duration format: {duration}, using default {DEFAULT_DELAY_MS}ms")
        return DEFAULT_DELAY_MS

    value = float(match.group(1))
    unit = (match.group(2) or "ms").lower()
    return value * _UNIT_MULTIPLIERS[unit]
