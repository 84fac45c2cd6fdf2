"""Clock period and filter delay derivation.

All values are integer nanoseconds. Division rounds half up by adding half
the divisor before flooring, never through floating point.
"""

from __future__ import annotations

from i2c_timing.utils.consts import (
    ANALOG_FILTER_DELAY_MAX,
    ANALOG_FILTER_DELAY_MIN,
    ConstUtils,
)


def clock_period_ns(freq_hz: int) -> int:
    """Return the period of a freq_hz clock, rounded to the nearest ns.

    Raises:
        ZeroDivisionError: if freq_hz is 0
        ValueError: if freq_hz is negative
    """
    if freq_hz < 0:
        raise ValueError("Clock frequency must be positive")
    return (ConstUtils.NSEC_PER_SEC + freq_hz // 2) // freq_hz


def analog_filter_delay(enabled: bool) -> tuple[int, int]:
    """Return the (min, max) analog filter delay, or (0, 0) when disabled."""
    if enabled:
        return ANALOG_FILTER_DELAY_MIN, ANALOG_FILTER_DELAY_MAX
    return 0, 0


def digital_filter_delay(period: int, coefficient: int) -> int:
    """tDNF = DNF x tI2CCLK"""
    return coefficient * period
