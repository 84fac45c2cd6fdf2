"""Timing generator parameter set."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TimingCandidate:
    """One combination of timing generator counter values.

    prescaler, setup_delay and hold_delay come from the prescaler/delay
    search; scl_high and scl_low are filled in by the SCL high/low search.
    """

    prescaler: int  # PRESC, 0..15
    setup_delay: int  # SCLDEL, 0..15
    hold_delay: int  # SDADEL, 0..15
    scl_high: int = 0  # SCLH, 0..255
    scl_low: int = 0  # SCLL, 0..255
