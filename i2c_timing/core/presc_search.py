"""Prescaler, SCL delay and SDA delay search.

Walks every (PRESC, SCLDEL, SDADEL) combination in ascending order and keeps
the first combination found for each prescaler that satisfies the data setup
and hold bounds of the selected speed mode:

    tPRESC = (PRESC+1) x tI2CCLK
    SDADEL >= {tf + tHD;DAT(min) - tAF(min) - tDNF - [3 x tI2CCLK]} / tPRESC
    SDADEL <= {tVD;DAT(max) - tr - tAF(max) - tDNF - [4 x tI2CCLK]} / tPRESC
    {[tr + tSU;DAT(min)] / tPRESC} - 1 <= SCLDEL
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from i2c_timing.core.candidate import TimingCandidate
from i2c_timing.core.delays import analog_filter_delay, clock_period_ns
from i2c_timing.core.speed_mode import SpeedMode
from i2c_timing.utils.config_loader import SpeedCharacteristics, SpeedTable, get_speed_table
from i2c_timing.utils.consts import PRESC_MAX, SCLDEL_MAX, SDADEL_MAX, VALID_TIMING_NBR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelayBounds:
    """Acceptable data hold and setup times in ns for one source clock."""

    hold_min: int
    hold_max: int
    setup_min: int

    def accepts_hold(self, hold_time: int) -> bool:
        return self.hold_min <= hold_time <= self.hold_max


def compute_delay_bounds(
    period: int, charac: SpeedCharacteristics, use_analog_filter: bool = False
) -> DelayBounds:
    """Derive SDADEL/SCLDEL time bounds, clamping negative bounds to zero."""
    af_min, af_max = analog_filter_delay(use_analog_filter)

    hold_min = charac.tfall + charac.hddat_min - af_min - (charac.dnf + 3) * period
    hold_max = charac.vddat_max - charac.trise - af_max - (charac.dnf + 4) * period

    return DelayBounds(
        hold_min=max(hold_min, 0),
        hold_max=max(hold_max, 0),
        setup_min=charac.trise + charac.sudat_min,
    )


def _find_hold_delay(prescaler: int, period: int, bounds: DelayBounds) -> Optional[int]:
    """Return the smallest SDADEL whose hold time fits the bounds, if any."""
    for hold_delay in range(SDADEL_MAX):
        # tSDADEL = SDADEL x (PRESC+1) x tI2CCLK
        hold_time = hold_delay * (prescaler + 1) * period
        if bounds.accepts_hold(hold_time):
            return hold_delay
    return None


def _find_delays(prescaler: int, period: int, bounds: DelayBounds) -> Optional[TimingCandidate]:
    """Return the first (SCLDEL, SDADEL) pair valid for this prescaler."""
    for setup_delay in range(SCLDEL_MAX):
        # tSCLDEL = (SCLDEL+1) x (PRESC+1) x tI2CCLK
        setup_time = (setup_delay + 1) * (prescaler + 1) * period
        if setup_time < bounds.setup_min:
            continue

        hold_delay = _find_hold_delay(prescaler, period, bounds)
        if hold_delay is not None:
            return TimingCandidate(
                prescaler=prescaler, setup_delay=setup_delay, hold_delay=hold_delay
            )
    return None


def compute_presc_scldel_sdadel(
    clock_src_freq: int,
    speed: SpeedMode,
    use_analog_filter: bool = False,
    table: Optional[SpeedTable] = None,
) -> list[TimingCandidate]:
    """Compute PRESC, SCLDEL and SDADEL candidates.

    Args:
        clock_src_freq: I2C source clock in Hz
        speed: Bus speed mode
        use_analog_filter: Account for the analog noise filter delays
        table: Speed characteristics; the bundled table when None

    Returns:
        New list of candidates with strictly increasing prescalers, at most
        one per prescaler and at most VALID_TIMING_NBR entries. SCL high/low
        fields are left at zero.
    """
    charac = (get_speed_table() if table is None else table)[speed]
    period = clock_period_ns(clock_src_freq)
    bounds = compute_delay_bounds(period, charac, use_analog_filter)

    logger.debug(
        f"{speed.name}: tI2CCLK={period}ns hold=[{bounds.hold_min}, "
        f"{bounds.hold_max}]ns setup>={bounds.setup_min}ns"
    )

    candidates: list[TimingCandidate] = []
    for prescaler in range(PRESC_MAX):
        candidate = _find_delays(prescaler, period, bounds)
        if candidate is None:
            continue

        candidates.append(candidate)
        if len(candidates) >= VALID_TIMING_NBR:
            break

    logger.debug(f"{speed.name}: {len(candidates)} prescaler candidates")
    return candidates
