"""SCL low and high period search.

For each prescaler candidate, tries every (SCLL, SCLH) pair and keeps the one
whose resulting SCL period is closest to the nominal period of the speed mode:

    tLOW  = tAF(min) + tDNF + 2 x tI2CCLK + [(SCLL+1) x tPRESC]
    tHIGH = tAF(min) + tDNF + 2 x tI2CCLK + [(SCLH+1) x tPRESC]
    tSCL  = tf + tLOW + tr + tHIGH

The I2CCLK period must respect tI2CCLK < (tLOW - tfilters) / 4 and
tI2CCLK < tHIGH.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from i2c_timing.core.candidate import TimingCandidate
from i2c_timing.core.delays import analog_filter_delay, clock_period_ns, digital_filter_delay
from i2c_timing.core.speed_mode import SpeedMode
from i2c_timing.utils.config_loader import SpeedCharacteristics, SpeedTable, get_speed_table
from i2c_timing.utils.consts import SCLH_MAX, SCLL_MAX, ConstUtils

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SclTiming:
    """Per-request quantities shared by every candidate of the search."""

    period: int  # tI2CCLK
    filter_delay: int  # tAF(min) + tDNF
    charac: SpeedCharacteristics

    def phase_time(self, tpresc: int, count: int) -> int:
        """Duration of an SCL low or high phase for a SCLL/SCLH counter value."""
        return self.filter_delay + 2 * self.period + (count + 1) * tpresc

    def low_ok(self, low_time: int) -> bool:
        return (
            low_time > self.charac.lscl_min
            and self.period < (low_time - self.filter_delay) // 4
        )

    def high_ok(self, high_time: int) -> bool:
        return high_time >= self.charac.hscl_min and self.period < high_time

    def scl_period(self, low_time: int, high_time: int) -> int:
        return low_time + high_time + self.charac.trise + self.charac.tfall


def _valid_phases(
    timing: SclTiming, tpresc: int
) -> Iterator[tuple[int, int, int, int]]:
    """Yield (scl_low, scl_high, low_time, high_time) in search order."""
    for scl_low in range(SCLL_MAX):
        low_time = timing.phase_time(tpresc, scl_low)
        if not timing.low_ok(low_time):
            continue

        for scl_high in range(SCLH_MAX):
            high_time = timing.phase_time(tpresc, scl_high)
            if timing.high_ok(high_time):
                yield scl_low, scl_high, low_time, high_time


def _check_period_window(
    speed: SpeedMode, charac: SpeedCharacteristics, scl_period: int
) -> None:
    """Warn when the selected SCL period lies outside the mode's frequency window."""
    period_min = ConstUtils.NSEC_PER_SEC // charac.freq_max
    period_max = ConstUtils.NSEC_PER_SEC // charac.freq_min
    if not period_min <= scl_period <= period_max:
        logger.warning(
            f"{speed.name}: SCL period {scl_period}ns is outside "
            f"[{period_min}, {period_max}]ns, bus frequency is off the mode window"
        )


def compute_scll_sclh(
    clock_src_freq: int,
    speed: SpeedMode,
    candidates: Sequence[TimingCandidate],
    use_analog_filter: bool = False,
    table: Optional[SpeedTable] = None,
) -> Optional[int]:
    """Compute SCLL and SCLH for the candidates and select the best one.

    The scl_low/scl_high fields of candidates are updated in place each time
    a strictly better pair is found. Among equal errors the first one found
    wins.

    Returns:
        Index of the best candidate, or None if no pair gets closer to the
        nominal SCL period than one full period.
    """
    charac = (get_speed_table() if table is None else table)[speed]
    period = clock_period_ns(clock_src_freq)
    target_period = clock_period_ns(charac.freq)
    af_min, _ = analog_filter_delay(use_analog_filter)

    timing = SclTiming(
        period=period,
        filter_delay=af_min + digital_filter_delay(period, charac.dnf),
        charac=charac,
    )

    best_error = target_period
    best_period = 0
    best_index: Optional[int] = None

    for index, candidate in enumerate(candidates):
        # tPRESC = (PRESC+1) x tI2CCLK
        tpresc = (candidate.prescaler + 1) * period

        for scl_low, scl_high, low_time, high_time in _valid_phases(timing, tpresc):
            scl_period = timing.scl_period(low_time, high_time)
            error = abs(scl_period - target_period)
            if error < best_error:
                best_error = error
                best_period = scl_period
                candidate.scl_low = scl_low
                candidate.scl_high = scl_high
                best_index = index

    if best_index is None:
        logger.debug(f"{speed.name}: no SCL low/high pair found")
    else:
        logger.debug(
            f"{speed.name}: best candidate {best_index} with error {best_error}ns"
        )
        _check_period_window(speed, charac, best_period)
    return best_index
