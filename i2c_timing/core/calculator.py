"""End-to-end TIMINGR computation.

Selects the speed mode for a bus frequency, runs the prescaler/delay search
followed by the SCL low/high search on a fresh candidate list, and packs the
best candidate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from i2c_timing.core.candidate import TimingCandidate
from i2c_timing.core.exceptions import (
    InvalidArgumentError,
    NoMatchingSpeedModeError,
    NoValidTimingError,
)
from i2c_timing.core.presc_search import compute_presc_scldel_sdadel
from i2c_timing.core.register import format_timing, pack_timing
from i2c_timing.core.scl_search import compute_scll_sclh
from i2c_timing.core.speed_mode import SpeedMode
from i2c_timing.utils.config_loader import SpeedTable, get_speed_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimingResult:
    """Outcome of one timing computation."""

    clock_src_freq: int
    i2c_freq: int
    use_analog_filter: bool
    speed: SpeedMode
    timing: TimingCandidate
    value: int  # packed TIMINGR

    @property
    def hex(self) -> str:
        return format_timing(self.value)


def _validate_frequency(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(
            f"{name} must be positive, got {value}", details={name: value}
        )


def select_speed_mode(i2c_freq: int, table: Optional[SpeedTable] = None) -> SpeedMode:
    """Return the speed mode whose frequency window contains i2c_freq.

    Raises:
        NoMatchingSpeedModeError: If i2c_freq is outside every window
    """
    table = get_speed_table() if table is None else table
    for mode in SpeedMode:
        if table[mode].accepts(i2c_freq):
            return mode
    raise NoMatchingSpeedModeError(i2c_freq)


def compute_timing(
    clock_src_freq: int,
    i2c_freq: int,
    use_analog_filter: bool = False,
    table: Optional[SpeedTable] = None,
) -> TimingResult:
    """Compute the TIMINGR value for a source clock and bus frequency.

    Args:
        clock_src_freq: I2C peripheral source clock in Hz
        i2c_freq: Desired bus frequency in Hz
        use_analog_filter: Account for the analog noise filter delays
        table: Speed characteristics; the bundled table when None

    Returns:
        TimingResult for the best candidate

    Raises:
        InvalidArgumentError: If a frequency is not a positive integer
        NoMatchingSpeedModeError: If i2c_freq matches no speed mode
        NoValidTimingError: If no SCL low/high pair satisfies the constraints
    """
    _validate_frequency("clock_src_freq", clock_src_freq)
    _validate_frequency("i2c_freq", i2c_freq)

    table = get_speed_table() if table is None else table
    speed = select_speed_mode(i2c_freq, table)
    logger.debug(f"{i2c_freq} Hz selects {speed.name} mode")

    candidates = compute_presc_scldel_sdadel(
        clock_src_freq, speed, use_analog_filter=use_analog_filter, table=table
    )
    index = compute_scll_sclh(
        clock_src_freq,
        speed,
        candidates,
        use_analog_filter=use_analog_filter,
        table=table,
    )
    if index is None:
        raise NoValidTimingError(clock_src_freq, speed.name)

    timing = candidates[index]
    return TimingResult(
        clock_src_freq=clock_src_freq,
        i2c_freq=i2c_freq,
        use_analog_filter=bool(use_analog_filter),
        speed=speed,
        timing=timing,
        value=pack_timing(timing),
    )
