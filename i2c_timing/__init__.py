"""I2C timing register calculator.

This package computes TIMINGR values (prescaler, data setup/hold delays and
SCL high/low periods) for I2C peripherals from a source clock frequency and
a target bus speed. It is an offline host-side tool; nothing here touches
hardware.

Architecture:
- core: speed modes, delay derivation, the two exhaustive searches, the
  register packer and the end-to-end calculator
- utils: constants and the speed characteristics table loader
- cli: thin command line front end

Getting started:
    from i2c_timing import compute_timing

    result = compute_timing(8_000_000, 100_000)
    print(result.hex)
"""

__version__ = "1.0.4"

from i2c_timing.core.calculator import TimingResult, compute_timing, select_speed_mode
from i2c_timing.core.candidate import TimingCandidate
from i2c_timing.core.exceptions import (
    ConfigurationError,
    FieldRangeError,
    InvalidArgumentError,
    NoMatchingSpeedModeError,
    NoValidTimingError,
    TimingError,
)
from i2c_timing.core.register import pack_timing, unpack_timing
from i2c_timing.core.speed_mode import SpeedMode

__all__ = [
    "__version__",
    # Calculator
    "compute_timing",
    "select_speed_mode",
    "TimingResult",
    # Data model
    "SpeedMode",
    "TimingCandidate",
    # Register
    "pack_timing",
    "unpack_timing",
    # Errors
    "TimingError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NoMatchingSpeedModeError",
    "NoValidTimingError",
    "FieldRangeError",
]
