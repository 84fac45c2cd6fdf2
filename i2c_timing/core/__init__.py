"""Core modules for the timing calculator.

- speed_mode: bus speed mode enumeration
- delays: clock period and filter delay derivation
- presc_search: PRESC/SCLDEL/SDADEL candidate search
- scl_search: SCLL/SCLH search and best candidate selection
- register: TIMINGR bitfield layout and packing
- calculator: speed mode selection and the end-to-end pipeline
"""

from i2c_timing.core.exceptions import (
    ConfigurationError,
    FieldRangeError,
    InvalidArgumentError,
    NoMatchingSpeedModeError,
    NoValidTimingError,
    TimingError,
)
from i2c_timing.core.speed_mode import SpeedMode
from i2c_timing.core.candidate import TimingCandidate
from i2c_timing.core.delays import analog_filter_delay, clock_period_ns, digital_filter_delay
from i2c_timing.core.presc_search import DelayBounds, compute_delay_bounds, compute_presc_scldel_sdadel
from i2c_timing.core.scl_search import compute_scll_sclh
from i2c_timing.core.register import (
    TIMINGR_FIELDS,
    FieldDescriptor,
    format_timing,
    pack_timing,
    unpack_timing,
)
from i2c_timing.core.calculator import TimingResult, compute_timing, select_speed_mode

__all__ = [
    # Errors
    "TimingError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NoMatchingSpeedModeError",
    "NoValidTimingError",
    "FieldRangeError",
    # Data model
    "SpeedMode",
    "TimingCandidate",
    # Delays
    "clock_period_ns",
    "analog_filter_delay",
    "digital_filter_delay",
    # Searches
    "DelayBounds",
    "compute_delay_bounds",
    "compute_presc_scldel_sdadel",
    "compute_scll_sclh",
    # Register
    "FieldDescriptor",
    "TIMINGR_FIELDS",
    "pack_timing",
    "unpack_timing",
    "format_timing",
    # Calculator
    "TimingResult",
    "compute_timing",
    "select_speed_mode",
]
