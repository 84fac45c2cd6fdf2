"""Constants and utility values for the timing calculator."""


class ConstUtils:
    """Bitwise masks and time unit constants."""

    MASK_32_BITS = 0xFFFFFFFF
    """32-bit mask: 0xFFFFFFFF"""

    NSEC_PER_SEC = 1_000_000_000
    """Nanoseconds in one second; all timing math is in integer ns."""


# Timing generator counter limits (exclusive upper bounds)
PRESC_MAX = 16
SCLDEL_MAX = 16
SDADEL_MAX = 16
SCLH_MAX = 256
SCLL_MAX = 256

VALID_TIMING_NBR = 128
"""Capacity of the prescaler/delay candidate list."""

# Analog filter delay bounds
ANALOG_FILTER_DELAY_MIN = 50
"""Minimum analog filter delay in ns."""
ANALOG_FILTER_DELAY_MAX = 260
"""Maximum analog filter delay in ns."""
