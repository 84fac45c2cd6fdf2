"""TIMINGR register layout and packing.

The timing generator is configured through a single 32-bit register:

    [31:28] PRESC   prescaler
    [27:20] SCLDEL  data setup delay (4-bit value)
    [19:16] SDADEL  data hold delay
    [15:8]  SCLH    SCL high period
    [7:0]   SCLL    SCL low period

Fields are checked against their width before packing; oversized values are
rejected rather than masked.
"""

from __future__ import annotations

from dataclasses import dataclass

from i2c_timing.core.candidate import TimingCandidate
from i2c_timing.core.exceptions import FieldRangeError
from i2c_timing.utils.consts import ConstUtils


@dataclass(frozen=True)
class FieldDescriptor:
    """Metadata about a single register bitfield."""

    name: str
    attr: str  # TimingCandidate attribute holding the value
    shift: int
    width: int  # bits

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    def encode(self, value: int) -> int:
        """Shift value into place.

        Raises:
            FieldRangeError: If value does not fit in width bits
        """
        if not 0 <= value <= self.mask:
            raise FieldRangeError(self.name, value, self.width)
        return value << self.shift

    def decode(self, register: int) -> int:
        return (register >> self.shift) & self.mask


TIMINGR_FIELDS = (
    FieldDescriptor(name="PRESC", attr="prescaler", shift=28, width=4),
    FieldDescriptor(name="SCLDEL", attr="setup_delay", shift=20, width=4),
    FieldDescriptor(name="SDADEL", attr="hold_delay", shift=16, width=4),
    FieldDescriptor(name="SCLH", attr="scl_high", shift=8, width=8),
    FieldDescriptor(name="SCLL", attr="scl_low", shift=0, width=8),
)


def pack_timing(candidate: TimingCandidate) -> int:
    """Encode a fully populated candidate into a TIMINGR value."""
    value = 0
    for field in TIMINGR_FIELDS:
        value |= field.encode(getattr(candidate, field.attr))
    return value


def unpack_timing(value: int) -> TimingCandidate:
    """Decode a TIMINGR value into its five fields."""
    if not 0 <= value <= ConstUtils.MASK_32_BITS:
        raise FieldRangeError("TIMINGR", value, 32)
    return TimingCandidate(
        **{field.attr: field.decode(value) for field in TIMINGR_FIELDS}
    )


def format_timing(value: int) -> str:
    """Render a TIMINGR value as 8 uppercase hex digits."""
    return f"{value:08X}"
