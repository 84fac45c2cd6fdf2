"""I2C bus speed mode enumeration."""

from enum import IntEnum


class SpeedMode(IntEnum):
    """Bus speed classes, used as index into the speed characteristics table."""

    STANDARD = 0  # 100 kHz
    FAST = 1  # 400 kHz
    FAST_PLUS = 2  # 1 MHz

    @property
    def key(self) -> str:
        """Name of the mode's section in the speed table YAML."""
        return self.name.lower()
