"""Helpers for loading and validating the I2C speed characteristics table."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Iterator, Optional
import threading

import yaml  # type: ignore[import-untyped]

from i2c_timing.core.exceptions import ConfigurationError
from i2c_timing.core.speed_mode import SpeedMode


@dataclass(frozen=True)
class SpeedCharacteristics:
    """Electrical characteristics of one bus speed mode.

    Frequencies are in Hz, times in ns.
    """

    freq: int  # nominal bus frequency
    freq_min: int
    freq_max: int
    hddat_min: int  # data hold time
    vddat_max: int  # data valid time
    sudat_min: int  # data setup time
    lscl_min: int  # SCL low period
    hscl_min: int  # SCL high period
    trise: int
    tfall: int
    dnf: int  # digital noise filter coefficient

    def accepts(self, frequency: int) -> bool:
        """True if frequency lies inside this mode's [freq_min, freq_max] window."""
        return self.freq_min <= frequency <= self.freq_max


@dataclass(frozen=True)
class SpeedTable:
    """Speed characteristics for all modes, indexed by SpeedMode."""

    modes: tuple[SpeedCharacteristics, ...]

    def __getitem__(self, speed: SpeedMode) -> SpeedCharacteristics:
        return self.modes[speed]

    def __iter__(self) -> Iterator[SpeedCharacteristics]:
        return iter(self.modes)

    def __len__(self) -> int:
        return len(self.modes)


# Bundled table cache with thread safety
_TABLE_CACHE: dict[str, SpeedTable] = {}
_CACHE_LOCK = threading.RLock()
_BUNDLED_KEY = "bundled"


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled table lives next to the package: i2c_timing/speed_modes.yaml
        base = Path(__file__).parent.parent / "speed_modes.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError("config root must be a mapping")

    return raw


def _build_speed_characteristics(mode: SpeedMode, raw: Any) -> SpeedCharacteristics:
    if not isinstance(raw, dict):
        raise ConfigurationError(
            config_key=f"speed_modes.{mode.key}", message="must be a mapping"
        )

    for name in (f.name for f in fields(SpeedCharacteristics)):
        if name not in raw:
            continue
        value = raw[name]
        # bool is an int subclass; reject it explicitly. A null value is rejected too
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigurationError(
                config_key=f"speed_modes.{mode.key}.{name}",
                message=f"expected an integer, got {value!r}",
            )
        if value < 0:
            raise ConfigurationError(
                config_key=f"speed_modes.{mode.key}.{name}",
                message="must not be negative",
            )

    try:
        return SpeedCharacteristics(**raw)
    except TypeError as exc:
        raise ConfigurationError(
            config_key=f"speed_modes.{mode.key}",
            message=f"Invalid config schema: {exc}",
        ) from exc


def _parse_speed_table_from_dict(raw: dict[str, Any]) -> SpeedTable:
    try:
        modes_raw = raw["speed_modes"]
        table = SpeedTable(
            modes=tuple(
                _build_speed_characteristics(mode, modes_raw[mode.key])
                for mode in SpeedMode
            )
        )
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc
    except TypeError as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    _validate_speed_table(table)
    return table


def _validate_speed_table(table: SpeedTable) -> None:
    """Sanity checks so that mode selection is unambiguous."""
    for mode in SpeedMode:
        charac = table[mode]
        if charac.freq <= 0:
            raise ConfigurationError(
                config_key=f"speed_modes.{mode.key}.freq", message="must be positive"
            )
        if not charac.freq_min <= charac.freq <= charac.freq_max:
            raise ConfigurationError(
                config_key=f"speed_modes.{mode.key}",
                message="freq must lie within [freq_min, freq_max]",
            )

    # Frequency windows must not overlap, otherwise two modes match one speed
    def overlaps(a: SpeedCharacteristics, b: SpeedCharacteristics) -> bool:
        return not (a.freq_max < b.freq_min or b.freq_max < a.freq_min)

    ordered = list(SpeedMode)
    for i, mode_a in enumerate(ordered):
        for mode_b in ordered[i + 1 :]:
            if overlaps(table[mode_a], table[mode_b]):
                raise ConfigurationError(
                    config_key="speed_modes",
                    message=f"{mode_a.key} window overlaps {mode_b.key} window",
                )


def load_speed_table(path: Optional[str] = None) -> SpeedTable:
    """Load and validate a speed characteristics table from a YAML file.

    Args:
        path: Optional path to YAML table. If None, load the bundled
            i2c_timing/speed_modes.yaml.

    Returns:
        SpeedTable instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_speed_table_from_dict(raw=raw)


def get_speed_table() -> SpeedTable:
    """Return the bundled speed table, loading and caching it if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    with _CACHE_LOCK:
        if _BUNDLED_KEY not in _TABLE_CACHE:
            _TABLE_CACHE[_BUNDLED_KEY] = load_speed_table()
        return _TABLE_CACHE[_BUNDLED_KEY]


def clear_speed_table_cache() -> None:
    """Clear the cached bundled table.

    All subsequent calls to get_speed_table() will reload from disk.
    """
    with _CACHE_LOCK:
        _TABLE_CACHE.clear()
