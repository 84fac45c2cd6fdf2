import tempfile
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import yaml

from i2c_timing.core.exceptions import ConfigurationError
from i2c_timing.core.speed_mode import SpeedMode
from i2c_timing.utils.config_loader import (
    SpeedCharacteristics,
    SpeedTable,
    _get_config_path,
    _load_yaml_file,
    _parse_speed_table_from_dict,
    clear_speed_table_cache,
    get_speed_table,
    load_speed_table,
)


class TestSpeedCharacteristics:
    def test_characteristics_immutable(self):
        charac = get_speed_table()[SpeedMode.FAST]
        with pytest.raises(AttributeError):
            charac.freq = 0

    def test_accepts_window(self):
        charac = get_speed_table()[SpeedMode.FAST]
        assert charac.accepts(320_000)
        assert charac.accepts(480_000)
        assert not charac.accepts(480_001)


class TestBundledTable:
    def test_bundled_values(self):
        table = load_speed_table()

        assert len(table) == 3
        assert table[SpeedMode.STANDARD] == SpeedCharacteristics(
            freq=100000,
            freq_min=80000,
            freq_max=120000,
            hddat_min=0,
            vddat_max=3450,
            sudat_min=250,
            lscl_min=4700,
            hscl_min=4000,
            trise=640,
            tfall=20,
            dnf=0,
        )
        assert table[SpeedMode.FAST].trise == 250
        assert table[SpeedMode.FAST_PLUS].hscl_min == 260
        assert [c.freq for c in table] == [100000, 400000, 1000000]

    def test_matches_fixture(self, valid_speed_table_dict):
        assert load_speed_table() == _parse_speed_table_from_dict(valid_speed_table_dict)


class TestGetConfigPath:
    def test_get_config_path_default(self):
        path = _get_config_path()
        assert path.endswith("speed_modes.yaml")
        assert Path(path).exists()

    def test_get_config_path_custom(self):
        custom_path = "/path/to/custom/speed_modes.yaml"
        assert _get_config_path(custom_path) == custom_path


class TestLoadYamlFile:
    def test_load_valid_yaml(self):
        yaml_content = {"speed_modes": {"standard": {"freq": 100000}}}
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(yaml_content, f)
            f.flush()
            path = Path(f.name)
        try:
            assert _load_yaml_file(path) == yaml_content
        finally:
            path.unlink()

    def test_load_invalid_yaml(self, temp_yaml_file):
        temp_yaml_file.write_text("{ invalid: yaml: content", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            _load_yaml_file(tmp_path / "missing.yaml")

    def test_root_must_be_mapping(self, temp_yaml_file):
        temp_yaml_file.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)


class TestParseSpeedTableFromDict:
    def test_parse_valid_table(self, valid_speed_table_dict):
        table = _parse_speed_table_from_dict(valid_speed_table_dict)
        assert isinstance(table, SpeedTable)
        assert table[SpeedMode.FAST_PLUS].freq == 1000000

    def test_missing_section(self):
        with pytest.raises(ConfigurationError):
            _parse_speed_table_from_dict({})

    def test_missing_mode(self, valid_speed_table_dict):
        del valid_speed_table_dict["speed_modes"]["fast_plus"]
        with pytest.raises(ConfigurationError, match="fast_plus"):
            _parse_speed_table_from_dict(valid_speed_table_dict)

    def test_missing_characteristic(self, valid_speed_table_dict):
        del valid_speed_table_dict["speed_modes"]["fast"]["tfall"]
        with pytest.raises(ConfigurationError):
            _parse_speed_table_from_dict(valid_speed_table_dict)

    def test_unknown_characteristic(self, valid_speed_table_dict):
        valid_speed_table_dict["speed_modes"]["fast"]["tglitch"] = 50
        with pytest.raises(ConfigurationError):
            _parse_speed_table_from_dict(valid_speed_table_dict)

    @pytest.mark.parametrize("value", ["640", 6.4, True])
    def test_non_integer_value(self, valid_speed_table_dict, value):
        valid_speed_table_dict["speed_modes"]["standard"]["trise"] = value
        with pytest.raises(ConfigurationError, match="speed_modes.standard.trise"):
            _parse_speed_table_from_dict(valid_speed_table_dict)

    @pytest.mark.parametrize("name", ["freq", "trise"])
    def test_null_value(self, valid_speed_table_dict, name):
        valid_speed_table_dict["speed_modes"]["standard"][name] = None
        with pytest.raises(ConfigurationError, match=f"speed_modes.standard.{name}"):
            _parse_speed_table_from_dict(valid_speed_table_dict)

    def test_negative_value(self, valid_speed_table_dict):
        valid_speed_table_dict["speed_modes"]["standard"]["tfall"] = -20
        with pytest.raises(ConfigurationError):
            _parse_speed_table_from_dict(valid_speed_table_dict)

    def test_mode_not_a_mapping(self, valid_speed_table_dict):
        valid_speed_table_dict["speed_modes"]["fast"] = [400000]
        with pytest.raises(ConfigurationError):
            _parse_speed_table_from_dict(valid_speed_table_dict)

    def test_zero_nominal_frequency(self, valid_speed_table_dict):
        valid_speed_table_dict["speed_modes"]["standard"].update(
            freq=0, freq_min=0, freq_max=120000
        )
        with pytest.raises(ConfigurationError):
            _parse_speed_table_from_dict(valid_speed_table_dict)

    def test_nominal_frequency_outside_window(self, valid_speed_table_dict):
        valid_speed_table_dict["speed_modes"]["fast"]["freq"] = 500000
        with pytest.raises(ConfigurationError):
            _parse_speed_table_from_dict(valid_speed_table_dict)

    def test_overlapping_windows(self, valid_speed_table_dict):
        valid_speed_table_dict["speed_modes"]["fast"]["freq_max"] = 900000
        with pytest.raises(ConfigurationError, match="overlaps"):
            _parse_speed_table_from_dict(valid_speed_table_dict)


class TestLoadSpeedTable:
    def test_load_from_custom_path(self, temp_speed_table_yaml_file):
        table = load_speed_table(path=str(temp_speed_table_yaml_file))
        assert table == load_speed_table()


class TestGetSpeedTable:
    def test_get_speed_table_is_cached(self):
        clear_speed_table_cache()
        assert get_speed_table() is get_speed_table()

    def test_clear_cache_reloads(self):
        first = get_speed_table()
        clear_speed_table_cache()
        second = get_speed_table()

        assert first is not second
        assert first == second

    def test_get_speed_table_loads_when_empty(self):
        with patch("i2c_timing.utils.config_loader._TABLE_CACHE", {}):
            with patch("i2c_timing.utils.config_loader.load_speed_table") as mock_load:
                mock_table = Mock(spec=SpeedTable)
                mock_load.return_value = mock_table
                result = get_speed_table()
                mock_load.assert_called_once_with()
                assert result == mock_table
