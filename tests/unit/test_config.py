"""Unit tests for configuration loading and saving."""

from __future__ import annotations

import tomllib

import pytest

from clocktui.config import ClockConfig, ConfigError
from clocktui.core.tokenizer import CLASSIC_FORMAT
from clocktui.limits import (
    DEFAULT_FORMAT,
    LOGIC_TICK_INTERVAL,
    RENDER_TICK_INTERVAL,
    TRANSITION_TIMING,
)

pytestmark = pytest.mark.unit


class TestDefaults:
    def test_default_values(self):
        config = ClockConfig()

        assert config.timing.logic_tick_interval == LOGIC_TICK_INTERVAL
        assert config.timing.render_tick_interval == RENDER_TICK_INTERVAL
        assert config.timing.transition_timing == TRANSITION_TIMING
        assert config.display.format_spec == DEFAULT_FORMAT
        assert config.display.classic is False
        assert config.display.theme == "auto"

    def test_classic_overrides_format(self):
        config = ClockConfig.model_validate({"display": {"classic": True, "format_spec": "%A"}})

        assert config.effective_format == CLASSIC_FORMAT


class TestLoad:
    """Tests for reading config.toml."""

    def test_missing_file_gives_defaults(self, config_path):
        assert ClockConfig.load(config_path) == ClockConfig()

    def test_default_path_is_the_config_dir(self, config_path):
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text('[display]\nformat_spec = "%H:%M"\n')

        assert ClockConfig.load().display.format_spec == "%H:%M"

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[timing]\ntransition_timing = 250\n")

        config = ClockConfig.load(path)

        assert config.timing.transition_timing == 250
        assert config.timing.logic_tick_interval == LOGIC_TICK_INTERVAL

    def test_invalid_toml_raises_config_error(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[timing\n")

        with pytest.raises(ConfigError, match="invalid TOML"):
            ClockConfig.load(path)

    def test_non_positive_interval_raises_config_error(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[timing]\nrender_tick_interval = 0\n")

        with pytest.raises(ConfigError):
            ClockConfig.load(path)

    def test_zero_transition_timing_is_allowed(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[timing]\ntransition_timing = 0\n")

        assert ClockConfig.load(path).timing.transition_timing == 0

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("256", "256"), ("TrueColor", "truecolor"), ("neon", "auto"), (7, "auto")],
    )
    def test_theme_is_coerced(self, raw, expected):
        config = ClockConfig.model_validate({"display": {"theme": raw}})

        assert config.display.theme == expected


class TestOverrides:
    def test_none_values_are_ignored(self):
        config = ClockConfig().with_overrides(format_spec=None, transition_timing=None)

        assert config == ClockConfig()

    def test_values_land_in_their_section(self):
        config = ClockConfig().with_overrides(
            format_spec="%H%M", transition_timing=100, logic_tick_interval=50, classic=True
        )

        assert config.display.format_spec == "%H%M"
        assert config.display.classic is True
        assert config.timing.transition_timing == 100
        assert config.timing.logic_tick_interval == 50

    def test_original_is_unchanged(self):
        original = ClockConfig()
        original.with_overrides(transition_timing=1)

        assert original.timing.transition_timing == TRANSITION_TIMING

    def test_invalid_value_raises_config_error(self):
        with pytest.raises(ConfigError):
            ClockConfig().with_overrides(render_tick_interval=-1)

    def test_unknown_key_raises_type_error(self):
        with pytest.raises(TypeError, match="colour"):
            ClockConfig().with_overrides(colour="red")


class TestSave:
    def test_save_round_trips_through_toml(self, tmp_path):
        config = ClockConfig().with_overrides(format_spec="%I:%M %p", transition_timing=300)
        path = tmp_path / "nested" / "config.toml"

        written = config.save(path)

        assert written == path
        assert ClockConfig.load(path) == config
        assert tomllib.loads(path.read_text())["display"]["format_spec"] == "%I:%M %p"

    def test_save_leaves_no_temp_files(self, tmp_path):
        path = tmp_path / "config.toml"

        ClockConfig().save(path)
        ClockConfig().save(path)

        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]

    def test_toml_has_comment_header(self):
        assert ClockConfig().to_toml().startswith("# clocktui configuration")
