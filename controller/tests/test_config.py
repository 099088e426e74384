"""
Tests for environment-driven settings.
"""
import pytest
from pydantic import ValidationError

from microwave.config import CookSettings, PowerSettings, Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.power.step_watts == 50
        assert settings.power.max_watts == 700
        assert settings.cook.tick_seconds == 1.0
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("PANEL_PORT", "8081")
        monkeypatch.setenv("COOK__TICK_SECONDS", "0.25")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.panel_port == 8081
        assert settings.cook.tick_seconds == 0.25

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("POWER__STEP_WATTS=100\nPOWER__MAX_WATTS=800\nCOOK__TUBE_MAX_WATTS=800\n", encoding="utf-8")

        settings = Settings(_env_file=str(env_file))

        assert settings.power.step_watts == 100
        assert settings.power.max_watts == 800

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    @pytest.mark.parametrize("step, maximum", [(50, 725), (100, 50)])
    def test_max_must_be_multiple_of_step(self, step, maximum):
        with pytest.raises(ValidationError):
            PowerSettings(step_watts=step, max_watts=maximum)

    def test_power_range_must_fit_power_tube(self):
        with pytest.raises(ValidationError, match="tube_max_watts"):
            Settings(
                _env_file=None,
                power=PowerSettings(max_watts=1000),
                cook=CookSettings(tube_max_watts=700),
            )

    def test_power_range_equal_to_tube_limit(self):
        settings = Settings(
            _env_file=None,
            power=PowerSettings(step_watts=100, max_watts=900),
            cook=CookSettings(tube_max_watts=900),
        )

        assert settings.power.max_watts == settings.cook.tube_max_watts
