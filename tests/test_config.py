"""Tests for the configuration system."""

from __future__ import annotations

import os
from pathlib import Path
from textwrap import dedent

import pytest

from dice_toy.core.config import PROJECT_ROOT, Settings, load_settings


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_loads_from_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("DICE_NUMBER=6\n")

        yaml_file = tmp_path / "default.yaml"
        yaml_file.write_text("")

        settings = load_settings(env_path=env_file, yaml_path=yaml_file)
        assert settings.dice_number == 6

    def test_defaults_from_yaml(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("")

        yaml_file = tmp_path / "default.yaml"
        yaml_file.write_text(dedent("""\
            dice:
              number: 2
            driver:
              press_count: 5
            logging:
              level: debug
        """))

        settings = load_settings(env_path=env_file, yaml_path=yaml_file)
        assert settings.dice_number == 2
        assert settings.press_count == 5
        assert settings.log_level == "DEBUG"

    def test_env_overrides_yaml(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("PRESS_COUNT=7\n")

        yaml_file = tmp_path / "default.yaml"
        yaml_file.write_text(dedent("""\
            driver:
              press_count: 5
        """))

        settings = load_settings(env_path=env_file, yaml_path=yaml_file)
        assert settings.press_count == 7

    def test_process_env_overrides_env_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DICE_NUMBER", "1")
        env_file = tmp_path / ".env"
        env_file.write_text("DICE_NUMBER=6\n")

        settings = load_settings(env_path=env_file, yaml_path=tmp_path / "none.yaml")
        assert settings.dice_number == 1

    def test_hardcoded_defaults_when_no_yaml(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("")

        yaml_file = tmp_path / "nonexistent.yaml"

        settings = load_settings(env_path=env_file, yaml_path=yaml_file)
        assert settings.dice_number == 4
        assert settings.press_count == 3
        assert settings.log_level == "INFO"

    def test_bundled_default_yaml(self, tmp_path: Path) -> None:
        settings = load_settings(
            env_path=tmp_path / ".env",
            yaml_path=PROJECT_ROOT / "config" / "default.yaml",
        )
        assert settings.dice_number == 4
        assert settings.press_count == 3

    @pytest.mark.parametrize("number", ["0", "7"])
    def test_invalid_dice_number_raises(self, tmp_path: Path, number: str) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(f"DICE_NUMBER={number}\n")

        with pytest.raises(ValueError, match="DICE_NUMBER must be between 1 and 6"):
            load_settings(env_path=env_file, yaml_path=tmp_path / "none.yaml")

    def test_negative_press_count_raises(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("PRESS_COUNT=-1\n")

        with pytest.raises(ValueError, match="PRESS_COUNT must be non-negative"):
            load_settings(env_path=env_file, yaml_path=tmp_path / "none.yaml")

    def test_env_file_values_do_not_leak(self) -> None:
        assert "DICE_NUMBER" not in os.environ

    def test_log_level_is_normalized(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=warning\n")

        settings = load_settings(env_path=env_file, yaml_path=tmp_path / "none.yaml")
        assert settings.log_level == "WARNING"

    def test_unknown_log_level_from_env_raises(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=verbose\n")

        with pytest.raises(ValueError, match="LOG_LEVEL must be a logging level name"):
            load_settings(env_path=env_file, yaml_path=tmp_path / "none.yaml")

    def test_unknown_log_level_from_yaml_raises(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "default.yaml"
        yaml_file.write_text(dedent("""\
            logging:
              level: chatty
        """))

        with pytest.raises(ValueError, match="chatty"):
            load_settings(env_path=tmp_path / ".env", yaml_path=yaml_file)

    def test_settings_is_frozen(self, tmp_path: Path) -> None:
        settings = load_settings(env_path=tmp_path / ".env", yaml_path=tmp_path / "none.yaml")
        assert isinstance(settings, Settings)
        with pytest.raises(AttributeError):
            settings.dice_number = 5  # type: ignore[misc]
