"""Tests for configuration module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from pickers.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_default_settings(self) -> None:
        """Test default settings values."""
        # Avoid inheriting developer-local .env values when running tests.
        settings = Settings(_env_file=None)

        assert settings.language_count == 60
        assert settings.language_group_size == 20
        assert settings.language_icons == ("image4", "image5")
        assert settings.country_banners == ["imagedan", "bisb", "ila"]
        assert settings.language_banners == ["image1", "image2", "image3"]
        assert settings.reshuffle_banner_index == 2
        assert settings.clear_selection_on_consume is True

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PICKERS_LANGUAGE_COUNT", "45")
        monkeypatch.setenv("PICKERS_CLEAR_SELECTION_ON_CONSUME", "false")

        settings = Settings(_env_file=None)

        assert settings.language_count == 45
        assert settings.clear_selection_on_consume is False

    @pytest.mark.parametrize("field", ["language_count", "language_group_size"])
    def test_generation_parameters_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})

    def test_reshuffle_banner_must_exist(self) -> None:
        with pytest.raises(ValidationError, match="reshuffle_banner_index"):
            Settings(_env_file=None, country_banners=["a", "b"], reshuffle_banner_index=2)

    def test_run_id_is_short_hex(self) -> None:
        run_id = Settings(_env_file=None).run_id
        assert len(run_id) == 8
        int(run_id, 16)

    def test_ensure_directories(self, tmp_path: Path) -> None:
        """Test directory creation."""
        settings = Settings(_env_file=None, log_dir=tmp_path / "logs", log_to_file=True)

        settings.ensure_directories()

        assert settings.log_dir.exists()

    def test_ensure_directories_skips_log_dir_without_file_logging(self, tmp_path: Path) -> None:
        settings = Settings(_env_file=None, log_dir=tmp_path / "logs", log_to_file=False)

        settings.ensure_directories()

        assert not settings.log_dir.exists()

    def test_get_settings_singleton(self) -> None:
        """Test that get_settings returns cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2
