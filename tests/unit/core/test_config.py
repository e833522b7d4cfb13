"""Unit tests for listing configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from lsinfo.core.config import (
    DEFAULT_TIME_FORMAT,
    ConfigError,
    ConfigParseError,
    ListingConfig,
    load_config,
)


class TestListingConfig:
    """Tests for ListingConfig model."""

    def test_defaults(self) -> None:
        """Defaults use the classic date layout with color on."""
        config = ListingConfig()
        assert config.time_format == DEFAULT_TIME_FORMAT == "%m/%d/%Y - %H:%M:%S"
        assert config.color is True

    def test_rejects_format_without_directive(self) -> None:
        """A time format must contain at least one strftime directive."""
        with pytest.raises(ValueError, match="strftime directive"):
            ListingConfig(time_format="plain")

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValueError):
            ListingConfig(columns=3)  # type: ignore[call-arg]


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """No config file means default settings."""
        assert load_config(tmp_path / "config.toml") == ListingConfig()

    def test_uses_default_path(self, tmp_path: Path) -> None:
        """Without an argument the XDG config path is read."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("[listing]\ncolor = false\n")

        with patch("lsinfo.core.config.get_config_path", return_value=config_file):
            config = load_config()

        assert config.color is False

    def test_loads_listing_section(self, tmp_path: Path) -> None:
        """Values come from the [listing] table."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[listing]\ntime_format = "%Y-%m-%d"\ncolor = false\n')

        config = load_config(config_file)

        assert config.time_format == "%Y-%m-%d"
        assert config.color is False

    def test_missing_section_returns_defaults(self, tmp_path: Path) -> None:
        """A file without [listing] yields defaults."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[other]\nkey = "value"\n')

        assert load_config(config_file) == ListingConfig()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML raises ConfigParseError."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("[listing\n")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(config_file)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[listing]\ncolor = "sometimes"\n')

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(config_file)

    def test_listing_not_a_table(self, tmp_path: Path) -> None:
        """A non-table listing key raises ConfigError."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('listing = "yes"\n')

        with pytest.raises(ConfigError, match="Invalid 'listing' section"):
            load_config(config_file)
