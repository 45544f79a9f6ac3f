"""Unit tests for MRZ configuration loader."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from src.mrz.config_loader import (
    ClassifierConfig,
    Config,
    CorrectionConfig,
    DateConfig,
    MRZModuleConfig,
    SelectorConfig,
    ValidationConfig,
    get_default_config,
    load_config,
)


class TestDefaults:
    """Test default configuration values."""

    def test_classifier(self):
        assert ClassifierConfig().min_line_length == 30

    def test_correction(self):
        config = CorrectionConfig()
        assert config.enabled is True
        assert config.rules == {"O": "0"}

    def test_selector(self):
        config = SelectorConfig()
        assert config.enable_td2_fallback is True
        assert config.td3_min_length == 44

    def test_validation(self):
        assert ValidationConfig().strict_fields is False

    def test_dates(self):
        assert DateConfig().century_pivot == 30

    def test_root(self):
        config = Config()
        assert isinstance(config.mrz, MRZModuleConfig)
        assert config.mrz.dates.century_pivot == 30


class TestValidation:
    """Test Pydantic validation of values."""

    def test_min_line_length_positive(self):
        with pytest.raises(ValidationError):
            ClassifierConfig(min_line_length=0)

    def test_century_pivot_range(self):
        DateConfig(century_pivot=0)
        DateConfig(century_pivot=99)

        with pytest.raises(ValidationError):
            DateConfig(century_pivot=100)

        with pytest.raises(ValidationError):
            DateConfig(century_pivot=-1)

    def test_td3_min_length_positive(self):
        with pytest.raises(ValidationError):
            SelectorConfig(td3_min_length=0)


class TestLoadConfig:
    """Test loading configuration from YAML."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_config(tmp_path / "missing.yaml")

    def test_partial_file(self, tmp_path):
        """Test unspecified sections keep their defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.safe_dump({"correction": {"enabled": False}, "dates": {"century_pivot": 40}})
        )

        config = load_config(config_file)

        assert config.mrz.correction.enabled is False
        assert config.mrz.dates.century_pivot == 40
        assert config.mrz.selector.td3_min_length == 44

    def test_empty_file(self, tmp_path):
        """Test an empty file gives the defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_config(config_file) == Config()

    def test_invalid_value(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("dates:\n  century_pivot: 150\n")

        with pytest.raises(ValidationError):
            load_config(config_file)

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("selector: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            load_config(config_file)


class TestDefaultConfig:
    """Test bundled configuration file."""

    def test_bundled_file_exists(self):
        bundled = Path(__file__).parents[2] / "src" / "mrz" / "config.yaml"
        assert bundled.exists()

    def test_bundled_matches_defaults(self):
        """Test the bundled YAML mirrors the model defaults."""
        assert get_default_config() == Config()
