"""Configuration loader with Pydantic validation for MRZ module.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values.
"""

from pathlib import Path
from typing import Dict

import yaml
from pydantic import BaseModel, Field


class ClassifierConfig(BaseModel):
    """Candidate line classification configuration.

    Attributes:
        min_line_length: Minimum length of a filler-free line made only of
            MRZ characters to be treated as a candidate
    """

    min_line_length: int = Field(default=30, ge=1)


class CorrectionConfig(BaseModel):
    """OCR confusion correction configuration.

    Attributes:
        enabled: Enable character correction during normalization
        rules: Character substitutions applied across the whole line
    """

    enabled: bool = True
    rules: Dict[str, str] = {"O": "0"}


class SelectorConfig(BaseModel):
    """Format selection configuration.

    Attributes:
        enable_td2_fallback: Retry as TD2 when a 3-line TD1 attempt is invalid
        td3_min_length: Minimum cleaned length of the first line to try TD3
    """

    enable_td2_fallback: bool = True
    td3_min_length: int = Field(default=44, ge=1)


class ValidationConfig(BaseModel):
    """Field validation configuration.

    Attributes:
        strict_fields: Also validate document code, dates and sex formats
            in addition to check digits
    """

    strict_fields: bool = False


class DateConfig(BaseModel):
    """Date projection configuration.

    Attributes:
        century_pivot: Two-digit years below this are 20xx, others 19xx
    """

    century_pivot: int = Field(default=30, ge=0, le=99)


class MRZModuleConfig(BaseModel):
    """Complete MRZ module configuration.

    Attributes:
        classifier: Candidate line classification
        correction: OCR confusion correction
        selector: Format selection and fallback
        validation: Field validation
        dates: Date projection
    """

    classifier: ClassifierConfig = ClassifierConfig()
    correction: CorrectionConfig = CorrectionConfig()
    selector: SelectorConfig = SelectorConfig()
    validation: ValidationConfig = ValidationConfig()
    dates: DateConfig = DateConfig()


class Config(BaseModel):
    """Root configuration container.

    Attributes:
        mrz: MRZ module configuration
    """

    mrz: MRZModuleConfig = MRZModuleConfig()


def load_config(config_path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated Config object with all settings

    Raises:
        FileNotFoundError: If config file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails

    Example:
        >>> config = load_config(Path("src/mrz/config.yaml"))
        >>> print(config.mrz.dates.century_pivot)
        30
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    # Wrap flat YAML structure in 'mrz' key for Config model
    return Config(mrz=MRZModuleConfig(**config_dict))


def get_default_config() -> Config:
    """Get default configuration from bundled config.yaml file.

    Returns:
        Config object loaded from src/mrz/config.yaml
    """
    default_config_path = Path(__file__).parent / "config.yaml"
    if default_config_path.exists():
        return load_config(default_config_path)
    else:
        # Fallback to hardcoded defaults if config file is missing
        return Config()
