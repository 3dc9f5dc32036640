# src/astarte_generators/core/config.py
"""Configuration schema and loading for the generators.

Uses Pydantic for validation with frozen (immutable) models.
Configuration precedence: overrides > YAML file > preset > defaults.

The active configuration is process-wide and is read when a strategy is
built. Install it once (e.g. from conftest.py) before strategies are
created:

    configure(load_config(preset="small"))
    configure_from_env()  # honours ASTARTE_GENERATORS_PRESET
"""

from __future__ import annotations

import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from astarte_generators.core.logging import get_logger

logger = get_logger(__name__)

PRESETS_DIR = Path(__file__).resolve().parent.parent / "presets"
PRESET_ENV_VAR = "ASTARTE_GENERATORS_PRESET"


class GenerationConfig(BaseModel):
    """Size and range bounds used by every generator."""

    model_config = {"frozen": True, "extra": "forbid"}

    preset_name: str | None = Field(
        default=None,
        description="Preset this configuration was built from (set by load_config)",
    )

    # Interface
    max_major_version: int = Field(default=9, ge=0, description="Upper bound for major_version")
    name_min_segments: int = Field(default=2, gt=0, description="Minimum dotted segments in an interface name")
    name_max_segments: int = Field(default=5, gt=0, description="Maximum dotted segments in an interface name")
    name_segment_max_length: int = Field(default=16, gt=0, description="Maximum length of one name segment")
    name_max_attempts: int = Field(
        default=10,
        gt=0,
        description="Redraws allowed before an interface name that starts with a digit rejects the example",
    )
    prefix_max_segments: int = Field(default=5, gt=0, description="Maximum path segments in an endpoint prefix")
    subpath_max_length: int = Field(default=5, gt=0, description="Maximum length of one endpoint path segment")
    min_mappings: int = Field(default=1, gt=0, description="Minimum mappings per interface")
    max_mappings: int = Field(default=1000, gt=0, description="Maximum mappings per interface")
    description_max_length: int = Field(default=1000, gt=0, description="Maximum description length")
    doc_max_length: int = Field(default=100_000, gt=0, description="Maximum doc length")

    # Mapping
    max_expiry: int = Field(default=10_000, gt=0, description="Upper bound for a non-zero expiry")
    max_database_retention_ttl: int = Field(default=101_000, ge=0, description="Upper bound for database TTL")

    # Device
    max_interfaces: int | None = Field(
        default=None,
        ge=0,
        description="Maximum interfaces per device (None leaves the size to Hypothesis)",
    )
    min_interface_msgs: int = Field(default=1, ge=0, description="Minimum received messages per interface")
    max_interface_msgs: int = Field(default=10_000, ge=0, description="Maximum received messages per interface")
    min_interface_bytes: int = Field(default=10, ge=0, description="Minimum received bytes per interface")
    max_interface_bytes: int = Field(default=10_000, ge=0, description="Maximum received bytes per interface")
    min_timestamp: datetime = Field(
        default=datetime(1970, 1, 1, tzinfo=UTC),
        description="Earliest timestamp a device may report",
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> GenerationConfig:
        """Ensure every min <= max pair is consistent."""
        pairs = (
            ("name_min_segments", "name_max_segments"),
            ("min_mappings", "max_mappings"),
            ("min_interface_msgs", "max_interface_msgs"),
            ("min_interface_bytes", "max_interface_bytes"),
        )
        for low_name, high_name in pairs:
            low = getattr(self, low_name)
            high = getattr(self, high_name)
            if low > high:
                raise ValueError(f"{low_name} ({low}) must be <= {high_name} ({high})")
        return self

    @model_validator(mode="after")
    def validate_min_timestamp(self) -> GenerationConfig:
        """Timestamps are compared with aware UTC datetimes."""
        if self.min_timestamp.tzinfo is None:
            raise ValueError("min_timestamp must be timezone-aware")
        return self


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, with override taking precedence.

    Returns:
        Merged configuration dict (new dict, does not mutate inputs).
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def list_presets(presets_dir: Path = PRESETS_DIR) -> list[str]:
    """List available preset names (without .yaml extension), sorted."""
    if not presets_dir.exists():
        return []
    return sorted(p.stem for p in presets_dir.glob("*.yaml"))


def _read_yaml_mapping(path: Path, label: str) -> dict[str, Any]:
    """Read a YAML file that must hold a mapping of config fields.

    An empty file reads as ``{}`` (all defaults).

    Raises:
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the document is not a mapping.
    """
    with path.open() as f:
        loaded = yaml.safe_load(f)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{label} must be a YAML mapping, got {type(loaded).__name__}")
    return loaded


def load_preset(preset_name: str, presets_dir: Path = PRESETS_DIR) -> dict[str, Any]:
    """Load a preset configuration by name.

    Raises:
        FileNotFoundError: If preset does not exist.
        yaml.YAMLError: If preset YAML is malformed.
        ValueError: If preset is not a YAML mapping.
    """
    preset_path = presets_dir / f"{preset_name}.yaml"

    if not preset_path.exists():
        available = list_presets(presets_dir)
        raise FileNotFoundError(f"Preset '{preset_name}' not found. Available presets: {available}")

    return _read_yaml_mapping(preset_path, f"Preset '{preset_name}'")


def load_config(
    *,
    preset: str | None = None,
    config_file: Path | None = None,
    overrides: dict[str, Any] | None = None,
    presets_dir: Path = PRESETS_DIR,
) -> GenerationConfig:
    """Load a generation configuration with precedence handling.

    Precedence (highest to lowest):
    1. overrides - Direct overrides from code
    2. config_file - User's YAML configuration file
    3. preset - Named preset configuration
    4. defaults - Built-in Pydantic defaults

    Raises:
        FileNotFoundError: If preset or config_file not found.
        yaml.YAMLError: If YAML is malformed.
        ValueError: If preset or config_file is not a YAML mapping.
        pydantic.ValidationError: If final config fails validation.
    """
    config_dict: dict[str, Any] = {}

    if preset is not None:
        config_dict = load_preset(preset, presets_dir)

    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        file_config = _read_yaml_mapping(config_file, f"Config file '{config_file}'")
        config_dict = deep_merge(config_dict, file_config)

    if overrides is not None:
        config_dict = deep_merge(config_dict, overrides)

    config_dict["preset_name"] = preset

    return GenerationConfig(**config_dict)


_active_config: GenerationConfig | None = None


def configure(config: GenerationConfig) -> None:
    """Install the process-wide generation configuration.

    Only strategies built after this call see the new configuration.
    """
    global _active_config
    _active_config = config
    logger.debug("generation_config_installed", preset=config.preset_name)


def get_config() -> GenerationConfig:
    """Return the active configuration, or the defaults if none was installed."""
    if _active_config is None:
        return GenerationConfig()
    return _active_config


def configure_from_env(default_preset: str = "default") -> GenerationConfig:
    """Install the preset named by ASTARTE_GENERATORS_PRESET (or default_preset)."""
    config = load_config(preset=os.getenv(PRESET_ENV_VAR, default_preset))
    configure(config)
    return config
