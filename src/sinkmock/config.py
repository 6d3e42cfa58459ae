# src/sinkmock/config.py
"""Sizing configuration for SinkMock.

Uses Pydantic for validation with frozen (immutable) models.
Configuration precedence: overrides > YAML file > preset > defaults.

Presets live in ``sinkmock/presets/*.yaml``; a test suite can keep its own
preset directory and pass it as ``presets_dir``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

PRESETS_DIR = Path(__file__).parent / "presets"


class SinkMockConfig(BaseModel):
    """Buffer sizing for a SinkMock."""

    model_config = {"frozen": True, "extra": "forbid"}

    capacity: int = Field(
        default=3,
        gt=0,
        description="Items that can be buffered before poll_ready() forces a flush",
    )
    drain_batch_size: int = Field(
        default=2,
        gt=0,
        description="Items removed from the buffer per successful drain event",
    )
    preset_name: str | None = Field(
        default=None,
        description="Preset this config was built from (informational)",
    )


def merge_layers(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge one config layer over another; keys in ``override`` win.

    SinkMockConfig is flat, so a layer replaces values key by key. Returns a
    new dict.
    """
    return {**base, **override}


def list_presets(presets_dir: Path = PRESETS_DIR) -> list[str]:
    """List available preset names (without .yaml extension), sorted."""
    if not presets_dir.exists():
        return []
    return sorted(p.stem for p in presets_dir.glob("*.yaml"))


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

    with preset_path.open() as f:
        loaded = yaml.safe_load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"Preset '{preset_name}' must be a YAML mapping, got {type(loaded).__name__}")
        return loaded


def load_config(
    *,
    preset: str | None = None,
    config_file: Path | None = None,
    overrides: dict[str, Any] | None = None,
    presets_dir: Path = PRESETS_DIR,
) -> SinkMockConfig:
    """Load a SinkMockConfig with precedence handling.

    Precedence (highest to lowest):
    1. overrides - Values passed directly by the test
    2. config_file - YAML configuration file
    3. preset - Named preset configuration
    4. defaults - Built-in Pydantic defaults

    Raises:
        FileNotFoundError: If preset or config_file not found.
        yaml.YAMLError: If YAML is malformed.
        ValueError: If config_file is not a YAML mapping.
        pydantic.ValidationError: If final config fails validation.
    """
    config_dict: dict[str, Any] = {}

    if preset is not None:
        config_dict = load_preset(preset, presets_dir)

    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        with config_file.open() as f:
            file_config = yaml.safe_load(f)
        if file_config is None:
            file_config = {}
        if not isinstance(file_config, dict):
            raise ValueError(f"Config file {config_file} must be a YAML mapping, got {type(file_config).__name__}")
        config_dict = merge_layers(config_dict, file_config)

    if overrides is not None:
        config_dict = merge_layers(config_dict, overrides)

    config_dict["preset_name"] = preset

    return SinkMockConfig(**config_dict)
