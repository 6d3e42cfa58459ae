# tests/unit/test_config.py
"""Unit tests for SinkMockConfig and layered config loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from sinkmock.config import (
    PRESETS_DIR,
    SinkMockConfig,
    list_presets,
    load_config,
    load_preset,
    merge_layers,
)

# =============================================================================
# SinkMockConfig
# =============================================================================


class TestSinkMockConfig:
    """Validation of the pydantic model."""

    def test_defaults_match_sink_mock(self) -> None:
        """Defaults are capacity 3, drain batch 2."""
        config = SinkMockConfig()
        assert config.capacity == 3
        assert config.drain_batch_size == 2
        assert config.preset_name is None

    @pytest.mark.parametrize("field", ["capacity", "drain_batch_size"])
    @pytest.mark.parametrize("value", [0, -3])
    def test_rejects_non_positive(self, field: str, value: int) -> None:
        """Sizes must be > 0."""
        with pytest.raises(ValidationError):
            SinkMockConfig(**{field: value})

    def test_rejects_unknown_fields(self) -> None:
        """extra=forbid catches typos."""
        with pytest.raises(ValidationError):
            SinkMockConfig(capacty=4)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Configs are immutable."""
        config = SinkMockConfig()
        with pytest.raises(ValidationError):
            config.capacity = 10  # type: ignore[misc]


# =============================================================================
# merge_layers
# =============================================================================


class TestMergeLayers:
    """Layering of flat config dicts."""

    def test_override_wins(self) -> None:
        """Keys in the override replace the base; others are kept."""
        assert merge_layers({"capacity": 3, "drain_batch_size": 2}, {"capacity": 8}) == {"capacity": 8, "drain_batch_size": 2}

    def test_does_not_mutate_inputs(self) -> None:
        """Both layers are left unchanged."""
        base = {"capacity": 3}
        override = {"drain_batch_size": 1}
        merge_layers(base, override)
        assert base == {"capacity": 3}
        assert override == {"drain_batch_size": 1}


# =============================================================================
# Presets
# =============================================================================


class TestPresets:
    """Built-in and custom preset directories."""

    def test_builtin_presets(self) -> None:
        """The package ships default, tight and batched presets."""
        assert list_presets() == ["batched", "default", "tight"]

    def test_builtin_presets_are_valid(self) -> None:
        """Every built-in preset validates."""
        for name in list_presets():
            SinkMockConfig(**load_preset(name))

    def test_missing_dir_lists_nothing(self, tmp_path: Path) -> None:
        """Nonexistent directory returns empty list."""
        assert list_presets(tmp_path / "nope") == []

    def test_unknown_preset(self) -> None:
        """Unknown preset names list what is available."""
        with pytest.raises(FileNotFoundError, match="Available presets"):
            load_preset("does-not-exist")

    def test_preset_must_be_mapping(self, tmp_path: Path) -> None:
        """A YAML list is rejected."""
        (tmp_path / "bad.yaml").write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="must be a YAML mapping"):
            load_preset("bad", tmp_path)

    def test_presets_dir_points_into_package(self) -> None:
        """PRESETS_DIR is the package's presets directory."""
        assert PRESETS_DIR.name == "presets"
        assert (PRESETS_DIR / "default.yaml").exists()


# =============================================================================
# load_config
# =============================================================================


class TestLoadConfig:
    """Precedence: overrides > config file > preset > defaults."""

    def test_defaults(self) -> None:
        """No inputs gives the model defaults."""
        assert load_config() == SinkMockConfig()

    def test_preset(self) -> None:
        """A preset sets the sizing and records its name."""
        config = load_config(preset="tight")
        assert config.capacity == 1
        assert config.drain_batch_size == 1
        assert config.preset_name == "tight"

    def test_file_overrides_preset(self, tmp_path: Path) -> None:
        """Config file values win over the preset."""
        config_file = tmp_path / "sink.yaml"
        config_file.write_text(yaml.safe_dump({"capacity": 9}))

        config = load_config(preset="batched", config_file=config_file)
        assert config.capacity == 9
        assert config.drain_batch_size == 4

    def test_overrides_win(self, tmp_path: Path) -> None:
        """Direct overrides beat file and preset."""
        config_file = tmp_path / "sink.yaml"
        config_file.write_text(yaml.safe_dump({"capacity": 9, "drain_batch_size": 3}))

        config = load_config(preset="batched", config_file=config_file, overrides={"capacity": 2})
        assert config.capacity == 2
        assert config.drain_batch_size == 3

    def test_empty_config_file(self, tmp_path: Path) -> None:
        """An empty YAML file contributes nothing."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_config(config_file=config_file).capacity == 3

    def test_config_file_must_be_mapping(self, tmp_path: Path) -> None:
        """A YAML list in the config file is rejected like a list preset."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- 1\n")
        with pytest.raises(ValueError, match="must be a YAML mapping, got list"):
            load_config(config_file=config_file)

    def test_missing_config_file(self, tmp_path: Path) -> None:
        """A missing config file is an error, not a silent default."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(config_file=tmp_path / "missing.yaml")

    def test_invalid_values_fail_validation(self) -> None:
        """Overrides go through the same validation."""
        with pytest.raises(ValidationError):
            load_config(overrides={"drain_batch_size": 0})

    def test_custom_presets_dir(self, tmp_path: Path) -> None:
        """Test suites can keep their own presets."""
        (tmp_path / "huge.yaml").write_text("capacity: 1000\ndrain_batch_size: 100\n")
        config = load_config(preset="huge", presets_dir=tmp_path)
        assert config.capacity == 1000
        assert config.preset_name == "huge"
