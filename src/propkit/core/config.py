# src/propkit/core/config.py
"""Runner settings and layered configuration loading.

Settings precedence (highest to lowest):
1. overrides - keyword overrides / CLI flags
2. config_file - user's YAML file
3. preset - named preset shipped in ``propkit/core/presets``
4. defaults - RunnerSettings field defaults

Settings are flat, so each layer replaces values key by key.

Usage:
    settings = load_settings(preset="quick", overrides={"seed": 42})
    result = check(gen, predicate, settings)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

DEFAULT_TRIALS = 100
DEFAULT_MAX_SHRINK_STEPS = 1000


class RunnerSettings(BaseModel):
    """Options for a property check."""

    model_config = {"frozen": True, "extra": "forbid"}

    trials: int = Field(
        default=DEFAULT_TRIALS,
        gt=0,
        description="Number of random trials to run",
    )
    max_shrink_steps: int = Field(
        default=DEFAULT_MAX_SHRINK_STEPS,
        ge=0,
        description="Maximum shrink candidates evaluated after a failure",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        lt=2**64,
        description="Starting seed (time-derived when omitted)",
    )
    preset_name: str | None = Field(
        default=None,
        description="Preset this configuration was built from (informational)",
    )


def _get_presets_dir() -> Path:
    return Path(__file__).parent / "presets"


def list_presets(presets_dir: Path | None = None) -> list[str]:
    """List available preset names.

    Args:
        presets_dir: Directory of preset YAML files (default: bundled presets).

    Returns:
        Sorted list of preset names (without .yaml extension).
    """
    directory = presets_dir if presets_dir is not None else _get_presets_dir()
    if not directory.exists():
        return []
    return sorted(p.stem for p in directory.glob("*.yaml"))


def _read_yaml_mapping(path: Path, label: str) -> dict[str, Any]:
    with path.open() as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{label} must be a YAML mapping, got {type(loaded).__name__}")
    return loaded


def load_preset(preset_name: str, presets_dir: Path | None = None) -> dict[str, Any]:
    """Load a preset configuration by name.

    Raises:
        FileNotFoundError: If the preset does not exist.
        yaml.YAMLError: If the preset YAML is malformed.
        ValueError: If the preset is not a YAML mapping.
    """
    directory = presets_dir if presets_dir is not None else _get_presets_dir()
    preset_path = directory / f"{preset_name}.yaml"
    if not preset_path.exists():
        available = list_presets(directory)
        raise FileNotFoundError(f"Preset '{preset_name}' not found. Available presets: {available}")
    return _read_yaml_mapping(preset_path, f"Preset '{preset_name}'")


def load_settings(
    *,
    preset: str | None = None,
    config_file: Path | None = None,
    overrides: dict[str, Any] | None = None,
    presets_dir: Path | None = None,
) -> RunnerSettings:
    """Build RunnerSettings from preset, YAML file and overrides.

    Args:
        preset: Optional preset name to use as base.
        config_file: Optional path to a YAML settings file.
        overrides: Optional explicit values (highest precedence).
        presets_dir: Directory holding presets (default: bundled presets).

    Returns:
        Validated RunnerSettings.

    Raises:
        FileNotFoundError: If preset or config_file not found.
        yaml.YAMLError: If YAML is malformed.
        pydantic.ValidationError: If the merged settings are invalid.
    """
    config_dict: dict[str, Any] = {}

    if preset is not None:
        config_dict = load_preset(preset, presets_dir)

    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        config_dict = {**config_dict, **_read_yaml_mapping(config_file, f"Config file {config_file}")}

    if overrides is not None:
        config_dict = {**config_dict, **overrides}

    config_dict["preset_name"] = preset
    return RunnerSettings(**config_dict)
