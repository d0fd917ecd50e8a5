"""Map configuration loading from TOML files."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError, UnknownPresetError
from .presets import MAP_PRESETS
from .terrain.config import GenerationConfig

CONFIGS_DIR = Path(__file__).parent.parent.parent / "configs"


class MapFile(BaseModel):
    """Map configuration file from TOML.

    ``preset`` supplies the shaping fields; anything under ``[map]``
    overrides them.
    """

    preset: str = "default"
    map: dict[str, Any] = Field(default_factory=dict)


def load_config(config_path: Path) -> GenerationConfig:
    """Load a generation configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed GenerationConfig. Seed stays None unless the file sets one.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        ConfigurationError: If the contents are not a valid configuration.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    try:
        map_file = MapFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid map file {config_path}: {exc}") from exc

    if map_file.preset not in MAP_PRESETS:
        raise UnknownPresetError(
            f"Unknown preset {map_file.preset!r} in {config_path}, "
            f"expected one of: {', '.join(MAP_PRESETS)}"
        )

    fields = dict(MAP_PRESETS[map_file.preset])
    fields.update(map_file.map)

    try:
        return GenerationConfig.model_validate(fields)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid map config in {config_path}: {exc}") from exc


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator
    2. configs/{name}.toml
    3. configs/{name}

    Args:
        name: Config name or path.

    Returns:
        Path to the config file.

    Raises:
        FileNotFoundError: If config file is not found.
    """
    # If it looks like a path, use it directly
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    config_path = CONFIGS_DIR / f"{name}.toml"
    if config_path.exists():
        return config_path

    config_path = CONFIGS_DIR / name
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {CONFIGS_DIR}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    if not CONFIGS_DIR.exists():
        return []
    return sorted(p.stem for p in CONFIGS_DIR.glob("*.toml"))
