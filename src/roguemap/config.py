from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

from .exceptions import ConfigError
from .rng import Seed, parse_seed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapSettings:
    # Logical map size (tiles)
    width: int = 80
    height: int = 50


@dataclass(frozen=True)
class RoomSettings:
    """Room generation bounds.

    Room sizes are drawn from ``[min_size, max_size)``; ``max_rooms`` is the
    number of placement attempts, not a guaranteed count.
    """

    min_size: int = 6
    max_size: int = 10
    max_rooms: int = 30


@dataclass(frozen=True)
class DisplaySettings:
    """Presentation-only settings. Core modules never read these."""

    screen_width: int = 80
    screen_height: int = 50
    fps: int = 20
    tile_px: int = 16
    title: str = "roguemap"
    fullscreen: bool = False


@dataclass(frozen=True)
class Settings:
    map: MapSettings = field(default_factory=MapSettings)
    rooms: RoomSettings = field(default_factory=RoomSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    seed: Seed = None
    player_start: Tuple[int, int] = (5, 5)

    def validate(self) -> "Settings":
        """Raise ConfigError on any invalid value; never clamps."""
        if self.map.width <= 0 or self.map.height <= 0:
            raise ConfigError(f"Map size must be positive (got {self.map.width}x{self.map.height})")
        if self.rooms.min_size < 2:
            raise ConfigError("rooms.min_size must be >= 2")
        if self.rooms.max_size <= self.rooms.min_size:
            raise ConfigError("rooms.max_size must be greater than rooms.min_size")
        if self.rooms.max_rooms < 0:
            raise ConfigError("rooms.max_rooms must be >= 0")
        if self.map.width <= self.rooms.max_size or self.map.height <= self.rooms.max_size:
            raise ConfigError(
                f"Map {self.map.width}x{self.map.height} too small for rooms up to {self.rooms.max_size} tiles"
            )
        if self.display.screen_width <= 0 or self.display.screen_height <= 0:
            raise ConfigError("display screen size must be positive")
        if self.display.fps <= 0:
            raise ConfigError("display.fps must be > 0")
        if self.display.tile_px <= 0:
            raise ConfigError("display.tile_px must be > 0")
        px, py = self.player_start
        if not (0 <= px < self.map.width and 0 <= py < self.map.height):
            raise ConfigError(
                f"player_start {self.player_start} is outside the {self.map.width}x{self.map.height} map"
            )
        return self


_SECTIONS = {"map": MapSettings, "rooms": RoomSettings, "display": DisplaySettings}

_ENV_OVERRIDES = {
    "ROGUEMAP_WIDTH": ("map", "width"),
    "ROGUEMAP_HEIGHT": ("map", "height"),
    "ROGUEMAP_MAX_ROOMS": ("rooms", "max_rooms"),
}


def _build_section(name: str, raw: Any) -> Any:
    cls = _SECTIONS[name]
    if raw is None:
        return cls()
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Section '{name}' must be a mapping")
    known = {f.name: f for f in fields(cls)}
    kwargs: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            logger.warning("Ignoring unknown setting %s.%s", name, key)
            continue
        default = getattr(cls(), key)
        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise ConfigError(f"Invalid value for {name}.{key}: {value!r} (expected true/false)")
            kwargs[key] = value
            continue
        if isinstance(default, int) and isinstance(value, bool):
            raise ConfigError(f"Invalid value for {name}.{key}: {value!r} (expected an integer)")
        if isinstance(default, int) and isinstance(value, float) and not value.is_integer():
            raise ConfigError(f"Invalid value for {name}.{key}: {value!r} (expected an integer)")
        try:
            kwargs[key] = type(default)(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid value for {name}.{key}: {value!r}") from exc
    return cls(**kwargs)


def settings_from_mapping(raw: Mapping[str, Any]) -> Settings:
    """Build Settings from a parsed YAML mapping. Missing sections fall back to defaults."""
    sections = {}
    for key, value in raw.items():
        if key in _SECTIONS:
            sections[key] = _build_section(key, value)
        elif key not in ("seed", "player_start"):
            logger.warning("Ignoring unknown setting %s", key)

    settings = Settings(**sections)
    if raw.get("seed") is not None:
        settings = replace(settings, seed=parse_seed(str(raw["seed"])))
    if "player_start" in raw:
        start = raw["player_start"]
        if not isinstance(start, (list, tuple)) or not all(
            isinstance(v, int) and not isinstance(v, bool) for v in start
        ):
            raise ConfigError(f"player_start must be a pair of integers (got {start!r})")
        try:
            px, py = start
        except ValueError as exc:
            raise ConfigError(f"player_start must be a pair of integers (got {start!r})") from exc
        settings = replace(settings, player_start=(px, py))
    return settings


def apply_env_overrides(settings: Settings, env: Mapping[str, str]) -> Settings:
    for var, (section, key) in _ENV_OVERRIDES.items():
        if var not in env:
            continue
        try:
            value = int(env[var])
        except ValueError as exc:
            raise ConfigError(f"{var} must be an integer (got {env[var]!r})") from exc
        updated = replace(getattr(settings, section), **{key: value})
        settings = replace(settings, **{section: updated})
        logger.debug("Env override %s -> %s.%s=%d", var, section, key, value)
    if env.get("ROGUEMAP_SEED"):
        settings = replace(settings, seed=parse_seed(env["ROGUEMAP_SEED"]))
    return settings


def load_settings(
    path: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Load settings from an optional YAML file, then apply environment overrides.

    Raises ConfigError if the file is missing, unparsable, or the resulting
    settings are invalid.
    """
    raw: Mapping[str, Any] = {}
    if path is not None:
        p = Path(path)
        if not p.exists():
            raise ConfigError(f"Config file not found: {p}")
        try:
            with p.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse {p}: {exc}") from exc
        if not isinstance(raw, Mapping):
            raise ConfigError(f"Top level of {p} must be a mapping")
        logger.debug("Loaded settings from %s", p)

    settings = settings_from_mapping(raw)
    settings = apply_env_overrides(settings, os.environ if env is None else env)
    return settings.validate()
