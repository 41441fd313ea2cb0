# config.py
import dataclasses
import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from camera_engine.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FirstPersonConfig:
    translation_smoothing: float = 50.0
    rotation_smoothing: float = 45.0
    # radians between the view direction and the up / down axis
    most_acute_from_above: float = 0.2
    most_acute_from_below: float = 0.2


@dataclass(frozen=True)
class ThirdPersonConfig:
    translation_smoothing_going_closer: float = 30.0
    translation_smoothing_going_further: float = 1.0
    most_acute_from_above: float = 0.4
    most_acute_from_below: float = 0.8
    min_distance: float = 1.0
    max_distance: float = 10.0
    zoom_speed: float = 0.5
    min_distance_to_objects: float = 0.4
    # squared-distance tolerance biasing the obstruction check toward "further"
    line_of_sight_epsilon: float = 1e-3


@dataclass(frozen=True)
class FixedAngleConfig:
    translation_smoothing: float = 5.0
    rotation_smoothing: float = 10.0
    min_distance: float = 3.0
    max_distance: float = 15.0
    zoom_speed: float = 0.5


@dataclass(frozen=True)
class CameraConfig:
    mouse_sensitivity_x: float = 7e-4
    mouse_sensitivity_y: float = 5e-4
    first_person: FirstPersonConfig = field(default_factory=FirstPersonConfig)
    third_person: ThirdPersonConfig = field(default_factory=ThirdPersonConfig)
    fixed_angle: FixedAngleConfig = field(default_factory=FixedAngleConfig)


@dataclass(frozen=True)
class GameConfig:
    """
    Read-only tuning snapshot shared by every camera instance.
    """

    camera: CameraConfig = field(default_factory=CameraConfig)

    def validate(self) -> "GameConfig":
        """
        Checks the cross-field constraints the cameras rely on.

        :return: The config itself, so calls can be chained
        :raises ConfigError: If a constraint is violated
        """
        camera = self.camera
        for name, limits in (
            ("first_person", camera.first_person),
            ("third_person", camera.third_person),
        ):
            above = limits.most_acute_from_above
            below = limits.most_acute_from_below
            if above < 0.0 or below < 0.0 or above + below >= math.pi:
                raise ConfigError(
                    f"camera.{name}: pitch limits {above} / {below} leave no valid pitch range"
                )

        for name, section in (
            ("third_person", camera.third_person),
            ("fixed_angle", camera.fixed_angle),
        ):
            if section.min_distance <= 0.0:
                raise ConfigError(f"camera.{name}.min_distance must be positive")
            if section.min_distance > section.max_distance:
                raise ConfigError(
                    f"camera.{name}: min_distance {section.min_distance} "
                    f"exceeds max_distance {section.max_distance}"
                )

        rates = {
            "first_person.translation_smoothing": camera.first_person.translation_smoothing,
            "first_person.rotation_smoothing": camera.first_person.rotation_smoothing,
            "third_person.translation_smoothing_going_closer": camera.third_person.translation_smoothing_going_closer,
            "third_person.translation_smoothing_going_further": camera.third_person.translation_smoothing_going_further,
            "fixed_angle.translation_smoothing": camera.fixed_angle.translation_smoothing,
            "fixed_angle.rotation_smoothing": camera.fixed_angle.rotation_smoothing,
        }
        for name, rate in rates.items():
            if rate <= 0.0:
                raise ConfigError(f"camera.{name} must be positive, got {rate}")

        if camera.third_person.min_distance_to_objects < 0.0:
            raise ConfigError("camera.third_person.min_distance_to_objects must not be negative")

        return self


def _build(cls, data: Any, path: str):
    if not isinstance(data, dict):
        raise ConfigError(f"{path or 'config'}: expected an object, got {type(data).__name__}")

    known = {f.name: f for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigError(f"{path or 'config'}: unknown keys {unknown}")

    values = {}
    for name, value in data.items():
        key = f"{path}.{name}" if path else name
        factory = known[name].default_factory
        if factory is not dataclasses.MISSING and dataclasses.is_dataclass(factory):
            values[name] = _build(factory, value, key)
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{key}: expected a number, got {value!r}")
        values[name] = float(value)

    return cls(**values)


def config_from_dict(data: dict) -> GameConfig:
    """
    Builds a snapshot from nested plain data; missing keys keep their defaults.
    """
    return _build(GameConfig, data, "").validate()


def load_config(config_path: str | Path) -> GameConfig:
    """
    Docstring für load_config

    :param config_path: Path to the JSON config file
    :type config_path: str | Path
    :return: The validated config snapshot
    :rtype: GameConfig
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: invalid JSON ({e})") from e

    config = config_from_dict(data)
    logger.debug("loaded camera config from %s", path)
    return config
