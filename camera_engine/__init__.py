from camera_engine.config import GameConfig, load_config
from camera_engine.errors import CameraError, ConfigError, InputError
from camera_engine.gameobjects.player.camera import (
    FirstPersonCamera,
    FixedAngleCamera,
    IngameCamera,
    LineOfSightCorrection,
    LineOfSightResult,
    ThirdPersonCamera,
    clamp_pitch,
)
from camera_engine.gameobjects.player.states import CameraKind
from camera_engine.gameobjects.transform import Transform
from camera_engine.input import CameraActions
from camera_engine.physics import PhysicsWorld, QueryFilter, RayCaster

__version__ = "0.1.0"

__all__ = [
    "CameraActions",
    "CameraError",
    "CameraKind",
    "ConfigError",
    "FirstPersonCamera",
    "FixedAngleCamera",
    "GameConfig",
    "IngameCamera",
    "InputError",
    "LineOfSightCorrection",
    "LineOfSightResult",
    "PhysicsWorld",
    "QueryFilter",
    "RayCaster",
    "ThirdPersonCamera",
    "Transform",
    "clamp_pitch",
    "load_config",
]
