from camera_engine.gameobjects.player.camera.first_person import FirstPersonCamera
from camera_engine.gameobjects.player.camera.fixed_angle import FixedAngleCamera
from camera_engine.gameobjects.player.camera.ingame import IngameCamera, convert
from camera_engine.gameobjects.player.camera.third_person import (
    LineOfSightCorrection,
    LineOfSightResult,
    ThirdPersonCamera,
)
from camera_engine.gameobjects.player.camera.util import clamp_pitch

__all__ = [
    "FirstPersonCamera",
    "FixedAngleCamera",
    "IngameCamera",
    "LineOfSightCorrection",
    "LineOfSightResult",
    "ThirdPersonCamera",
    "clamp_pitch",
    "convert",
]
