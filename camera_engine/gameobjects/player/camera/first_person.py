from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from camera_engine.config import GameConfig
from camera_engine.gameobjects.player.camera.util import clamp_pitch, smooth_transform
from camera_engine.gameobjects.quaternion import quat_from_axis_angle, quat_mul
from camera_engine.gameobjects.transform import Transform
from camera_engine.input import CameraActions

if TYPE_CHECKING:
    from camera_engine.gameobjects.player.camera.third_person import ThirdPersonCamera

logger = logging.getLogger(__name__)


def world_up() -> np.ndarray:
    return np.array((0.0, 1.0, 0.0), dtype=np.float32)


@dataclass
class FirstPersonCamera:
    """
    Rigid eye: either looks at ``look_target`` or turns with pan input.
    """

    transform: Transform = field(default_factory=Transform)
    look_target: Optional[np.ndarray] = None
    up: np.ndarray = field(default_factory=world_up)
    config: GameConfig = field(default_factory=GameConfig)

    @classmethod
    def from_third_person(cls, camera: ThirdPersonCamera) -> FirstPersonCamera:
        """
        Jumps into the orbit pivot, keeping the orbit orientation.
        """
        logger.debug("first person camera from third person, pivot %s", camera.target.tolist())
        return cls(
            transform=camera.transform.with_translation(camera.target),
            look_target=None if camera.secondary_target is None else camera.secondary_target.copy(),
            up=camera.up.copy(),
            config=camera.config,
        )

    def forward(self) -> np.ndarray:
        return self.transform.forward()

    def update_transform(
        self, dt: float, camera_actions: CameraActions, transform: Transform
    ) -> Transform:
        """
        Advances the camera by one frame.

        :param dt: Frame time in seconds
        :param camera_actions: This frame's input
        :param transform: The transform rendered last frame
        :return: The transform to render this frame
        :raises InputError: If pan is not an axis pair
        """
        if self.look_target is not None:
            self.look_at(self.look_target)
        else:
            camera_movement = camera_actions.axis_pair()
            self.handle_camera_controls(camera_movement)
        return self.get_camera_transform(dt, transform)

    def get_camera_transform(self, dt: float, transform: Transform) -> Transform:
        first_person = self.config.camera.first_person
        return smooth_transform(
            transform,
            self.transform,
            first_person.translation_smoothing,
            first_person.rotation_smoothing,
            dt,
        )

    def handle_camera_controls(self, camera_movement: np.ndarray):
        yaw = -camera_movement[0] * self.config.camera.mouse_sensitivity_x
        pitch = -camera_movement[1] * self.config.camera.mouse_sensitivity_y
        pitch = self.clamp_pitch(pitch)
        self.rotate(yaw, pitch)

    def look_at(self, target):
        self.transform.look_at(target, self.up)

    def rotate(self, yaw: float, pitch: float):
        # yaw in world space, pitch about the camera's own right axis
        yaw_rotation = quat_from_axis_angle(self.up, yaw)
        pitch_rotation = quat_from_axis_angle(self.transform.local_x(), pitch)
        self.transform.rotate(quat_mul(yaw_rotation, pitch_rotation))

    def clamp_pitch(self, angle: float) -> float:
        first_person = self.config.camera.first_person
        return clamp_pitch(
            self.up,
            self.forward(),
            angle,
            first_person.most_acute_from_above,
            first_person.most_acute_from_below,
        )
