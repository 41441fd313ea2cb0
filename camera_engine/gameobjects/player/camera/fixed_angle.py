from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from camera_engine.config import GameConfig
from camera_engine.gameobjects.player.camera.first_person import world_up
from camera_engine.gameobjects.player.camera.util import smooth_transform
from camera_engine.gameobjects.transform import Transform
from camera_engine.input import CameraActions

if TYPE_CHECKING:
    from camera_engine.gameobjects.player.camera.third_person import ThirdPersonCamera

logger = logging.getLogger(__name__)


@dataclass
class FixedAngleCamera:
    """
    Follows ``target`` from a constant direction. Pan input is ignored.
    """

    transform: Transform = field(default_factory=Transform)
    target: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float32))
    up: np.ndarray = field(default_factory=world_up)
    secondary_target: Optional[np.ndarray] = None
    distance: float = 10.0
    config: GameConfig = field(default_factory=GameConfig)

    @classmethod
    def from_third_person(cls, camera: ThirdPersonCamera) -> FixedAngleCamera:
        """
        Inverse of ``ThirdPersonCamera.from_fixed_angle``: lifts the view
        back up by the tilt that conversion adds.
        """
        transform = camera.transform.copy()
        transform.rotate_axis(
            transform.right(),
            camera.config.camera.third_person.most_acute_from_above,
        )
        logger.debug("fixed angle camera from third person, pivot %s", camera.target.tolist())
        return cls(
            transform=transform,
            target=camera.target.copy(),
            up=camera.up.copy(),
            secondary_target=None if camera.secondary_target is None else camera.secondary_target.copy(),
            distance=camera.distance,
            config=camera.config,
        )

    def forward(self) -> np.ndarray:
        return self.transform.forward()

    def update_transform(
        self, dt: float, camera_actions: CameraActions, transform: Transform
    ) -> Transform:
        fixed_angle = self.config.camera.fixed_angle
        zoom = camera_actions.clamped_zoom() * fixed_angle.zoom_speed
        self.distance = float(
            np.clip(self.distance - zoom, fixed_angle.min_distance, fixed_angle.max_distance)
        )
        self.transform.position = (self.target - self.forward() * self.distance).astype(np.float32)

        return smooth_transform(
            transform,
            self.transform,
            fixed_angle.translation_smoothing,
            fixed_angle.rotation_smoothing,
            dt,
        )
