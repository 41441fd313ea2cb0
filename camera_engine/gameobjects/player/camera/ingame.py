from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from camera_engine.config import GameConfig
from camera_engine.gameobjects.player.camera.first_person import FirstPersonCamera, world_up
from camera_engine.gameobjects.player.camera.fixed_angle import FixedAngleCamera
from camera_engine.gameobjects.player.camera.third_person import ThirdPersonCamera
from camera_engine.gameobjects.player.states import CameraKind
from camera_engine.gameobjects.transform import Transform
from camera_engine.input import CameraActions
from camera_engine.physics.world_physics import RayCaster

logger = logging.getLogger(__name__)

AnyCamera = Union[FirstPersonCamera, ThirdPersonCamera, FixedAngleCamera]


def convert(camera: AnyCamera, kind: CameraKind) -> AnyCamera:
    """
    Builds a fresh camera of ``kind`` from ``camera``.

    There is no direct path between first person and fixed angle; those
    go through a third person camera.
    """
    if isinstance(camera, FirstPersonCamera):
        if kind == CameraKind.FIRST_PERSON:
            return camera
        third_person = ThirdPersonCamera.from_first_person(camera)
        if kind == CameraKind.THIRD_PERSON:
            return third_person
        return FixedAngleCamera.from_third_person(third_person)

    if isinstance(camera, FixedAngleCamera):
        if kind == CameraKind.FIXED_ANGLE:
            return camera
        third_person = ThirdPersonCamera.from_fixed_angle(camera)
        if kind == CameraKind.THIRD_PERSON:
            return third_person
        return FirstPersonCamera.from_third_person(third_person)

    if kind == CameraKind.FIRST_PERSON:
        return FirstPersonCamera.from_third_person(camera)
    if kind == CameraKind.FIXED_ANGLE:
        return FixedAngleCamera.from_third_person(camera)
    return camera


class IngameCamera:
    """
    Holds the one active camera behavior and routes the per-frame update
    to it.
    """

    def __init__(
        self,
        kind: CameraKind = CameraKind.THIRD_PERSON,
        config: GameConfig | None = None,
        up=None,
    ):
        """
        Docstring für __init__

        :param self: The object itself
        :param kind: The initially active behavior
        :param config: Shared config snapshot, defaults if omitted
        :param up: The world up axis, +Y if omitted
        """
        config = config or GameConfig()
        up = world_up() if up is None else np.array(up, dtype=np.float32)

        if kind == CameraKind.FIRST_PERSON:
            self.camera: AnyCamera = FirstPersonCamera(up=up, config=config)
        elif kind == CameraKind.THIRD_PERSON:
            self.camera = ThirdPersonCamera(
                up=up, config=config, distance=config.camera.third_person.min_distance
            )
        else:
            self.camera = FixedAngleCamera(
                up=up, config=config, distance=config.camera.fixed_angle.min_distance
            )
        self.kind = kind

    def switch_to(self, kind: CameraKind):
        if kind == self.kind:
            return
        logger.info("switching camera %s -> %s", self.kind.name, kind.name)
        self.camera = convert(self.camera, kind)
        self.kind = kind

    def toggle_first_person(self):
        """First person <-> third person; fixed angle goes to third person."""
        if self.kind == CameraKind.THIRD_PERSON:
            self.switch_to(CameraKind.FIRST_PERSON)
        else:
            self.switch_to(CameraKind.THIRD_PERSON)

    def set_primary_target(self, point):
        point = np.array(point, dtype=np.float32)
        if isinstance(self.camera, FirstPersonCamera):
            self.camera.transform.position = point
        else:
            self.camera.target = point

    def set_secondary_target(self, point: Optional[np.ndarray]):
        if point is not None:
            point = np.array(point, dtype=np.float32)
        if isinstance(self.camera, FirstPersonCamera):
            self.camera.look_target = point
        else:
            self.camera.secondary_target = point

    def update_transform(
        self,
        dt: float,
        camera_actions: CameraActions,
        ray_caster: RayCaster,
        transform: Transform,
    ) -> Transform:
        if isinstance(self.camera, ThirdPersonCamera):
            return self.camera.update_transform(dt, camera_actions, ray_caster, transform)
        return self.camera.update_transform(dt, camera_actions, transform)
