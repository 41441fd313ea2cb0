from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

import numpy as np

from camera_engine.config import GameConfig
from camera_engine.gameobjects.player.camera.first_person import world_up
from camera_engine.gameobjects.player.camera.util import (
    clamp_pitch,
    is_approx_zero,
    normalize,
    smooth_transform,
    split,
)
from camera_engine.gameobjects.quaternion import (
    quat_from_axis_angle,
    quat_from_rotation_arc,
    quat_mul,
)
from camera_engine.gameobjects.transform import Transform
from camera_engine.input import CameraActions
from camera_engine.physics.world_physics import QueryFilter, RayCaster

if TYPE_CHECKING:
    from camera_engine.gameobjects.player.camera.first_person import FirstPersonCamera
    from camera_engine.gameobjects.player.camera.fixed_angle import FixedAngleCamera

logger = logging.getLogger(__name__)


class LineOfSightCorrection(Enum):
    """
    Whether obstruction handling pulled the eye toward the pivot or let it
    move away. Picks the translation smoothing rate.
    """

    CLOSER = auto()
    FURTHER = auto()


@dataclass(frozen=True)
class LineOfSightResult:
    location: np.ndarray
    correction: LineOfSightCorrection


@dataclass
class ThirdPersonCamera:
    """
    Orbit camera around ``target`` at ``distance``, kept in line of sight
    of the pivot by a ray query against static geometry.
    """

    transform: Transform = field(default_factory=Transform)
    target: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float32))
    up: np.ndarray = field(default_factory=world_up)
    secondary_target: Optional[np.ndarray] = None
    distance: float = 5.0
    config: GameConfig = field(default_factory=GameConfig)

    # -------------------------------------------------
    # Conversions
    # -------------------------------------------------
    @classmethod
    def from_first_person(cls, camera: FirstPersonCamera) -> ThirdPersonCamera:
        """
        Pulls the eye back from the first person position, which becomes
        the pivot, by the minimum orbit distance.
        """
        target = camera.transform.position.copy()
        distance = camera.config.camera.third_person.min_distance
        eye = target - camera.forward() * distance
        up = camera.up.copy()
        transform = Transform(eye).looking_at(target, up)
        logger.debug("third person camera from first person, pivot %s", target.tolist())
        return cls(
            transform=transform,
            target=target,
            up=up,
            secondary_target=None if camera.look_target is None else camera.look_target.copy(),
            distance=distance,
            config=camera.config,
        )

    @classmethod
    def from_fixed_angle(cls, camera: FixedAngleCamera) -> ThirdPersonCamera:
        """
        Keeps the fixed-angle framing but tilts the view down by the
        third person ``most_acute_from_above`` angle.
        """
        transform = camera.transform.copy()
        transform.rotate_axis(
            transform.right(),
            -camera.config.camera.third_person.most_acute_from_above,
        )
        logger.debug("third person camera from fixed angle, pivot %s", camera.target.tolist())
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

    # -------------------------------------------------
    # Per frame update
    # -------------------------------------------------
    def update_transform(
        self,
        dt: float,
        camera_actions: CameraActions,
        ray_caster: RayCaster,
        transform: Transform,
    ) -> Transform:
        """
        Advances the camera by one frame.

        :param dt: Frame time in seconds
        :param camera_actions: This frame's input
        :param ray_caster: Collision world snapshot for this frame
        :param transform: The transform rendered last frame
        :return: The transform to render this frame
        :raises InputError: If pan is not an axis pair
        """
        if self.secondary_target is not None:
            self.move_eye_to_align_target_with(self.secondary_target)

        camera_movement = camera_actions.axis_pair()
        if not is_approx_zero(camera_movement):
            self.handle_camera_controls(camera_movement)

        self.zoom(camera_actions.clamped_zoom())
        los_correction = self.place_eye_in_valid_position(ray_caster)
        return self.get_camera_transform(dt, transform, los_correction)

    def handle_camera_controls(self, camera_movement: np.ndarray):
        yaw = -camera_movement[0] * self.config.camera.mouse_sensitivity_x
        pitch = -camera_movement[1] * self.config.camera.mouse_sensitivity_y
        pitch = self.clamp_pitch(pitch)
        self.rotate_around_target(yaw, pitch)

    def rotate_around_target(self, yaw: float, pitch: float):
        yaw_rotation = quat_from_axis_angle(self.up, yaw)
        pitch_rotation = quat_from_axis_angle(self.transform.local_x(), pitch)
        self.transform.rotate_around(self.target, quat_mul(yaw_rotation, pitch_rotation))

    def clamp_pitch(self, angle: float) -> float:
        third_person = self.config.camera.third_person
        return clamp_pitch(
            self.up,
            self.forward(),
            angle,
            third_person.most_acute_from_above,
            third_person.most_acute_from_below,
        )

    def zoom(self, zoom: float):
        third_person = self.config.camera.third_person
        zoom = zoom * third_person.zoom_speed
        self.distance = float(
            np.clip(self.distance - zoom, third_person.min_distance, third_person.max_distance)
        )

    def move_eye_to_align_target_with(self, secondary_target):
        """
        Orbits the eye so that, seen from above, it sits on the far side of
        the pivot from ``secondary_target``.

        No-op when either horizontal direction is degenerate.
        """
        _, target_to_secondary_target = split(
            np.asarray(secondary_target, dtype=np.float32) - self.target, self.up
        )
        if is_approx_zero(target_to_secondary_target):
            return
        _, eye_to_target = split(self.target - self.transform.position, self.up)
        if is_approx_zero(eye_to_target):
            return

        rotation = quat_from_rotation_arc(
            normalize(eye_to_target),
            normalize(target_to_secondary_target),
            fallback_axis=self.up,
        )
        self.transform.rotate_around(self.target, rotation)

    def place_eye_in_valid_position(self, ray_caster: RayCaster) -> LineOfSightCorrection:
        line_of_sight_result = self.keep_line_of_sight(ray_caster)
        self.transform.position = line_of_sight_result.location
        return line_of_sight_result.correction

    def get_camera_transform(
        self,
        dt: float,
        transform: Transform,
        line_of_sight_correction: LineOfSightCorrection,
    ) -> Transform:
        third_person = self.config.camera.third_person
        if line_of_sight_correction == LineOfSightCorrection.FURTHER:
            translation_smoothing = third_person.translation_smoothing_going_further
        else:
            translation_smoothing = third_person.translation_smoothing_going_closer

        # shared with first person
        rotation_smoothing = self.config.camera.first_person.rotation_smoothing
        return smooth_transform(
            transform, self.transform, translation_smoothing, rotation_smoothing, dt
        )

    # -------------------------------------------------
    # Line of sight queries (side-effect free)
    # -------------------------------------------------
    def keep_line_of_sight(self, ray_caster: RayCaster) -> LineOfSightResult:
        """
        Where the eye has to go to see the pivot, and whether that is
        closer than where it is now.
        """
        origin = self.target
        direction = -self.forward()

        distance = self.get_raycast_distance(origin, direction, ray_caster)
        location = (origin + direction * distance).astype(np.float32)

        original_distance = self.target - self.transform.position
        epsilon = self.config.camera.third_person.line_of_sight_epsilon
        if distance * distance < float(np.dot(original_distance, original_distance)) - epsilon:
            correction = LineOfSightCorrection.CLOSER
        else:
            correction = LineOfSightCorrection.FURTHER
        return LineOfSightResult(location=location, correction=correction)

    def get_raycast_distance(self, origin, direction, ray_caster: RayCaster) -> float:
        """
        Free distance from ``origin`` along ``direction``, at most
        ``self.distance`` and ``min_distance_to_objects`` short of the
        first static hit.
        """
        max_toi = self.distance
        query_filter = QueryFilter(only_fixed=True, exclude_sensors=True)

        hit = ray_caster.cast_ray(origin, direction, max_toi, True, query_filter)
        if hit is None:
            return max_toi

        _entity, toi = hit
        min_distance_to_objects = self.config.camera.third_person.min_distance_to_objects
        distance = min(max(toi - min_distance_to_objects, 0.0), max_toi)
        logger.debug("line of sight blocked at %.3f, eye distance %.3f", toi, distance)
        return distance
