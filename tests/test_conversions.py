import math

import numpy as np
import pytest

from camera_engine.config import CameraConfig, GameConfig, ThirdPersonConfig
from camera_engine.gameobjects.player.camera.first_person import FirstPersonCamera
from camera_engine.gameobjects.player.camera.fixed_angle import FixedAngleCamera
from camera_engine.gameobjects.player.camera.third_person import ThirdPersonCamera
from camera_engine.gameobjects.quaternion import quat_from_axis_angle, quat_mul
from camera_engine.gameobjects.transform import Transform

from conftest import assert_nearly_eq, build_third_person, vec


def first_person_at(position, yaw=0.4, pitch=-0.3, **kwargs):
    rotation = quat_mul(
        quat_from_axis_angle(vec(0, 1, 0), yaw),
        quat_from_axis_angle(vec(1, 0, 0), pitch),
    )
    return FirstPersonCamera(transform=Transform(position, rotation), **kwargs)


def test_third_to_first_jumps_into_pivot():
    third_person = build_third_person(vec(0, 3, 6), vec(1, 1, 1))
    third_person.secondary_target = vec(9, 0, 9)

    first_person = FirstPersonCamera.from_third_person(third_person)

    assert_nearly_eq(first_person.transform.position, vec(1, 1, 1))
    np.testing.assert_allclose(first_person.transform.rotation, third_person.transform.rotation)
    assert_nearly_eq(first_person.look_target, vec(9, 0, 9))
    assert_nearly_eq(first_person.up, third_person.up)
    assert first_person.config is third_person.config


def test_first_to_third_backs_out_by_min_distance():
    config = GameConfig(camera=CameraConfig(third_person=ThirdPersonConfig(min_distance=2.5)))
    first_person = first_person_at(vec(1, 2, 3), config=config, look_target=vec(0, 0, -10))

    third_person = ThirdPersonCamera.from_first_person(first_person)

    assert_nearly_eq(third_person.target, vec(1, 2, 3))
    assert third_person.distance == pytest.approx(2.5)
    assert_nearly_eq(
        third_person.transform.position, vec(1, 2, 3) - first_person.forward() * 2.5
    )
    assert_nearly_eq(third_person.forward(), first_person.forward())
    assert_nearly_eq(third_person.secondary_target, vec(0, 0, -10))
    assert third_person.config is config


def test_first_to_third_to_first_keeps_view():
    original = first_person_at(vec(-4, 1, 2), yaw=2.0, pitch=0.5)

    round_trip = FirstPersonCamera.from_third_person(ThirdPersonCamera.from_first_person(original))

    assert_nearly_eq(round_trip.transform.position, original.transform.position)
    assert_nearly_eq(round_trip.forward(), original.forward())
    assert_nearly_eq(round_trip.transform.right(), original.transform.right())


def test_conversion_produces_independent_state():
    original = first_person_at(vec(0, 0, 0), look_target=vec(1, 0, 0))
    third_person = ThirdPersonCamera.from_first_person(original)

    third_person.target[0] = 42.0
    third_person.secondary_target[1] = 42.0
    third_person.transform.position[2] = 42.0

    assert_nearly_eq(original.transform.position, vec(0, 0, 0))
    assert_nearly_eq(original.look_target, vec(1, 0, 0))


def test_fixed_angle_to_third_tilts_down():
    fixed_angle = FixedAngleCamera(
        transform=Transform(vec(0, 5, 10)),
        target=vec(0, 1, 0),
        secondary_target=vec(3, 0, 3),
        distance=7.0,
    )
    third_person = ThirdPersonCamera.from_fixed_angle(fixed_angle)

    angle = fixed_angle.config.camera.third_person.most_acute_from_above
    assert_nearly_eq(third_person.forward(), vec(0, -math.sin(angle), -math.cos(angle)))
    assert_nearly_eq(third_person.transform.position, vec(0, 5, 10))
    assert_nearly_eq(third_person.target, vec(0, 1, 0))
    assert_nearly_eq(third_person.secondary_target, vec(3, 0, 3))
    assert third_person.distance == pytest.approx(7.0)
    assert third_person.config is fixed_angle.config
    # source untouched
    assert_nearly_eq(fixed_angle.forward(), vec(0, 0, -1))


def test_third_to_fixed_angle_undoes_the_tilt():
    fixed_angle = FixedAngleCamera(
        transform=Transform().looking_at(vec(1, -1, -2), vec(0, 1, 0)),
        target=vec(0, 1, 0),
        distance=7.0,
    )
    back = FixedAngleCamera.from_third_person(ThirdPersonCamera.from_fixed_angle(fixed_angle))
    assert_nearly_eq(back.forward(), fixed_angle.forward())
    assert back.distance == pytest.approx(7.0)
