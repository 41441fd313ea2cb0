import numpy as np
import pytest

from camera_engine.config import GameConfig
from camera_engine.gameobjects.player.camera.third_person import ThirdPersonCamera
from camera_engine.gameobjects.transform import Transform


class FakeRayCaster:
    """
    Collision world stand-in: answers every query with ``hit_distance``
    (or no hit) and records what it was asked.
    """

    def __init__(self, hit_distance=None):
        self.hit_distance = hit_distance
        self.calls = []

    def cast_ray(self, origin, direction, max_distance, solid, query_filter):
        self.calls.append(
            {
                "origin": np.array(origin),
                "direction": np.array(direction),
                "max_distance": max_distance,
                "solid": solid,
                "query_filter": query_filter,
            }
        )
        if self.hit_distance is None or self.hit_distance > max_distance:
            return None
        return ("entity", self.hit_distance)


def vec(*values):
    return np.array(values, dtype=np.float32)


def assert_nearly_eq(actual, expected, tolerance=1e-5):
    actual = np.asarray(actual, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)
    assert float(np.sum((actual - expected) ** 2)) < tolerance, (
        f"expected: {expected}, actual: {actual}"
    )


def build_third_person(camera_translation, primary_target, config=None):
    camera = ThirdPersonCamera(config=config or GameConfig())
    camera.transform = Transform(camera_translation).looking_at(primary_target, vec(0, 1, 0))
    camera.target = np.array(primary_target, dtype=np.float32)
    camera.distance = float(np.linalg.norm(camera.target - camera.transform.position))
    return camera


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def no_hits():
    return FakeRayCaster()
