import math

import numpy as np

from camera_engine.gameobjects.quaternion import quat_slerp
from camera_engine.gameobjects.transform import Transform

APPROX_ZERO_SQUARED = 1e-5


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Docstring für normalize

    :param v: The vector to normalize
    :type v: np.ndarray
    :return: The normalized vector, or v itself if it has zero length
    :rtype: ndarray[Any, Any]
    """
    norm = np.linalg.norm(v)
    if norm == 0:
        return v
    return v / norm


def is_approx_zero(v) -> bool:
    v = np.asarray(v, dtype=np.float32)
    return float(np.dot(v, v)) < APPROX_ZERO_SQUARED


def split(v, up) -> tuple[np.ndarray, np.ndarray]:
    """
    Splits ``v`` into its component along ``up`` and the remainder in the
    horizontal plane.

    :return: (vertical, horizontal)
    """
    v = np.asarray(v, dtype=np.float32)
    up = normalize(np.asarray(up, dtype=np.float32))
    vertical = up * np.dot(v, up)
    return vertical, v - vertical


def angle_between(a, b) -> float:
    a = np.asarray(a, dtype=np.float32)
    b = np.asarray(b, dtype=np.float32)
    denom = float(np.linalg.norm(a) * np.linalg.norm(b))
    if denom == 0.0:
        return 0.0
    cos = float(np.dot(a, b)) / denom
    return math.acos(max(-1.0, min(1.0, cos)))


def clamp_pitch(
    up,
    forward,
    angle: float,
    most_acute_from_above: float,
    most_acute_from_below: float,
) -> float:
    """
    Limits a pitch delta so the view never gets closer to straight up than
    ``most_acute_from_above`` or closer to straight down than
    ``most_acute_from_below``.

    A positive pitch lifts the forward vector toward ``up``, i.e. it
    shrinks the angle between the two.

    :param up: The up axis
    :param forward: The current view direction
    :param angle: The requested pitch delta in radians
    :param most_acute_from_above: Smallest allowed angle to ``up``
    :param most_acute_from_below: Smallest allowed angle to ``-up``
    :return: The allowed pitch delta
    :rtype: float
    """
    angle_to_up = angle_between(forward, up)
    max_up = angle_to_up - most_acute_from_above
    max_down = angle_to_up - (math.pi - most_acute_from_below)
    return min(max(angle, max_down), max_up)


def smooth_transform(
    current: Transform,
    target: Transform,
    translation_smoothing: float,
    rotation_smoothing: float,
    dt: float,
) -> Transform:
    """
    Moves the rendered ``current`` transform toward ``target``.

    Both factors are capped at 1 so a long frame lands exactly on the
    target instead of overshooting it.
    """
    scale = min(translation_smoothing * dt, 1.0)
    if scale >= 1.0:
        position = target.position.copy()
    else:
        position = current.position + (target.position - current.position) * scale

    scale = min(rotation_smoothing * dt, 1.0)
    rotation = quat_slerp(current.rotation, target.rotation, scale)

    smoothed = Transform(position)
    smoothed.rotation = rotation
    return smoothed
