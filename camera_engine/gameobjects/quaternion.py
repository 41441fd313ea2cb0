import math

import numpy as np

# Quaternions are stored as float32 arrays in (x, y, z, w) order.

ARC_EPS = 1e-6
SLERP_LINEAR_THRESHOLD = 0.9995


def quat_identity() -> np.ndarray:
    return np.array((0.0, 0.0, 0.0, 1.0), dtype=np.float32)


def quat_normalize(q: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(q)
    if norm == 0:
        return quat_identity()
    return (q / norm).astype(np.float32)


def quat_from_axis_angle(axis, angle: float) -> np.ndarray:
    """
    Rotation of ``angle`` radians about ``axis`` (right-handed).

    :param axis: The rotation axis, does not need to be normalized
    :param angle: The angle in radians
    :return: The rotation quaternion
    :rtype: np.ndarray
    """
    axis = np.asarray(axis, dtype=np.float32)
    norm = np.linalg.norm(axis)
    if norm == 0:
        return quat_identity()
    axis = axis / norm
    half = angle * 0.5
    s = math.sin(half)
    return np.array(
        (axis[0] * s, axis[1] * s, axis[2] * s, math.cos(half)),
        dtype=np.float32,
    )


def quat_mul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Hamilton product ``a * b``: applies ``b`` first, then ``a``.
    """
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return np.array(
        (
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
            aw * bw - ax * bx - ay * by - az * bz,
        ),
        dtype=np.float32,
    )


def quat_rotate(q: np.ndarray, v) -> np.ndarray:
    v = np.asarray(v, dtype=np.float32)
    u = q[:3]
    t = 2.0 * np.cross(u, v)
    return (v + q[3] * t + np.cross(u, t)).astype(np.float32)


def quat_dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.dot(a, b))


def quat_slerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """
    Spherical interpolation along the shortest arc.

    ``t <= 0`` returns ``a`` and ``t >= 1`` returns ``b`` exactly, so a
    saturated smoothing factor never leaves residual error.
    """
    if t <= 0.0:
        return a.copy()
    if t >= 1.0:
        return b.copy()

    dot = quat_dot(a, b)
    if dot < 0.0:
        b = -b
        dot = -dot

    if dot > SLERP_LINEAR_THRESHOLD:
        return quat_normalize(a + (b - a) * t)

    theta = math.acos(min(dot, 1.0))
    sin_theta = math.sin(theta)
    wa = math.sin((1.0 - t) * theta) / sin_theta
    wb = math.sin(t * theta) / sin_theta
    return quat_normalize(a * wa + b * wb)


def any_orthonormal(v: np.ndarray) -> np.ndarray:
    v = np.asarray(v, dtype=np.float32)
    if abs(v[0]) < 0.9:
        other = np.array((1.0, 0.0, 0.0), dtype=np.float32)
    else:
        other = np.array((0.0, 1.0, 0.0), dtype=np.float32)
    axis = np.cross(v, other)
    return (axis / np.linalg.norm(axis)).astype(np.float32)


def quat_from_rotation_arc(from_dir, to_dir, fallback_axis=None) -> np.ndarray:
    """
    Shortest-arc rotation turning ``from_dir`` onto ``to_dir``.

    Both inputs must be normalized. When they point in opposite
    directions the arc is not unique; the half turn is taken about
    ``fallback_axis`` if one is given.

    :param from_dir: The unit start direction
    :param to_dir: The unit end direction
    :param fallback_axis: Axis for the half turn of antiparallel inputs
    :return: The rotation quaternion
    :rtype: np.ndarray
    """
    from_dir = np.asarray(from_dir, dtype=np.float32)
    to_dir = np.asarray(to_dir, dtype=np.float32)
    dot = float(np.dot(from_dir, to_dir))

    if dot >= 1.0 - ARC_EPS:
        return quat_identity()

    if dot <= -1.0 + ARC_EPS:
        axis = None
        if fallback_axis is not None:
            axis = np.asarray(fallback_axis, dtype=np.float32)
            # the half turn axis has to be orthogonal to the start direction
            axis = axis - from_dir * float(np.dot(axis, from_dir))
            if np.dot(axis, axis) < ARC_EPS:
                axis = None
        if axis is None:
            axis = any_orthonormal(from_dir)
        return quat_from_axis_angle(axis, math.pi)

    c = np.cross(from_dir, to_dir)
    return quat_normalize(np.array((c[0], c[1], c[2], 1.0 + dot), dtype=np.float32))


def quat_from_basis(right, up, back) -> np.ndarray:
    """
    Quaternion of the rotation matrix whose columns are ``right``, ``up``
    and ``back`` (local +X, +Y and +Z).
    """
    m00, m10, m20 = (float(c) for c in right)
    m01, m11, m21 = (float(c) for c in up)
    m02, m12, m22 = (float(c) for c in back)

    trace = m00 + m11 + m22
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        w = 0.25 * s
        x = (m21 - m12) / s
        y = (m02 - m20) / s
        z = (m10 - m01) / s
    elif m00 > m11 and m00 > m22:
        s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
        w = (m21 - m12) / s
        x = 0.25 * s
        y = (m01 + m10) / s
        z = (m02 + m20) / s
    elif m11 > m22:
        s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
        w = (m02 - m20) / s
        x = (m01 + m10) / s
        y = 0.25 * s
        z = (m12 + m21) / s
    else:
        s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
        w = (m10 - m01) / s
        x = (m02 + m20) / s
        y = (m12 + m21) / s
        z = 0.25 * s

    return quat_normalize(np.array((x, y, z, w), dtype=np.float32))


def quat_to_matrix(q: np.ndarray) -> np.ndarray:
    x, y, z, w = (float(c) for c in q)
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
            [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
        ],
        dtype=np.float32,
    )
