import numpy as np

from camera_engine.gameobjects.quaternion import (
    any_orthonormal,
    quat_from_axis_angle,
    quat_from_basis,
    quat_identity,
    quat_mul,
    quat_normalize,
    quat_rotate,
    quat_to_matrix,
)

LOCAL_RIGHT = np.array((1.0, 0.0, 0.0), dtype=np.float32)
LOCAL_UP = np.array((0.0, 1.0, 0.0), dtype=np.float32)
LOCAL_FORWARD = np.array((0.0, 0.0, -1.0), dtype=np.float32)


class Transform:
    """
    Rigid pose: a position and a unit quaternion orientation.

    The camera looks down its local -Z axis with +Y up and +X to the right.
    """

    def __init__(self, position=(0.0, 0.0, 0.0), rotation=None):
        """
        Docstring für __init__

        :param self: The object itself
        :param position: The position of the transform
        :param rotation: The orientation as (x, y, z, w) quaternion, identity if omitted
        """
        self.position = np.array(position, dtype=np.float32)
        if rotation is None:
            self.rotation = quat_identity()
        else:
            self.rotation = quat_normalize(np.array(rotation, dtype=np.float32))

    def __repr__(self):
        return f"Transform(position={self.position.tolist()}, rotation={self.rotation.tolist()})"

    def copy(self) -> "Transform":
        return Transform(self.position.copy(), self.rotation.copy())

    def with_translation(self, position) -> "Transform":
        return Transform(position, self.rotation.copy())

    # -------------------------------------------------
    # Local axes
    # -------------------------------------------------
    def forward(self) -> np.ndarray:
        return quat_rotate(self.rotation, LOCAL_FORWARD)

    def back(self) -> np.ndarray:
        return -self.forward()

    def right(self) -> np.ndarray:
        return quat_rotate(self.rotation, LOCAL_RIGHT)

    def local_x(self) -> np.ndarray:
        return self.right()

    def up(self) -> np.ndarray:
        return quat_rotate(self.rotation, LOCAL_UP)

    # -------------------------------------------------
    # Mutation
    # -------------------------------------------------
    def look_at(self, target, up) -> None:
        """
        Docstring für look_at

        Turns the transform so that its forward axis points at ``target``.
        Looking at the own position leaves the orientation untouched.

        :param self: The object itself
        :param target: The point to look at
        :param up: The reference up vector
        """
        back = self.position - np.asarray(target, dtype=np.float32)
        length = np.linalg.norm(back)
        if length < 1e-6:
            return
        back = back / length

        right = np.cross(np.asarray(up, dtype=np.float32), back)
        right_length = np.linalg.norm(right)
        if right_length < 1e-6:
            # up is parallel to the view direction
            right = any_orthonormal(back)
        else:
            right = right / right_length

        true_up = np.cross(back, right)
        self.rotation = quat_from_basis(right, true_up, back)

    def looking_at(self, target, up) -> "Transform":
        transform = self.copy()
        transform.look_at(target, up)
        return transform

    def rotate(self, rotation: np.ndarray) -> None:
        """Applies ``rotation`` in world space on top of the current orientation."""
        self.rotation = quat_normalize(quat_mul(rotation, self.rotation))

    def rotate_axis(self, axis, angle: float) -> None:
        self.rotate(quat_from_axis_angle(axis, angle))

    def rotate_around(self, pivot, rotation: np.ndarray) -> None:
        """
        Docstring für rotate_around

        Orbits the position around ``pivot`` and turns the orientation by
        the same rotation.

        :param self: The object itself
        :param pivot: The point to orbit around
        :param rotation: The world-space rotation
        """
        pivot = np.asarray(pivot, dtype=np.float32)
        self.position = pivot + quat_rotate(rotation, self.position - pivot)
        self.rotate(rotation)

    # -------------------------------------------------
    # Matrices
    # -------------------------------------------------
    def matrix(self) -> np.ndarray:
        """
        Docstring für matrix

        :param self: The object itself
        :return: The 4x4 model matrix
        """
        m = np.identity(4, dtype=np.float32)
        m[:3, :3] = quat_to_matrix(self.rotation)
        m[:3, 3] = self.position
        return m

    def view_matrix(self) -> np.ndarray:
        """
        Inverse of :meth:`matrix`, the view matrix a renderer uploads for
        a camera placed at this transform.
        """
        rotation_t = quat_to_matrix(self.rotation).T
        view = np.identity(4, dtype=np.float32)
        view[:3, :3] = rotation_t
        view[:3, 3] = -rotation_t @ self.position
        return view
