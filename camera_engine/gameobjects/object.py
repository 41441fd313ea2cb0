import itertools
from typing import Optional

import numpy as np

from camera_engine.gameobjects.collider import AABBCollider

_ids = itertools.count(1)


class GameObject:
    def __init__(
        self,
        position=(0.0, 0.0, 0.0),
        scale=(1.0, 1.0, 1.0),
        collider: Optional[AABBCollider] = None,
        sensor: bool = False,
        fixed: bool = True,
        name: str | None = None,
    ):
        """
        Docstring für __init__

        :param self: The object itself
        :param position: The world position of the object
        :param scale: The scale of the object
        :param collider: The collider of the object
        :param sensor: Sensors report overlaps but never block rays
        :param fixed: Static geometry (False for dynamic bodies)
        :param name: Optional debug name
        """
        self.id = next(_ids)
        self.position = np.array(position, dtype=np.float32)
        self.scale = np.array(scale, dtype=np.float32)
        self.collider = collider
        self.sensor = sensor
        self.fixed = fixed
        self.name = name or f"object_{self.id}"

    def __repr__(self):
        return f"GameObject(name={self.name!r}, position={self.position.tolist()})"

    def get_bounds(self):
        return self.collider.get_bounds(self.position, self.scale)
