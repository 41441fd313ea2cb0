import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import numpy as np

from camera_engine.gameobjects.object import GameObject

logger = logging.getLogger(__name__)

PARALLEL_EPS = 1e-6


@dataclass
class QueryFilter:
    """
    Selects which bodies a ray query may hit.
    """

    only_fixed: bool = False
    exclude_sensors: bool = False

    def accepts(self, obj: GameObject) -> bool:
        if self.only_fixed and not obj.fixed:
            return False
        if self.exclude_sensors and obj.sensor:
            return False
        return True


class RayCaster(Protocol):
    """
    The only capability the cameras need from a collision world.
    """

    def cast_ray(
        self,
        origin: np.ndarray,
        direction: np.ndarray,
        max_distance: float,
        solid: bool,
        query_filter: QueryFilter,
    ) -> Optional[tuple[object, float]]:
        ...


class PhysicsWorld:
    """
    Minimal collision world of static AABB objects.
    Answers ray queries for camera placement; it does not simulate anything.
    """

    def __init__(self):
        self.static_objects: list[GameObject] = []

    # -------------------------------------------------
    # World setup
    # -------------------------------------------------
    def add_static(self, obj: GameObject):
        """
        Register a collidable object.
        The object MUST have:
        - obj.position (vec3)
        - obj.collider with get_bounds(position, scale)
        """
        if obj.collider is None:
            raise ValueError("Static object must have a collider")
        self.static_objects.append(obj)
        logger.debug("registered collider %s", obj.name)

    def remove(self, obj: GameObject):
        self.static_objects.remove(obj)

    # -------------------------------------------------
    # Raycast (for camera collision)
    # -------------------------------------------------
    def cast_ray(
        self,
        origin,
        direction,
        max_distance: float,
        solid: bool = True,
        query_filter: QueryFilter | None = None,
    ) -> Optional[tuple[GameObject, float]]:
        """
        Ray vs AABB test (slab method) against the registered colliders.

        :param origin: The ray origin
        :param direction: The ray direction, normalized internally
        :param max_distance: Hits further away than this are ignored
        :param solid: If True an origin inside a box hits at distance 0,
            otherwise the exit face is reported
        :param query_filter: Which bodies may be hit
        :return: (object, distance) of the closest hit, or None
        """
        origin = np.asarray(origin, dtype=np.float32)
        direction = np.asarray(direction, dtype=np.float32)
        length = np.linalg.norm(direction)
        if length < PARALLEL_EPS or max_distance < 0.0:
            return None
        direction = direction / length
        query_filter = query_filter or QueryFilter()

        closest = None
        for obj in self.static_objects:
            if not query_filter.accepts(obj):
                continue

            toi = self._intersect(origin, direction, obj.get_bounds(), solid)
            if toi is None or toi > max_distance:
                continue
            if closest is None or toi < closest[1]:
                closest = (obj, toi)

        return closest

    @staticmethod
    def _intersect(origin, direction, bounds, solid: bool) -> Optional[float]:
        min_v, max_v = bounds
        t_enter = -np.inf
        t_exit = np.inf

        for axis in range(3):
            d = direction[axis]
            if abs(d) < PARALLEL_EPS:
                # Ray parallel to slab
                if origin[axis] < min_v[axis] or origin[axis] > max_v[axis]:
                    return None
                continue

            inv_d = 1.0 / d
            t1 = (min_v[axis] - origin[axis]) * inv_d
            t2 = (max_v[axis] - origin[axis]) * inv_d
            if t1 > t2:
                t1, t2 = t2, t1

            t_enter = max(t_enter, t1)
            t_exit = min(t_exit, t2)
            if t_enter > t_exit:
                return None

        if t_exit < 0.0:
            # box is behind the origin
            return None
        if t_enter >= 0.0:
            return float(t_enter)
        # origin is inside the box
        return 0.0 if solid else float(t_exit)
