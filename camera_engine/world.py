# world.py
import json
import logging
from pathlib import Path

from camera_engine.gameobjects.collider.aabb import AABBCollider
from camera_engine.gameobjects.object import GameObject
from camera_engine.physics.world_physics import PhysicsWorld

logger = logging.getLogger(__name__)


class World:
    def __init__(self, level_path: str | Path | None = None):
        """
        Docstring für __init__

        :param self: The object itself
        :param level_path: Optional level file to load right away
        """
        self.objects: list[GameObject] = []
        self.physics = PhysicsWorld()
        self.spawn = (0.0, 1.0, 0.0)
        if level_path:
            self.load_level(level_path)

    def _create_object(self, data: dict):
        """
        Docstring für _create_object

        :param self: The object itself
        :param data: dict with object parameters
        :type data: dict
        """
        # ---------- collider ----------
        collider = None
        collider_size = data.get("collider")
        if collider_size:
            collider = AABBCollider(size=collider_size, margin=data.get("margin", 0.0))

        obj = GameObject(
            position=data.get("position", [0, 0, 0]),
            scale=data.get("scale", [1, 1, 1]),
            collider=collider,
            sensor=bool(data.get("sensor", False)),
            fixed=bool(data.get("fixed", True)),
            name=data.get("name"),
        )

        self.objects.append(obj)

        if collider is not None:
            self.physics.add_static(obj)

        return obj

    def load_level(self, level_path: str | Path):
        """
        Docstring für load_level

        :param self: The object itself
        :param level_path: Path to the level file
        :type level_path: str | Path
        """
        path = Path(level_path)
        if not path.exists():
            raise FileNotFoundError(f"Level file not found: {level_path}")

        with open(path, "r") as f:
            data = json.load(f)

        self.spawn = tuple(data.get("spawn", self.spawn))
        for entry in data.get("objects", []):
            self._create_object(entry)

        logger.info(
            "loaded level %s: %d objects, %d colliders",
            path.name,
            len(self.objects),
            len(self.physics.static_objects),
        )

    def add_box(self, position, size, **kwargs) -> GameObject:
        return self._create_object({"position": position, "collider": size, **kwargs})
