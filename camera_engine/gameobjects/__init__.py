from camera_engine.gameobjects.object import GameObject
from camera_engine.gameobjects.transform import Transform

__all__ = ["GameObject", "Transform"]
