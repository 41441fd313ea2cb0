from camera_engine.gameobjects.collider.aabb import AABBCollider

__all__ = ["AABBCollider"]
