from camera_engine.physics.world_physics import PhysicsWorld, QueryFilter, RayCaster

__all__ = ["PhysicsWorld", "QueryFilter", "RayCaster"]
