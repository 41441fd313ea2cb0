import pytest

from camera_engine.gameobjects.collider import AABBCollider
from camera_engine.gameobjects.object import GameObject
from camera_engine.physics.world_physics import PhysicsWorld, QueryFilter

from conftest import vec


def box(position, size=(2, 2, 2), **kwargs):
    return GameObject(position=position, collider=AABBCollider(size=size), **kwargs)


@pytest.fixture
def world():
    return PhysicsWorld()


def test_static_object_needs_collider(world):
    with pytest.raises(ValueError):
        world.add_static(GameObject())


def test_hits_nearest_box(world):
    far = box((0, 0, 10), name="far")
    near = box((0, 0, 5), name="near")
    world.add_static(far)
    world.add_static(near)

    hit = world.cast_ray(vec(0, 0, 0), vec(0, 0, 1), 100.0)
    assert hit is not None
    obj, toi = hit
    assert obj is near
    assert toi == pytest.approx(4.0)


def test_direction_is_normalized(world):
    world.add_static(box((0, 0, 5)))
    _, toi = world.cast_ray(vec(0, 0, 0), vec(0, 0, 10), 100.0)
    assert toi == pytest.approx(4.0)


def test_hits_beyond_max_distance_are_ignored(world):
    world.add_static(box((0, 0, 5)))
    assert world.cast_ray(vec(0, 0, 0), vec(0, 0, 1), 3.9) is None


def test_boxes_behind_origin_and_to_the_side_are_missed(world):
    world.add_static(box((0, 0, -5)))
    world.add_static(box((5, 0, 5)))
    assert world.cast_ray(vec(0, 0, 0), vec(0, 0, 1), 100.0) is None


def test_zero_direction_never_hits(world):
    world.add_static(box((0, 0, 0)))
    assert world.cast_ray(vec(0, 0, 0), vec(0, 0, 0), 100.0) is None


def test_origin_inside_box(world):
    world.add_static(box((0, 0, 0)))
    _, solid_toi = world.cast_ray(vec(0, 0, 0), vec(1, 0, 0), 10.0, solid=True)
    _, hollow_toi = world.cast_ray(vec(0, 0, 0), vec(1, 0, 0), 10.0, solid=False)
    assert solid_toi == 0.0
    assert hollow_toi == pytest.approx(1.0)


def test_filter_skips_sensors_and_dynamic_bodies(world):
    sensor = box((0, 0, 3), sensor=True)
    dynamic = box((0, 0, 6), fixed=False)
    wall = box((0, 0, 9))
    for obj in (sensor, dynamic, wall):
        world.add_static(obj)

    origin, direction = vec(0, 0, 0), vec(0, 0, 1)
    assert world.cast_ray(origin, direction, 100.0)[0] is sensor
    assert world.cast_ray(origin, direction, 100.0, query_filter=QueryFilter(exclude_sensors=True))[0] is dynamic
    assert (
        world.cast_ray(origin, direction, 100.0, query_filter=QueryFilter(only_fixed=True, exclude_sensors=True))[0]
        is wall
    )


def test_collider_margin_and_scale_grow_bounds():
    obj = GameObject(position=(1, 1, 1), scale=(2, 1, 1), collider=AABBCollider(size=(1, 1, 1), margin=0.5))
    min_v, max_v = obj.get_bounds()
    assert list(min_v) == pytest.approx([-0.5, 0.0, 0.0])
    assert list(max_v) == pytest.approx([2.5, 2.0, 2.0])


def test_removed_objects_are_not_hit(world):
    obj = box((0, 0, 5))
    world.add_static(obj)
    world.remove(obj)
    assert world.cast_ray(vec(0, 0, 0), vec(0, 0, 1), 100.0) is None
