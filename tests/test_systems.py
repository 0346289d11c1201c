import pytest

from cocoengine.ecs import CameraComponent, GraphicsComponent, VelocityComponent, World
from cocoengine.matrix import Matrix, Vector2
from cocoengine.systems import GravitySystem, RenderSystem, VelocitySystem
from cocoengine.transform import Transform


class _Drawable:
    def __init__(self, name, layer, log):
        self.name = name
        self.layer = layer
        self.log = log

    def render(self, renderer, transform_matrix):
        self.log.append((self.name, renderer, transform_matrix))


def test_gravity_accelerates_downwards():
    world = World()
    entity = world.create()
    velocity = world.add(entity, VelocityComponent(Vector2(5.0, 0.0)))
    GravitySystem(world).apply_gravity(1.0)
    assert velocity.linear_vel == Vector2(5.0, 1000.0)


def test_gravity_ignores_entities_without_velocity():
    world = World()
    entity = world.create()
    transform = world.add(entity, Transform((1.0, 2.0)))
    GravitySystem(world).apply_gravity(1.0)
    assert transform.position == Vector2(1.0, 2.0)


def test_velocity_moves_transform():
    world = World()
    entity = world.create()
    transform = world.add(entity, Transform((0.0, 0.0)))
    world.add(entity, VelocityComponent(Vector2(10.0, 20.0)))
    VelocitySystem(world).apply_velocity(1.0)
    assert transform.position == Vector2(10.0, 20.0)


def test_velocity_stops_at_ground():
    world = World()
    entity = world.create()
    transform = world.add(entity, Transform((7.0, 590.0)))
    velocity = world.add(entity, VelocityComponent(Vector2(0.0, 100.0)))
    VelocitySystem(world).apply_velocity(1.0)
    assert transform.position == Vector2(7.0, 720 - 128)
    assert velocity.linear_vel.y == 0.0


def test_render_orders_by_layer():
    world = World()
    log = []
    for name, layer in [("top", 5), ("bottom", -1), ("middle", 2)]:
        entity = world.create()
        world.add(entity, Transform())
        world.add(entity, GraphicsComponent(_Drawable(name, layer, log)))
    renderer = object()
    RenderSystem(world, renderer).render(0.016)
    assert [entry[0] for entry in log] == ["bottom", "middle", "top"]
    assert all(entry[1] is renderer for entry in log)


def test_render_skips_entities_without_transform():
    world = World()
    log = []
    entity = world.create()
    world.add(entity, GraphicsComponent(_Drawable("lonely", 0, log)))
    RenderSystem(world, None).render(0.0)
    assert log == []


def test_render_without_camera_uses_world_matrix():
    world = World()
    log = []
    entity = world.create()
    transform = world.add(entity, Transform((3.0, 4.0), 30.0, (2.0, 1.0)))
    world.add(entity, GraphicsComponent(_Drawable("a", 0, log)))
    RenderSystem(world, None).render(0.0)
    received = log[0][2]
    expected = transform.local_to_world_matrix()
    assert received.values == pytest.approx(expected.values)


def test_render_applies_camera_inverse():
    world = World()
    log = []
    camera_entity = world.create()
    camera = world.add(camera_entity, Transform((100.0, 50.0)))
    world.add(camera_entity, CameraComponent())
    entity = world.create()
    world.add(entity, Transform((130.0, 70.0)))
    world.add(entity, GraphicsComponent(_Drawable("a", 0, log)))
    RenderSystem(world, None).render(0.0)
    received: Matrix = log[0][2]
    local = camera.world_to_local_point((130.0, 70.0))
    assert tuple(received.vector2()) == pytest.approx(tuple(local))
    assert camera.children == ()