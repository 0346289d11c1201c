import pytest

from cocoengine.ecs import (
    CameraComponent,
    GraphicsComponent,
    NameComponent,
    VelocityComponent,
    World,
)
from cocoengine.matrix import Vector2
from cocoengine.transform import Transform


def test_create_and_destroy():
    world = World()
    first = world.create()
    second = world.create()
    assert first != second
    assert world.valid(first) and world.valid(second)
    world.destroy(first)
    assert not world.valid(first)
    assert list(world.entities()) == [second]


def test_destroy_invalid_entity_raises():
    world = World()
    entity = world.create()
    world.destroy(entity)
    with pytest.raises(KeyError):
        world.destroy(entity)


def test_add_get_has_remove():
    world = World()
    entity = world.create()
    name = world.add(entity, NameComponent("hero"))
    assert world.get(entity, NameComponent) is name
    assert world.has(entity, NameComponent)
    assert world.try_get(entity, CameraComponent) is None
    world.remove(entity, NameComponent)
    assert not world.has(entity, NameComponent)
    with pytest.raises(KeyError):
        world.get(entity, NameComponent)
    with pytest.raises(KeyError):
        world.remove(entity, NameComponent)


def test_add_duplicate_component_raises():
    world = World()
    entity = world.create()
    world.add(entity, CameraComponent())
    with pytest.raises(ValueError):
        world.add(entity, CameraComponent())


def test_add_to_invalid_entity_raises():
    world = World()
    with pytest.raises(KeyError):
        world.add(42, NameComponent("ghost"))


def test_view_filters_by_all_types():
    world = World()
    a = world.create()
    b = world.create()
    c = world.create()
    world.add(a, Transform())
    world.add(a, CameraComponent())
    world.add(b, Transform())
    world.add(c, CameraComponent())
    assert [row[0] for row in world.view(Transform)] == [a, b]
    rows = list(world.view(Transform, CameraComponent))
    assert len(rows) == 1
    assert rows[0][0] == a
    assert rows[0][1] is world.get(a, Transform)


def test_view_without_types_raises():
    with pytest.raises(TypeError):
        list(World().view())


def test_destroy_unlinks_transform_hierarchy():
    world = World()
    parent_entity = world.create()
    child_entity = world.create()
    parent = world.add(parent_entity, Transform())
    child = world.add(child_entity, Transform())
    child.set_parent(parent)
    world.destroy(parent_entity)
    assert child.parent is None


def test_remove_transform_detaches_from_parent():
    world = World()
    parent = Transform()
    entity = world.create()
    transform = world.add(entity, Transform())
    transform.set_parent(parent)
    world.remove(entity, Transform)
    assert parent.children == ()


def test_clear_removes_everything():
    world = World()
    for _ in range(3):
        world.add(world.create(), NameComponent("x"))
    world.clear()
    assert len(world) == 0
    assert list(world.view(NameComponent)) == []


def test_name_component_round_trip():
    name = NameComponent("player")
    assert NameComponent.from_dict(name.serialize()) == name
    assert name.serialize() == {"Name": "player"}


def test_velocity_component_round_trip():
    velocity = VelocityComponent(Vector2(3.0, -4.0), 90.0)
    assert VelocityComponent.from_dict(velocity.serialize()) == velocity


def test_velocity_from_empty_dict_uses_defaults():
    assert VelocityComponent.from_dict({}) == VelocityComponent()


def test_graphics_component_holds_renderable():
    marker = object()
    assert GraphicsComponent(marker).renderable is marker