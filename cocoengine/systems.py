"""Systems that advance or draw the world each frame."""

from __future__ import annotations

from cocoengine.ecs import CameraComponent, GraphicsComponent, VelocityComponent, World
from cocoengine.matrix import Vector2
from cocoengine.transform import Transform

GRAVITY = 1000.0
GROUND_LEVEL = 720 - 128


class GravitySystem:
    """Accelerates every moving entity downwards."""

    def __init__(self, world: World):
        self.world = world

    def apply_gravity(self, delta: float) -> None:
        for _, velocity in self.world.view(VelocityComponent):
            v = velocity.linear_vel
            velocity.linear_vel = Vector2(v.x, v.y + GRAVITY * delta)


class VelocitySystem:
    """Moves entities by their velocity and stops them at the ground."""

    def __init__(self, world: World):
        self.world = world

    def apply_velocity(self, delta: float) -> None:
        for _, transform, velocity in self.world.view(Transform, VelocityComponent):
            transform.translate(velocity.linear_vel * delta)
            position = transform.position
            if position.y > GROUND_LEVEL:
                transform.position = Vector2(position.x, float(GROUND_LEVEL))
                velocity.linear_vel = Vector2(velocity.linear_vel.x, 0.0)


class RenderSystem:
    """Draws every graphic entity through the camera, lower layers first."""

    def __init__(self, world: World, renderer):
        self.world = world
        self.renderer = renderer

    def render(self, delta: float) -> None:
        camera = Transform()
        for _, transform, _ in self.world.view(Transform, CameraComponent):
            camera = transform
        view_matrix = camera.world_to_local_matrix()

        drawables = [
            (transform, graphics)
            for _, transform, graphics in self.world.view(Transform, GraphicsComponent)
            if graphics.renderable is not None
        ]
        drawables.sort(key=lambda pair: pair[1].renderable.layer)

        for transform, graphics in drawables:
            matrix = view_matrix * transform.local_to_world_matrix()
            graphics.renderable.render(self.renderer, matrix)