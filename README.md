# cocoengine

The engine-side building blocks of a small 2D game, in pure Python with no
dependencies.

## Modules

- `cocoengine.matrix`: an immutable `Vector2` and a row-major `Matrix` with
  elementary row and column operations, `split`, `augmented`,
  `invert_by_row_reduction`, and 3x3 affine helpers (`Matrix.identity`,
  `Matrix.from_position`, `Matrix.make_transform` with rotation in degrees).
- `cocoengine.transform`: `Transform` nodes with position, rotation and scale,
  parenting (`set_parent`, `detach`), the `global_position`,
  `global_rotation` and `global_scale` properties, and local/world
  conversions (`local_to_world_point`, `world_to_local_point` and the matrix
  forms). `serialize` and `Transform.from_dict` read and write JSON-ready dicts.
- `cocoengine.serialization`: `serialize_binary` / `unserialize_binary` for
  `struct`-formatted values (little-endian by default), 16-bit length-prefixed
  UTF-8 strings (`serialize_string` / `unserialize_string`), and JSON helpers
  for `Rect`, `Color`, `Vertex` and vectors.
- `cocoengine.timer`: `Timer` (delay, loop, end and per-tick callbacks) and
  `TimerManager`, which advances its timers and drops the finished ones.
- `cocoengine.stopwatch`: `Stopwatch` with `elapsed()` and `restart()`, on
  `time.perf_counter` or a clock you pass in.
- `cocoengine.texture`: `Asset` and `Texture` (pixel size and file path).
- `cocoengine.spritesheet`: `Animation` and `Spritesheet`, saved to and loaded
  from JSON files.
- `cocoengine.sprite`: the `Renderable` base class and `Sprite`, which
  computes its textured quad (`geometry`), its `bounds`, and JSON
  serialization.
- `cocoengine.ecs`: an entity `World` (`create`, `destroy`, `add`, `get`,
  `try_get`, `has`, `remove`, `view`, `clear`) and the `CameraComponent`,
  `NameComponent`, `VelocityComponent` and `GraphicsComponent` components.
- `cocoengine.systems`: `GravitySystem`, `VelocitySystem` (stops entities at
  the ground line y = 592) and `RenderSystem` (draws through the camera,
  lowest layer first).
- `cocoengine.registry`: `ComponentRegistry` and `ComponentEntry`, describing
  how to add, test, remove and (un)serialize each component type. The name,
  transform, camera and velocity components are registered by default.
- `cocoengine.scene`: `SceneEditor`, which tracks paused state and inspected
  entities, centres the camera on an entity, and saves and loads whole scenes
  as JSON. Failures raise `SceneError`.

## Install

```
pip install .
```

## Example

```python
from cocoengine.matrix import Vector2
from cocoengine.transform import Transform
from cocoengine.timer import TimerManager

parent = Transform(Vector2(100.0, 0.0))
child = Transform(Vector2(10.0, 0.0))
child.set_parent(parent)
print(child.global_position)  # Vector2(x=110.0, y=0.0)

timers = TimerManager()
timers.create_timer(1.0, lambda: print("done"))
timers.update_timers(0.5)
timers.update_timers(0.6)  # prints "done"
```

Saving and loading a scene:

```python
from cocoengine.ecs import NameComponent, World
from cocoengine.registry import ComponentRegistry
from cocoengine.scene import SceneEditor
from cocoengine.transform import Transform

world = World()
entity = world.create()
world.add(entity, NameComponent("player"))
world.add(entity, Transform())

editor = SceneEditor(world, ComponentRegistry(), window_size=(1080, 769))
editor.save_scene("scene.json")
editor.load_scene("scene.json")
```

## What it does not do

The package has no window, input handling, physics, audio, image or font
loading, and no drawing backend. `Sprite.render` and `RenderSystem` hand the
computed geometry to a renderer object you supply, which must provide
`render_geometry(texture, vertices, indices)`. There is no easing-curve
module and no command-line program; the package is a library only.

## Tests

```
pip install .[test]
pytest
```