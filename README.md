# gprengine

A small 2D game engine: vector, matrix and angle maths, a frame loop driven by
registered systems, and a window and renderer built on pygame.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Maths

```python
from gprengine.angle import Degree, Radian
from gprengine.vec2 import Vec2F
from gprengine.vec3 import Vec3F
from gprengine.matrix2 import Matrix2

quarter = Radian.from_degree(Degree(90.0))
v = Vec2F(1.0, 0.0).rotate(quarter)      # roughly (0, 1)

a = Vec3F(1.0, 0.0, 0.0)
b = Vec3F(0.0, 1.0, 0.0)
print(a.cross(b))                         # Vec3F(0.0, 0.0, 1.0)
print(Vec3F.slerp(a, b, 0.5))

m = Matrix2(Vec2F(1.0, 2.0), Vec2F(3.0, 4.0))
print(m.determinant())                    # -2.0
print(m.inverse())
print(m[0, 1])                            # 2.0
```

- `gprengine.angle`: `Radian` and `Degree`, converted with
  `Radian.from_degree` and `Degree.from_radian`; the constants `PI` and
  `EPSILON`.
- `gprengine.vec2`, `gprengine.vec3`, `gprengine.vec4`: vectors in
  single-precision float (`Vec2F`, `Vec3F`, `Vec4F`), signed 32-bit integer
  (`Vec2I`, `Vec3I`, `Vec4I`) and unsigned 32-bit integer (`Vec2U`, `Vec3U`,
  `Vec4U`) flavours. Components are rounded or wrapped to their type. They
  support `+`, `-`, `*` and `/` with vectors and scalars, `==`, `dot`,
  `magnitude_sqr`, `magnitude`, `normalize`, `lerp`, `projection` and
  `reflection`; integer division truncates towards zero. `Vec2` adds `cross`,
  `rotate`, `slerp`, `perpendicular_clockwise`,
  `perpendicular_counter_clockwise` and the in-place `+=`, `-=`, `*=`; `Vec3`
  adds `cross`, `pitch`, `yaw`, `roll` and `slerp`. Float-only operations
  raise `TypeError` on integer vectors.
- `gprengine.matrix2`, `gprengine.matrix3`, `gprengine.matrix4`: `Matrix2`,
  `Matrix3` and `Matrix4` with `identity`, `determinant`, `transpose`,
  `inverse`, addition, subtraction, matrix multiplication and `m[i, j]`
  indexing. `Matrix3.from_array` builds from three rows; `Matrix4` also
  multiplies and divides by scalars and returns its rows with `rows()`.
  Inverting a singular matrix raises `ValueError`; dividing a `Matrix4` by
  zero raises `ZeroDivisionError`.

## Observers

`gprengine.observer.ObserverSubject` keeps an ordered list of observers.
`add_observer` fills the first slot freed by `remove_observer`, or appends;
removing an observer that is not registered raises `ValueError`. Iterating a
subject yields the registered observers, and `observers()` returns every slot
with `None` where one was removed.

## Running the engine

Systems implement `begin`, `end` and `update(dt)` and are registered with
`gprengine.engine.system_observers`; `run_engine()` opens the window and runs
frames until the window is closed. `get_delta_time()` gives the seconds
between the last two frames.

```python
from gprengine.engine import SystemInterface, run_engine, system_observers
from gprengine.window import close_window


class QuitAfter(SystemInterface):
    def __init__(self, frames):
        self.frames = frames

    def begin(self):
        pass

    def end(self):
        pass

    def update(self, dt):
        self.frames -= 1
        if self.frames <= 0:
            close_window()


system_observers.add_observer(QuitAfter(100))
run_engine()
```

Each frame the window's event queue is drained, handing every event to the
`OnEventInterface` objects in `gprengine.window.event_observers`; a quit or
window-close event ends the loop, and a resize updates `get_window_size()`.

Drawing works the same way: subclass `DrawInterface` from
`gprengine.renderer`, implement `draw` (and optionally `pre_draw` and
`post_draw`), and register it with `gprengine.renderer.draw_observers`. Each
frame is cleared to black, all `pre_draw`, then `draw`, then `post_draw`
passes run, and the frame is shown. `get_renderer()` returns the surface to
draw on, `draw_circle` fills a circle out of triangles on it, and
`circle_triangles` returns the triangles without drawing them.

The window's title, size and resizability are set with `set_window_config`
and a `WindowConfig` before the engine starts.

## What it does not do

There is no on-screen GUI or debug overlay layer, and the `fullscreen` field
of `WindowConfig` is stored but not applied when the window is created. The
package has no command-line program; games are written as Python code that
registers systems and drawables and calls `run_engine()`.