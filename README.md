# playkit

Small, dependency-free building blocks for games, simulations and
experiments. Everything here computes state; nothing opens a window.

## Modules

- `playkit.vector` — immutable `Vector` with `add`, `sub`, `scale`, `dot`,
  `rotate`, `norm`, `len2` and `length`. `norm()` of a zero vector returns
  the fixed "zero normal" `ZN` (0, 1).
- `playkit.vec2` — a plain immutable `Vec2` used by the ray caster.
- `playkit.mesh3d` — `Point3` with cross and dot products, `rotate_x`,
  `rotate_y`, `rotate_z` over point lists, `circle_points` (midpoint circle
  pixels), `build_antiprism()` (a twelve-vertex closed mesh),
  `visible_facets` (back-face culling) and `project` (central projection of a
  segment).
- `playkit.intersect` — `Circle`, `Rect` and `Polygon` shapes and the tests
  `circles`, `rectangles` and `polygons`, each returning an `Intersection`
  (`penetration`, `normal`, `support`) or `None`.
- `playkit.collisions` — `Box`, `Disc`, `Aabb`, `RigidBody`, a
  `CollisionResolver` applying impulses and position corrections, and a
  `PhysicsWorld` whose `step()` detects collisions, moves bodies and resolves.
- `playkit.world`, `playkit.mover`, `playkit.raycast` — a character grid
  (`World.parse`, `default_world()`; `.` is empty), a `Mover` with
  `handle_input` for forward/backward/left/right controls that slide along
  walls, and DDA ray casting (`solve`, and `fov` yielding one ray per screen
  column).
- `playkit.rect` — integer `Point` and half-open `Rectangle`.
- `playkit.elements` — a tree of rectangular `Element`s managed by `UI`, with
  `DrawEvent` and mouse press, release and position events, mouse capture,
  and `element_at` for hit testing. Input is fed in by calling
  `UI.update(cursor, pressed)`.
- `playkit.sparks` — a firework particle system: `SparkWorld.update()`
  advances explosive shells that burst into sparks leaving fading shadows.
- `playkit.actor` — a minimal actor runtime: `System`, `RootContext`,
  `SpawnOptions`, bounded `MessageQueue` mailboxes and pluggable schedulers
  (a new daemon thread per drain by default).
- `playkit.filtermap` — three thread-based filter-map variants:
  `filter_map_buffered`, `filter_map_streaming` and `filter_map_semaphore`.
- `playkit.bubblesort` — in-place `bubble_sort` with early exit.
- `playkit.trees` — `BinaryTree` with a custom ordering and node allocator,
  and an `Arena` of preallocated nodes.
- `playkit.wire` — a `Client` writing CRLF-terminated commands to a stream,
  with a chained `Command` builder (`arg`, `kv`, `send`).

## Installation

```
pip install .
```

## Examples

Intersecting two circles:

```python
from playkit.intersect import Circle, circles

hit = circles(Circle(0, 0, 10), Circle(15, 0, 10))
if hit is not None:
    print(hit.penetration, hit.normal)  # 5.0 Vector(x=1.0, y=0.0)
```

Inserting into a binary tree and reading it back in order:

```python
from playkit.trees import BinaryTree

tree = BinaryTree()
for x in (5, 7, 2, 1, 9, 6):
    tree.insert(x)
print(list(tree))  # [1, 2, 5, 6, 7, 9]
```

Casting a ray through the built-in map:

```python
from playkit.raycast import solve
from playkit.vec2 import Vec2
from playkit.world import default_world

hit = solve(default_world(), Vec2(1.5, 1.5), Vec2(0.0, 1.0))
print(hit.distance, hit.vertical_side)
```

Writing a command:

```python
import io
from playkit.wire import Client

stream = io.BytesIO()
Client(stream).command("set").kv("key", "value").send()
print(stream.getvalue())  # b'set key value\r\n'
```

## Actor demo

The actor module ships a small demo that spawns one actor and sends it two
bursts of greetings:

```
playkit-actor
```

## What it does not do

There is no window, renderer, font handling or input device access. Drawing
hooks such as `UI.draw(screen)` only pass along whatever screen object you
give them, and mouse state must be supplied as cursor points and button
flags. There is no clickable button, label or drag-and-drop widget layer
on top of `playkit.elements`.

## Running the tests

```
pip install ".[test]"
pytest
```