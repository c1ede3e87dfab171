# uniengine

A compact entity-component-system (ECS) core for games and simulations.

## Modules

- `uniengine.sparse_set` – `SparseSet`, a mapping from non-negative integer
  ids to values with densely packed ids. `insert`, `remove` (absent ids are
  ignored), `has_index`, `get` and `set` (both raise `KeyError` for an absent
  id), `ids()`, `len()` and `in`. Removal moves the last entry into the freed
  slot, so `ids()` keeps insertion order only until something is removed.
- `uniengine.memory_pool` – `MemoryPool(chunk_size, chunk_count)`, a fixed
  number of chunks handed out as integer handles. The chunk size is rounded
  up to a multiple of 16. `allocate()` returns the most recently freed chunk
  first and raises `PoolExhaustedError` when none is left; `deallocate()`
  raises `ValueError` for a handle outside the pool or one already free;
  `free_count()` reports the free chunks.
- `uniengine.delta_time` – `DeltaTime(clock=time.monotonic)`. `calculate()`
  returns 0.0 on the first call and the seconds since the previous call after
  that; the last value is also kept in `delta`.
- `uniengine.ecs` – two registries:
  - `AnyECS` stores components by value. `attach_components(entity, *components)`
    stores a copy of each, replacing one of the same type;
    `has_components(entity, *types)` checks for all of them;
    `get_component(entity, type)` returns a copy and raises `KeyError` if the
    type is unregistered or the entity has none; `set_component(entity, component)`
    writes a changed copy back (also `KeyError` when missing).
    `remove_entity` drops the id from the entity list but keeps its components.
    `entity_components()` returns a deep copy of the store.
  - `MemoryECS(pool_capacity=10000)` keeps each component type in its own
    `MemoryPool`. `create_entity` reuses the most recently removed id first;
    `remove_entity` returns whether the entity existed. `attach_component`
    raises `ComponentPoolFullError` when the type's pool is full;
    `remove_components(entity, *types)` detaches components and ignores the
    rest; `get_component` returns the stored object itself, or `None`.
  - Both have `add_system(system)` and `update_systems(delta_time)`, which
    calls each system as `system(ecs, delta_time)` in the order added.
- `uniengine.demo` – the `Transform(x, y, z)` dataclass, the
  `any_transform_system` and `memory_transform_system` systems (each moves
  transforms 5 units along x for entity ids `0 .. len(all_entities()) - 1`),
  `build_world(use_memory_pool, entity_amount)` and the `main` command.

## Installation

```
pip install .
```

## Usage

```python
from uniengine.ecs import AnyECS
from uniengine.demo import Transform

ecs = AnyECS()
entity = ecs.create_entity()
ecs.attach_components(entity, Transform(1.0, 0.0, 1.0))

def move(world, delta_time):
    for e in world.all_entities():
        if world.has_components(e, Transform):
            t = world.get_component(e, Transform)
            t.x += 5
            world.set_component(e, t)

ecs.add_system(move)
ecs.update_systems(0.016)
print(ecs.get_component(entity, Transform).x)  # 6.0
```

With `MemoryECS` a system may change the returned component in place:

```python
from uniengine.ecs import MemoryECS
from uniengine.demo import Transform

ecs = MemoryECS(pool_capacity=100)
entity = ecs.create_entity()
ecs.attach_component(entity, Transform(1.0, 0.0, 1.0))
ecs.get_component(entity, Transform).x += 5
```

Frame timing:

```python
from uniengine.delta_time import DeltaTime

timer = DeltaTime()
timer.calculate()   # 0.0 on the first call
timer.calculate()   # seconds since the previous call
```

## Demo

The demo builds a world of entities carrying a `Transform`, registers the
move system and prints each frame's delta time before updating:

```
uniengine-demo --entities 1000 --frames 10
uniengine-demo --memory-pool
```

Options: `--memory-pool` uses `MemoryECS` instead of `AnyECS`,
`--entities N` sets the number of entities (default 10000), and
`--frames N` stops after N frames; without it the demo runs until interrupted.

## What it does not do

There is no rendering, window, input handling or scene storage: the package
is the ECS core and frame timer, and the demo only prints frame times.

## Tests

```
pip install .[test]
pytest
```