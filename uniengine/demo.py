"""A benchmark world of moving transforms, run frame after frame."""

from __future__ import annotations

import argparse
import itertools
from dataclasses import dataclass
from typing import Sequence

from .delta_time import DeltaTime
from .ecs import AnyECS, MemoryECS


@dataclass
class Transform:
    """A position in 3D space."""

    x: float
    y: float
    z: float


def any_transform_system(ecs: AnyECS, delta_time: float) -> None:
    """Move every transform 5 units along x, writing each copy back."""
    for entity in range(len(ecs.all_entities())):
        if ecs.has_components(entity, Transform):
            transform = ecs.get_component(entity, Transform)
            transform.x += 5
            ecs.set_component(entity, transform)


def memory_transform_system(ecs: MemoryECS, delta_time: float) -> None:
    """Move every transform 5 units along x in place."""
    for entity in range(len(ecs.all_entities())):
        if ecs.has_components(entity, Transform):
            ecs.get_component(entity, Transform).x += 5


def build_world(use_memory_pool: bool, entity_amount: int) -> AnyECS | MemoryECS:
    """Create ``entity_amount`` entities, each with a transform, and the move system."""
    ecs: AnyECS | MemoryECS
    if use_memory_pool:
        ecs = MemoryECS()
        for _ in range(entity_amount):
            ecs.attach_component(ecs.create_entity(), Transform(1.0, 0.0, 1.0))
        ecs.add_system(memory_transform_system)
    else:
        ecs = AnyECS()
        for _ in range(entity_amount):
            ecs.attach_components(ecs.create_entity(), Transform(1.0, 0.0, 1.0))
        ecs.add_system(any_transform_system)
    return ecs


def main(argv: Sequence[str] | None = None) -> int:
    """Run the world, printing each frame's delta time."""
    parser = argparse.ArgumentParser(
        prog="uniengine", description="Run the transform benchmark world."
    )
    parser.add_argument(
        "--memory-pool", action="store_true", help="use the pooled component store"
    )
    parser.add_argument("--entities", type=int, default=10000, help="number of entities")
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames (default: never)"
    )
    args = parser.parse_args(argv)

    ecs = build_world(args.memory_pool, args.entities)
    timer = DeltaTime()
    frames = itertools.count() if args.frames is None else range(args.frames)
    for _ in frames:
        delta = timer.calculate()
        print(delta)
        ecs.update_systems(delta)
    return 0