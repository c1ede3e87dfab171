import pytest

from uniengine.demo import (
    Transform,
    any_transform_system,
    build_world,
    main,
    memory_transform_system,
)
from uniengine.ecs import AnyECS, ComponentPoolFullError, MemoryECS


def test_build_any_world():
    ecs = build_world(False, 5)
    assert isinstance(ecs, AnyECS)
    assert len(ecs.all_entities()) == 5
    assert ecs.get_component(4, Transform) == Transform(1.0, 0.0, 1.0)


def test_build_memory_world():
    ecs = build_world(True, 5)
    assert isinstance(ecs, MemoryECS)
    assert ecs.get_component(0, Transform) == Transform(1.0, 0.0, 1.0)


def test_any_world_update_moves_x():
    ecs = build_world(False, 3)
    ecs.update_systems(0.0)
    assert [ecs.get_component(e, Transform).x for e in range(3)] == [6.0] * 3
    assert ecs.get_component(0, Transform).z == 1.0


def test_memory_world_update_moves_x():
    ecs = build_world(True, 3)
    ecs.update_systems(0.0)
    ecs.update_systems(0.0)
    assert all(ecs.get_component(e, Transform).x == 11.0 for e in range(3))


def test_systems_skip_entities_without_transform():
    any_ecs = AnyECS()
    any_ecs.create_entity()
    any_transform_system(any_ecs, 0.0)
    assert not any_ecs.has_components(0, Transform)

    mem_ecs = MemoryECS(pool_capacity=1)
    mem_ecs.create_entity()
    memory_transform_system(mem_ecs, 0.0)
    assert mem_ecs.get_component(0, Transform) is None


def test_memory_world_is_limited_by_pool():
    with pytest.raises(ComponentPoolFullError):
        build_world(True, 10001)


def test_main_runs_given_frames(capsys):
    assert main(["--entities", "2", "--frames", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0] == "0.0"
    assert all(float(line) >= 0.0 for line in lines)


def test_main_with_memory_pool(capsys):
    assert main(["--memory-pool", "--entities", "2", "--frames", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["0.0"]