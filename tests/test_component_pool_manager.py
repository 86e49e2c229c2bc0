from dataclasses import dataclass

import pytest

from voidengine.ecs.component_pool_manager import ComponentPoolManager
from voidengine.ecs.entity_manager import EntityManager


@dataclass
class Position:
    x: int = 0
    y: int = 0


@dataclass
class Velocity:
    x: int = 0
    y: int = 0


class Tag:
    pass


@pytest.fixture
def pools():
    return ComponentPoolManager()


@pytest.fixture
def entities():
    return EntityManager()


def test_create_entity_component(pools, entities):
    e1 = entities.create()
    e2 = entities.create()
    p1 = pools.create(e1, Position)
    p1.x, p1.y = 10, 20
    v1 = pools.create(e1, Velocity)
    v1.x, v1.y = 30, 40
    p2 = pools.create(e2, Position)
    p2.x, p2.y = 50, 60
    v2 = pools.create(e2, Velocity)
    v2.x, v2.y = 70, 80
    assert pools.get(e1, Position) == Position(10, 20)
    assert pools.get(e1, Velocity) == Velocity(30, 40)
    assert pools.get(e2, Position) == Position(50, 60)
    assert pools.get(e2, Velocity) == Velocity(70, 80)


def test_create_entity_component_with_value(pools, entities):
    e1 = entities.create()
    e2 = entities.create()
    assert pools.create(e1, Position(10, 20)) == Position(10, 20)
    assert pools.create(e1, Velocity(30, 40)) == Velocity(30, 40)
    assert pools.create(e2, Position(50, 60)) == Position(50, 60)
    assert pools.create(e2, Velocity(70, 80)) == Velocity(70, 80)


def test_destroy_entity_component(pools, entities):
    e = entities.create()
    pools.create(e, Position(10, 20))
    pools.create(e, Velocity(30, 40))
    pools.destroy(e, Position)
    assert not pools.contains(e, Position)
    assert pools.contains(e, Velocity)
    assert pools.get(e, Velocity) == Velocity(30, 40)


def test_destroy_all_entity_components(pools, entities):
    e = entities.create()
    pools.create(e, Position(10, 20))
    pools.create(e, Velocity(30, 40))
    pools.destroy(e)
    assert not pools.contains(e, Position)
    assert not pools.contains(e, Velocity)


def test_clear_components(pools, entities):
    e1 = entities.create()
    e2 = entities.create()
    pools.create(e1, Position(10, 20))
    pools.create(e1, Velocity(30, 40))
    pools.create(e2, Position(50, 60))
    pools.create(e2, Velocity(70, 80))
    pools.clear(Position)
    assert not pools.contains(e1, Position)
    assert not pools.contains(e2, Position)
    assert pools.get(e1, Velocity) == Velocity(30, 40)
    assert pools.get(e2, Velocity) == Velocity(70, 80)


def test_get_component(pools, entities):
    e = entities.create()
    pools.create(e, Position(10, 20))
    pools.create(e, Velocity(30, 40))
    assert pools.get(e, Position) == Position(10, 20)
    assert pools.get(e, Velocity) == Velocity(30, 40)


def test_check_pool_contains_entity(pools, entities):
    e1 = entities.create()
    e2 = entities.create()
    pools.create(e1, Position)
    pools.create(e2, Velocity)
    assert pools.contains(e1, Position)
    assert not pools.contains(e1, Velocity)
    assert not pools.contains(e2, Position)
    assert pools.contains(e2, Velocity)


def test_check_multiple_pools_contain_entity(pools, entities):
    e = entities.create()
    pools.create(e, Position)
    pools.create(e, Velocity)
    assert pools.contains(e, Position, Velocity)
    assert not pools.contains(e, Position, Velocity, Tag)


def test_contains_without_types_raises(pools, entities):
    with pytest.raises(TypeError):
        pools.contains(entities.create())


def test_query_all_entities(pools, entities):
    es = [entities.create() for _ in range(4)]
    pools.create(es[0], Position)
    pools.create(es[1], Velocity)
    pools.create(es[2], Position)
    pools.create(es[3], Velocity)
    result = pools.query()
    assert len(result) == 4
    assert set(result) == set(es)


def test_query_all_counts_each_entity_once(pools, entities):
    e = entities.create()
    pools.create(e, Position)
    pools.create(e, Velocity)
    assert pools.query() == [e]


def test_query_entities_with_component(pools, entities):
    e1, e2, e3, e4 = (entities.create() for _ in range(4))
    pools.create(e1, Position)
    pools.create(e1, Velocity)
    pools.create(e2, Position)
    pools.create(e2, Velocity)
    pools.create(e3, Velocity)
    pools.create(e4, Position)
    result = pools.query(Position)
    assert len(result) == 3
    assert set(result) == {e1, e2, e4}


def test_query_unknown_component_is_empty(pools, entities):
    pools.create(entities.create(), Position)
    assert pools.query(Tag) == []


def test_query_entities_with_multiple_components(pools, entities):
    e1, e2, e3, e4 = (entities.create() for _ in range(4))
    for e in (e1, e2, e3):
        pools.create(e, Position)
        pools.create(e, Velocity)
    pools.create(e4, Position)
    result = pools.query(Position, Velocity)
    assert len(result) == 3
    assert set(result) == {e1, e2, e3}


def test_missing_pool_errors(pools, entities):
    e = entities.create()
    with pytest.raises(KeyError):
        pools.get(e, Position)
    with pytest.raises(KeyError):
        pools.clear(Position)
    with pytest.raises(KeyError):
        pools.destroy(e, Position)