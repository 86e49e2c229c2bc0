import pytest

from voidengine.ecs.entity import entity_index, entity_version
from voidengine.ecs.entity_manager import EntityManager


@pytest.fixture
def entities():
    return EntityManager()


def test_create_entity(entities):
    entity = entities.create()
    assert entities.contains(entity)


def test_destroy_entity_recycles_index_with_new_version(entities):
    entity = entities.create()
    entities.destroy(entity)
    assert not entities.contains(entity)
    entity = entities.create()
    assert entity_index(entity) == 0
    assert entity_version(entity) == 1


def test_check_entity_existence(entities):
    entity = entities.create()
    assert entity in entities
    entities.destroy(entity)
    assert entity not in entities


def test_sequential_indices(entities):
    first = entities.create()
    second = entities.create()
    assert (entity_index(first), entity_version(first)) == (0, 0)
    assert (entity_index(second), entity_version(second)) == (1, 0)


def test_destroyed_slot_is_not_alive_under_next_version(entities):
    entity = entities.create()
    entities.destroy(entity)
    # The next version of index 0 has not been handed out yet.
    assert not entities.contains(1)


def test_destroy_unknown_entity_raises(entities):
    with pytest.raises(KeyError):
        entities.destroy(42)


def test_destroy_twice_raises(entities):
    entity = entities.create()
    entities.destroy(entity)
    with pytest.raises(KeyError):
        entities.destroy(entity)