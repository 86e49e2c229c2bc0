import pytest

from voidengine.ecs.entity import create_entity, entity_index, entity_version

INDEX = 10
VERSION = 20


def test_create_entity_packs_index_and_version():
    assert create_entity(INDEX, VERSION) == (INDEX << 32) | VERSION


def test_entity_index():
    assert entity_index(create_entity(INDEX, VERSION)) == INDEX


def test_entity_version():
    assert entity_version(create_entity(INDEX, VERSION)) == VERSION


def test_maximum_values_round_trip():
    entity = create_entity(0xFFFFFFFF, 0xFFFFFFFF)
    assert entity == 0xFFFFFFFFFFFFFFFF
    assert entity_index(entity) == 0xFFFFFFFF
    assert entity_version(entity) == 0xFFFFFFFF


@pytest.mark.parametrize("index, version", [(-1, 0), (0, -1), (2**32, 0), (0, 2**32)])
def test_out_of_range_values_are_rejected(index, version):
    with pytest.raises(ValueError):
        create_entity(index, version)