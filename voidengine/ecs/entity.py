"""Entity handles: a 32-bit index and a 32-bit version packed into one integer."""

from __future__ import annotations

_MASK_32 = 0xFFFF_FFFF
_MASK_64 = 0xFFFF_FFFF_FFFF_FFFF


def _check_u32(name: str, value: int) -> None:
    if not 0 <= value <= _MASK_32:
        raise ValueError(f"{name} must fit in 32 bits, got {value}")


def create_entity(index: int, version: int) -> int:
    """Pack an index and a version into a single entity handle."""
    _check_u32("index", index)
    _check_u32("version", version)
    return (index << 32) | version


def entity_index(entity: int) -> int:
    """Return the index part of an entity handle."""
    return (entity & _MASK_64) >> 32


def entity_version(entity: int) -> int:
    """Return the version part of an entity handle."""
    return entity & _MASK_32