"""Plain records describing shader sources and font glyphs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from voidengine.resource.enums import ShaderFormat, ShaderType


@dataclass(frozen=True)
class ShaderSource:
    """One shader stage's source: a path to a file, or the source text itself."""

    type: ShaderType
    format: ShaderFormat
    data: Union[Path, str]


@dataclass(frozen=True)
class Glyph:
    """A rendered glyph's metrics and its place in the font atlas."""

    codepoint: int = 0
    size: tuple[int, int] = (0, 0)
    bearing: tuple[int, int] = (0, 0)
    advance: tuple[float, float] = (0.0, 0.0)
    uv_position: tuple[float, float] = (0.0, 0.0)
    uv_size: tuple[float, float] = (0.0, 0.0)