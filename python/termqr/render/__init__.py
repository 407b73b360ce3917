from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class QRCodeRenderer(Protocol):
    def render(self, data: list[list[bool]], /) -> str:
        ...


from .dense1x2 import Dense1x2 as Dense1x2
from .glyph import GlyphCell as GlyphCell
from .glyph import HalfGlyphCell as HalfGlyphCell
from .glyph import RenderedImage as RenderedImage
from .glyph import compose as compose
from .surface import PixelSurface as PixelSurface
