from __future__ import annotations

from termqr.emit import to_text
from termqr.structs import Pixel

from .glyph import compose
from .surface import PixelSurface


class Dense1x2:
    """每个字符显示上下两个像素的渲染器"""

    def __init__(self, invert: bool = False) -> None:
        self.inv = invert

    def render(self, data: list[list[bool]]) -> str:
        if not data:
            return ""
        dark, light = (Pixel.Light, Pixel.Dark) if self.inv else (Pixel.Dark, Pixel.Light)
        return to_text(compose(PixelSurface.from_matrix(data, dark, light)))
