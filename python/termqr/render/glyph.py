"""将画布的像素两两配对为终端字符

终端字符的高度大约是宽度的两倍，所以一个字符可以显示上下两个像素。
高度为奇数时，最后落单的一行总是使用上半块字符显示。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union
from typing_extensions import TypeAlias

from loguru import logger as log

from termqr.structs import Pixel
from termqr.utils import pairwise_rows

from .surface import PixelSurface

FULL_BLOCK = "█"
UPPER_HALF_BLOCK = "▀"
LOWER_HALF_BLOCK = "▄"
BLANK = " "

_CELL_CHARS: dict[tuple[Pixel, Pixel], str] = {
    (Pixel.Dark, Pixel.Dark): FULL_BLOCK,
    (Pixel.Dark, Pixel.Light): UPPER_HALF_BLOCK,
    (Pixel.Light, Pixel.Dark): LOWER_HALF_BLOCK,
    (Pixel.Light, Pixel.Light): BLANK,
}


@dataclass(frozen=True)
class GlyphCell:
    """一个终端字符，对应上下两个像素"""

    top: Pixel
    """上半部分像素"""
    bottom: Pixel
    """下半部分像素"""

    def to_char(self) -> str:
        """转换为方块字符，假定深色为前景色"""
        return _CELL_CHARS[self.top, self.bottom]


@dataclass(frozen=True)
class HalfGlyphCell:
    """高度为奇数时最后一行的字符，只有上半部分有意义"""

    pixel: Pixel

    def to_char(self) -> str:
        return UPPER_HALF_BLOCK if self.pixel.is_dark else BLANK


GlyphRow: TypeAlias = tuple[GlyphCell, ...]
HalfGlyphRow: TypeAlias = tuple[HalfGlyphCell, ...]


@dataclass(frozen=True)
class RenderedImage:
    """可以输出到终端的图像"""

    rows: tuple[GlyphRow, ...]
    """完整的字符行，自上而下"""
    half_row: Optional[HalfGlyphRow] = None
    """高度为奇数时的最后半行"""

    @property
    def width(self) -> int:
        if self.rows:
            return len(self.rows[0])
        return len(self.half_row) if self.half_row else 0

    @property
    def height(self) -> int:
        """原画布的像素高度"""
        return len(self.rows) * 2 + (1 if self.half_row is not None else 0)

    def __iter__(self) -> Iterator[tuple[Union[GlyphCell, HalfGlyphCell], ...]]:
        yield from self.rows
        if self.half_row is not None:
            yield self.half_row


def compose(surface: PixelSurface) -> RenderedImage:
    """消费画布，生成 `RenderedImage`"""
    pixel_rows = surface.take_rows()
    if not pixel_rows or not pixel_rows[0]:
        log.debug("画布为空，输出空图像")
        return RenderedImage(rows=())

    rows: tuple[GlyphRow, ...] = tuple(
        tuple(GlyphCell(top, bottom) for top, bottom in zip(upper, lower)) for upper, lower in pairwise_rows(pixel_rows)
    )
    half_row: Optional[HalfGlyphRow] = None
    if len(pixel_rows) % 2 != 0:
        half_row = tuple(HalfGlyphCell(pixel) for pixel in pixel_rows[-1])

    log.debug("生成 {} 行字符{}", len(rows), "，另有半行" if half_row is not None else "")
    return RenderedImage(rows=rows, half_row=half_row)
