from __future__ import annotations

from typing import Any, Sequence

from loguru import logger as log

from termqr.exceptions import SurfaceBoundsError, SurfaceConsumedError
from termqr.structs import Pixel


class PixelSurface:
    """按行优先顺序存储二值像素的画布

    画布只能通过 `set_dark` 修改，并且只能被 `termqr.render.compose` 消费一次。
    """

    __slots__ = ("_pixels", "_width", "_height", "_dark", "_consumed")

    def __init__(self, width: int, height: int, dark: Pixel = Pixel.Dark, light: Pixel = Pixel.Light) -> None:
        """初始化

        :param width: 宽度（像素）
        :param height: 高度（像素），任一维度为 0 时得到空画布
        :param dark: `set_dark` 写入的像素值
        :param light: 初始填充的像素值
        """
        if width < 0 or height < 0:
            raise ValueError(f"画布尺寸不能为负: {width}x{height}")
        self._pixels: list[Pixel] = [light] * (width * height)
        self._width: int = width
        self._height: int = height
        self._dark: Pixel = dark
        self._consumed: bool = False
        log.debug("创建 {}x{} 画布", width, height)

    @classmethod
    def from_matrix(
        cls, matrix: Sequence[Sequence[Any]], dark: Pixel = Pixel.Dark, light: Pixel = Pixel.Light
    ) -> PixelSurface:
        """从二维模块矩阵构建画布，真值模块视为深色"""
        height = len(matrix)
        width = len(matrix[0]) if height else 0
        surface = cls(width, height, dark, light)
        for y, row in enumerate(matrix):
            if len(row) != width:
                raise ValueError(f"第 {y} 行长度为 {len(row)}，预期为 {width}")
            for x, module in enumerate(row):
                if Pixel.from_color(bool(module)).is_dark:
                    surface.set_dark(x, y)
        return surface

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def consumed(self) -> bool:
        """是否已被转换为图像"""
        return self._consumed

    def set_dark(self, x: int, y: int) -> None:
        """将 (x, y) 处的像素标记为深色"""
        if self._consumed:
            raise SurfaceConsumedError("画布已被转换，不能再修改")
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y)):
            raise SurfaceBoundsError(f"像素坐标必须为整数: ({x!r}, {y!r})")
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise SurfaceBoundsError(f"像素 ({x}, {y}) 超出 {self._width}x{self._height} 画布范围")
        self._pixels[x + y * self._width] = self._dark

    def take_rows(self) -> list[list[Pixel]]:
        """取出全部像素行并将画布标记为已消费"""
        if self._consumed:
            raise SurfaceConsumedError("画布已被转换过一次")
        self._consumed = True
        pixels, self._pixels = self._pixels, []
        w = self._width
        return [pixels[y * w : (y + 1) * w] for y in range(self._height)] if w else []

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "open"
        return f"<PixelSurface {self._width}x{self._height} {state}>"
