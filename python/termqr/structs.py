from enum import auto

from .utils import AutoEnum


class Pixel(AutoEnum):
    """二值像素"""

    Dark = auto()
    """深色（二维码的黑色模块）"""
    Light = auto()
    """浅色（背景）"""

    @classmethod
    def from_color(cls, dark: bool) -> "Pixel":
        """将生成器给出的模块颜色转换为像素，`True` 代表深色"""
        return cls.Dark if dark else cls.Light

    @property
    def is_dark(self) -> bool:
        return self is Pixel.Dark
