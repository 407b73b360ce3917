from __future__ import annotations

from .config import RenderConfig as RenderConfig
from .emit import write_image as write_image
from .encode import make_surface as make_surface
from .encode import render_data as render_data
from .encode import render_text as render_text
from .render import Dense1x2 as Dense1x2
from .render import PixelSurface as PixelSurface
from .render import RenderedImage as RenderedImage
from .render import compose as compose
from .structs import Pixel as Pixel

__version__: str = "0.1.0"
"""termqr 当前版本号"""
