from __future__ import annotations

from typing import Optional

import qrcode.constants
from loguru import logger as log
from qrcode.exceptions import DataOverflowError
from qrcode.main import QRCode

from .config import RenderConfig
from .exceptions import EmptyDataError, EncodeError
from .render import Dense1x2, QRCodeRenderer
from .render.glyph import RenderedImage, compose
from .render.surface import PixelSurface
from .structs import Pixel

ERROR_CORRECTION: dict[str, int] = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


def make_matrix(data: bytes, config: Optional[RenderConfig] = None) -> list[list[bool]]:
    """将数据编码为二维码模块矩阵，`True` 为深色模块"""
    if not data:
        raise EmptyDataError("empty data")
    config = config or RenderConfig()
    qr = QRCode(
        version=config.version,
        error_correction=ERROR_CORRECTION[config.error_correction],
        box_size=1,
        border=config.border,
    )
    qr.add_data(data)
    try:
        qr.make(fit=config.version is None)
    except DataOverflowError as err:
        raise EncodeError(f"数据过长，无法编码为版本 {config.version} 的二维码") from err
    except ValueError as err:
        raise EncodeError(f"无法编码数据: {err}") from err
    matrix = qr.get_matrix()
    log.debug(
        "二维码版本 {}，纠错等级 {}，尺寸 {}x{}",
        qr.version,
        config.error_correction,
        len(matrix[0]) if matrix else 0,
        len(matrix),
    )
    return matrix


def make_surface(data: bytes, config: Optional[RenderConfig] = None) -> PixelSurface:
    """将数据编码为二维码并绘制到画布上"""
    config = config or RenderConfig()
    matrix = make_matrix(data, config)
    if config.invert:
        return PixelSurface.from_matrix(matrix, dark=Pixel.Light, light=Pixel.Dark)
    return PixelSurface.from_matrix(matrix)


def render_data(data: bytes, config: Optional[RenderConfig] = None) -> RenderedImage:
    return compose(make_surface(data, config))


def render_text(
    data: bytes, config: Optional[RenderConfig] = None, renderer: Optional[QRCodeRenderer] = None
) -> str:
    """编码数据并交给渲染器输出文本，未指定渲染器时使用 `Dense1x2`

    指定渲染器时 `config.invert` 不生效，反色由渲染器自行决定。
    """
    config = config or RenderConfig()
    renderer = renderer or Dense1x2(config.invert)
    return renderer.render(make_matrix(data, config))
