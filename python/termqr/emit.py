from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterator, Optional, TextIO

if TYPE_CHECKING:
    from termqr.render.glyph import RenderedImage


def iter_lines(image: RenderedImage) -> Iterator[str]:
    """逐行给出图像的文本，半行（如有）在最后"""
    for row in image:
        yield "".join(cell.to_char() for cell in row)


def to_text(image: RenderedImage) -> str:
    return "\n".join(iter_lines(image))


def write_image(image: RenderedImage, stream: Optional[TextIO] = None) -> int:
    """将图像逐行写入流（默认为标准输出）

    :return: 写入的行数
    """
    out = stream if stream is not None else sys.stdout
    count = 0
    for line in iter_lines(image):
        out.write(line + "\n")
        count += 1
    out.flush()
    return count
