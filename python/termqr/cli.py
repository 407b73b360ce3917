"""在终端中显示二维码"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger as log

from .config import ERROR_CORRECTION_LEVELS, load_config
from .emit import write_image
from .encode import render_data
from .exceptions import InputError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termqr", description=__doc__)
    parser.add_argument("data", nargs="*", metavar="DATA", help="要显示的数据，留空时从标准输入读取")
    parser.add_argument("-c", "--config", help="JSON 配置文件路径")
    parser.add_argument(
        "-e",
        "--error-correction",
        choices=ERROR_CORRECTION_LEVELS,
        type=str.upper,
        help="纠错等级",
    )
    parser.add_argument("-b", "--border", type=int, help="静区宽度（模块数）")
    parser.add_argument("--qr-version", type=int, dest="version", help="二维码版本 (1-40)")
    parser.add_argument("-i", "--invert", action="store_true", default=None, help="反色，适用于深色背景的终端")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    return parser


def setup_logging(level: str) -> None:
    log.remove()
    log.add(sys.stderr, level=level, format="<level>{level}</level>: {message}")


def read_data(words: Sequence[str]) -> bytes:
    if words:
        log.info("从命令行参数读取数据")
        return " ".join(words).encode("utf-8")
    log.info("从标准输入读取数据")
    return sys.stdin.buffer.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    nbsp = build_parser().parse_args(argv)
    setup_logging("DEBUG" if nbsp.verbose else "WARNING")
    try:
        config = load_config(
            nbsp.config,
            overrides={
                "error_correction": nbsp.error_correction,
                "border": nbsp.border,
                "version": nbsp.version,
                "invert": nbsp.invert,
            },
        )
        if not nbsp.verbose:
            setup_logging(config.log_level)
        image = render_data(read_data(nbsp.data), config)
    except InputError as err:
        log.error("{}", err)
        return 1
    write_image(image, sys.stdout)
    return 0
