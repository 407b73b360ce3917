from __future__ import annotations

from termqr.render import Dense1x2, QRCodeRenderer

SAMPLE = [[True, False], [False, True], [True, False]]


def test_dense1x2_is_renderer() -> None:
    assert isinstance(Dense1x2(), QRCodeRenderer)


def test_render() -> None:
    assert Dense1x2().render(SAMPLE) == "▀▄\n▀ "


def test_render_inverted() -> None:
    assert Dense1x2(True).render(SAMPLE) == "▄▀\n ▀"


def test_render_even_height() -> None:
    assert Dense1x2().render([[True, True], [True, False]]) == "█▀"


def test_render_empty() -> None:
    assert Dense1x2().render([]) == ""
    assert Dense1x2(True).render([]) == ""
