from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


class AutoEnum(Enum):
    """以名字为值的自动枚举"""

    _value_: str
    value: str

    def _generate_next_value_(name, *_):
        return name


def pairwise_rows(rows: Sequence[T]) -> Iterable[tuple[T, T]]:
    """按 (0, 1), (2, 3), ... 成对取出行，末尾落单的行不会被返回"""
    for i in range(0, len(rows) - 1, 2):
        yield rows[i], rows[i + 1]
