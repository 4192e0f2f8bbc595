"""尺寸提示词解析。"""

from __future__ import annotations

from typing import Optional

from pnm_shrink.core.exceptions import UnknownSizeHintError
from pnm_shrink.core.models import Dimensions

# 区分大小写：large / Large / LARGE 是三个不同的尺寸。
SIZE_HINTS: dict[str, int] = {
    "min": 8,
    "minimal": 8,
    "tiny": 16,
    "small": 32,
    "normal": 64,
    "large": 128,
    "Large": 256,
    "LARGE": 512,
    "huge": 1024,
    "Huge": 2048,
    "HUGE": 4096,
}


def available_hints() -> list[str]:
    """按尺寸从小到大返回所有提示词。"""

    return sorted(SIZE_HINTS, key=lambda name: SIZE_HINTS[name])


def resolve_size(hint: str, width: Optional[int] = None, height: Optional[int] = None) -> Dimensions:
    """将提示词解析为目标尺寸，并按轴应用显式的宽/高覆盖。

    覆盖值不做范围检查，0 也会原样保留。
    """

    side = SIZE_HINTS.get(hint)
    if side is None:
        raise UnknownSizeHintError(hint)

    return Dimensions(
        width=side if width is None else width,
        height=side if height is None else height,
    )
