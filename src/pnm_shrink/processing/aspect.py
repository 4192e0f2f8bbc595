"""宽高比策略：preserve / ignore / clip 三种缩放几何。"""

from __future__ import annotations

import logging
import math

from PIL import Image

from pnm_shrink.core.config import AspectMode, FilterMode
from pnm_shrink.core.exceptions import InvalidConfigurationError
from pnm_shrink.core.models import Dimensions
from pnm_shrink.processing.resampling import resample

LOGGER = logging.getLogger(__name__)


def apply_aspect(
    image: Image.Image, target: Dimensions, filter_mode: FilterMode, aspect: AspectMode
) -> Image.Image:
    """按宽高比策略把图片缩放到目标尺寸，原图不会被修改。"""

    original = Dimensions.of(image)

    if aspect is AspectMode.PRESERVE:
        return resample(image, scaled_dimensions(original, target, cover=False), filter_mode)

    if aspect is AspectMode.IGNORE:
        return resample(image, target, filter_mode)

    if aspect is AspectMode.CLIP:
        scaled = scaled_dimensions(original, target, cover=True)
        intermediate = resample(image, scaled, filter_mode)
        try:
            return intermediate.crop(center_crop_box(scaled, target))
        finally:
            intermediate.close()

    raise InvalidConfigurationError(f"未知的宽高比策略: {aspect}")


def scaled_dimensions(original: Dimensions, target: Dimensions, *, cover: bool) -> Dimensions:
    """计算等比缩放后的尺寸。

    ``cover=False`` 取较小的缩放比（完整放入目标框），``cover=True`` 取较大的缩放比
    （覆盖目标框）。每个轴至少保留 1 像素。
    """

    if original.width == 0 or original.height == 0:
        return target

    width_ratio = target.width / original.width
    height_ratio = target.height / original.height
    ratio = max(width_ratio, height_ratio) if cover else min(width_ratio, height_ratio)

    return Dimensions(
        width=max(_round_half_up(original.width * ratio), 1),
        height=max(_round_half_up(original.height * ratio), 1),
    )


def center_crop_box(scaled: Dimensions, target: Dimensions) -> tuple[int, int, int, int]:
    """返回从缩放结果中居中裁剪出目标尺寸的 (left, top, right, bottom)。"""

    # 用整数交叉相乘比较宽高比，避免浮点误差选错裁剪方向。
    if target.width * scaled.height > scaled.width * target.height:
        left = 0
        top = (scaled.height - target.height) // 2
    else:
        left = (scaled.width - target.width) // 2
        top = 0
    return left, top, left + target.width, top + target.height


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
