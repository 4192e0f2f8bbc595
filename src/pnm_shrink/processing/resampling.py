"""滤波器到 Pillow 重采样方式的映射。"""

from __future__ import annotations

import logging

from PIL import Image, ImageFilter

from pnm_shrink.core.config import FilterMode
from pnm_shrink.core.exceptions import ResampleError
from pnm_shrink.core.models import Dimensions

LOGGER = logging.getLogger(__name__)

PIL_FILTERS = {
    FilterMode.NEAREST: Image.NEAREST,
    FilterMode.TRIANGLE: Image.BILINEAR,
    FilterMode.CATMULL_ROM: Image.BICUBIC,
    FilterMode.LANCZOS3: Image.LANCZOS,
}

GAUSSIAN_SIGMA = 0.5


def resample(image: Image.Image, size: Dimensions, filter_mode: FilterMode) -> Image.Image:
    """将图片重采样到指定尺寸，返回新图片。"""

    LOGGER.debug("重采样 %s -> %s (%s)", Dimensions.of(image), size, filter_mode.value)
    try:
        if filter_mode is FilterMode.GAUSSIAN:
            return _gaussian_resample(image, size)
        return image.resize(size.as_tuple(), PIL_FILTERS[filter_mode])
    except (ValueError, MemoryError) as exc:
        raise ResampleError(f"无法缩放到 {size}: {exc}") from exc


def _gaussian_resample(image: Image.Image, size: Dimensions) -> Image.Image:
    """Pillow 没有高斯重采样核：先按缩小倍数做高斯模糊，再双线性缩放。"""

    if size.width > 0 and size.height > 0:
        factor = max(image.width / size.width, image.height / size.height, 1.0)
        image = image.filter(ImageFilter.GaussianBlur(GAUSSIAN_SIGMA * factor))
    return image.resize(size.as_tuple(), Image.BILINEAR)
