"""图片解码与模式归一化。"""

from __future__ import annotations

import io
import logging

from PIL import Image, ImageOps

from pnm_shrink.core.exceptions import ImageDecodeError

LOGGER = logging.getLogger(__name__)

GRAYSCALE_MODES = {"1", "L", "LA", "La", "I", "I;16", "I;16L", "I;16B", "I;16N", "F"}
BACKGROUND_COLOR = 255


def decode_image(data: bytes, *, auto_orient: bool = False) -> Image.Image:
    """从内存字节解码单张图片，格式由内容自动识别。

    多帧图片只取第一帧。返回值为新的 Image 对象（``L`` 或 ``RGB``），调用者负责关闭。
    """

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            LOGGER.debug("识别到 %s 图像，模式 %s，尺寸 %dx%d", img.format, img.mode, img.width, img.height)

            if auto_orient:
                img = ImageOps.exif_transpose(img)

            return _normalize_mode(img).copy()
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        LOGGER.debug("无法识别输入图像 (%d 字节): %s", len(data), exc)
        raise ImageDecodeError(f"无法解析输入图像: {exc}") from exc


def _normalize_mode(img: Image.Image) -> Image.Image:
    """将任意模式转换为 PNM 可写的 ``L`` 或 ``RGB``。"""

    if img.mode in {"L", "RGB"}:
        return img

    if img.mode in GRAYSCALE_MODES:
        if img.mode in {"LA", "La"}:
            return _flatten_alpha(img, "L")
        if img.mode.startswith("I"):
            # 16 位灰度按比例压缩到 8 位，直接 convert 会截断。
            return img.convert("I").point(lambda value: value * (1 / 256)).convert("L")
        return img.convert("L")

    if "A" in img.mode or (img.mode == "P" and "transparency" in img.info):
        return _flatten_alpha(img, "RGB")

    return img.convert("RGB")


def _flatten_alpha(img: Image.Image, mode: str) -> Image.Image:
    """通过白色背景混合去除 Alpha 通道。"""

    rgba = img.convert("RGBA")
    background = Image.new("RGB", rgba.size, (BACKGROUND_COLOR,) * 3)
    background.paste(rgba, mask=rgba.getchannel("A"))
    if mode == "L":
        return background.convert("L")
    return background
