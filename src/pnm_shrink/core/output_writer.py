"""PNM 编码与输出写入模块。"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from PIL import Image

from pnm_shrink.core.exceptions import ImageEncodeError, StreamIOError

LOGGER = logging.getLogger(__name__)

OUTPUT_FORMAT = "PPM"
PNM_MODES = {"L", "RGB"}


def encode_pnm(image: Image.Image) -> bytes:
    """将图片编码为二进制 PNM（L -> P5，RGB -> P6），返回完整字节。"""

    if image.width == 0 or image.height == 0:
        raise ImageEncodeError(f"无法编码空图像: {image.width}x{image.height}")

    image_to_save = image
    if image.mode not in PNM_MODES:
        image_to_save = image.convert("RGB")

    buffer = io.BytesIO()
    try:
        image_to_save.save(buffer, format=OUTPUT_FORMAT)
    except (OSError, ValueError) as exc:
        raise ImageEncodeError(f"PNM 编码失败: {exc}") from exc
    finally:
        if image_to_save is not image:
            image_to_save.close()

    return buffer.getvalue()


def write_output(payload: bytes, sink: BinaryIO) -> int:
    """把已编码的字节一次性写出并 flush，返回写出的字节数。"""

    try:
        sink.write(payload)
        sink.flush()
    except (OSError, ValueError) as exc:
        raise StreamIOError(f"写入输出失败: {exc}") from exc

    LOGGER.debug("已写出 %d 字节", len(payload))
    return len(payload)
