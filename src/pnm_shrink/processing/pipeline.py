"""处理流水线：有界读取、解码、缩放、编码与输出。"""

from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from PIL import Image

from pnm_shrink.core.config import JobConfig, ShrinkConfig
from pnm_shrink.core.models import Dimensions, ShrinkOutcome
from pnm_shrink.core.output_writer import encode_pnm, write_output
from pnm_shrink.processing.aspect import apply_aspect
from pnm_shrink.processing.image_loader import decode_image
from pnm_shrink.utils.stream import read_bounded

LOGGER = logging.getLogger(__name__)


def shrink_image(image: Image.Image, config: ShrinkConfig) -> Image.Image:
    """按配置缩放单张图片，要么返回完整结果，要么抛出异常。"""

    return apply_aspect(image, config.target, config.filter, config.aspect)


def run_shrink(source: BinaryIO, sink: BinaryIO, job: JobConfig) -> ShrinkOutcome:
    """执行一次完整转换。

    编码结果先写入内存，全部步骤成功后才写到 ``sink``；任何一步失败时 ``sink``
    不会收到任何字节。
    """

    data = read_bounded(source, job.input_limit)
    LOGGER.debug("读取输入 %d 字节（上限 %d）", len(data), job.input_limit)

    image: Optional[Image.Image] = None
    shrunk: Optional[Image.Image] = None
    try:
        image = decode_image(data, auto_orient=job.auto_orient)
        source_size = Dimensions.of(image)

        shrunk = shrink_image(image, job.shrink)
        output_size = Dimensions.of(shrunk)
        LOGGER.debug(
            "%s -> %s (目标 %s, %s, %s)",
            source_size,
            output_size,
            job.shrink.target,
            job.shrink.aspect.value,
            job.shrink.filter.value,
        )

        payload = encode_pnm(shrunk)
    finally:
        _close_if_needed(image, shrunk)

    written = write_output(payload, sink)
    return ShrinkOutcome(
        bytes_read=len(data),
        source_size=source_size,
        output_size=output_size,
        bytes_written=written,
    )


def _close_if_needed(*images: Optional[Image.Image]) -> None:
    for img in images:
        if img is not None:
            img.close()
