"""带上限的字节流读取。"""

from __future__ import annotations

import logging
from typing import BinaryIO

from pnm_shrink.core.exceptions import StreamIOError

LOGGER = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def read_bounded(stream: BinaryIO, limit: int) -> bytes:
    """从流中读取至多 ``limit`` 字节。

    流提前结束属于正常情况；超过上限的部分不会被读取，也不会报错。
    """

    chunks: list[bytes] = []
    remaining = limit

    try:
        while remaining > 0:
            chunk = stream.read(min(remaining, CHUNK_SIZE))
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
    except OSError as exc:
        raise StreamIOError(f"读取输入失败: {exc}") from exc

    data = b"".join(chunks)
    if limit > 0 and remaining <= 0:
        LOGGER.debug("输入已达到读取上限 %d 字节，其余内容被忽略", limit)
    return data
