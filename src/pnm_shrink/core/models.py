"""核心数据模型定义。"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Dimensions:
    """图像宽高（像素）。允许为 0，交给重采样阶段处理。"""

    width: int
    height: int

    @classmethod
    def square(cls, size: int) -> "Dimensions":
        return cls(width=size, height=size)

    @classmethod
    def of(cls, image: "Image.Image") -> "Dimensions":
        """读取 PIL Image 的尺寸。"""

        return cls(width=image.width, height=image.height)

    def as_tuple(self) -> tuple[int, int]:
        return self.width, self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(slots=True)
class ShrinkOutcome:
    """单次转换的结果摘要（用于日志与测试）。"""

    bytes_read: int
    source_size: Dimensions
    output_size: Dimensions
    bytes_written: int
