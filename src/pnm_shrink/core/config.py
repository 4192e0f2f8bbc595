"""转换任务的配置模型。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pnm_shrink.core.models import Dimensions

DEFAULT_INPUT_LIMIT = 1048576


class AspectMode(str, Enum):
    """宽高比处理策略。"""

    PRESERVE = "preserve"  # 等比缩放到目标框内，不裁剪
    IGNORE = "ignore"  # 拉伸到精确的目标尺寸
    CLIP = "clip"  # 等比缩放覆盖目标框，居中裁剪


class FilterMode(str, Enum):
    """重采样滤波器，按计算量与平滑度大致递增排列。"""

    NEAREST = "nearest"
    TRIANGLE = "triangle"
    CATMULL_ROM = "catmull-rom"
    GAUSSIAN = "gaussian"
    LANCZOS3 = "lanczos3"


@dataclass(frozen=True, slots=True)
class ShrinkConfig:
    """一次缩放所需的全部参数，创建后不可修改。"""

    target: Dimensions
    aspect: AspectMode = AspectMode.PRESERVE
    filter: FilterMode = FilterMode.CATMULL_ROM


@dataclass(frozen=True, slots=True)
class JobConfig:
    """单次命令行调用的配置集合。"""

    shrink: ShrinkConfig
    input_limit: int = DEFAULT_INPUT_LIMIT
    auto_orient: bool = False
