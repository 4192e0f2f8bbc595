"""项目内使用的自定义异常定义。"""


class PnmShrinkError(Exception):
    """基础异常类型。"""


class InvalidConfigurationError(PnmShrinkError):
    """配置不合法时抛出。"""


class UnknownSizeHintError(InvalidConfigurationError):
    """尺寸提示词不在预设表中。"""

    def __init__(self, hint: str) -> None:
        super().__init__(f"未知的尺寸提示词: {hint!r}")
        self.hint = hint


class ImageProcessingError(PnmShrinkError):
    """图像解码、缩放或编码失败。"""


class ImageDecodeError(ImageProcessingError):
    """输入字节无法识别为图像。"""


class ImageEncodeError(ImageProcessingError):
    """图像无法编码为 PNM。"""


class ResampleError(ImageProcessingError):
    """重采样失败（例如目标尺寸为 0）。"""


class StreamIOError(PnmShrinkError):
    """标准输入/输出读写失败。"""
