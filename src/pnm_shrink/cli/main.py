"""命令行入口。"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from pnm_shrink.core.config import DEFAULT_INPUT_LIMIT, AspectMode, FilterMode, JobConfig, ShrinkConfig
from pnm_shrink.core.exceptions import PnmShrinkError
from pnm_shrink.core.size_hints import SIZE_HINTS, available_hints, resolve_size
from pnm_shrink.processing.pipeline import run_shrink
from pnm_shrink.utils.logging import setup_logging

LOGGER = logging.getLogger(__name__)

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

app = typer.Typer(help="从 stdin 读取图片，缩放后以 PNM 格式写到 stdout。", add_completion=False)
error_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _hint_help() -> str:
    listed = ", ".join(f"{name} ({SIZE_HINTS[name]})" for name in available_hints())
    return f"尺寸提示词（区分大小写），对应正方形边长：{listed}"


@app.command()
def shrink(  # noqa: PLR0913
    size_hint: str = typer.Option("min", "--size-hint", "-s", metavar="HINT", help=_hint_help()),
    width: Optional[int] = typer.Option(
        None, "--width", min=0, max=U32_MAX, metavar="PIXELS", help="显式目标宽度，覆盖提示词给出的宽度"
    ),
    height: Optional[int] = typer.Option(
        None, "--height", min=0, max=U32_MAX, metavar="PIXELS", help="显式目标高度，覆盖提示词给出的高度"
    ),
    aspect: AspectMode = typer.Option(
        AspectMode.PRESERVE, "--aspect", "-a", help="宽高比策略：preserve 等比放入 / ignore 拉伸 / clip 填满后裁剪"
    ),
    filter_mode: FilterMode = typer.Option(
        FilterMode.CATMULL_ROM, "--filter", "-f", help="重采样滤波器，nearest 最快，lanczos3 质量最好"
    ),
    input_limit: int = typer.Option(
        DEFAULT_INPUT_LIMIT, "--input-limit", min=0, max=U64_MAX, metavar="BYTES", help="最多读取的输入字节数"
    ),
    auto_orient: bool = typer.Option(False, "--auto-orient/--no-auto-orient", help="按 EXIF 方向信息旋转图片"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="在 stderr 输出调试日志"),
) -> None:
    """缩放 stdin 中的图片并输出 PNM。"""

    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        # 提示词在任何 I/O 之前校验。
        target = resolve_size(size_hint, width, height)
        job = JobConfig(
            shrink=ShrinkConfig(target=target, aspect=aspect, filter=filter_mode),
            input_limit=input_limit,
            auto_orient=auto_orient,
        )
        outcome = run_shrink(sys.stdin.buffer, sys.stdout.buffer, job)
    except PnmShrinkError as exc:
        LOGGER.debug("转换失败", exc_info=True)
        error_console.print(f"[bold red]错误：[/bold red]{escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    LOGGER.debug("完成：%s -> %s，写出 %d 字节", outcome.source_size, outcome.output_size, outcome.bytes_written)


if __name__ == "__main__":
    app()
