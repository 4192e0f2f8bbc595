"""宽高比策略与重采样几何。"""

from __future__ import annotations

import pytest
from PIL import Image

from pnm_shrink.core.config import AspectMode, FilterMode, ShrinkConfig
from pnm_shrink.core.exceptions import ResampleError
from pnm_shrink.core.models import Dimensions
from pnm_shrink.processing.aspect import apply_aspect, center_crop_box, scaled_dimensions
from pnm_shrink.processing.pipeline import shrink_image

SHAPES = [(64, 32), (32, 64), (100, 50), (17, 93), (50, 50), (3, 200)]
TARGETS = [(32, 32), (10, 10), (50, 50), (200, 120), (7, 300)]


def _make_image(size: tuple[int, int], color: str = "gray") -> Image.Image:
    return Image.new("RGB", size, color)


@pytest.mark.parametrize("original", SHAPES)
@pytest.mark.parametrize("target", TARGETS)
def test_ignore_matches_target_exactly(original: tuple[int, int], target: tuple[int, int]) -> None:
    result = apply_aspect(_make_image(original), Dimensions(*target), FilterMode.TRIANGLE, AspectMode.IGNORE)

    assert result.size == target


@pytest.mark.parametrize("original", SHAPES)
@pytest.mark.parametrize("target", TARGETS)
def test_clip_matches_target_exactly(original: tuple[int, int], target: tuple[int, int]) -> None:
    result = apply_aspect(_make_image(original), Dimensions(*target), FilterMode.NEAREST, AspectMode.CLIP)

    assert result.size == target


@pytest.mark.parametrize("original", SHAPES)
@pytest.mark.parametrize("target", TARGETS)
def test_preserve_fits_inside_target(original: tuple[int, int], target: tuple[int, int]) -> None:
    result = apply_aspect(_make_image(original), Dimensions(*target), FilterMode.NEAREST, AspectMode.PRESERVE)

    width, height = result.size
    assert width <= target[0]
    assert height <= target[1]
    assert width == target[0] or height == target[1]


def test_preserve_same_ratio_matches_both_axes() -> None:
    result = apply_aspect(_make_image((64, 32)), Dimensions(128, 64), FilterMode.NEAREST, AspectMode.PRESERVE)

    assert result.size == (128, 64)


def test_preserve_limited_by_width() -> None:
    assert scaled_dimensions(Dimensions(64, 32), Dimensions(32, 32), cover=False) == Dimensions(32, 16)


def test_cover_limited_by_height() -> None:
    assert scaled_dimensions(Dimensions(100, 50), Dimensions(50, 50), cover=True) == Dimensions(100, 50)


def test_scaled_dimensions_round_half_up() -> None:
    # 5 * 0.5 = 2.5 -> 3，不使用银行家舍入。
    assert scaled_dimensions(Dimensions(10, 5), Dimensions(5, 5), cover=False) == Dimensions(5, 3)


def test_scaled_dimensions_keep_at_least_one_pixel() -> None:
    assert scaled_dimensions(Dimensions(1000, 1), Dimensions(8, 8), cover=False) == Dimensions(8, 1)


def test_scaled_dimensions_zero_sized_original_passes_target_through() -> None:
    assert scaled_dimensions(Dimensions(0, 10), Dimensions(8, 8), cover=True) == Dimensions(8, 8)


def test_center_crop_box_horizontal_and_vertical() -> None:
    assert center_crop_box(Dimensions(100, 50), Dimensions(50, 50)) == (25, 0, 75, 50)
    assert center_crop_box(Dimensions(40, 90), Dimensions(40, 40)) == (0, 25, 40, 65)


def test_clip_keeps_horizontal_center() -> None:
    image = _make_image((100, 50), "red")
    image.paste((0, 255, 0), (25, 0, 75, 50))

    result = apply_aspect(image, Dimensions(50, 50), FilterMode.NEAREST, AspectMode.CLIP)

    assert result.size == (50, 50)
    assert set(result.getdata()) == {(0, 255, 0)}


def test_clip_keeps_vertical_center() -> None:
    image = _make_image((20, 60), "blue")
    image.paste((255, 255, 0), (0, 20, 20, 40))

    result = apply_aspect(image, Dimensions(20, 20), FilterMode.NEAREST, AspectMode.CLIP)

    assert set(result.getdata()) == {(255, 255, 0)}


@pytest.mark.parametrize("filter_mode", list(FilterMode))
def test_every_filter_produces_target_size(filter_mode: FilterMode) -> None:
    image = _make_image((90, 40), "white")

    result = apply_aspect(image, Dimensions(30, 30), filter_mode, AspectMode.IGNORE)

    assert result.size == (30, 30)
    assert result.mode == "RGB"


@pytest.mark.parametrize("filter_mode", list(FilterMode))
def test_uniform_color_survives_every_filter(filter_mode: FilterMode) -> None:
    image = Image.new("L", (48, 48), 200)

    result = apply_aspect(image, Dimensions(12, 12), filter_mode, AspectMode.PRESERVE)

    assert set(result.getdata()) == {200}


def test_zero_target_fails_in_resampler() -> None:
    with pytest.raises(ResampleError):
        apply_aspect(_make_image((20, 20)), Dimensions(0, 10), FilterMode.NEAREST, AspectMode.IGNORE)


def test_original_image_is_not_mutated() -> None:
    image = _make_image((40, 20), "orange")
    before = list(image.getdata())

    shrink_image(image, ShrinkConfig(target=Dimensions(10, 10), aspect=AspectMode.CLIP))

    assert image.size == (40, 20)
    assert list(image.getdata()) == before


def test_shrink_image_uses_config_defaults() -> None:
    config = ShrinkConfig(target=Dimensions(32, 32))

    assert config.aspect is AspectMode.PRESERVE
    assert config.filter is FilterMode.CATMULL_ROM
    assert shrink_image(_make_image((64, 32)), config).size == (32, 16)
