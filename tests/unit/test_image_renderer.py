import pytest

from burnout.components import CameraOffset, GridExtent, GridRect
from burnout.config import AvatarConfig, BlockConfig, MapConfig
from burnout.renderer import ImageRenderer, Layout, class_to_color, rect_to_pixels


def _layout(developer: bool = False) -> Layout:
    return Layout(
        map=MapConfig(
            block_size=10,
            map=GridExtent(rows=6, cols=8),
            view=GridExtent(rows=3, cols=4),
            developer=developer,
        ),
        blocks=(BlockConfig(GridRect.cell(1, 1), True, "wall"),),
        avatar=AvatarConfig(GridRect.cell(2, 2), "hero"),
    )


def test_rect_to_pixels_uses_one_based_lines() -> None:
    assert rect_to_pixels(GridRect.cell(1, 1), 10) == (0, 0, 10, 10)
    assert rect_to_pixels(GridRect.cell(3, 2), 16) == (16, 32, 32, 48)


def test_class_color_is_deterministic() -> None:
    assert class_to_color("wall") == class_to_color("wall")
    assert class_to_color("wall")[3] == 255


def test_render_before_mount_raises() -> None:
    with pytest.raises(ValueError):
        ImageRenderer().render()


def test_render_crops_to_view() -> None:
    renderer = ImageRenderer()
    renderer.mount(_layout())
    frame = renderer.render()
    assert frame.size == (40, 30)
    assert frame.getpixel((5, 5)) == class_to_color("wall")
    assert frame.getpixel((15, 15)) == class_to_color("hero")


def test_world_offset_translates_map() -> None:
    renderer = ImageRenderer()
    renderer.mount(_layout())
    renderer.set_entity_position(GridRect.cell(2, 3), 10)
    renderer.set_world_offset(CameraOffset(x=-10, y=0))
    frame = renderer.render()
    # avatar stays at the same screen spot, the wall scrolled out of view
    assert frame.getpixel((15, 15)) == class_to_color("hero")
    assert frame.getpixel((5, 5)) != class_to_color("wall")


def test_developer_mode_returns_whole_map() -> None:
    renderer = ImageRenderer()
    renderer.mount(_layout(developer=True))
    frame = renderer.render()
    assert frame.size == (80, 60)
    assert frame.getpixel((39, 15)) == (255, 0, 0, 255)


def test_to_array_shape() -> None:
    renderer = ImageRenderer()
    renderer.mount(_layout())
    array = renderer.to_array()
    assert array.shape == (30, 40, 4)
    assert array.dtype.name == "uint8"
