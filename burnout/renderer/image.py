"""Pillow renderer.

Paints the mounted layout into an RGBA image:

* One map-sized canvas holding every block, filled with a color derived from
  its ``class_name`` (same name, same color, across runs).
* The avatar drawn on top at its latest cell.
* The canvas translated by the world offset and cropped to the view window.
  In developer mode the whole map is returned instead, with the map outlined
  in black and the view window in red.
"""

import colorsys
import zlib
from functools import lru_cache
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from burnout.components import CameraOffset, GridRect
from burnout.renderer.base import Layout
from burnout.types import Pixels

Color = Tuple[int, int, int, int]
PixelBox = Tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)
MAP_OUTLINE: Color = (0, 0, 0, 255)
VIEW_OUTLINE: Color = (255, 0, 0, 255)


@lru_cache(maxsize=256)
def class_to_color(class_name: str) -> Color:
    """Opaque fill for a block / avatar class name, stable across runs."""
    digest = zlib.crc32(class_name.encode("utf-8"))
    hue = (digest & 0xFFFF) / 0xFFFF
    lightness = 0.45 + 0.2 * ((digest >> 16) & 0xFF) / 0xFF
    r, g, b = colorsys.hls_to_rgb(hue, lightness, 0.75)
    return round(r * 255), round(g * 255), round(b * 255), 255


def rect_to_pixels(rect: GridRect, block_size: Pixels) -> PixelBox:
    """Pixel box ``(left, top, right, bottom)`` of ``rect``; lines start at 1."""
    return (
        round((rect.col_start - 1) * block_size),
        round((rect.row_start - 1) * block_size),
        round((rect.col_end - 1) * block_size),
        round((rect.row_end - 1) * block_size),
    )


class ImageRenderer:
    def __init__(self, background: Color = TRANSPARENT) -> None:
        self.background = background
        self.layout: Optional[Layout] = None
        self.position: Optional[GridRect] = None
        self.offset = CameraOffset()
        self._map_image: Optional[Image.Image] = None

    def mount(self, layout: Layout) -> None:
        self.layout = layout
        self.position = layout.avatar.position
        self.offset = CameraOffset()
        self._map_image = self._paint_map(layout)

    def set_entity_position(self, position: GridRect, block_size: Pixels) -> None:
        self.position = position

    def set_world_offset(self, offset: CameraOffset) -> None:
        self.offset = offset

    def render(self) -> Image.Image:
        """Compose the current frame.

        Raises:
            ValueError: If called before :meth:`mount`.
        """
        if self.layout is None or self._map_image is None or self.position is None:
            raise ValueError("Renderer is not mounted")

        block_size = self.layout.map.block_size
        frame = self._map_image.copy()
        draw = ImageDraw.Draw(frame)
        draw.ellipse(
            _inclusive(rect_to_pixels(self.position, block_size)),
            fill=class_to_color(self.layout.avatar.class_name),
        )

        view = self.layout.map.view
        left = round(-self.offset.x)
        top = round(-self.offset.y)
        view_box = (
            left,
            top,
            left + round(view.cols * block_size),
            top + round(view.rows * block_size),
        )

        if self.layout.map.developer:
            draw.rectangle((0, 0, frame.width - 1, frame.height - 1), outline=MAP_OUTLINE)
            draw.rectangle(_inclusive(view_box), outline=VIEW_OUTLINE)
            return frame

        return frame.crop(view_box)

    def to_array(self) -> npt.NDArray[np.uint8]:
        """Current frame as an ``(H, W, 4)`` uint8 array."""
        return np.asarray(self.render(), dtype=np.uint8)

    def _paint_map(self, layout: Layout) -> Image.Image:
        block_size = layout.map.block_size
        size = (
            round(layout.map.map.cols * block_size),
            round(layout.map.map.rows * block_size),
        )
        image = Image.new("RGBA", size, self.background)
        draw = ImageDraw.Draw(image)
        for block in layout.blocks:
            draw.rectangle(
                _inclusive(rect_to_pixels(block.position, block_size)),
                fill=class_to_color(block.class_name),
            )
        return image


def _inclusive(box: PixelBox) -> PixelBox:
    # ImageDraw boxes include the right/bottom pixel
    left, top, right, bottom = box
    return left, top, max(left, right - 1), max(top, bottom - 1)
