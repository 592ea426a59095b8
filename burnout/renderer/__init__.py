from .base import Layout, Renderer
from .image import ImageRenderer, class_to_color, rect_to_pixels

__all__ = [
    "ImageRenderer",
    "Layout",
    "Renderer",
    "class_to_color",
    "rect_to_pixels",
]
