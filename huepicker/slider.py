"""A vertical slider choosing the value (brightness) of a colour."""

from __future__ import annotations

from PIL import Image, ImageDraw

from .color import Color
from .signal import Signal

_H_MARGIN = 8
_V_MARGIN = 4


class ColorSlider:
    """Top of the track is full value, bottom is black.

    ``color_changed`` is emitted with the shared colour after every press or drag.
    """

    def __init__(self, color: Color, width: int = 15, height: int = 200) -> None:
        self._color = color
        self._width = width
        self._height = height
        self.handle_color = Color(0, 0, 0)
        self.color_changed = Signal()
        self.sync_with_color()

    def size(self) -> tuple[int, int]:
        return (self._width + 2 * _H_MARGIN, self._height + 2 * _V_MARGIN)

    def handle_y(self) -> float:
        """Vertical position of the handle for the current value."""
        return _V_MARGIN + (1 - self._color.value_f()) * self._height

    def sync_with_color(self, *args: object) -> None:
        """The handle position is derived from the colour, so nothing is cached."""

    def _update_color_from_y(self, y: float) -> None:
        y = min(max(y, float(_V_MARGIN)), float(_V_MARGIN + self._height))
        value = 1 - (y - _V_MARGIN) / self._height
        self._color.set_hsv_f(self._color.hue_f(), self._color.saturation_f(), value)
        self.color_changed.emit(self._color)

    def press(self, x: float, y: float) -> None:
        self._update_color_from_y(y)

    def move(self, x: float, y: float) -> None:
        self._update_color_from_y(y)

    def render(self) -> Image.Image:
        """Draw the gradient track and both handle triangles."""
        width, height = self.size()
        image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        top = Color.from_hsv_f(
            self._color.hue_f(), self._color.saturation_f(), 1.0
        ).rgb()

        sx, sy = _H_MARGIN + self._width, _V_MARGIN + self._height
        ex, ey = _H_MARGIN, _V_MARGIN
        dx, dy = ex - sx, ey - sy
        norm = dx * dx + dy * dy
        for y in range(_V_MARGIN, _V_MARGIN + self._height):
            for x in range(_H_MARGIN, _H_MARGIN + self._width):
                t = ((x + 0.5 - sx) * dx + (y + 0.5 - sy) * dy) / norm
                t = min(max(t, 0.0), 1.0)
                image.putpixel((x, y), (*(round(c * t) for c in top), 255))

        draw = ImageDraw.Draw(image)
        fill = (*self.handle_color.rgb(), 255)
        ty = self.handle_y()
        draw.polygon([(0, ty - _V_MARGIN), (0, ty + _V_MARGIN), (_H_MARGIN, ty)], fill=fill)
        draw.polygon(
            [(width, ty - _V_MARGIN), (width, ty + _V_MARGIN), (width - _H_MARGIN, ty)],
            fill=fill,
        )
        return image