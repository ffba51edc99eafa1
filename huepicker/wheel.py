"""A hue/saturation wheel: positions on a disc map to hue and saturation."""

from __future__ import annotations

import colorsys
import math

from PIL import Image, ImageDraw

from .color import Color
from .signal import Signal

_MARGIN = 10


class ColorWheel:
    """Hue runs counter-clockwise from the +x axis; saturation grows outward.

    ``color_changed`` is emitted with the shared colour whenever the user
    picks a new position.
    """

    def __init__(self, color: Color, radius: int = 100) -> None:
        self._color = color
        self._radius = radius
        offset = float(_MARGIN + radius)
        self._center = (offset, offset)
        self._target = self._center
        self.grabbed = False
        self.color_changed = Signal()
        self.sync_with_color()

    @property
    def radius(self) -> int:
        return self._radius

    def size(self) -> tuple[int, int]:
        side = (_MARGIN + self._radius) * 2
        return (side, side)

    def center(self) -> tuple[float, float]:
        return self._center

    def target(self) -> tuple[float, float]:
        return self._target

    def sync_with_color(self, *args: object) -> None:
        """Move the target marker to where the current colour lies."""
        theta = self._color.hue_f() * 2 * math.pi
        r = self._color.saturation_f() * self._radius
        cx, cy = self._center
        self._target = (cx + r * math.cos(theta), cy - r * math.sin(theta))

    def is_in_wheel(self, x: float, y: float) -> bool:
        length = math.hypot(x - self._center[0], y - self._center[1])
        return math.floor(length + 0.5) <= self._radius

    def _update_color_from_target(self) -> None:
        cx, cy = self._center
        dx = self._target[0] - cx
        dy = self._target[1] - cy
        rad = math.atan2(-dy, dx)
        if rad < 0:
            rad += 2 * math.pi
        hue = rad / (2 * math.pi)
        saturation = min(math.hypot(dx, dy) / self._radius, 1.0)
        self._color.set_hsv_f(hue, saturation, self._color.value_f())
        self.color_changed.emit(self._color)

    def press(self, x: float, y: float) -> bool:
        """Grab the marker at a point; returns False if the point is off the wheel."""
        if not self.is_in_wheel(x, y):
            return False
        self.grabbed = True
        self._target = (float(x), float(y))
        self._update_color_from_target()
        return True

    def move(self, x: float, y: float) -> None:
        """Drag the grabbed marker, keeping it on the disc."""
        if not self.grabbed:
            return
        cx, cy = self._center
        dx, dy = x - cx, y - cy
        length = math.hypot(dx, dy)
        if length > self._radius:
            scale = self._radius / length
            self._target = (cx + dx * scale, cy + dy * scale)
        else:
            self._target = (float(x), float(y))
        self._update_color_from_target()

    def release(self) -> None:
        self.grabbed = False

    def render(self) -> Image.Image:
        """Draw the wheel and its marker onto a transparent RGBA image."""
        width, height = self.size()
        cx, cy = self._center
        value = self._color.value_f()
        radius = self._radius
        pixels = []
        for y in range(height):
            dy = y + 0.5 - cy
            for x in range(width):
                dx = x + 0.5 - cx
                dist = math.hypot(dx, dy)
                if dist > radius:
                    pixels.append((0, 0, 0, 0))
                    continue
                hue = (math.atan2(-dy, dx) / (2 * math.pi)) % 1.0
                r, g, b = colorsys.hsv_to_rgb(hue, min(dist / radius, 1.0), value)
                pixels.append((round(r * 255), round(g * 255), round(b * 255), 255))
        image = Image.new("RGBA", (width, height))
        image.putdata(pixels)

        draw = ImageDraw.Draw(image)
        marker = 8 if self.grabbed else 5
        outline = (255, 255, 255, 255) if value < 0.7 else (0x44, 0x44, 0x44, 255)
        tx, ty = self._target
        draw.ellipse(
            (tx - marker, ty - marker, tx + marker, ty + marker),
            fill=(*self._color.rgb(), 255),
            outline=outline,
            width=1,
        )
        return image