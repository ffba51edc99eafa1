"""Numeric HSV, RGB and hex fields kept in step with a shared colour."""

from __future__ import annotations

import math

from .color import Color
from .signal import Signal

_RANGES = {
    "hue": (0, 359),
    "saturation": (0, 100),
    "value": (0, 100),
    "red": (0, 255),
    "green": (0, 255),
    "blue": (0, 255),
    "name": (0, 0xFFFFFF),
}


def format_name(value: int) -> str:
    """Six lower-case hex digits, as shown in the name field."""
    return f"{value:06x}"


def _clamp(key: str, value: int) -> int:
    low, high = _RANGES[key]
    return min(max(value, low), high)


class ColorFields:
    """Each field clamps to its range; a change updates the colour and emits
    ``color_changed``, while setting a field to its current value does nothing."""

    def __init__(self, color: Color) -> None:
        self._color = color
        self._fields = {key: low for key, (low, _) in _RANGES.items()}
        self.color_changed = Signal()
        self.sync_with_color()

    def values(self) -> dict[str, int]:
        return dict(self._fields)

    def _read_color(self, include_name: bool) -> dict[str, int]:
        color = self._color
        read = {
            "hue": color.hue(),
            "saturation": math.floor(color.saturation_f() * 100 + 0.5),
            "value": math.floor(color.value_f() * 100 + 0.5),
            "red": color.red(),
            "green": color.green(),
            "blue": color.blue(),
        }
        if include_name:
            read["name"] = int(color.name()[1:], 16)
        return {key: _clamp(key, value) for key, value in read.items()}

    def sync_with_color(self, *args: object) -> None:
        """Refresh every field from the colour without emitting."""
        self._fields.update(self._read_color(include_name=True))

    def _store(self, key: str, value: int) -> bool:
        clamped = _clamp(key, value)
        if clamped == self._fields[key]:
            return False
        self._fields[key] = clamped
        return True

    def _finish(self) -> None:
        self.sync_with_color()
        self.color_changed.emit(self._color)

    def set_hue(self, hue: int) -> None:
        if self._store("hue", hue):
            c = self._color
            c.set_hsv(self._fields["hue"], c.saturation(), c.value())
            self._finish()

    def set_saturation(self, saturation: int) -> None:
        if self._store("saturation", saturation):
            c = self._color
            c.set_hsv_f(c.hue_f(), self._fields["saturation"] / 100, c.value_f())
            self._finish()

    def set_value(self, value: int) -> None:
        if self._store("value", value):
            c = self._color
            c.set_hsv_f(c.hue_f(), c.saturation_f(), self._fields["value"] / 100)
            self._finish()

    def set_red(self, red: int) -> None:
        if self._store("red", red):
            c = self._color
            c.set_rgb(self._fields["red"], c.green(), c.blue())
            self._finish()

    def set_green(self, green: int) -> None:
        if self._store("green", green):
            c = self._color
            c.set_rgb(c.red(), self._fields["green"], c.blue())
            self._finish()

    def set_blue(self, blue: int) -> None:
        if self._store("blue", blue):
            c = self._color
            c.set_rgb(c.red(), c.green(), self._fields["blue"])
            self._finish()

    def set_name(self, value: int) -> None:
        """Set the colour from a 24-bit RGB number; the name field keeps its value."""
        if self._store("name", value):
            self._color.assign(Color.from_string("#" + format_name(self._fields["name"])))
            self._fields.update(self._read_color(include_name=False))
            self.color_changed.emit(self._color)