"""An RGB/HSV colour with 16-bit internal precision per component."""

from __future__ import annotations

import enum
import math
import re

_MAX = 0xFFFF
_ACHROMATIC = 0xFFFF
_HEX_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def _round(x: float) -> int:
    return math.floor(x + 0.5)


def _div_257(x: int) -> int:
    return (x + (x >> 8) + 0x80) >> 8


class _Spec(enum.Enum):
    RGB = enum.auto()
    HSV = enum.auto()


def _hsv_to_rgb16(hue: int, sat: int, val: int) -> tuple[int, int, int]:
    if sat == 0 or hue == _ACHROMATIC:
        return (val, val, val)
    h = 0.0 if hue == 36000 else hue / 6000
    s = sat / _MAX
    v = val / _MAX
    i = int(h)
    f = h - i
    p = v * (1 - s)
    if i & 1:
        q = v * (1 - s * f)
        rgb = {1: (q, v, p), 3: (p, q, v), 5: (v, p, q)}[i]
    else:
        t = v * (1 - s * (1 - f))
        rgb = {0: (v, t, p), 2: (p, v, t), 4: (t, p, v)}[i]
    return tuple(_round(c * _MAX) for c in rgb)  # type: ignore[return-value]


def _rgb_to_hsv16(red: int, green: int, blue: int) -> tuple[int, int, int]:
    r, g, b = red / _MAX, green / _MAX, blue / _MAX
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    value = _round(high * _MAX)
    if abs(delta) <= 1e-5:
        return (_ACHROMATIC, 0, value)
    saturation = _round(delta / high * _MAX)
    if r == high:
        hue = (g - b) / delta
    elif g == high:
        hue = 2.0 + (b - r) / delta
    else:
        hue = 4.0 + (r - g) / delta
    hue *= 60.0
    if hue < 0.0:
        hue += 360.0
    return (_round(hue * 100.0), saturation, value)


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in 0..1, got {value}")


class Color:
    """A mutable colour remembering whether it was last set as RGB or HSV.

    Hue is undefined (-1) for achromatic colours set through RGB; a colour set
    through HSV keeps its hue even when saturation or value reach zero.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, red: int, green: int, blue: int) -> None:
        self._spec = _Spec.RGB
        self._components = (0, 0, 0)
        self.set_rgb(red, green, blue)

    @classmethod
    def from_hsv(cls, hue: int, saturation: int, value: int) -> Color:
        color = cls(0, 0, 0)
        color.set_hsv(hue, saturation, value)
        return color

    @classmethod
    def from_hsv_f(cls, hue: float, saturation: float, value: float) -> Color:
        color = cls(0, 0, 0)
        color.set_hsv_f(hue, saturation, value)
        return color

    @classmethod
    def from_string(cls, name: str) -> Color:
        """Parse ``#rgb`` or ``#rrggbb``."""
        match = _HEX_RE.fullmatch(name)
        if match is None:
            raise ValueError(f"invalid colour name: {name!r}")
        digits = match.group(1)
        if len(digits) == 3:
            red, green, blue = (int(d, 16) * 17 for d in digits)
        else:
            red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return cls(red, green, blue)

    def _rgb16(self) -> tuple[int, int, int]:
        if self._spec is _Spec.RGB:
            return self._components
        return _hsv_to_rgb16(*self._components)

    def _hsv16(self) -> tuple[int, int, int]:
        if self._spec is _Spec.HSV:
            return self._components
        return _rgb_to_hsv16(*self._components)

    def red(self) -> int:
        return _div_257(self._rgb16()[0])

    def green(self) -> int:
        return _div_257(self._rgb16()[1])

    def blue(self) -> int:
        return _div_257(self._rgb16()[2])

    def hue(self) -> int:
        """Hue in degrees 0..359, or -1 when undefined."""
        hue = self._hsv16()[0]
        return -1 if hue == _ACHROMATIC else hue // 100

    def saturation(self) -> int:
        return self._hsv16()[1] >> 8

    def value(self) -> int:
        return self._hsv16()[2] >> 8

    def hue_f(self) -> float:
        """Hue in 0..1, or -1.0 when undefined."""
        hue = self._hsv16()[0]
        return -1.0 if hue == _ACHROMATIC else hue / 36000.0

    def saturation_f(self) -> float:
        return self._hsv16()[1] / _MAX

    def value_f(self) -> float:
        return self._hsv16()[2] / _MAX

    def set_rgb(self, red: int, green: int, blue: int) -> None:
        for name, component in (("red", red), ("green", green), ("blue", blue)):
            _check_byte(name, component)
        self._spec = _Spec.RGB
        self._components = (red * 0x101, green * 0x101, blue * 0x101)

    def set_hsv(self, hue: int, saturation: int, value: int) -> None:
        """Set from hue in degrees (-1 for undefined) and 0..255 saturation/value."""
        if hue < -1:
            raise ValueError(f"hue must be -1 or non-negative, got {hue}")
        _check_byte("saturation", saturation)
        _check_byte("value", value)
        stored_hue = _ACHROMATIC if hue == -1 else (hue % 360) * 100
        self._spec = _Spec.HSV
        self._components = (stored_hue, saturation * 0x101, value * 0x101)

    def set_hsv_f(self, hue: float, saturation: float, value: float) -> None:
        """Set from hue in 0..1 (-1 for undefined) and 0..1 saturation/value."""
        if hue != -1.0:
            _check_unit("hue", hue)
        _check_unit("saturation", saturation)
        _check_unit("value", value)
        stored_hue = _ACHROMATIC if hue == -1.0 else _round(hue * 36000) % 36000
        self._spec = _Spec.HSV
        self._components = (stored_hue, _round(saturation * _MAX), _round(value * _MAX))

    def assign(self, other: Color) -> None:
        """Take over the full state of ``other``."""
        self._spec = other._spec
        self._components = other._components

    def copy(self) -> Color:
        duplicate = Color(0, 0, 0)
        duplicate.assign(self)
        return duplicate

    def name(self) -> str:
        """The ``#rrggbb`` form of the colour."""
        return "#{:02x}{:02x}{:02x}".format(*self.rgb())

    def rgb(self) -> tuple[int, int, int]:
        return (self.red(), self.green(), self.blue())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgb() == other.rgb()

    def __repr__(self) -> str:
        return "Color({}, {}, {})".format(*self.rgb())