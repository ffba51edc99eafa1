"""A complete picker: hue/saturation wheel, value slider and numeric fields."""

from __future__ import annotations

from .color import Color
from .fields import ColorFields
from .signal import Signal
from .slider import ColorSlider
from .wheel import ColorWheel

BACKGROUND = (83, 83, 83)

_FIELDS_HEIGHT = 145
_SLIDER_TOP = 6
_RIGHT_GAP = 10


class ColorPicker:
    """Wires a wheel, a slider and a fields panel to one shared colour.

    A change made through any part updates the other two, and
    ``color_changed`` is emitted with the shared colour.
    """

    def __init__(
        self,
        color: Color,
        radius: int = 100,
        slider_width: int = 15,
        slider_height: int = 200,
    ) -> None:
        self._color = color.copy()
        self.wheel = ColorWheel(self._color, radius)
        self.slider = ColorSlider(self._color, slider_width, slider_height)
        self.fields = ColorFields(self._color)
        self.color_changed = Signal()

        for part in (self.wheel, self.slider, self.fields):
            part.color_changed.connect(self.color_changed.emit)

        self.wheel.color_changed.connect(self.slider.sync_with_color)
        self.wheel.color_changed.connect(self.fields.sync_with_color)

        self.slider.color_changed.connect(self.wheel.sync_with_color)
        self.slider.color_changed.connect(self.fields.sync_with_color)

        self.fields.color_changed.connect(self.wheel.sync_with_color)
        self.fields.color_changed.connect(self.slider.sync_with_color)

    def color(self) -> Color:
        """A copy of the current colour."""
        return self._color.copy()

    def size(self) -> tuple[int, int]:
        wheel_width, wheel_height = self.wheel.size()
        slider_width, _ = self.slider.size()
        return (wheel_width + slider_width + _RIGHT_GAP, wheel_height + _FIELDS_HEIGHT)

    def slider_position(self) -> tuple[int, int]:
        """Top-left corner of the slider, to the right of the wheel."""
        return (self.wheel.size()[0], _SLIDER_TOP)

    def fields_position(self) -> tuple[int, int]:
        """Top-left corner of the fields panel, below the wheel."""
        return (0, self.wheel.size()[1])