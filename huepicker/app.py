"""Command-line front end: drive a picker and report each colour change."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from PIL import Image

from .color import Color
from .picker import BACKGROUND, ColorPicker

_FIELD_KEYS = ("hue", "saturation", "value", "red", "green", "blue", "name")


def format_color(color: Color) -> str:
    """The line reported whenever the picked colour changes."""
    r, g, b = color.rgb()
    return f"Current color: {color.name()} (r={r}, g={g}, b={b})"


def _parse_color(text: str) -> Color:
    try:
        return Color.from_string(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _parse_field(text: str) -> tuple[str, str, int]:
    key, sep, raw = text.partition("=")
    key = key.strip().lower()
    if not sep or key not in _FIELD_KEYS:
        raise argparse.ArgumentTypeError(
            f"expected KEY=VALUE with KEY one of {', '.join(_FIELD_KEYS)}"
        )
    try:
        value = int(raw.strip().lstrip("#"), 16) if key == "name" else int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value for {key}: {raw!r}") from None
    return ("field", key, value)


def _parse_point(text: str) -> tuple[str, float, float]:
    try:
        x, y = (float(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {text!r}") from None
    return ("wheel", x, y)


def _parse_slider(text: str) -> tuple[str, float]:
    try:
        return ("slider", float(text))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huepicker", description="Pick a colour with a wheel, a slider and fields."
    )
    parser.add_argument(
        "--color", type=_parse_color, default=Color(255, 0, 0),
        help="starting colour as #rrggbb (default red)",
    )
    parser.add_argument(
        "--set", dest="actions", action="append", type=_parse_field,
        metavar="KEY=VALUE", help="edit a field (name takes hex digits)",
    )
    parser.add_argument(
        "--wheel", dest="actions", action="append", type=_parse_point,
        metavar="X,Y", help="click on the wheel at a point",
    )
    parser.add_argument(
        "--slider", dest="actions", action="append", type=_parse_slider,
        metavar="Y", help="click on the slider at a height",
    )
    parser.add_argument("--output", help="write an image of the wheel and slider")
    return parser


def _render(picker: ColorPicker) -> Image.Image:
    image = Image.new("RGBA", picker.size(), (*BACKGROUND, 255))
    wheel = picker.wheel.render()
    image.alpha_composite(wheel, (0, 0))
    slider = picker.slider.render()
    image.alpha_composite(slider, picker.slider_position())
    return image


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    picker = ColorPicker(args.color)
    picker.color_changed.connect(lambda color: print(format_color(color)))

    setters = {
        "hue": picker.fields.set_hue,
        "saturation": picker.fields.set_saturation,
        "value": picker.fields.set_value,
        "red": picker.fields.set_red,
        "green": picker.fields.set_green,
        "blue": picker.fields.set_blue,
        "name": picker.fields.set_name,
    }

    for action in args.actions or []:
        kind = action[0]
        if kind == "field":
            _, key, value = action
            setters[key](value)
        elif kind == "wheel":
            _, x, y = action
            picker.wheel.press(x, y)
            picker.wheel.release()
        else:
            picker.slider.press(0.0, action[1])

    if args.output:
        _render(picker).save(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())