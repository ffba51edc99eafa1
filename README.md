# huepicker

A colour picker made of three linked parts that share one colour:

- **`ColorWheel`** (`huepicker.wheel`) picks hue and saturation. Hue is the angle around the wheel, counter-clockwise from the right-hand side. Saturation is the distance from the centre.
- **`ColorSlider`** (`huepicker.slider`) is a vertical slider for value (brightness). The top of the track is full value and the bottom is black.
- **`ColorFields`** (`huepicker.fields`) holds the numeric fields: hue in degrees (0..359), saturation and value in percent (0..100), red/green/blue (0..255), and the 24-bit hex name.

`ColorPicker` (`huepicker.picker`) wires the three parts to one shared colour. When you change the colour in one part, the other two follow.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Command line

`huepicker` builds a picker, applies the edits given on the command line in the order they appear, and prints one line for each colour change:

```
huepicker --set hue=120
Current color: #00ff00 (r=0, g=255, b=0)
```

Options:

- `--color #rrggbb`: the starting colour. `#rgb` is also accepted. The default is red.
- `--set KEY=VALUE`: edit a field. `KEY` is one of `hue`, `saturation`, `value`, `red`, `green`, `blue` or `name`. For `name`, give hex digits, with or without a leading `#`. Values outside a field's range are clamped.
- `--wheel X,Y`: click on the wheel at a point, in wheel pixel coordinates. A point off the wheel does nothing.
- `--slider Y`: click on the slider at a height, in slider pixel coordinates. The height is clamped to the track.
- `--output FILE`: after all edits, save an image of the wheel and the slider on a grey background. The image format follows the file extension.

If you give no edits, nothing is printed.

## Using the library

### Colours

`Color` holds a colour and remembers whether it was last set as RGB or as HSV. Integer setters take 0..255. Fractional setters take 0..1. Values out of range raise `ValueError`. The hue of a grey colour set through RGB is undefined: `hue()` returns `-1` and `hue_f()` returns `-1.0`.

```python
from huepicker.color import Color

c = Color(255, 0, 0)
c.hue(), c.saturation(), c.value()       # integer HSV
c.hue_f(), c.saturation_f(), c.value_f() # HSV as fractions
c.name()                                 # "#ff0000"
c.rgb()                                  # (255, 0, 0)

c.set_hsv_f(1 / 3, 1.0, 1.0)             # pure green
c.set_hsv(240, 255, 255)                 # blue; hue in degrees
c.set_rgb(10, 20, 30)

Color.from_string("#1e90ff")
Color.from_hsv(120, 255, 255)
Color.from_hsv_f(0.5, 1.0, 1.0)

other = c.copy()
other.assign(Color(0, 0, 0))             # take over another colour's state
```

Two colours compare equal when their RGB values match. Colours are mutable, so they are not hashable.

### Fields

```python
from huepicker.color import Color
from huepicker.fields import ColorFields, format_name

color = Color(255, 0, 0)
fields = ColorFields(color)
fields.color_changed.connect(print)

fields.set_hue(120)        # degrees
fields.set_saturation(50)  # percent
fields.set_red(200)
fields.set_name(0x336699)  # the hex field
fields.values()            # current contents of every field, as a dict
format_name(0x336699)      # "336699"
```

Each setter clamps its value to the field's range. A value equal to the field's current contents does nothing. Any other value updates the shared colour, refreshes the fields and emits `color_changed`. `sync_with_color()` reloads the fields from the colour and emits nothing.

### Wheel and slider

```python
from huepicker.color import Color
from huepicker.wheel import ColorWheel
from huepicker.slider import ColorSlider

color = Color(255, 0, 0)
wheel = ColorWheel(color, 100)       # radius
slider = ColorSlider(color, 15, 200) # track width and height

cx, cy = wheel.center()
wheel.press(cx, cy)      # returns False if the point is off the wheel
wheel.move(cx + 50, cy)  # drag halfway out along hue 0
wheel.release()
wheel.target()           # marker position for the current colour

slider.press(0, slider.handle_y())
slider.move(0, 300)      # clamped to the bottom of the track: value 0

wheel.render()           # Pillow RGBA images
slider.render()
```

`wheel.move()` only acts while the wheel is grabbed after a successful `press()`. While dragging, positions outside the wheel are clamped to its rim. `wheel.size()` and `slider.size()` give the pixel size of each part, including its margins. `slider.handle_color` sets the colour of the slider's handle triangles. Both parts emit `color_changed` with the shared colour after each press or drag.

### Signals

Every part tells listeners about changes through a small `Signal` class:

```python
from huepicker.signal import Signal

changed = Signal()
changed.connect(print)
changed.emit("hello")
with changed.blocked():
    changed.emit("not delivered")
changed.disconnect(print)   # ValueError if it was not connected
```

### The whole picker

```python
from huepicker.color import Color
from huepicker.picker import ColorPicker

picker = ColorPicker(Color(255, 0, 0))
picker.color_changed.connect(print)

picker.fields.set_value(50)  # the wheel and slider follow
picker.color().name()        # a copy of the shared colour
picker.size()
picker.slider_position()     # to the right of the wheel
picker.fields_position()     # below the wheel
```

`ColorPicker` works on its own copy of the colour you pass in. The shared colour is available through `picker.wheel`, `picker.slider` and `picker.fields`.

## What it does not do

huepicker has no on-screen window and no mouse handling of its own. The parts are models: your program feeds them pointer positions and field values. Drawing is limited to `render()` images of the wheel and the slider. The fields panel is not drawn.

## Running the tests

```
pytest
```