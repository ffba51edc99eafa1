"""HSV colour picker model: a hue/saturation wheel, a value slider and numeric fields sharing one colour."""

__version__ = "0.1.0"