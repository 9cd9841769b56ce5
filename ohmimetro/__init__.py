"""Resistance meter: ADC conversion, E24 values, colour bands and SSD1306 rendering."""

__version__ = "0.1.0"
__all__ = ["font", "ssd1306", "meter"]