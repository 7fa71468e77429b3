"""Voltage-divider ohmmeter: E24 matching, colour bands, an SSD1306 display model and a command line."""

__version__ = "0.1.0"
__all__ = ["font", "ssd1306", "resistor", "meter"]