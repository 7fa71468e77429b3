"""Resistance measurement from averaged ADC samples and its on-screen layout."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

from .resistor import (
    ADC_RESOLUTION,
    ADC_VREF,
    ERROR_BAND,
    KNOWN_RESISTANCE,
    adc_to_voltage,
    color_bands,
    nearest_e24,
    unknown_resistance,
)
from .ssd1306 import SSD1306

SAMPLES_PER_READING = 500


@dataclass(frozen=True)
class Reading:
    """One averaged measurement of the unknown resistor."""

    mean: float
    voltage: float
    resistance: float
    commercial: float
    bands: tuple[str, str, str]

    @property
    def mean_text(self) -> str:
        """The averaged ADC count as shown on the display."""
        return f"{self.mean:1.0f}"

    @property
    def resistance_text(self) -> str:
        """The measured resistance in ohms as shown on the display."""
        return f"{self.resistance:1.0f}"


def measure(
    samples: Iterable[float],
    known_resistance: float = KNOWN_RESISTANCE,
    vref: float = ADC_VREF,
    resolution: int = ADC_RESOLUTION,
) -> Reading:
    """Average ADC samples and derive resistance, nearest E24 value and colour bands.

    Raises ValueError when no samples are given.
    """
    values = list(samples)
    if not values:
        raise ValueError("at least one ADC sample is required")
    mean = sum(values) / len(values)
    voltage = adc_to_voltage(mean, resolution, vref)
    resistance = unknown_resistance(voltage, known_resistance, vref)
    commercial = nearest_e24(resistance)
    try:
        bands = color_bands(commercial)
    except ValueError:
        bands = (ERROR_BAND, ERROR_BAND, ERROR_BAND)
    return Reading(mean, voltage, resistance, commercial, bands)


def draw_reading(display: SSD1306, reading: Reading) -> None:
    """Lay out a reading on the display's frame buffer (without sending it)."""
    color = True
    display.fill(not color)
    display.rect(3, 3, 122, 60, color, not color)
    display.line(3, 37, 123, 37, color)
    for band, y in zip(reading.bands, (6, 16, 28)):
        display.draw_string(band, 40, y)
    display.draw_string("ADC", 13, 41)
    display.draw_string("Ohms", 70, 41)
    display.line(44, 37, 44, 60, color)
    display.draw_string(reading.mean_text, 8, 52)
    display.draw_string(reading.resistance_text, 70, 52)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ohmmeter",
        description="Compute a resistor's value from voltage-divider ADC samples.",
    )
    parser.add_argument(
        "samples",
        nargs="*",
        type=int,
        help="ADC counts; read whitespace-separated from stdin when omitted",
    )
    parser.add_argument("--known", type=float, default=KNOWN_RESISTANCE,
                        help="known divider resistance in ohms")
    parser.add_argument("--vref", type=float, default=ADC_VREF,
                        help="ADC reference voltage")
    parser.add_argument("--resolution", type=int, default=ADC_RESOLUTION,
                        help="ADC full-scale count")
    parser.add_argument("--display", action="store_true",
                        help="also print the rendered display")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    args = _parse_args(argv)
    samples = args.samples
    if not samples:
        try:
            samples = [int(token) for token in sys.stdin.read().split()]
        except ValueError as exc:
            print(f"ohmmeter: invalid sample: {exc}", file=sys.stderr)
            return 2
    try:
        reading = measure(samples, args.known, args.vref, args.resolution)
    except ValueError as exc:
        print(f"ohmmeter: {exc}", file=sys.stderr)
        return 2

    print(f"{reading.commercial:f}")
    print(" ".join(reading.bands))
    if args.display:
        display = SSD1306(lambda address, data: None)
        draw_reading(display, reading)
        print(display.to_text())
    return 0