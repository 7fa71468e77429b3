"""Resistor value helpers: E24 rounding, colour bands and divider maths."""

from __future__ import annotations

import math

E24: tuple[float, ...] = (
    10, 11, 12, 13, 15, 16, 18, 20, 22, 24, 27, 30,
    33, 36, 39, 43, 47, 51, 56, 62, 68, 75, 82, 91,
)

DECADES: tuple[float, ...] = (1, 10, 100, 1e3, 1e4, 1e5, 1e6)

COLORS: tuple[str, ...] = (
    "Preto", "Marrom", "Vermelho", "Laranja", "Amarelo",
    "Verde", "Azul", "Violeta", "Cinza", "Branco",
)

ERROR_BAND = "Erro"

KNOWN_RESISTANCE = 67000
ADC_VREF = 3.3
ADC_RESOLUTION = 4095


def nearest_e24(resistance: float) -> float:
    """Return the E24 value (10 ohm to 9.1 Mohm) closest to ``resistance``.

    Returns 0 when no candidate lies within 1e9 of the input.
    """
    best = 0.0
    smallest = 1e9
    for decade in DECADES:
        for base in E24:
            value = base * decade
            difference = abs(resistance - value)
            if difference < smallest:
                smallest = difference
                best = value
    return best


def color_bands(resistance: float) -> tuple[str, str, str]:
    """Return the three colour bands (two digits and a multiplier).

    Raises ValueError when the value cannot be expressed with multipliers 0 to 9.
    """
    if not math.isfinite(resistance) or resistance <= 0:
        raise ValueError(f"resistance must be a positive finite number, got {resistance!r}")
    multiplier = 0
    while resistance >= 100:
        resistance /= 10.0
        multiplier += 1
    while resistance < 10:
        resistance *= 10.0
        multiplier -= 1

    value = int(resistance + 0.5)
    if value >= 100:
        value //= 10
        multiplier += 1

    first, second = divmod(value, 10)
    if first > 9 or not 0 <= multiplier <= 9:
        raise ValueError(f"resistance out of colour-code range (multiplier {multiplier})")
    return COLORS[first], COLORS[second], COLORS[multiplier]


def adc_to_voltage(mean: float, resolution: int = ADC_RESOLUTION, vref: float = ADC_VREF) -> float:
    """Convert an averaged ADC reading to volts."""
    return (mean / resolution) * vref


def unknown_resistance(
    voltage: float, known_resistance: float = KNOWN_RESISTANCE, vref: float = ADC_VREF
) -> float:
    """Resistance of the lower divider leg given the voltage across it.

    A voltage equal to the reference (open circuit) gives infinity.
    """
    headroom = vref - voltage
    if headroom == 0:
        return math.inf
    return known_resistance * voltage / headroom