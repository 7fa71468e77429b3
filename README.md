# ohmmeter

Tools for a voltage-divider ohmmeter. An unknown resistor sits in series
with a known one. The package averages ADC samples and works out the unknown
resistance from them. It then picks the nearest standard E24 value and names
its three colour bands. The result can be drawn on a model of a 128x64
SSD1306 OLED framebuffer.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Resistor helpers

```python
from ohmmeter.resistor import nearest_e24, color_bands, adc_to_voltage, unknown_resistance

voltage = adc_to_voltage(2048, 4095, 3.3)
rx = unknown_resistance(voltage, 67000, 3.3)
value = nearest_e24(rx)
print(value, color_bands(value))
```

- `adc_to_voltage(mean, resolution, vref)` converts an averaged ADC count
  to volts. The defaults are 4095 and 3.3 V.
- `unknown_resistance(voltage, known_resistance, vref)` gives the resistance
  of the divider leg the voltage is measured across. The default known
  resistance is 67000 Ω. A voltage equal to `vref` gives `math.inf`.
- `nearest_e24(resistance)` returns the closest E24 value from 10 Ω to
  91 MΩ. It returns 0 when no candidate lies within 1e9 of the input, for
  example for an infinite resistance.
- `color_bands(resistance)` returns the first digit, second digit and
  multiplier colour names as a tuple. The names are in Portuguese, as on the
  instrument's display: "Preto", "Marrom", "Vermelho" and so on. It raises
  `ValueError` for zero, negative or non-finite values. It also raises for
  values that need a multiplier outside 0 to 9, which means anything below
  10 Ω or from about 10 GΩ up.

## Display model

`ohmmeter.ssd1306.SSD1306` keeps the framebuffer in the controller's
vertical-addressing page layout. It takes a `write` callable, which receives
each I²C transfer as an address and a block of bytes. You can pass a real
bus writer, or a list-appending function when testing.

```python
from ohmmeter.ssd1306 import SSD1306

sent = []
display = SSD1306(lambda address, data: sent.append((address, bytes(data))), 128, 64, 0x3C, False)
display.config()
display.draw_string("Ohms", 70, 41)
display.send_data()
print(display.to_text())
```

- `config()` sends the power-up command sequence and switches the display on.
- `command(byte)` sends one command byte.
- `send_data()` sets the column and page range, then sends the whole buffer.
- The opcodes are in the `Command` enum.

The drawing methods are `pixel`, `fill`, `rect`, `line` (Bresenham, both
ends included), `hline`, `vline`, `draw_char` and `draw_string`.

- `draw_string` wraps to the next 8-pixel row near the right edge and stops
  near the bottom edge.
- Characters outside printable ASCII are drawn as spaces.
- `get_pixel` reads the buffer back.
- `to_text` renders the buffer as rows of `#` (lit) and `.` (dark).

`ohmmeter.font.glyph(char)` returns the eight column bytes of a character in
the built-in 8x8 font.

## Measuring

`ohmmeter.meter.measure(samples, known_resistance, vref, resolution)` turns
a sequence of raw ADC samples into a `Reading`. It raises `ValueError` when
no samples are given.

A `Reading` has these fields:

- `mean`
- `voltage`
- `resistance`
- `commercial`, the nearest E24 value
- `bands`
- `mean_text` and `resistance_text`, the text shown on screen

When the commercial value has no colour code, every band reads "Erro".

`draw_reading(display, reading)` lays the reading out on a display's
framebuffer without sending it. The layout is:

- a bordered screen with the three bands at the top
- "ADC" and "Ohms" columns below, holding the mean count and the resistance

## Command line

The `ohmmeter` command takes ADC counts as arguments. With no arguments, it
reads whitespace-separated counts from standard input. It prints the nearest
E24 value and the three band names.

```
ohmmeter 2048 2050 2047
ohmmeter --display < samples.txt
ohmmeter --help
```

The options are:

- `--known` sets the known resistance in ohms.
- `--vref` sets the reference voltage.
- `--resolution` sets the ADC full-scale count.
- `--display` also prints the rendered screen as text.

If the input is invalid or empty, the command prints an error and exits
with status 2.

## What it does not do

The package does not read an ADC or drive an I²C bus by itself. You supply
the samples, and for a real display, the `write` function that sends bytes
to it.