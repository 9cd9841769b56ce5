# ohmimetro

This package holds the logic of a small resistance meter. The resistor of unknown value sits in a voltage divider with a known resistor. The package averages ADC samples taken at the divider and computes the unknown resistance from them. It then finds the nearest E24 commercial value and gives that value's colour bands. It can also draw the meter screen into a 128×64 SSD1306 framebuffer.

## Installation

```
pip install .
```

To run the tests, install with the test extra:

```
pip install .[test]
pytest
```

## Command line

```
ohmimetro [samples ...] [--batch N] [--known OHMS] [--resolution MAX] [--show]
```

The command takes ADC samples as arguments. If none are given, it reads them from standard input, separated by whitespace. It splits the samples into batches of `--batch` samples (500 by default) and averages each batch into one reading. For each reading it prints the commercial value in ohms, with no decimals. It prints `0` when the resistance is out of range.

- `--known`: the resistance of the known divider resistor in ohms (default 10000).
- `--resolution`: the full-scale ADC value (default 4095).
- `--show`: after each value, also print the display frame as 64 lines of `#` (lit) and `.` (dark).

If a sample cannot be read as a number, or `--batch` is below 1, the command exits with a usage error.

```
echo "2048 2048 2048" | ohmimetro --batch 3
10000
```

## Library use

```python
from ohmimetro.meter import (
    resistance_from_adc,
    commercial_value,
    format_commercial,
    color_bands,
    measure,
    render,
)
from ohmimetro.ssd1306 import SSD1306

r_x = resistance_from_adc(2048.0, 10000, 4095)   # about 10005 ohms
nominal = commercial_value(r_x)                  # 10000.0, the nearest E24 value
label = format_commercial(nominal)               # "10.0k"
bands = color_bands(nominal)                     # ColorBands("Mrm", "Prt", "Lrj", "Drd")

reading = measure([2048] * 500, 10000, 4095)     # a Reading holding all of the above
print(reading.real_text, reading.commercial_text)
```

`resistance_from_adc` returns 0.0 in three cases: the computed resistance is below 510 Ω, it is above 101 kΩ, or the mean is at or above full scale. `commercial_value(0)` returns 0.0. Otherwise it returns the nearest value of the E24 series between 510 Ω and 100 kΩ. `format_commercial` adds a `k` suffix with one decimal from 1000 Ω upwards. `color_bands` raises `ValueError` for a negative value, or for one that needs a multiplier band beyond the seventh. `measure` raises `ValueError` when it is given no samples.

Colour band names are Portuguese abbreviations for black to white: Prt, Mrm, Vrm, Lrj, Amr, Vrd, Azl, Vio, Cin, Bra. The tolerance band is always Drd (gold, 5 %).

### Display

`ohmimetro.ssd1306.SSD1306` keeps the display RAM in memory and draws into it:

- `pixel` and `get_pixel`; coordinates outside the display raise `IndexError`;
- `fill`, `rect`, `line`, `hline` and `vline`;
- `draw_char` and `draw_string`, which use the built-in 8×8 font.

The font is available through `ohmimetro.font.glyph`. Characters outside printable ASCII are drawn as a space. The `buffer` property returns the raw data block, including its leading control byte.

To talk to a panel, pass a `bus` object that has a `write(address, data)` method. `config()` sends the power-up sequence. `command()` sends one command byte, and `send_data()` sets the addressing window and pushes the framebuffer. The opcodes are in the `Command` enum. Without a bus, these three methods raise `RuntimeError`.

`render(display, reading)` draws the meter screen. It shows the title, the real value, the commercial value and the colour bands. When the commercial value is 0, it blanks the band area instead.

## What it does not do

The package does not sample an ADC or drive I²C hardware itself. Samples come from the caller or from the command line. Display traffic goes through whatever `bus` object you supply. The command line prints the framebuffer as text, not to a panel.