"""Resistance measurement through a voltage divider, with E24 matching and colour bands."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .ssd1306 import SSD1306

KNOWN_RESISTANCE = 10000
RESOLUTION = 4095.0
SAMPLES_PER_READING = 500

MIN_RESISTANCE = 510.0
MAX_RESISTANCE = 100000.0
_OVERRANGE_LIMIT = 1000 * 100 + 1000

E24 = (10, 11, 12, 13, 15, 16, 18, 20, 22, 24, 27, 30,
       33, 36, 39, 43, 47, 51, 56, 62, 68, 75, 82, 91)
_DECADES = range(2, 6)

_COLOURS = ("Prt", "Mrm", "Vrm", "Lrj", "Amr", "Vrd", "Azl", "Vio", "Cin", "Bra")
_MULTIPLIERS = _COLOURS[:7]
_TOLERANCE = "Drd"  # 5 %, as for the E24 series


@dataclass(frozen=True)
class ColorBands:
    """The four colour bands of a resistor, as short colour names."""

    first: str
    second: str
    multiplier: str
    tolerance: str


@dataclass(frozen=True)
class Reading:
    """One measurement: the computed resistance, its E24 value and its bands."""

    real: float
    commercial: float
    bands: ColorBands

    @property
    def real_text(self) -> str:
        return f"{self.real:.0f}"

    @property
    def commercial_text(self) -> str:
        return format_commercial(self.commercial)


def resistance_from_adc(mean: float, known: float = KNOWN_RESISTANCE,
                        resolution: float = RESOLUTION) -> float:
    """Return the unknown resistance for a mean ADC reading, or 0.0 when out of range."""
    if mean >= resolution:
        return 0.0
    r_x = known * mean / (resolution - mean)
    if r_x > _OVERRANGE_LIMIT or r_x < MIN_RESISTANCE:
        return 0.0
    return r_x


def _candidates() -> Iterator[float]:
    for exponent in _DECADES:
        factor = 10.0 ** exponent
        for base in E24:
            value = base * factor
            if MIN_RESISTANCE <= value <= MAX_RESISTANCE:
                yield value


def commercial_value(r_x: float) -> float:
    """Return the nearest E24 value in range, or 0.0 for a zero resistance."""
    if r_x == 0:
        return 0.0
    return min(_candidates(), key=lambda candidate: abs(r_x - candidate))


def format_commercial(value: float) -> str:
    """Format a resistance, using a 'k' suffix from one kilo-ohm upwards."""
    if value >= 1000.0:
        return f"{value / 1000.0:.1f}k"
    return f"{value:.0f}"


def color_bands(value: float) -> ColorBands:
    """Return the colour bands for a resistance with two significant digits."""
    rounded = int(value + 0.5)
    if rounded < 0:
        raise ValueError(f"resistance must not be negative: {value!r}")
    exponent = 0
    while rounded >= 100:
        rounded //= 10
        exponent += 1
    if exponent >= len(_MULTIPLIERS):
        raise ValueError(f"resistance too large for a colour code: {value!r}")
    first, second = divmod(rounded, 10)
    return ColorBands(_COLOURS[first], _COLOURS[second],
                      _MULTIPLIERS[exponent], _TOLERANCE)


def measure(samples: Iterable[float], known: float = KNOWN_RESISTANCE,
            resolution: float = RESOLUTION) -> Reading:
    """Average ADC samples and turn them into a reading."""
    values = list(samples)
    if not values:
        raise ValueError("at least one ADC sample is required")
    mean = math.fsum(values) / len(values)
    real = resistance_from_adc(mean, known, resolution)
    commercial = commercial_value(real)
    return Reading(real, commercial, color_bands(commercial))


def render(display: SSD1306, reading: Reading) -> None:
    """Draw the measurement screen into the display's frame buffer."""
    display.fill(False)
    display.rect(0, 0, 125, 62, True, False)
    display.draw_string("Ohmimetro", 27, 2)
    display.hline(1, 124, 10, True)
    display.draw_string("Real:", 2, 12)
    display.draw_string(reading.real_text, 43, 12)
    display.draw_string("Comerc:", 2, 22)
    display.draw_string(reading.commercial_text, 58, 22)
    display.draw_string("Cores", 42, 32)
    if reading.commercial != 0:
        bands = reading.bands
        display.draw_string(bands.first, 9, 45)
        display.draw_string(bands.second, 36, 45)
        display.draw_string(bands.multiplier, 63, 45)
        display.draw_string(bands.tolerance, 91, 45)
    else:
        display.rect(45, 9, 100, 15, False, True)


def _frame_text(display: SSD1306) -> str:
    return "\n".join(
        "".join("#" if display.get_pixel(x, y) else "." for x in range(display.width))
        for y in range(display.height)
    )


def _batches(values: Sequence[float], size: int) -> Iterator[Sequence[float]]:
    for start in range(0, len(values), size):
        yield values[start:start + size]


def _read_stream(parser: argparse.ArgumentParser, stream) -> list[float]:
    try:
        return [float(token) for token in stream.read().split()]
    except ValueError as exc:
        parser.error(f"invalid ADC sample: {exc}")
        raise


def main(argv: Sequence[str] | None = None) -> int:
    """Turn ADC samples into resistance readings and print the E24 value of each."""
    parser = argparse.ArgumentParser(
        prog="ohmimetro",
        description="Compute resistances from ADC samples of a voltage divider.",
    )
    parser.add_argument("samples", nargs="*", type=float,
                        help="ADC samples; read from standard input when omitted")
    parser.add_argument("--batch", type=int, default=SAMPLES_PER_READING,
                        help="samples averaged into one reading")
    parser.add_argument("--known", type=float, default=KNOWN_RESISTANCE,
                        help="resistance of the known divider resistor in ohms")
    parser.add_argument("--resolution", type=float, default=RESOLUTION,
                        help="full-scale ADC value")
    parser.add_argument("--show", action="store_true",
                        help="print the display frame for each reading")
    args = parser.parse_args(argv)
    if args.batch < 1:
        parser.error("--batch must be at least 1")

    values = args.samples if args.samples else _read_stream(parser, sys.stdin)
    for batch in _batches(values, args.batch):
        reading = measure(batch, args.known, args.resolution)
        print(f"{reading.commercial:.0f}")
        if args.show:
            display = SSD1306()
            render(display, reading)
            print(_frame_text(display))
    return 0