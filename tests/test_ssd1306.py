import pytest

from ohmimetro.font import glyph
from ohmimetro.ssd1306 import HEIGHT, WIDTH, Command, SSD1306


class RecordingBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


@pytest.fixture
def bus():
    return RecordingBus()


@pytest.fixture
def display(bus):
    return SSD1306(WIDTH, HEIGHT, False, 0x3C, bus)


def lit(display):
    return {(x, y) for x in range(display.width) for y in range(display.height)
            if display.get_pixel(x, y)}


def test_new_buffer_is_blank_with_data_prefix(display):
    buf = display.buffer
    assert len(buf) == display.pages * display.width + 1
    assert buf[0] == 0x40
    assert not any(buf[1:])


def test_command_writes_control_byte(display, bus):
    before = bytes(display.buffer)
    display.command(Command.SET_CONTRAST)
    assert bus.writes == [(display.address, bytes([0x80, 0x81]))]
    assert display.address == 0x3C
    assert bytes(display.buffer) == before


def test_config_turns_display_off_then_on(display, bus):
    before = bytes(display.buffer)
    display.config()
    commands = [data[1] for _, data in bus.writes]
    assert commands[0] == 0xAE
    assert commands[-1] == 0xAF
    assert int(Command.SET_CHARGE_PUMP) in commands
    assert all(data[0] == 0x80 for _, data in bus.writes)
    assert all(address == display.address for address, _ in bus.writes)
    assert bytes(display.buffer) == before


def test_send_data_sets_window_then_sends_buffer(display, bus):
    display.pixel(3, 5, True)
    display.send_data()
    commands = [data[1] for _, data in bus.writes[:6]]
    assert commands == [Command.SET_COL_ADDR, 0, WIDTH - 1,
                        Command.SET_PAGE_ADDR, 0, HEIGHT // 8 - 1]
    assert bus.writes[6] == (0x3C, display.buffer)


def test_send_without_bus_raises():
    with pytest.raises(RuntimeError):
        SSD1306().send_data()


def test_pixel_set_and_clear(display):
    display.pixel(10, 20, True)
    assert display.get_pixel(10, 20)
    assert lit(display) == {(10, 20)}
    display.pixel(10, 20, False)
    assert lit(display) == set()


def test_pixel_uses_vertical_addressing(display):
    display.pixel(1, 9, True)
    buf = display.buffer
    assert buf[1 * display.pages + 1 + 1] == 1 << 1


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (WIDTH, 0), (0, HEIGHT)])
def test_pixel_out_of_range(display, x, y):
    with pytest.raises(IndexError):
        display.pixel(x, y, True)


def test_fill_and_clear(display):
    display.fill(True)
    assert all(b == 0xFF for b in display.buffer[1:])
    assert display.buffer[0] == 0x40
    display.fill(False)
    assert not any(display.buffer[1:])


def test_rect_outline(display):
    display.rect(2, 3, 5, 4, True, False)
    expected = set()
    for x in range(3, 8):
        expected |= {(x, 2), (x, 5)}
    for y in range(2, 6):
        expected |= {(3, y), (7, y)}
    assert lit(display) == expected


def test_rect_filled(display):
    display.rect(2, 3, 5, 4, True, True)
    assert lit(display) == {(x, y) for x in range(3, 8) for y in range(2, 6)}


def test_rect_clear_over_filled_area(display):
    display.fill(True)
    display.rect(0, 0, 4, 4, False, True)
    assert not any(display.get_pixel(x, y) for x in range(4) for y in range(4))
    assert display.get_pixel(4, 4)


def test_diagonal_line(display):
    display.line(0, 0, 5, 5, True)
    assert lit(display) == {(i, i) for i in range(6)}


def test_line_is_symmetric(display):
    display.line(2, 7, 9, 1, True)
    forward = lit(display)
    display.fill(False)
    display.line(9, 1, 2, 7, True)
    assert lit(display) == forward
    assert (2, 7) in forward and (9, 1) in forward


def test_hline_and_vline_inclusive(display):
    display.hline(1, 4, 3, True)
    display.vline(10, 5, 7, True)
    assert lit(display) == {(1, 3), (2, 3), (3, 3), (4, 3),
                            (10, 5), (10, 6), (10, 7)}


def test_draw_char_matches_glyph(display):
    display.draw_char("R", 20, 8)
    for i, column in enumerate(glyph("R")):
        for j in range(8):
            assert display.get_pixel(20 + i, 8 + j) == bool(column >> j & 1)


def test_draw_string_places_characters_side_by_side(display):
    display.draw_string("Hi", 0, 0)
    other = SSD1306(bus=RecordingBus())
    other.draw_char("H", 0, 0)
    other.draw_char("i", 8, 0)
    assert display.buffer == other.buffer


def test_draw_string_wraps_to_next_row(display):
    text = "A" * 17
    display.draw_string(text, 0, 0)
    assert display.get_pixel(1, 8 + 1) == bool(glyph("A")[1] >> 1 & 1)
    assert any(display.get_pixel(x, y) for x in range(8) for y in range(8, 16))


def test_draw_string_stops_at_bottom(display):
    display.draw_string("W" * 200, 0, 0)
    assert not any(display.get_pixel(x, y)
                   for x in range(WIDTH) for y in range(56, HEIGHT))