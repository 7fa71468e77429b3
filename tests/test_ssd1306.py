import pytest

from ohmmeter.font import glyph
from ohmmeter.ssd1306 import HEIGHT, WIDTH, Command, SSD1306


@pytest.fixture
def writes():
    return []


@pytest.fixture
def display(writes):
    return SSD1306(lambda address, data: writes.append((address, data)))


def lit(display):
    return {
        (x, y)
        for y in range(display.height)
        for x in range(display.width)
        if display.get_pixel(x, y)
    }


def test_new_buffer_is_blank_with_data_prefix(display):
    assert len(display.buffer) == WIDTH * HEIGHT // 8 + 1
    assert display.buffer[0] == 0x40
    assert not lit(display)


def test_command_writes_prefixed_byte():
    sent = []
    device = SSD1306(lambda address, data: sent.append((address, bytes(data))))
    device.command(Command.SET_DISP | 0x01)
    assert sent == [(0x3C, bytes([0x80, 0xAF]))]
    assert device.buffer[0] == 0x40
    assert len(device.buffer) == WIDTH * HEIGHT // 8 + 1
    assert not lit(device)


def test_config_sequence_starts_off_and_ends_on():
    sent_frames = []
    device = SSD1306(lambda address, data: sent_frames.append((address, bytes(data))))
    device.config()
    assert sent_frames[0] == (0x3C, bytes([0x80, Command.SET_DISP]))
    assert sent_frames[-1] == (0x3C, bytes([0x80, Command.SET_DISP | 0x01]))
    sent = [data[1] for _, data in sent_frames]
    mux = sent.index(Command.SET_MUX_RATIO)
    assert sent[mux + 1] == HEIGHT - 1
    assert all(data[0] == 0x80 for _, data in sent_frames)
    assert device.buffer[0] == 0x40
    assert not lit(device)


def test_send_data_addresses_whole_screen_then_writes_buffer(display, writes):
    display.pixel(0, 0, True)
    display.send_data()
    commands = [data[1] for _, data in writes[:6]]
    assert commands == [Command.SET_COL_ADDR, 0, WIDTH - 1, Command.SET_PAGE_ADDR, 0, HEIGHT // 8 - 1]
    address, frame = writes[6]
    assert address == 0x3C
    assert frame[0] == 0x40
    assert frame[1] == 0x01
    assert len(frame) == len(display.buffer)


def test_pixel_round_trip(display):
    display.pixel(17, 42, True)
    assert display.get_pixel(17, 42)
    assert lit(display) == {(17, 42)}
    display.pixel(17, 42, False)
    assert not display.get_pixel(17, 42)


def test_fill_and_clear(display):
    display.fill(True)
    assert set(display.to_text()) == {"#", "\n"}
    display.fill(False)
    assert set(display.to_text()) == {".", "\n"}


def test_to_text_shape(display):
    rows = display.to_text().split("\n")
    assert len(rows) == HEIGHT
    assert all(len(row) == WIDTH for row in rows)


def test_rect_outline(display):
    display.rect(3, 3, 10, 6, True, False)
    pixels = lit(display)
    assert {(3, 3), (12, 3), (3, 8), (12, 8)} <= pixels
    assert (5, 5) not in pixels
    assert all(x in (3, 12) or y in (3, 8) for x, y in pixels)


def test_rect_filled(display):
    display.rect(3, 3, 10, 6, True, True)
    assert lit(display) == {(x, y) for x in range(3, 13) for y in range(3, 9)}


def test_line_diagonal(display):
    display.line(0, 0, 5, 5, True)
    assert lit(display) == {(i, i) for i in range(6)}


def test_line_reversed_matches_horizontal(display):
    display.line(20, 37, 3, 37, True)
    assert lit(display) == {(x, 37) for x in range(3, 21)}


def test_hline_and_vline_inclusive(display):
    display.hline(2, 6, 10, True)
    display.vline(50, 4, 8, True)
    expected = {(x, 10) for x in range(2, 7)} | {(50, y) for y in range(4, 9)}
    assert lit(display) == expected


def test_draw_char_matches_glyph(display):
    display.draw_char("A", 10, 20)
    columns = glyph("A")
    expected = {
        (10 + i, 20 + j) for i in range(8) for j in range(8) if columns[i] & (1 << j)
    }
    assert lit(display) == expected


def test_draw_char_clears_background(display):
    display.fill(True)
    display.draw_char(" ", 0, 0)
    assert not any(display.get_pixel(x, y) for x in range(8) for y in range(8))


def test_draw_string_wraps_to_next_row():
    writes = []
    first = SSD1306(lambda a, d: writes.append(d))
    first.draw_string("HH", 112, 8)
    second = SSD1306(lambda a, d: writes.append(d))
    second.draw_char("H", 112, 8)
    second.draw_char("H", 0, 16)
    assert first.buffer == second.buffer


def test_draw_string_stops_at_bottom(display):
    display.draw_string("HHHH", 0, 56)
    pixels = lit(display)
    assert pixels
    assert all(x < 8 for x, _ in pixels)