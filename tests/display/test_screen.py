import pytest

from oledtext.config import config as cfg
from oledtext.display import RecordingCanvas, Screen
from oledtext.display.canvas import FONT_ICONS, FONT_TEXT, DrawCall
from oledtext.display.screen import (
    ICON_ARTIST,
    ICON_CONTENT_TYPE,
    ICON_SONG,
    ICON_STATION,
    ICON_WAITING,
)
from oledtext.exceptions import DisplayNotReady
from oledtext.lib.decoder import Utf8AsciiDecoder


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def screen(canvas, mocker):
    mocker.patch.multiple(
        cfg, DISPLAY_WIDTH=128, DISPLAY_HEIGHT=64, CHAR_WIDTH=5, CHAR_HEIGHT=8
    )
    s = Screen(canvas)
    s.setup()
    canvas.clear()
    return s


def test_setup(canvas):
    s = Screen(canvas)
    s.setup()

    assert s.ready
    assert canvas.calls == [DrawCall("begin", ()), DrawCall("set_font", (FONT_TEXT,))]


def test_buffer_capacity(screen):
    assert screen.buffer_capacity == 26


def test_not_ready(canvas):
    s = Screen(canvas)

    with pytest.raises(DisplayNotReady):
        s.display_text("Hello", 0, 0)

    with pytest.raises(DisplayNotReady):
        s.show_station_name("Radio")

    with pytest.raises(DisplayNotReady):
        s.show_waiting_data_icon()

    assert not s.waiting
    assert canvas.calls == []


def test_display_text(screen, canvas):
    screen.display_text("Café del Mar", 9, 18)

    assert canvas.calls == [
        DrawCall("set_draw_color", (1,)),
        DrawCall("draw_str", (9, 26, b"Cafe del Mar")),
    ]


def test_display_text_bytes(screen, canvas):
    screen.display_text(b"\xe2\x82\xac 5", 0, 0)

    assert canvas.strings() == [b"E 5"]


def test_display_text_truncates_before_decoding(screen, canvas):
    # 30 ASCII bytes, only 25 fit in the line buffer
    screen.display_text("x" * 30, 0, 0)

    assert canvas.strings() == [b"x" * 25]


def test_display_text_multibyte_cut_at_buffer_end(screen, canvas):
    # 24 bytes, then "é" whose trailing byte falls outside the buffer
    screen.display_text("y" * 24 + "é", 0, 0)

    assert canvas.strings() == [b"y" * 24]


def test_display_text_folded_text_is_shorter(screen, canvas):
    # Every "é" takes two buffer bytes, so only 12 of them fit
    screen.display_text("é" * 20, 0, 0)

    assert canvas.strings() == [b"e" * 12]


def test_clear_area(screen, canvas):
    screen.clear_area(1, 2, 3, 4)

    assert canvas.calls == [
        DrawCall("set_draw_color", (0,)),
        DrawCall("draw_box", (1, 2, 3, 4)),
    ]


def test_display_glyph(screen, canvas):
    screen.display_glyph(0, 18, ICON_STATION)

    assert canvas.calls == [
        DrawCall("set_draw_color", (1,)),
        DrawCall("set_font", (FONT_ICONS,)),
        DrawCall("draw_glyph", (0, 26, ICON_STATION)),
        DrawCall("set_font", (FONT_TEXT,)),
    ]
    assert canvas.font == FONT_TEXT


def test_show_now_playing_info(screen, canvas):
    screen.show_now_playing_info("Motörhead", "Ace of Spades")

    assert DrawCall("draw_box", (0, 0, 128, 18)) in canvas.calls
    glyphs = [c.args for c in canvas.calls if c.name == "draw_glyph"]
    assert glyphs == [(0, 8, ICON_ARTIST), (0, 17, ICON_SONG)]
    draws = [c.args for c in canvas.calls if c.name == "draw_str"]
    assert draws == [(9, 8, b"Motorhead"), (9, 17, b"Ace of Spades")]
    assert canvas.calls[-1].name == "send_buffer"
    assert canvas.frames == 1


def test_show_station_name(screen, canvas):
    screen.show_station_name("Rádio Comercial")

    assert canvas.calls[1] == DrawCall("draw_box", (0, 18, 128, 10))
    assert (0, 26, ICON_STATION) in [c.args for c in canvas.calls if c.name == "draw_glyph"]
    assert canvas.strings() == [b"Radio Comercial"]
    assert canvas.frames == 1


def test_show_content_type(screen, canvas):
    screen.show_content_type("audio/mpeg")

    assert canvas.calls[1] == DrawCall("draw_box", (0, 27, 128, 10))
    assert (0, 35, ICON_CONTENT_TYPE) in [c.args for c in canvas.calls if c.name == "draw_glyph"]
    assert canvas.strings() == [b"audio/mpeg"]


def test_waiting_icon_is_idempotent(screen, canvas):
    screen.show_waiting_data_icon()
    screen.show_waiting_data_icon()

    assert screen.waiting
    assert canvas.frames == 1
    assert [c.args for c in canvas.calls if c.name == "draw_glyph"] == [(0, 44, ICON_WAITING)]

    screen.hide_waiting_data_icon()
    screen.hide_waiting_data_icon()

    assert not screen.waiting
    assert canvas.frames == 2
    assert canvas.calls[-2] == DrawCall("draw_box", (0, 36, 128, 10))


def test_hide_waiting_icon_when_not_shown(screen, canvas):
    screen.hide_waiting_data_icon()

    assert canvas.calls == []


def test_display_debug(screen, canvas):
    screen.display_debug("Free heap 4096")

    assert canvas.calls[1] == DrawCall("draw_box", (0, 55, 128, 9))
    assert [c.args for c in canvas.calls if c.name == "draw_str"] == [(0, 63, b"Free heap 4096")]
    assert canvas.frames == 1


def test_screen_keeps_own_decoder_state_clean(screen, canvas):
    # A truncated sequence on one line must not leak into the next one
    screen.display_text(b"abc\xc3", 0, 0)
    screen.display_text(b"\xa9def", 0, 9)

    assert canvas.strings() == [b"abc", b"def"]


def test_custom_geometry(canvas, mocker):
    mocker.patch.multiple(cfg, DISPLAY_WIDTH=84, CHAR_WIDTH=6)
    s = Screen(canvas)

    assert s.buffer_capacity == 15


def test_unknown_font(canvas):
    with pytest.raises(KeyError):
        canvas.set_font("10x20")


def test_explicit_decoder(canvas):
    decoder = Utf8AsciiDecoder()
    s = Screen(canvas, decoder=decoder)

    assert s.decoder is decoder
    assert isinstance(Screen(canvas, decoder=None).decoder, Utf8AsciiDecoder)
