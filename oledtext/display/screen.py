# -*- coding: utf-8 -*-

import logging
import typing

from oledtext.config import config as cfg
from oledtext.display.canvas import FONT_ICONS, FONT_TEXT, Canvas
from oledtext.exceptions import DisplayNotReady
from oledtext.lib.buffers import fit_to_buffer, read_buffer
from oledtext.lib.decoder import Utf8AsciiDecoder

logger = logging.getLogger("OLEDTEXT").getChild(__name__)

ICON_ARTIST = 0xE5
ICON_SONG = 0xE1
ICON_STATION = 0xF8
ICON_CONTENT_TYPE = 0xF9
ICON_WAITING = 0xCD

TEXT_INDENT = 9  # icon cell plus one pixel

ROW_STATION = 18
ROW_CONTENT_TYPE = 27
ROW_WAITING = 36


class Screen:
    """Status screen of a network radio: now playing, station, stream type.

    Text goes through a fixed size buffer and the UTF-8 decoder before being
    drawn, so anything longer than one display line is cut.
    """

    def __init__(self, canvas: Canvas, decoder: typing.Optional[Utf8AsciiDecoder] = None):
        self.canvas = canvas
        self.decoder = decoder or Utf8AsciiDecoder()

        self.width = cfg.DISPLAY_WIDTH
        self.height = cfg.DISPLAY_HEIGHT
        self.char_width = cfg.CHAR_WIDTH
        self.char_height = cfg.CHAR_HEIGHT

        self.ready = False
        self.waiting = False

    @property
    def buffer_capacity(self) -> int:
        return self.width // self.char_width + 1

    def setup(self):
        self.canvas.begin()
        self.canvas.set_font(FONT_TEXT)
        self.ready = True
        logger.debug("Display ready: %dx%d, %d chars per line", self.width, self.height, self.buffer_capacity - 1)

    def _check_ready(self):
        if not self.ready:
            raise DisplayNotReady("Display used before setup()")

    def _row_height(self) -> int:
        self._check_ready()
        return self.char_height + 1 - self.canvas.get_descent()

    def prepare_text(self, text: typing.Union[str, bytes]) -> bytes:
        if isinstance(text, str):
            text = text.encode("utf-8")

        buf = fit_to_buffer(text, self.buffer_capacity)
        self.decoder.decode_in_place(buf)
        return read_buffer(buf)

    def display_text(self, text: typing.Union[str, bytes], x: int, y: int):
        self._check_ready()
        self.canvas.set_draw_color(1)
        self.canvas.draw_str(x, y + self.char_height, self.prepare_text(text))

    def clear_area(self, x: int, y: int, w: int, h: int):
        self._check_ready()
        self.canvas.set_draw_color(0)
        self.canvas.draw_box(x, y, w, h)

    def display_glyph(self, x: int, y: int, glyph: int):
        self._check_ready()
        self.canvas.set_draw_color(1)
        self.canvas.set_font(FONT_ICONS)
        self.canvas.draw_glyph(x, y + self.canvas.get_ascent(), glyph)
        self.canvas.set_font(FONT_TEXT)

    def show_now_playing_info(self, artist, song):
        self._check_ready()
        self.clear_area(0, 0, self.width, self.char_height * 2 + 1 - self.canvas.get_descent())
        self.display_glyph(0, 0, ICON_ARTIST)
        self.display_glyph(0, self.char_height + 1, ICON_SONG)
        self.display_text(artist, TEXT_INDENT, 0)
        self.display_text(song, TEXT_INDENT, self.char_height + 1)
        self.canvas.send_buffer()

    def show_station_name(self, name):
        self.clear_area(0, ROW_STATION, self.width, self._row_height())
        self.display_glyph(0, ROW_STATION, ICON_STATION)
        self.display_text(name, TEXT_INDENT, ROW_STATION)
        self.canvas.send_buffer()

    def show_content_type(self, content_type):
        self.clear_area(0, ROW_CONTENT_TYPE, self.width, self._row_height())
        self.display_glyph(0, ROW_CONTENT_TYPE, ICON_CONTENT_TYPE)
        self.display_text(content_type, TEXT_INDENT, ROW_CONTENT_TYPE)
        self.canvas.send_buffer()

    def show_waiting_data_icon(self):
        if self.waiting:
            return
        self._check_ready()
        self.waiting = True
        self.clear_area(0, ROW_WAITING, self.width, self._row_height())
        self.display_glyph(0, ROW_WAITING, ICON_WAITING)
        self.canvas.send_buffer()

    def hide_waiting_data_icon(self):
        if not self.waiting:
            return
        self.waiting = False
        self.clear_area(0, ROW_WAITING, self.width, self._row_height())
        self.canvas.send_buffer()

    def display_debug(self, text):
        self._check_ready()
        descent = self.canvas.get_descent()
        y = self.height - self.char_height + descent
        self.clear_area(0, y, self.width, self.char_height - descent)
        self.display_text(text, 0, y)
        self.canvas.send_buffer()
