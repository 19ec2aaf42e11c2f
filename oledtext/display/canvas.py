# -*- coding: utf-8 -*-

import logging
import typing
from abc import ABC, abstractmethod
from collections import namedtuple

logger = logging.getLogger("OLEDTEXT").getChild(__name__)

FONT_TEXT = "5x8"
FONT_ICONS = "open_iconic_all_1x"

FontMetrics = namedtuple("FontMetrics", "ascent descent")

FONT_METRICS = {
    FONT_TEXT: FontMetrics(ascent=6, descent=-1),
    FONT_ICONS: FontMetrics(ascent=8, descent=0),
}

DrawCall = namedtuple("DrawCall", "name args")


class Canvas(ABC):
    """Drawing primitives of a monochrome frame buffer display.

    Text passed to draw_str is already single byte encoded, one glyph per byte.
    """

    @abstractmethod
    def begin(self):
        pass

    @abstractmethod
    def set_font(self, font: str):
        pass

    @abstractmethod
    def set_draw_color(self, color: int):
        pass

    @abstractmethod
    def draw_box(self, x: int, y: int, w: int, h: int):
        pass

    @abstractmethod
    def draw_str(self, x: int, y: int, text: bytes):
        pass

    @abstractmethod
    def draw_glyph(self, x: int, y: int, glyph: int):
        pass

    @abstractmethod
    def get_ascent(self) -> int:
        pass

    @abstractmethod
    def get_descent(self) -> int:
        pass

    @abstractmethod
    def send_buffer(self):
        pass


class RecordingCanvas(Canvas):
    """Canvas keeping every call in memory, for headless use and tests."""

    def __init__(self):
        self.calls = []  # type: typing.List[DrawCall]
        self.font = None
        self.draw_color = 1
        self.frames = 0

    def _record(self, name, *args):
        self.calls.append(DrawCall(name, args))

    def begin(self):
        self._record("begin")

    def set_font(self, font: str):
        if font not in FONT_METRICS:
            raise KeyError("Unknown font {}".format(font))
        self.font = font
        self._record("set_font", font)

    def set_draw_color(self, color: int):
        self.draw_color = color
        self._record("set_draw_color", color)

    def draw_box(self, x: int, y: int, w: int, h: int):
        self._record("draw_box", x, y, w, h)

    def draw_str(self, x: int, y: int, text: bytes):
        self._record("draw_str", x, y, bytes(text))

    def draw_glyph(self, x: int, y: int, glyph: int):
        self._record("draw_glyph", x, y, glyph)

    def get_ascent(self) -> int:
        return FONT_METRICS[self.font].ascent

    def get_descent(self) -> int:
        return FONT_METRICS[self.font].descent

    def send_buffer(self):
        self.frames += 1
        logger.debug("Frame %d sent", self.frames)
        self._record("send_buffer")

    def strings(self) -> typing.List[bytes]:
        return [c.args[2] for c in self.calls if c.name == "draw_str"]

    def clear(self):
        self.calls.clear()
