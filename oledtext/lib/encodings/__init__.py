import codecs
import logging
import re

from oledtext.lib.decoder import Utf8AsciiDecoder

logger = logging.getLogger("OLEDTEXT").getChild(__name__)

CODEC_NAME = "oled-ascii"

codec_cache = {}

_registered = False


def oled_codec_search(name: str):
    name = name.lower()
    if re.match("^oled[-_]?ascii$", name):
        mod = codec_cache.get(CODEC_NAME)
        if mod is not None:
            return mod
        mod = codec_cache[CODEC_NAME] = getregentry()
        logger.debug(f"Loaded {CODEC_NAME} encoding")
        return mod


def _encode(input: str) -> bytes:
    return Utf8AsciiDecoder().feed(input.encode("utf-8"))


def _decode(input: bytes) -> str:
    return Utf8AsciiDecoder().feed(bytes(input)).decode("latin-1")


def getregentry():
    # Unmappable input is dropped or folded, never an error, so "errors" is
    # accepted for codec compatibility only.
    class Codec(codecs.Codec):
        def encode(self, input, errors="strict"):
            return _encode(input), len(input)

        def decode(self, input, errors="strict"):
            return _decode(input), len(input)

    class IncrementalEncoder(codecs.IncrementalEncoder):
        def __init__(self, errors="strict"):
            super().__init__(errors)
            self.decoder = Utf8AsciiDecoder()

        def encode(self, input, final=False):
            return self.decoder.feed(input.encode("utf-8"))

        def reset(self):
            self.decoder.reset()

        def getstate(self):
            return self.decoder.lead

        def setstate(self, state):
            self.decoder.reset()
            if state:
                self.decoder.decode_byte(state)

    class IncrementalDecoder(codecs.IncrementalDecoder):
        def __init__(self, errors="strict"):
            super().__init__(errors)
            self.decoder = Utf8AsciiDecoder()

        def decode(self, input, final=False):
            return self.decoder.feed(input).decode("latin-1")

        def reset(self):
            self.decoder.reset()

        def getstate(self):
            return b"", self.decoder.lead

        def setstate(self, state):
            self.decoder.reset()
            if state[1]:
                self.decoder.decode_byte(state[1])

    class StreamWriter(Codec, codecs.StreamWriter):
        pass

    class StreamReader(Codec, codecs.StreamReader):
        def __init__(self, stream, errors="strict"):
            super().__init__(stream, errors)
            self.decoder = Utf8AsciiDecoder()

        def decode(self, input, errors="strict"):
            return self.decoder.feed(input).decode("latin-1"), len(input)

        def reset(self):
            super().reset()
            self.decoder.reset()

    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def register_encodings():
    global _registered

    if not _registered:
        codecs.register(oled_codec_search)
        _registered = True
