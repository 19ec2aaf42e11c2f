"""UTF-8 to extended ASCII decoder.

Converts UTF-8 encoded text to the single-byte character set of the display
font. One input byte yields at most one output byte: lead bytes are swallowed
and the byte following them is folded to a displayable character, or dropped
when there is nothing to show for it.
"""
import logging
import typing

logger = logging.getLogger("OLEDTEXT").getChild(__name__)

LEAD_TILDE = 0xC2  # U+0080..U+00BF
LEAD_LATIN1 = 0xC3  # U+00C0..U+00FF
LEAD_EURO = 0x82  # middle byte of E2 82 AC
TRAIL_EURO = 0xAC

SUPPRESS = 0

# fmt: off
### Substitution table for bytes following a 0xC3 lead
LATIN1_FOLD = (
    b"A"    # 0x80 -> U+00C0 LATIN CAPITAL LETTER A WITH GRAVE
    b"A"    # 0x81 -> U+00C1 LATIN CAPITAL LETTER A WITH ACUTE
    b"A"    # 0x82 -> U+00C2 LATIN CAPITAL LETTER A WITH CIRCUMFLEX
    b"A"    # 0x83 -> U+00C3 LATIN CAPITAL LETTER A WITH TILDE
    b"A"    # 0x84 -> U+00C4 LATIN CAPITAL LETTER A WITH DIAERESIS
    b"A"    # 0x85 -> U+00C5 LATIN CAPITAL LETTER A WITH RING ABOVE
    b"A"    # 0x86 -> U+00C6 LATIN CAPITAL LETTER AE
    b"C"    # 0x87 -> U+00C7 LATIN CAPITAL LETTER C WITH CEDILLA
    b"E"    # 0x88 -> U+00C8 LATIN CAPITAL LETTER E WITH GRAVE
    b"E"    # 0x89 -> U+00C9 LATIN CAPITAL LETTER E WITH ACUTE
    b"E"    # 0x8A -> U+00CA LATIN CAPITAL LETTER E WITH CIRCUMFLEX
    b"E"    # 0x8B -> U+00CB LATIN CAPITAL LETTER E WITH DIAERESIS
    b"I"    # 0x8C -> U+00CC LATIN CAPITAL LETTER I WITH GRAVE
    b"I"    # 0x8D -> U+00CD LATIN CAPITAL LETTER I WITH ACUTE
    b"I"    # 0x8E -> U+00CE LATIN CAPITAL LETTER I WITH CIRCUMFLEX
    b"I"    # 0x8F -> U+00CF LATIN CAPITAL LETTER I WITH DIAERESIS
    b"D"    # 0x90 -> U+00D0 LATIN CAPITAL LETTER ETH
    b"N"    # 0x91 -> U+00D1 LATIN CAPITAL LETTER N WITH TILDE
    b"O"    # 0x92 -> U+00D2 LATIN CAPITAL LETTER O WITH GRAVE
    b"O"    # 0x93 -> U+00D3 LATIN CAPITAL LETTER O WITH ACUTE
    b"O"    # 0x94 -> U+00D4 LATIN CAPITAL LETTER O WITH CIRCUMFLEX
    b"O"    # 0x95 -> U+00D5 LATIN CAPITAL LETTER O WITH TILDE
    b"O"    # 0x96 -> U+00D6 LATIN CAPITAL LETTER O WITH DIAERESIS
    b"#"    # 0x97 -> U+00D7 MULTIPLICATION SIGN
    b"#"    # 0x98 -> U+00D8 LATIN CAPITAL LETTER O WITH STROKE
    b"U"    # 0x99 -> U+00D9 LATIN CAPITAL LETTER U WITH GRAVE
    b"U"    # 0x9A -> U+00DA LATIN CAPITAL LETTER U WITH ACUTE
    b"U"    # 0x9B -> U+00DB LATIN CAPITAL LETTER U WITH CIRCUMFLEX
    b"U"    # 0x9C -> U+00DC LATIN CAPITAL LETTER U WITH DIAERESIS
    b"#"    # 0x9D -> U+00DD LATIN CAPITAL LETTER Y WITH ACUTE
    b"#"    # 0x9E -> U+00DE LATIN CAPITAL LETTER THORN
    b"#"    # 0x9F -> U+00DF LATIN SMALL LETTER SHARP S
    b"a"    # 0xA0 -> U+00E0 LATIN SMALL LETTER A WITH GRAVE
    b"a"    # 0xA1 -> U+00E1 LATIN SMALL LETTER A WITH ACUTE
    b"a"    # 0xA2 -> U+00E2 LATIN SMALL LETTER A WITH CIRCUMFLEX
    b"a"    # 0xA3 -> U+00E3 LATIN SMALL LETTER A WITH TILDE
    b"a"    # 0xA4 -> U+00E4 LATIN SMALL LETTER A WITH DIAERESIS
    b"a"    # 0xA5 -> U+00E5 LATIN SMALL LETTER A WITH RING ABOVE
    b"a"    # 0xA6 -> U+00E6 LATIN SMALL LETTER AE
    b"c"    # 0xA7 -> U+00E7 LATIN SMALL LETTER C WITH CEDILLA
    b"e"    # 0xA8 -> U+00E8 LATIN SMALL LETTER E WITH GRAVE
    b"e"    # 0xA9 -> U+00E9 LATIN SMALL LETTER E WITH ACUTE
    b"e"    # 0xAA -> U+00EA LATIN SMALL LETTER E WITH CIRCUMFLEX
    b"e"    # 0xAB -> U+00EB LATIN SMALL LETTER E WITH DIAERESIS
    b"i"    # 0xAC -> U+00EC LATIN SMALL LETTER I WITH GRAVE
    b"i"    # 0xAD -> U+00ED LATIN SMALL LETTER I WITH ACUTE
    b"i"    # 0xAE -> U+00EE LATIN SMALL LETTER I WITH CIRCUMFLEX
    b"i"    # 0xAF -> U+00EF LATIN SMALL LETTER I WITH DIAERESIS
    b"d"    # 0xB0 -> U+00F0 LATIN SMALL LETTER ETH
    b"n"    # 0xB1 -> U+00F1 LATIN SMALL LETTER N WITH TILDE
    b"o"    # 0xB2 -> U+00F2 LATIN SMALL LETTER O WITH GRAVE
    b"o"    # 0xB3 -> U+00F3 LATIN SMALL LETTER O WITH ACUTE
    b"o"    # 0xB4 -> U+00F4 LATIN SMALL LETTER O WITH CIRCUMFLEX
    b"o"    # 0xB5 -> U+00F5 LATIN SMALL LETTER O WITH TILDE
    b"o"    # 0xB6 -> U+00F6 LATIN SMALL LETTER O WITH DIAERESIS
    b"#"    # 0xB7 -> U+00F7 DIVISION SIGN
    b"#"    # 0xB8 -> U+00F8 LATIN SMALL LETTER O WITH STROKE
    b"u"    # 0xB9 -> U+00F9 LATIN SMALL LETTER U WITH GRAVE
    b"u"    # 0xBA -> U+00FA LATIN SMALL LETTER U WITH ACUTE
    b"u"    # 0xBB -> U+00FB LATIN SMALL LETTER U WITH CIRCUMFLEX
    b"u"    # 0xBC -> U+00FC LATIN SMALL LETTER U WITH DIAERESIS
    b"y"    # 0xBD -> U+00FD LATIN SMALL LETTER Y WITH ACUTE
    b"y"    # 0xBE -> U+00FE LATIN SMALL LETTER THORN
    b"y"    # 0xBF -> U+00FF LATIN SMALL LETTER Y WITH DIAERESIS
    # 0xC0..0xFF never follow a lead byte in valid UTF-8
    + bytes(0x40)
)
# fmt: on

assert len(LATIN1_FOLD) == 128


class Utf8AsciiDecoder:
    """Byte-at-a-time UTF-8 to extended ASCII decoder.

    Remembers the previous non-ASCII byte. One instance per logical stream:
    sharing an instance between interleaved strings corrupts both.
    """

    def __init__(self):
        self._lead = 0

    @property
    def lead(self) -> int:
        return self._lead

    def reset(self) -> None:
        self._lead = 0

    def decode_byte(self, value: int) -> int:
        """Decode one input byte.

        Returns the extended ASCII character, or 0 if nothing is to be
        emitted for this byte.
        """
        if not 0 <= value <= 0xFF:
            raise ValueError("byte must be in range(0, 256), got {}".format(value))

        if value <= 0x7F:
            self._lead = 0
            return value

        result = SUPPRESS
        if self._lead == LEAD_TILDE:
            result = ord("~")
        elif self._lead == LEAD_LATIN1:
            result = LATIN1_FOLD[value - 0x80]
        elif self._lead == LEAD_EURO and value == TRAIL_EURO:
            result = ord("E")

        self._lead = value
        return result

    def decode_in_place(self, buffer: bytearray) -> None:
        """In place conversion of a NUL terminated UTF-8 buffer.

        The output is never longer than the input, so the converted text is
        compacted towards the start of the buffer and re-terminated. Decoding
        starts from a clean state on every call.
        """
        self.reset()

        k = 0
        for value in buffer:
            if value == 0:
                break
            c = self.decode_byte(value)
            if c:
                buffer[k] = c
                k += 1

        if k < len(buffer):
            buffer[k] = 0

    def feed(self, data: typing.Iterable[int]) -> bytes:
        """Decode a chunk of a longer stream, keeping state between chunks.

        NUL bytes are not treated as terminators here, they are dropped like
        any other byte that produces no character.
        """
        result = bytearray()
        for value in data:
            c = self.decode_byte(value)
            if c:
                result.append(c)
        return bytes(result)

    def convert(self, data: typing.Union[bytes, bytearray]) -> bytes:
        """Convert a byte string, returning the decoded bytes without terminator."""
        buffer = bytearray(data)
        end = buffer.find(0)
        if end < 0:
            end = len(buffer)
            buffer.append(0)
        else:
            del buffer[end + 1 :]

        self.decode_in_place(buffer)

        result = bytes(buffer[: buffer.index(0)])
        if len(result) < end:
            logger.debug("Dropped %d byte(s) while converting %r", end - len(result), data)
        return result
