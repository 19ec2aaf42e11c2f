import typing

from construct import Construct, FixedSized, GreedyBytes, NullTerminated

from oledtext.lib.utils import memoized


@memoized
def TextBuffer(capacity: int) -> Construct:
    """NUL terminated text inside a fixed size, zero padded buffer."""
    if capacity < 1:
        raise ValueError("Buffer capacity must be at least 1, got {}".format(capacity))

    return FixedSized(capacity, NullTerminated(GreedyBytes, require=False))


def fit_to_buffer(data: typing.Union[bytes, bytearray], capacity: int) -> bytearray:
    """Copy data into a buffer of exactly capacity bytes, like strncpy.

    Text that does not fit is cut silently and the last byte is always the
    terminator.
    """
    text = bytes(data).split(b"\x00", 1)[0][: capacity - 1]
    return bytearray(TextBuffer(capacity).build(text))


def read_buffer(buffer: typing.Union[bytes, bytearray]) -> bytes:
    return TextBuffer(len(buffer)).parse(bytes(buffer))
