import logging

from oledtext.config import config as cfg

logger = logging.getLogger("OLEDTEXT").getChild(__name__)


class DebugSink:
    """printf style debug lines of bounded length.

    The formatted line is returned whether or not it was emitted, so callers
    can show the same text on screen.
    """

    def __init__(self, enabled: bool = False, buffer_size: int = 100, log=logger):
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1, got {}".format(buffer_size))

        self.enabled = enabled
        self.buffer_size = buffer_size
        self.log = log

    def format(self, format: str, *args) -> str:
        try:
            text = format % args
        except (TypeError, ValueError, KeyError):
            logger.warning("Bad debug format %r for arguments %r", format, args)
            text = format

        # One slot is kept for the terminator
        return text[: self.buffer_size - 1]

    def __call__(self, format: str, *args) -> str:
        text = self.format(format, *args)
        if self.enabled:
            self.log.debug("D: %s", text)
        return text


def dbgprint(format: str, *args) -> str:
    return DebugSink(cfg.DEBUG_ENABLE, cfg.DEBUG_BUFFER_SIZE)(format, *args)
