import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from oledtext import VERSION
from oledtext.config import config as cfg
from oledtext.lib.debug import dbgprint
from oledtext.lib.encodings import CODEC_NAME, register_encodings
from oledtext.lib.utils import hexdump

logger = logging.getLogger("OLEDTEXT")


def get_format(level):
    if level <= logging.DEBUG:
        return (
            "%(asctime)s - %(levelname)-8s - %(threadName)-10s - %(name)s - %(message)s"
        )
    else:
        return "%(asctime)s - %(levelname)-8s - %(name)s - %(message)s"


def configure_logger(logger):
    logger_level = cfg.LOGGING_LEVEL_CONSOLE

    if cfg.LOGGING_FILE:
        logfile_handler = RotatingFileHandler(
            cfg.LOGGING_FILE,
            mode="a",
            maxBytes=cfg.LOGGING_FILE_MAX_SIZE * 1024 * 1024,
            backupCount=cfg.LOGGING_FILE_MAX_FILES,
            encoding=None,
            delay=0,
        )

        logfile_handler.setLevel(cfg.LOGGING_LEVEL_FILE)
        logfile_handler.setFormatter(logging.Formatter(get_format(logger_level)))
        logger.addHandler(logfile_handler)
        logger_level = min(logger_level, cfg.LOGGING_LEVEL_FILE)

    logconsole_handler = logging.StreamHandler()
    logconsole_handler.setLevel(cfg.LOGGING_LEVEL_CONSOLE)
    logconsole_handler.setFormatter(logging.Formatter(get_format(logger_level)))
    logger.addHandler(logconsole_handler)

    logger.setLevel(logger_level)


def load_config(args):
    if "config" in args and args.config is not None:
        cfg.load(os.path.abspath(args.config))
    elif os.environ.get("OLEDTEXT_CONFIG_FILE"):
        cfg.load()
    else:
        cfg.load_environment()

    if getattr(args, "debug", False):
        cfg.DEBUG_ENABLE = True
        cfg.LOGGING_LEVEL_CONSOLE = logging.DEBUG


def convert_lines(input, output, as_hex=False):
    count = 0
    for count, line in enumerate(input, start=1):
        raw = line.rstrip(b"\r\n")
        text = raw.decode(CODEC_NAME)
        converted = text.encode("latin-1")

        dbgprint("Line %d: %d bytes in, %d bytes out", count, len(raw), len(converted))

        if as_hex:
            output.write(hexdump(converted).encode("ascii") + b"\n")
        else:
            output.write(converted + b"\n")

    return count


def main(args):
    load_config(args)

    configure_logger(logger)

    logger.info(f"Starting oledtext {VERSION}")
    if cfg.CONFIG_LOADED:
        logger.info(f"Config loaded from {cfg.CONFIG_FILE_LOCATION}")

    # Registering additional encodings
    register_encodings()

    if args.file is not None:
        with args.file as source:
            count = convert_lines(source, sys.stdout.buffer, as_hex=args.hex)
    else:
        count = convert_lines(sys.stdin.buffer, sys.stdout.buffer, as_hex=args.hex)
    sys.stdout.buffer.flush()

    logger.info(f"Converted {count} line(s)")
