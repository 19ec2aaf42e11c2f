import logging

from oledtext.config import config as cfg
from oledtext.lib.debug import DebugSink, dbgprint


def test_returns_text_when_disabled(caplog):
    caplog.set_level(logging.DEBUG)
    sink = DebugSink(enabled=False)

    assert sink("Station %s at %d kbps", "Radio 1", 128) == "Station Radio 1 at 128 kbps"
    assert "D: " not in caplog.text


def test_emits_when_enabled(caplog):
    caplog.set_level(logging.DEBUG)
    sink = DebugSink(enabled=True)

    assert sink("Free heap %d", 4096) == "Free heap 4096"
    assert "D: Free heap 4096" in caplog.text


def test_truncates_to_buffer():
    sink = DebugSink(enabled=False, buffer_size=10)

    assert sink("%s", "x" * 50) == "x" * 9


def test_no_arguments():
    assert DebugSink()("ready") == "ready"


def test_escaped_percent_without_arguments():
    assert DebugSink()("100%% done") == "100% done"


def test_bad_arguments_do_not_raise(caplog):
    caplog.set_level(logging.WARNING)

    assert DebugSink()("%d items", "many") == "%d items"
    assert "Bad debug format" in caplog.text


def test_dbgprint_uses_config(mocker, caplog):
    caplog.set_level(logging.DEBUG)
    mocker.patch.multiple(cfg, DEBUG_ENABLE=True, DEBUG_BUFFER_SIZE=6)

    assert dbgprint("Hello %s", "world") == "Hello"
    assert "D: Hello" in caplog.text


def test_dbgprint_disabled(mocker, caplog):
    caplog.set_level(logging.DEBUG)
    mocker.patch.multiple(cfg, DEBUG_ENABLE=False)

    assert dbgprint("quiet") == "quiet"
    assert "D: quiet" not in caplog.text
