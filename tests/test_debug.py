import logging

import pytest

from bentfour.debug import DebugLevel, DebugManager


@pytest.fixture
def manager():
    manager = DebugManager()
    yield manager
    manager.configure(log_file="", level=DebugLevel.ERROR, components=[])


def test_messages_above_level_are_dropped(manager, caplog):
    manager.configure(level=DebugLevel.INFO)
    logger = logging.getLogger("bentfour")
    logger.addHandler(caplog.handler)
    try:
        manager.info("shown", "board")
        manager.debug("hidden", "board")
    finally:
        logger.removeHandler(caplog.handler)
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["[board] shown"]


def test_component_filter(manager, tmp_path):
    log_file = tmp_path / "game.log"
    manager.configure(level=DebugLevel.DEBUG, log_file=str(log_file), components=["ai"])
    manager.debug("from ai", "ai")
    manager.debug("from board", "board")
    manager.configure(log_file="")
    text = log_file.read_text()
    assert "[ai] from ai" in text
    assert "from board" not in text


def test_timer_returns_elapsed_seconds(manager):
    manager.start_timer("move")
    elapsed = manager.end_timer("move")
    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("move") is None


def test_set_from_string(manager):
    manager.set_from_string("trace")
    assert manager.level == DebugLevel.TRACE
    manager.set_from_string("loud")
    assert manager.level == DebugLevel.TRACE
