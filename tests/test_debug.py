import pytest

from connect4_arcade.debug import DebugLevel, DebugManager


@pytest.fixture
def manager(tmp_path):
    manager = DebugManager(logger_name="connect4_arcade.test")
    log_file = tmp_path / "engine.log"
    manager.configure(level=DebugLevel.DEBUG, log_file=str(log_file))
    yield manager, log_file
    manager.configure(log_file="")


def test_messages_are_tagged_with_component(manager):
    manager, log_file = manager
    manager.info("Popup activated", "popup")
    assert "[popup] Popup activated" in log_file.read_text()


def test_level_filters_messages(manager):
    manager, log_file = manager
    manager.configure(level=DebugLevel.WARNING)
    manager.info("hidden")
    manager.warning("shown")

    text = log_file.read_text()
    assert "hidden" not in text
    assert "shown" in text


def test_component_filter(manager):
    manager, log_file = manager
    manager.configure(components=["board"])
    manager.debug("from board", "board")
    manager.debug("from popup", "popup")

    text = log_file.read_text()
    assert "from board" in text
    assert "from popup" not in text


def test_none_level_silences_everything(manager):
    manager, log_file = manager
    manager.configure(level=DebugLevel.NONE)
    manager.error("silenced")
    assert "silenced" not in log_file.read_text()


def test_trace_needs_trace_level(manager):
    manager, log_file = manager
    manager.trace("fine grained")
    assert "fine grained" not in log_file.read_text()

    manager.configure(level=DebugLevel.TRACE)
    manager.trace("fine grained")
    assert "TRACE: fine grained" in log_file.read_text()


def test_timers(manager):
    manager, log_file = manager
    manager.start_timer("commit")
    elapsed = manager.end_timer("commit", "controller")
    assert elapsed is not None and elapsed >= 0.0
    assert "Performance [commit]" in log_file.read_text()

    assert manager.end_timer("never-started") is None


def test_set_from_string(manager):
    manager, _ = manager
    manager.set_from_string("error")
    assert manager.level == DebugLevel.ERROR
    manager.set_from_string("loud")
    assert manager.level == DebugLevel.ERROR
