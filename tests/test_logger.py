import pytest
from loguru import logger

from screenmap.core.config import config
from screenmap.core.logger import Logger, configure_sinks


@pytest.fixture
def records():
    captured = []
    handler_id = logger.add(captured.append, format="{function}|{message}", level="DEBUG")
    yield captured
    logger.remove(handler_id)


def test_records_carry_component_and_caller(records):
    Logger("pointer", configure=False).info("Moving mouse to: (1.0, 2.0)")
    assert [r.strip() for r in records] == [
        "test_records_carry_component_and_caller|[pointer] Moving mouse to: (1.0, 2.0)"
    ]


def test_step_and_performance_messages(records):
    component = Logger("controller", configure=False)
    component.log_automation_step("locate", {"text": "home"})
    component.log_automation_step("go_to_home")
    component.log_performance("analysis", 12.345)

    messages = [r.strip().split("|", 1)[1] for r in records]
    assert messages == [
        "[controller] AUTOMATION STEP: locate | Details: {'text': 'home'}",
        "[controller] AUTOMATION STEP: go_to_home",
        "[controller] PERFORMANCE: analysis took 12.35ms",
    ]


def test_file_sink_only_when_enabled(monkeypatch, tmp_path):
    logs_dir = tmp_path / "logs"
    monkeypatch.setattr(config, "logs_dir", str(logs_dir))
    try:
        assert len(configure_sinks(to_file=False)) == 1
        assert not logs_dir.exists()

        assert len(configure_sinks(to_file=True)) == 2
        Logger("files", configure=False).debug("written to disk")
        logger.remove()
        (log_file,) = logs_dir.glob("screenmap_*.log")
        assert "[files] written to disk" in log_file.read_text()
    finally:
        configure_sinks(to_file=False)
