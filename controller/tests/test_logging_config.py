"""
Tests for the logging bootstrap.
"""
import logging

import pytest

from microwave.devices import Light, Output
from microwave.logging_config import OUTPUT_LOG, OUTPUT_LOGGER, RUNTIME_LOG, configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    output_logger = logging.getLogger(OUTPUT_LOGGER)
    saved = (root.level, list(root.handlers), output_logger.level, list(output_logger.handlers))
    yield
    for handler in root.handlers + output_logger.handlers:
        if handler not in saved[1] and handler not in saved[3]:
            handler.close()
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    output_logger.setLevel(saved[2])
    output_logger.handlers[:] = saved[3]


def _flush():
    for logger in (logging.getLogger(), logging.getLogger(OUTPUT_LOGGER)):
        for handler in logger.handlers:
            handler.flush()


class TestConfigureLogging:

    def test_device_lines_go_to_output_log(self, tmp_path, restore_logging):
        configure_logging("INFO", tmp_path)

        Light(Output()).turn_on()
        logging.getLogger("microwave.user_interface").info("Panel mode ready -> door_open")
        _flush()

        output_text = (tmp_path / OUTPUT_LOG).read_text(encoding="utf-8")
        runtime_text = (tmp_path / RUNTIME_LOG).read_text(encoding="utf-8")
        assert "[light] Light is turned on" in output_text
        assert "Panel mode" not in output_text
        assert "Light is turned on" in runtime_text
        assert "Panel mode ready -> door_open" in runtime_text

    def test_output_log_ignores_runtime_level(self, tmp_path, restore_logging):
        configure_logging("WARNING", tmp_path)

        Light(Output()).turn_on()
        _flush()

        assert "Light is turned on" in (tmp_path / OUTPUT_LOG).read_text(encoding="utf-8")
        assert not (tmp_path / RUNTIME_LOG).exists()

    def test_creates_log_directory(self, tmp_path, restore_logging):
        log_dir = tmp_path / "nested" / "logs"
        configure_logging("INFO", log_dir)

        assert log_dir.is_dir()
