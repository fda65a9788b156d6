"""Tests for the progress-aware logging manager and console handler."""

import logging

import pytest

from scoped_progress.logging import LoggingManager, ProgressAwareConsoleHandler


@pytest.fixture
def manager():
    instance = LoggingManager()
    yield instance
    instance.cleanup()


class TestLoggingManager:
    def test_verbosity_follows_console_level(self, manager, sink):
        manager.setup(logging.WARNING, sink=sink)
        assert not manager.is_verbose()

        manager.cleanup()
        manager.setup(logging.INFO, sink=sink)
        assert manager.is_verbose()

        manager.cleanup()
        manager.setup(logging.DEBUG, sink=sink)
        assert manager.is_verbose()

    def test_records_go_through_the_progress_sink(self, manager, sink):
        manager.setup(logging.INFO, sink=sink)

        logging.getLogger("scoped_progress.tests").info("packages restored")

        assert sink.output == "INFO - packages restored\n"

    def test_records_start_below_open_progress_line(self, manager, sink):
        manager.setup(logging.WARNING, sink=sink)
        sink.write("Build:  40% (4/10), 00:00:03 \r")

        logging.getLogger("scoped_progress.tests").warning("slow disk")

        assert sink.output == "Build:  40% (4/10), 00:00:03 \r\nWARNING - slow disk\n"

    def test_records_below_console_level_are_dropped(self, manager, sink):
        manager.setup(logging.WARNING, sink=sink)
        logging.getLogger("scoped_progress.tests").info("hidden")
        assert sink.output == ""

    def test_file_handler_receives_debug_records(self, manager, sink, tmp_path):
        log_file = tmp_path / "logs" / "progress.log"
        manager.setup(logging.WARNING, log_file=log_file, sink=sink)

        logging.getLogger("scoped_progress.tests").debug("scope pushed")
        manager.cleanup()

        assert "scope pushed" in log_file.read_text()
        assert sink.output == ""

    def test_cleanup_restores_original_handlers(self, manager, sink):
        root_logger = logging.getLogger()
        original = list(root_logger.handlers)

        manager.setup(logging.WARNING, sink=sink)
        assert any(isinstance(h, ProgressAwareConsoleHandler) for h in root_logger.handlers)

        manager.cleanup()
        assert root_logger.handlers == original
        assert not manager.is_verbose()

    def test_set_sink_redirects_console_records(self, manager, sink):
        manager.setup(logging.WARNING, sink=sink)
        other = type(sink)()
        manager.set_sink(other)

        logging.getLogger("scoped_progress.tests").error("failed")

        assert sink.output == ""
        assert other.output == "ERROR - failed\n"

    def test_critical_error_commits_open_line(self, manager, sink, mocker):
        manager.setup(logging.WARNING, sink=sink)
        sink.write("Build...\r")
        console = mocker.patch("scoped_progress.logging.manager.Console").return_value

        manager.display_critical_error("stack leaked")

        assert sink.output == "Build...\r\n"
        console.print.assert_called_once()


def test_get_instance_is_a_singleton():
    assert LoggingManager.get_instance() is LoggingManager.get_instance()
