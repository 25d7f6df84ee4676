"""
Tests for the logging helpers.
"""
import logging
import os
from datetime import datetime, timedelta

import pytest

from sdkprops.lib.logger import (
    LOGS_DIR,
    LogContext,
    cleanup_old_logs,
    get_current_log_file,
    get_logger,
)
from sdkprops.lib.logger import constants


class TestGetLogger:
    """Logger singletons and their log files."""

    def test_singleton_per_name(self):
        """Should return the same instance for the same name."""
        assert get_logger("sample") is get_logger("sample")

    def test_log_file_under_home(self):
        """Should write log files below SDKPROPS_HOME."""
        logger = get_logger("sample")
        logger.info("hello")

        log_file = get_current_log_file("sample")
        assert log_file == logger.log_file
        assert os.path.dirname(log_file) == str(LOGS_DIR)
        assert str(LOGS_DIR).startswith(os.environ["SDKPROPS_HOME"])

    def test_unknown_logger_has_no_file(self):
        """Should return None for a logger that was never created."""
        assert get_current_log_file("never-created") is None

    def test_foreign_handler_does_not_block_file_output(self):
        """Should still add a log file when another handler is already attached."""
        foreign = logging.StreamHandler()
        std_logger = logging.getLogger("sdkprops.hosted")
        std_logger.addHandler(foreign)
        try:
            logger = get_logger("hosted")

            assert logger.log_file is not None
            assert get_current_log_file("hosted") == logger.log_file
            assert any(isinstance(h, logging.FileHandler) for h in std_logger.handlers)
        finally:
            std_logger.removeHandler(foreign)

    def test_reset_keeps_foreign_handlers(self):
        """Should only remove the handlers the logger added itself."""
        from sdkprops.lib.logger import reset_session

        foreign = logging.StreamHandler()
        std_logger = logging.getLogger("sdkprops.shared")
        std_logger.addHandler(foreign)
        try:
            get_logger("shared")
            reset_session()

            assert std_logger.handlers == [foreign]
        finally:
            std_logger.removeHandler(foreign)

    def test_unwritable_log_dir_falls_back(self, tmp_path, monkeypatch):
        """Should keep working without a log file when the log dir cannot be created."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        monkeypatch.setattr(constants, "LOGS_DIR", blocker / "sub" / "logs")

        logger = get_logger("nodir")
        logger.info("still fine")

        assert logger.log_file is None
        assert not (blocker / "sub").exists()

    def test_capture_routes_library_logger(self):
        """Should copy library logger records into the entry point's log file."""
        logger = get_logger("entry")
        logger.capture("library")

        logging.getLogger("sdkprops.library").debug("from library")

        with open(logger.log_file, encoding="utf-8") as f:
            assert "from library" in f.read()


class TestLogContext:
    """LogContext never swallows exceptions."""

    def test_reraises(self):
        """Should propagate the exception raised inside the block."""
        logger = get_logger("sample")

        with pytest.raises(OSError):
            with LogContext(logger, "failing"):
                raise OSError("disk full")

    def test_accepts_standard_logger(self, caplog):
        """Should log the operation with its details through a plain logging.Logger."""
        std_logger = logging.getLogger("sdkprops.context-test")

        with caplog.at_level(logging.DEBUG, logger="sdkprops.context-test"):
            with LogContext(std_logger, "write", path="/tmp/x") as ctx:
                pass

        assert ctx.elapsed >= 0
        assert "write (path=/tmp/x)" in caplog.text


class TestCleanupOldLogs:
    """Removing expired log files."""

    def test_removes_only_expired_files(self):
        """Should delete files older than the retention period."""
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        old_stamp = (datetime.now() - timedelta(days=30)).strftime("%Y%m%d_%H%M%S")
        new_stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        old_file = LOGS_DIR / f"cleanup_{old_stamp}.log"
        new_file = LOGS_DIR / f"cleanup_{new_stamp}.log"
        odd_file = LOGS_DIR / "cleanup_notadate_x.log"
        for path in (old_file, new_file, odd_file):
            path.write_text("")

        deleted = cleanup_old_logs(7)

        assert deleted >= 1
        assert not old_file.exists()
        assert new_file.exists()
        assert odd_file.exists()
