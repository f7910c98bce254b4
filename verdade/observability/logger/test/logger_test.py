"""
tests for the logging package.

covers env configuration, stage tagging, prefixes, file output and the
time_profile decorator.
"""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from verdade.observability.logger import (
    Stage,
    get_logger,
    get_request_logger,
    setup_logging,
    time_profile,
)
from verdade.observability.logger.config import LoggerConfig


def _reset_logging():
    import verdade.observability.logger.logger as logger_module
    logger_module._logging_initialized = False

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)


class TestLoggerConfig:
    """logger configuration from environment variables"""

    def test_default_config(self):
        with patch.dict(os.environ, {}, clear=True):
            config = LoggerConfig()

            assert config.log_level == "INFO"
            assert config.log_output == "STDOUT"
            assert config.log_dir == "logs"
            assert config.log_file_max_bytes == 5242880
            assert config.log_file_backup_count == 3
            assert config.split_by_stage is False

    def test_custom_config_from_env(self):
        env_vars = {
            "LOG_LEVEL": "DEBUG",
            "LOG_OUTPUT": "FILE",
            "LOG_DIR": "/tmp/verdade_logs",
            "LOG_FILE_MAX_BYTES": "1024",
            "LOG_FILE_BACKUP_COUNT": "1",
            "LOG_SPLIT_BY_STAGE": "true",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            config = LoggerConfig()

            assert config.log_level == "DEBUG"
            assert config.log_output == "FILE"
            assert config.log_dir == "/tmp/verdade_logs"
            assert config.log_file_max_bytes == 1024
            assert config.log_file_backup_count == 1
            assert config.split_by_stage is True

    def test_invalid_log_level_raises_error(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValueError, match="invalid LOG_LEVEL"):
                LoggerConfig()

    def test_invalid_log_output_raises_error(self):
        with patch.dict(os.environ, {"LOG_OUTPUT": "SYSLOG"}, clear=True):
            with pytest.raises(ValueError, match="invalid LOG_OUTPUT"):
                LoggerConfig()

    def test_values_are_case_insensitive(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "warn", "LOG_OUTPUT": "both"}, clear=True):
            config = LoggerConfig()

            assert config.log_level == "WARN"
            assert config.log_output == "BOTH"


class TestStage:

    def test_string_conversion(self):
        assert str(Stage.FEED_FETCH) == "feed_fetch"
        assert Stage.PERSISTENCE.value == "persistence"


class TestLoggerFactory:
    """logger factory and output behaviour"""

    def setup_method(self):
        _reset_logging()

    def test_get_logger_with_stage(self):
        with patch.dict(os.environ, {"LOG_OUTPUT": "STDOUT"}, clear=True):
            logger = get_logger(__name__, Stage.AGGREGATION)

            assert logger.stage == Stage.AGGREGATION
            assert logger.logger.name == __name__

    def test_get_logger_defaults_to_unknown_stage(self):
        with patch.dict(os.environ, {"LOG_OUTPUT": "STDOUT"}, clear=True):
            assert get_logger(__name__).stage == Stage.UNKNOWN

    def test_stdout_output_contains_stage(self, capsys):
        with patch.dict(os.environ, {"LOG_LEVEL": "INFO", "LOG_OUTPUT": "STDOUT"}, clear=True):
            logger = get_logger("verdade.test", Stage.FEED_PARSE)
            logger.info("parsed 12 items")

            captured = capsys.readouterr()
            assert "feed_parse" in captured.err
            assert "parsed 12 items" in captured.err
            assert "verdade.test" in captured.err

    def test_level_filtering(self, capsys):
        with patch.dict(os.environ, {"LOG_LEVEL": "WARN", "LOG_OUTPUT": "STDOUT"}, clear=True):
            logger = get_logger("verdade.test", Stage.SYSTEM)
            logger.info("hidden message")
            logger.warning("visible message")

            captured = capsys.readouterr()
            assert "hidden message" not in captured.err
            assert "visible message" in captured.err

    def test_request_logger_prefixes_messages(self, capsys):
        with patch.dict(os.environ, {"LOG_LEVEL": "INFO", "LOG_OUTPUT": "STDOUT"}, clear=True):
            logger = get_request_logger("verdade.test", Stage.API_INTAKE, "req42")
            logger.info("received request")

            captured = capsys.readouterr()
            assert "[req42] received request" in captured.err
            assert logger.extra["request_id"] == "req42"

    def test_prefix_can_be_cleared(self, capsys):
        with patch.dict(os.environ, {"LOG_LEVEL": "INFO", "LOG_OUTPUT": "STDOUT"}, clear=True):
            logger = get_logger("verdade.test", Stage.SYSTEM)
            logger.set_prefix("[batch]")
            logger.info("first")
            logger.clear_prefix()
            logger.info("second")

            err = capsys.readouterr().err
            assert "[batch] first" in err
            assert "[batch] second" not in err

    def test_file_output_single_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            env_vars = {"LOG_LEVEL": "INFO", "LOG_OUTPUT": "FILE", "LOG_DIR": tmp_dir}
            with patch.dict(os.environ, env_vars, clear=True):
                logger = get_logger("verdade.test", Stage.PERSISTENCE)
                logger.info("row stored")

                for handler in logging.getLogger().handlers:
                    handler.flush()

                content = (Path(tmp_dir) / "verdade.log").read_text(encoding="utf-8")
                assert "row stored" in content
                assert "persistence" in content

            _reset_logging()

    def test_file_output_split_by_stage(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            env_vars = {
                "LOG_LEVEL": "INFO",
                "LOG_OUTPUT": "FILE",
                "LOG_DIR": tmp_dir,
                "LOG_SPLIT_BY_STAGE": "true",
            }
            with patch.dict(os.environ, env_vars, clear=True):
                get_logger("verdade.test", Stage.FEED_FETCH).info("fetched feed")
                get_logger("verdade.test", Stage.VERIFICATION).info("verified headline")

                for handler in logging.getLogger().handlers:
                    handler.flush()

                fetch_log = (Path(tmp_dir) / "feed_fetch.log").read_text(encoding="utf-8")
                verification_log = (Path(tmp_dir) / "verification.log").read_text(encoding="utf-8")

                assert "fetched feed" in fetch_log
                assert "verified headline" not in fetch_log
                assert "verified headline" in verification_log

            _reset_logging()

    def test_setup_logging_is_idempotent(self):
        with patch.dict(os.environ, {"LOG_OUTPUT": "STDOUT"}, clear=True):
            setup_logging()
            handler_count = len(logging.getLogger().handlers)
            setup_logging()

            assert len(logging.getLogger().handlers) == handler_count


class TestTimeProfile:

    def setup_method(self):
        _reset_logging()

    def test_sync_function(self, capsys):
        with patch.dict(os.environ, {"LOG_LEVEL": "INFO", "LOG_OUTPUT": "STDOUT"}, clear=True):
            @time_profile(Stage.FEED_PARSE)
            def parse():
                return 3

            assert parse() == 3
            err = capsys.readouterr().err
            assert "[TIME PROFILE] parse completed in" in err

    @pytest.mark.asyncio
    async def test_async_function_reports_failure(self, capsys):
        with patch.dict(os.environ, {"LOG_LEVEL": "INFO", "LOG_OUTPUT": "STDOUT"}, clear=True):
            @time_profile(Stage.AGGREGATION)
            async def aggregate():
                raise RuntimeError("boom")

            with pytest.raises(RuntimeError):
                await aggregate()

            err = capsys.readouterr().err
            assert "[TIME PROFILE] aggregate failed in" in err
