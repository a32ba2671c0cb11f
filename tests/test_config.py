"""
Tests for configuration loading and logging setup.
"""

import logging
from pathlib import Path

import pytest

from config import ConfigurationManager, get_config
from docgen.utils.logger import LOGGER_NAMESPACE, ColoredFormatter, get_logger, setup_logger


class TestConfiguration:
    """Test settings lookup and custom settings files."""

    def test_dotted_lookup(self):
        assert get_config("export.page.margin_mm") == 10
        assert get_config("stamp.defaults.variant") == "circular"

    def test_missing_key_returns_default(self):
        assert get_config("export.page.bleed_mm", 3) == 3
        assert get_config("company.name.first") is None

    def test_paths_are_absolute(self):
        assert Path(get_config("paths.output_dir")).is_absolute()

    def test_singleton(self):
        assert ConfigurationManager() is ConfigurationManager()

    def test_custom_file_overrides_defaults(self, tmp_path):
        """Test a partial custom file only replaces the keys it names."""
        custom = tmp_path / "custom.yaml"
        custom.write_text("company:\n  name: PT Maju Jaya\nexport:\n  page:\n    margin_mm: 15\n",
                          encoding="utf-8")

        config = ConfigurationManager(custom)

        assert config.get("company.name") == "PT Maju Jaya"
        assert config.get("company.email") == "kontak@generatordok.com"
        assert config.get("export.page.margin_mm") == 15
        assert config.get("export.page.width_mm") == 210

    def test_missing_custom_file_raises_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigurationManager(tmp_path / "absent.yaml")


class TestLogging:
    """Test the package logger setup."""

    def test_module_loggers_share_namespace(self):
        assert get_logger("docgen.export").name == f"{LOGGER_NAMESPACE}.docgen.export"
        assert get_logger(LOGGER_NAMESPACE).name == LOGGER_NAMESPACE

    def test_setup_writes_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "docgen.log"
        logger = setup_logger(level="INFO", log_file=log_file, colorize=False)

        get_logger("tests").info("export finished")
        for handler in logger.handlers:
            handler.flush()

        assert "export finished" in log_file.read_text(encoding="utf-8")

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_colored_formatter_restores_level_name(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "WARNING" in output
        assert "careful" in output
        assert record.levelname == "WARNING"
