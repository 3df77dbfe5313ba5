"""Tests for ValidatorConfig and logging setup."""

# pylint: disable=missing-function-docstring

import logging

from serverless_predeploy.config.validator_config import ValidatorConfig


class TestValidatorConfig:
    """Tests for configuration loading."""

    def test_defaults(self, monkeypatch):
        for name in ("CREDENTIAL_LENGTH", "LOG_LEVEL", "PRINT_LEVEL"):
            monkeypatch.delenv(f"SERVERLESS_PREDEPLOY_{name}", raising=False)

        config = ValidatorConfig.from_env()

        assert config.credential_length == 36
        assert config.log_level == "INFO"
        assert config.print_level == "ERROR"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SERVERLESS_PREDEPLOY_CREDENTIAL_LENGTH", "32")
        monkeypatch.setenv("SERVERLESS_PREDEPLOY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SERVERLESS_PREDEPLOY_PRINT_LEVEL", "WARNING")

        config = ValidatorConfig.from_env()

        assert config.credential_length == 32
        assert config.log_level == "DEBUG"
        assert config.print_level == "WARNING"


class TestSetLogging:
    """Tests for split stdout/stderr logging."""

    def teardown_method(self):
        logger = logging.getLogger("serverless_predeploy")
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

    def test_info_to_stdout_errors_to_stderr(self, capsys):
        logger = ValidatorConfig(log_level="INFO", print_level="ERROR").set_logging()

        logger.info("phase done")
        logger.error("phase failed")
        logger.debug("hidden")

        captured = capsys.readouterr()
        assert "phase done" in captured.out
        assert "phase failed" not in captured.out
        assert "phase failed" in captured.err
        assert "hidden" not in captured.out

    def test_warning_threshold_moves_warnings_to_stderr(self, capsys):
        logger = ValidatorConfig(log_level="INFO", print_level="WARNING").set_logging()

        logger.warning("descriptor has errors")

        captured = capsys.readouterr()
        assert "descriptor has errors" not in captured.out
        assert "descriptor has errors" in captured.err

    def test_returns_package_logger(self):
        logger = ValidatorConfig().set_logging()

        assert logger.name == "serverless_predeploy"
        assert len(logger.handlers) == 2
