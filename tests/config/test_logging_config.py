"""Tests for the logging configuration."""

from compandauth.config.logging_config import (
    FORMAT_STRINGS,
    LogFormat,
    LoggingConfig,
    get_log_level_from_verbosity,
    setup_logging,
)


class TestLogLevelResolution:
    """Test cases for verbosity and level resolution."""
    
    def test_verbosity_mapping(self):
        """Each verbosity mode maps to a log level."""
        assert get_log_level_from_verbosity("quiet") == "ERROR"
        assert get_log_level_from_verbosity("NORMAL") == "WARNING"
        assert get_log_level_from_verbosity("verbose") == "INFO"
        assert get_log_level_from_verbosity("debug") == "DEBUG"
    
    def test_unknown_verbosity_falls_back_to_warning(self):
        """Unrecognised verbosity modes fall back to WARNING."""
        assert get_log_level_from_verbosity("chatty") == "WARNING"


class TestLoggingConfigBuild:
    """Test cases for the generated dictConfig mapping."""
    
    def test_defaults(self, monkeypatch):
        """Without overrides the root logs warnings in the simple format."""
        for name in ("LOG_LEVEL", "LOG_VERBOSITY", "LOG_FORMAT", "ENABLE_COUNTER_LOGGING"):
            monkeypatch.delenv(name, raising=False)
        
        config = LoggingConfig.build()
        
        assert config["root"]["level"] == "WARNING"
        assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.SIMPLE]
        assert config["loggers"][LoggingConfig.COUNTER_MODULE]["level"] == "WARNING"
        assert set(config["loggers"]) == {LoggingConfig.COUNTER_MODULE}
    
    def test_log_level_overrides_verbosity(self, monkeypatch):
        """An explicit LOG_LEVEL wins over LOG_VERBOSITY."""
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        monkeypatch.setenv("LOG_LEVEL", "info")
        
        assert LoggingConfig.build()["root"]["level"] == "INFO"
    
    def test_json_format(self, monkeypatch):
        """LOG_FORMAT selects the formatter."""
        monkeypatch.setenv("LOG_FORMAT", "json")
        
        config = LoggingConfig.build()
        
        assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.JSON]
    
    def test_counter_logging_enabled(self, monkeypatch):
        """ENABLE_COUNTER_LOGGING traces counter transitions at DEBUG."""
        monkeypatch.setenv("ENABLE_COUNTER_LOGGING", "true")
        
        config = LoggingConfig.build()
        
        assert config["loggers"][LoggingConfig.COUNTER_MODULE]["level"] == "DEBUG"
        assert config["handlers"]["console"]["level"] == "DEBUG"


def test_setup_logging_applies_dict_config(mocker):
    """setup_logging hands the built mapping to dictConfig."""
    dict_config = mocker.patch("logging.config.dictConfig")
    
    setup_logging()
    
    dict_config.assert_called_once()
    assert dict_config.call_args.args[0]["version"] == 1
