"""Tests for environment-driven counter settings."""

import pytest
from pydantic import ValidationError

from compandauth.config.constants import NegativeRevocationPolicy, OverflowPolicy
from compandauth.config.settings import CounterSettings, get_settings


class TestCounterSettings:
    """Test cases for CounterSettings."""
    
    def test_defaults(self):
        """Defaults fail loudly at the boundaries."""
        settings = CounterSettings()
        
        assert settings.overflow_policy is OverflowPolicy.FAIL
        assert settings.negative_revocation_policy is NegativeRevocationPolicy.REJECT
        assert settings.warn_on_unissued_lock is True
    
    def test_reads_prefixed_environment(self, monkeypatch):
        """CAA_* variables are picked up case-insensitively."""
        monkeypatch.setenv("CAA_OVERFLOW_POLICY", "Saturate")
        monkeypatch.setenv("CAA_NEGATIVE_REVOCATION_POLICY", "CLAMP")
        monkeypatch.setenv("CAA_WARN_ON_UNISSUED_LOCK", "false")
        
        settings = CounterSettings()
        
        assert settings.overflow_policy is OverflowPolicy.SATURATE
        assert settings.negative_revocation_policy is NegativeRevocationPolicy.CLAMP
        assert settings.warn_on_unissued_lock is False
    
    def test_invalid_policy_raises(self, monkeypatch):
        """Unknown policy names are rejected at load time."""
        monkeypatch.setenv("CAA_OVERFLOW_POLICY", "wrap")
        
        with pytest.raises(ValidationError):
            CounterSettings()
    
    def test_get_settings_is_cached(self):
        """get_settings returns one shared instance until cleared."""
        first = get_settings()
        
        assert get_settings() is first
        
        get_settings.cache_clear()
        assert get_settings() is not first
