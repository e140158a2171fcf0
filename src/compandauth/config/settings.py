"""
Counter settings loaded from the environment.

Policies for the boundary cases of the counter encoding are configured here
so that a deployment can choose them without touching call sites.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import NegativeRevocationPolicy, OverflowPolicy


class CounterSettings(BaseSettings):
    """Settings for counter boundary behaviour and library bootstrap."""
    
    model_config = SettingsConfigDict(
        env_prefix="CAA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    overflow_policy: OverflowPolicy = Field(
        default=OverflowPolicy.FAIL,
        description="What issue/revoke do when the magnitude would exceed 2**63 - 1"
    )
    negative_revocation_policy: NegativeRevocationPolicy = Field(
        default=NegativeRevocationPolicy.REJECT,
        description="What revoke does when called with a negative count"
    )
    warn_on_unissued_lock: bool = Field(
        default=True,
        description="Log a warning when lock() is called on a counter that never issued"
    )
    configure_logging: bool = Field(
        default=True,
        description="Apply the package logging configuration on import"
    )
    
    @field_validator("overflow_policy", "negative_revocation_policy", mode="before")
    @classmethod
    def normalize_policy(cls, value):
        """Accept policy names in any case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache()
def get_settings() -> CounterSettings:
    """Get cached settings instance."""
    return CounterSettings()
