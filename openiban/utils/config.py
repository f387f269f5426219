"""Application settings.

Pydantic-based configuration. Supports environment variables and a ``.env``
file for deployment.

Environment Variables:
- OPENIBAN_VALIDATION_METHOD: "strict" or "loose" (default: strict)
- OPENIBAN_SEPA_ONLY: Restrict the registry to SEPA countries (default: false)
- OPENIBAN_LOG_LEVEL: Logging level (default: WARNING)
- OPENIBAN_JSON_LOGS: Emit JSON logs (default: false)
- OPENIBAN_DEV_MODE: Colorful console logs (default: true)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from openiban.registry import CountryRegistry, default_registry


class Settings(BaseSettings):
    """OpenIBAN settings.

    All settings can be overridden via environment variables with prefix:
    OPENIBAN_*

    Example:
        >>> settings = Settings()
        >>> settings.validation_method
        'strict'
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENIBAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Validation
    validation_method: str = Field(
        default="strict",
        description="Structure validation method (strict | loose)",
    )

    sepa_only: bool = Field(
        default=False,
        description="Only accept IBANs from SEPA countries",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    json_logs: bool = Field(default=False, description="Output JSON logs")

    dev_mode: bool = Field(default=True, description="Development-friendly console logs")

    @field_validator("validation_method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        """Ensure the validation method is known."""
        v = v.strip().lower()
        if v not in ("strict", "loose"):
            raise ValueError(f"validation_method must be 'strict' or 'loose', got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level is a standard one."""
        v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return v

    def build_registry(self) -> CountryRegistry:
        """Registry honoring ``sepa_only``."""
        registry = default_registry()
        return registry.filter(sepa_only=True) if self.sepa_only else registry


# Global settings instance (singleton pattern)
_settings: Settings | None = None


def get_settings(force_reload: bool = False) -> Settings:
    """Get or create the settings.

    Args:
        force_reload: Force reload from environment

    Returns:
        Settings instance
    """
    global _settings

    if _settings is None or force_reload:
        _settings = Settings()

    return _settings


def reload_settings() -> Settings:
    """Read the settings again from the environment."""
    return get_settings(force_reload=True)
