"""
FXCONV Configuration Management

Settings are read from environment variables (prefix ``FXCONV_``) or a local
``.env`` file. See ``.env.example`` for placeholder values.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # === Rate Table ===
    exchange_rates: dict[str, float] = Field(
        default_factory=dict,
        description=(
            "Currency code -> rate relative to the base currency, as JSON. "
            "Empty means the built-in default table is used."
        )
    )

    # === API Configuration ===
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    # === Logging ===
    log_level: str = Field(default="INFO")

    model_config = {
        "env_prefix": "FXCONV_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
