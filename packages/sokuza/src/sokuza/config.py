"""Engine configuration.

Loads from environment variables (prefix SOKUZA_) and .env file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class EngineSettings(BaseSettings):
    """Configuration for the unification engine.

    All values can be set via environment variables or .env file,
    e.g. SOKUZA_OCCURS_CHECK=true.
    """

    occurs_check: bool = Field(
        default=False,
        description=(
            "Reject bindings of a variable to a term containing it. "
            "Off by default: lookups on cyclic bindings may not terminate."
        ),
    )
    serialization_indent: int = Field(
        default=2,
        ge=0,
        description="JSON indentation for saved stores.",
    )

    model_config = {
        "env_prefix": "SOKUZA_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached settings singleton."""
    return EngineSettings()
