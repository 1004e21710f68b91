from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from httpetag.options import CachingOptionsInput


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HTTPETAG_", env_file=".env", extra="ignore")

    # Caching defaults for ETagMiddleware
    cache_control: str | None = None  # unset: default header built from max_age
    send_cache_control: bool = True
    max_age: int = 0
    weak: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    def caching_options(self) -> CachingOptionsInput:
        """Build middleware options from the configured values."""
        values: dict[str, Any] = {"max_age": self.max_age, "weak": self.weak}
        if not self.send_cache_control:
            values["cache_control"] = None
        elif "cache_control" in self.model_fields_set:
            values["cache_control"] = self.cache_control
        return CachingOptionsInput(**values)


settings = Settings()
