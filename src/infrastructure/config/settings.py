"""
Runtime configuration read from environment variables.

The entry point calls load_dotenv() before Settings.from_env(), so values in a
local .env file are picked up the same way as real environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    app_env: str = "production"
    log_level: str = "INFO"
    cors_allow_origins: tuple[str, ...] = ("*",)
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from *environ* (defaults to os.environ).

        Raises:
            ValueError: if PORT is not an integer.
        """
        env = os.environ if environ is None else environ
        origins = tuple(
            origin.strip()
            for origin in env.get("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        )
        return cls(
            app_env=env.get("APP_ENV", cls.app_env),
            log_level=env.get("LOG_LEVEL", cls.log_level),
            cors_allow_origins=origins or ("*",),
            host=env.get("HOST", cls.host),
            port=int(env.get("PORT", cls.port)),
        )
