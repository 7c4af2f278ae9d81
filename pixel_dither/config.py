import logging
import os
from dataclasses import dataclass

APP_VERSION = "1.0.0"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class DitherSettings:
    port: int
    internal_width: int
    scale_factor: int
    posterize_levels: int
    grayscale: bool
    timeout: float
    max_source_bytes: int
    cache_max_age: int
    log_level: str

    @classmethod
    def from_env(cls) -> "DitherSettings":
        return cls(
            port=int(os.getenv("PORT", "3000")),
            internal_width=int(os.getenv("INTERNAL_WIDTH", "54")),
            scale_factor=int(os.getenv("SCALE_FACTOR", "3")),
            posterize_levels=int(os.getenv("POSTERIZE_LEVELS", "9")),
            grayscale=_env_flag("GRAYSCALE", "false"),
            timeout=float(os.getenv("SOURCE_TIMEOUT", "10.0")),
            max_source_bytes=int(os.getenv("MAX_SOURCE_BYTES", str(20 * 1024 * 1024))),
            cache_max_age=int(os.getenv("CACHE_MAX_AGE", "604800")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.cache_max_age}, immutable"


SETTINGS = DitherSettings.from_env()


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("pixel-dither")
