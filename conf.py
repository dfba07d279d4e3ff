"""Configuration settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings class, loaded from .env or environment vars"""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="bin2h_")

    program_name: str = "bin2h"
    program_version: str = "0.0.1"
    log_level: str = "INFO"

    # Conversion defaults
    chunk_capacity: int = 1024
    column_size: int = 8

    # Name derivation
    strip_chars: str = ".,_"
    header_suffix: str = ".h"

    # Standard input fallback, used when no input file is given
    stdin_available: bool = True
    stdin_path: str = "/dev/stdin"
    stdin_output: str = "out.h"
    stdin_symbol: str = "stdin"

    # HTTP service settings
    cors_origins: list[str] = ["*"]
    cors_origin_regex: str | None = None
    max_upload_size: int = 16 * 1024 * 1024
    max_concurrent_tasks: int = 4

    # Header cache settings
    max_header_caches: int = 100
    header_cache_duration: int = 3600


settings = Settings()
