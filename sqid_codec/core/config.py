from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Sqid Codec"

    # Codec defaults (an empty alphabet falls back to the built-in one)
    ALPHABET: str = ""
    MIN_LENGTH: int = 0
    # JSON list in the environment; unset means the built-in blocklist
    BLOCKLIST: Optional[List[str]] = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="SQID_CODEC_", env_file=".env", extra="ignore")


settings = Settings()
