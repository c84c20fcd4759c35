import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DOCXSCAN_", env_file=".env", extra="ignore")

    # Archive
    document_part: str = "word/document.xml"
    max_part_size_bytes: int = 50 * 1024 * 1024  # 50MB uncompressed

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CSV export
    timestamp_format: str = "%Y%m%d%H%M%S"
    csv_delimiter: str = ","

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case, reject unknown ones."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("csv_delimiter")
    @classmethod
    def single_char_delimiter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("csv_delimiter must be a single character")
        return v


settings = Settings()
