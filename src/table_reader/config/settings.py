"""Centralized settings management using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReaderSettings(BaseSettings):
    """Selectors used to locate tables, rows and cells."""

    model_config = SettingsConfigDict(
        env_prefix="TABLE_READER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    table_tag: str = Field(default="table", description="Tag name of table elements")
    row_selector: str = Field(default="tr", description="Selector for rows within a table")
    header_cell_selector: str = Field(default="th", description="Selector for header cells")
    data_cell_selector: str = Field(default="td", description="Selector for data cells")
    placeholder_prefix: str = Field(
        default="col",
        description="Prefix for synthesized column names",
    )

    @property
    def any_cell_selector(self) -> str:
        """Selector matching both header and data cells."""
        return f"{self.header_cell_selector},{self.data_cell_selector}"

    @field_validator("table_tag", "row_selector", "header_cell_selector", "data_cell_selector")
    @classmethod
    def validate_selector(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Selector must not be empty")
        return v.strip()


class SourceSettings(BaseSettings):
    """Settings for loading documents from files, URLs and streams."""

    model_config = SettingsConfigDict(
        env_prefix="SOURCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    parser: str = Field(default="lxml", description="BeautifulSoup tree builder")
    encoding: str = Field(default="utf-8", description="Encoding for local files and streams")
    timeout_seconds: float = Field(default=20.0, description="Timeout for remote sources")
    user_agent: str = Field(default="table-reader/0.1", description="User-Agent for HTTP requests")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    format: Literal["json", "console"] = Field(default="console", description="Log format")


class Settings(BaseSettings):
    """Main settings class aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reader: ReaderSettings = Field(default_factory=ReaderSettings)
    source: SourceSettings = Field(default_factory=SourceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
