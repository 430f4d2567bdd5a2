import json
from pathlib import Path
from typing import Annotated, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    SOURCE: str = "src/i18n"
    SOURCE_FILE: str = "messages.json"
    DESTINATION: str | None = None

    LOCALES: Annotated[list[str], NoDecode] = []
    INDENT: str | int = "\t"
    CHECK: bool = False

    LOG_LEVEL: LogLevel = "INFO"
    LOG_FILE: str | None = None

    model_config = SettingsConfigDict(env_prefix="CATALOG_SYNC_", env_file=".env", env_file_encoding="utf-8")

    @field_validator("INDENT", mode="before")
    @classmethod
    def parse_indent(cls, value):
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            value = int(value)
        if isinstance(value, int) and value < 0:
            raise ValueError("indent must not be negative")
        return value

    @field_validator("LOCALES", mode="before")
    @classmethod
    def parse_locales(cls, value):
        # Env values arrive as raw text: either a JSON list or "fr,de".
        if isinstance(value, str):
            if value.strip().startswith("["):
                try:
                    return json.loads(value)
                except json.JSONDecodeError as e:
                    raise ValueError(f"invalid locale list: {e}") from e
            return value.split(",")
        return value

    @field_validator("LOCALES")
    @classmethod
    def strip_locales(cls, value: list[str]) -> list[str]:
        return [locale.strip() for locale in value if locale.strip()]

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def source_dir(self) -> Path:
        return Path(self.SOURCE)

    @property
    def destination_dir(self) -> Path:
        return Path(self.DESTINATION or self.SOURCE)

    @property
    def file_stem(self) -> str:
        return Path(self.SOURCE_FILE).stem

    @property
    def source_file_path(self) -> Path:
        return self.source_dir / self.SOURCE_FILE
