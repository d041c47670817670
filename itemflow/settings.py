from pydantic import Field, NonNegativeInt
from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic_settings import SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    model_config = SettingsConfigDict(env_prefix="ITEMFLOW_", env_file_encoding="utf-8", env_nested_delimiter="__")


class LoggerSettings(BaseSettings):
    level: int = 20


class RunSettings(BaseSettings):
    # 0 disables periodic progress logging
    progress_log_interval: NonNegativeInt = 0


class GlobalSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")
    logger_settings: LoggerSettings = Field(default_factory=LoggerSettings)
    run_settings: RunSettings = Field(default_factory=RunSettings)
