from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

# Names understood by both stdlib logging and uvicorn.
LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ServerSettings(BaseSettings):
    server_ip: str = Field("127.0.0.1", validation_alias="SERVER_IP")
    server_port: int = Field(10290, validation_alias="SERVER_PORT")

    log_ring_size: int = Field(200, validation_alias="LOG_RING_SIZE")
    log_level: LogLevel = Field("INFO", validation_alias="LOG_LEVEL")
    logger_name: str = Field("bobassistant.server", validation_alias="LOGGER_NAME")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> ServerSettings:
    return ServerSettings()
