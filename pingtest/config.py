"""Service configuration from environment."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PINGTEST_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)
    log_level: str = "INFO"

    # ICMP probe
    ping_count: int = Field(4, ge=1)
    ping_timeout: float = Field(10.0, gt=0)  # whole run, seconds
    ping_interval: float = Field(1.0, ge=0)  # between echoes, seconds
    ping_echo_timeout: float = Field(1.0, gt=0)  # wait per echo reply, seconds
    ping_size: int = Field(56, ge=0, le=65507)


settings = Settings()
