"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
PortInt = Annotated[int, Field(gt=0, le=65535)]
BcryptRounds = Annotated[int, Field(ge=4, le=31)]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: NonEmptyStr = Field(validation_alias="DATABASE_URL")
    api_host: NonEmptyStr = Field(default="0.0.0.0", validation_alias="API_HOST")
    api_port: PortInt = Field(default=8083, validation_alias="API_PORT")
    bcrypt_rounds: BcryptRounds = Field(default=12, validation_alias="BCRYPT_ROUNDS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()  # type: ignore[call-arg]
