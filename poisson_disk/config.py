"""Default sampling parameters via environment variables."""
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from .types import DEFAULT_MAX_ATTEMPTS, DEFAULT_RADIUS


class Settings(BaseSettings):
    radius: float = Field(DEFAULT_RADIUS, gt=0)
    max_attempts: int = Field(DEFAULT_MAX_ATTEMPTS, ge=1)
    seed: int | None = Field(None, ge=0, le=2 ** 64 - 1)
    precision: Literal["double", "single"] = "double"
    log_level: str = "WARNING"

    model_config = {"env_prefix": "POISSON_"}


settings = Settings()
