from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    default_notation: str = "sharp"
    max_progression_chords: int = 256
    cors_origins: List[str] = ["http://localhost:5173"]
    log_level: str = "INFO"

    @field_validator("default_notation")
    @classmethod
    def notation_must_be_known(cls, v: str) -> str:
        if v not in ("sharp", "flat"):
            raise ValueError("default_notation must be 'sharp' or 'flat'")
        return v

    @field_validator("max_progression_chords")
    @classmethod
    def limit_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_progression_chords must be greater than 0")
        return v

    class Config:
        env_file = ".env"


settings = Settings()
