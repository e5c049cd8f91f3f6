import os
from functools import lru_cache

from pydantic import BaseModel


class Settings(BaseModel):
    HOST: str = "0.0.0.0"
    PORT: int = 8001
    DATABASE_URL: str = "sqlite:///./db.sqlite"

    @classmethod
    def from_env(cls) -> "Settings":
        raw = {
            "HOST": os.getenv("HOST"),
            "PORT": os.getenv("PORT"),
            "DATABASE_URL": os.getenv("DATABASE_URL"),
        }
        # unset/empty env falls back to the field default
        return cls.model_validate({k: v for k, v in raw.items() if v})


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
