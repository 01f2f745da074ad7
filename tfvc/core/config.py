from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # tf command line client
    TFVC_LOCATION: str = "tf"  # Name on PATH or absolute path
    TFVC_TIMEOUT: float = 60.0  # Seconds before a tf process is killed

    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env"
    }


@lru_cache
def get_settings():
    return Settings()
