from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Alternative wordlist (one word per line). The packaged list is used when unset.
    WORDLIST_PATH: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    model_config = {"env_prefix": "WORDCODES_", "env_file": ".env", "extra": "ignore"}

settings = Settings()
