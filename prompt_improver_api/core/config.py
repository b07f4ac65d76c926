import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

from prompt_improver_api.core.constants import REMOTE_MODEL

# Load .env values so local runs pick up service-level overrides.
load_dotenv()


class Settings:
    """Runtime configuration pulled from environment variables.

    The Perplexity credential is deliberately absent: it always arrives with
    the request and is never read from the process environment.
    """

    def __init__(self) -> None:
        self.log_level = os.getenv("PROMPT_IMPROVER_LOG_LEVEL", "INFO").upper()
        self.cors_origins = self._split_origins(os.getenv("PROMPT_IMPROVER_CORS_ORIGINS", "*"))

        # Reported by the health endpoints.
        self.service_name = os.getenv("PROMPT_IMPROVER_SERVICE_NAME", "prompt_improver")
        self.remote_model = REMOTE_MODEL

    @staticmethod
    def _split_origins(raw: str) -> List[str]:
        origins = [item.strip() for item in raw.split(",") if item.strip()]
        return origins or ["*"]


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance so imports remain lightweight."""
    return Settings()
