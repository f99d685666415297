import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

DEFAULT_MODEL = "google_genai:gemini-2.0-flash"
DEFAULT_REQUEST_TIMEOUT = 60.0


class Settings(BaseModel):
    """Runtime configuration, read once from the environment."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_path: Path = ENV_PATH) -> "Settings":
        load_dotenv(env_path)

        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or None
        if not api_key:
            logger.warning(
                "GEMINI_API_KEY or GOOGLE_API_KEY is not set; AI features will not work "
                "until one of them is configured (e.g. in %s)",
                env_path,
            )

        return cls(
            api_key=api_key,
            model=os.getenv("NAVIGATOR_MODEL", DEFAULT_MODEL),
            request_timeout=float(os.getenv("NAVIGATOR_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)),
            log_level=os.getenv("NAVIGATOR_LOG_LEVEL", "INFO").upper(),
        )
