from dotenv import load_dotenv
load_dotenv()
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class Settings:
    """
    Runtime configuration for the store directory service.

    Values can be overridden via environment variables (or a local `.env`).
    """

    # Store document and static front-end (relative to the working directory by default)
    STORES_PATH: Path = Path(os.getenv("STORES_PATH", "data/stores.json"))
    STATIC_DIR: Path = Path(os.getenv("STATIC_DIR", "public"))

    # HTTP server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "3000"))
    CORS_ORIGINS: List[str] = field(
        default_factory=lambda: _split_origins(
            os.getenv("CORS_ORIGINS", "http://localhost:3000")
        )
    )

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
