"""Centralised runtime settings for strip-tags.

Values can be overridden via environment variables or a `.env` file in
the project root (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # BeautifulSoup tree builder used to parse markup.
    parser: str = field(
        default_factory=lambda: os.environ.get("STRIP_TAGS_PARSER", "lxml")
    )
    # Unset means each entry point picks its own default level.
    log_level: Optional[str] = field(
        default_factory=lambda: os.environ.get("STRIP_TAGS_LOG_LEVEL") or None
    )


# Module-level singleton:
#   from extraction.settings import settings
settings = Settings()
