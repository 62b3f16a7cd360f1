"""
Runtime configuration for the learning tracker.

Values come from the environment, after loading PROJECT_ROOT/.env:
- SUPABASE_URL, SUPABASE_ANON_KEY: hosted auth/profile backend
- LEARNTRACK_SEED_PATH: alternative seed YAML
- LEARNTRACK_LOG_LEVEL: logging level for the app (default INFO)
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

PROJECT_ROOT = Path(__file__).parent.parent


class ConfigError(Exception):
    """Raised when a required setting is missing."""


class Settings(BaseModel):
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    seed_path: Optional[Path] = None
    log_level: str = "INFO"

    @property
    def auth_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    def require_supabase(self) -> tuple[str, str]:
        """Return (url, anon key) or raise ConfigError if either is missing."""
        if not self.auth_enabled:
            raise ConfigError(
                "Missing Supabase environment variables. "
                "Set SUPABASE_URL and SUPABASE_ANON_KEY in your .env file."
            )
        return self.supabase_url, self.supabase_anon_key


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from the environment (and the .env file, if present)."""
    load_dotenv(env_file or PROJECT_ROOT / ".env")

    seed_path = os.environ.get("LEARNTRACK_SEED_PATH")
    return Settings(
        supabase_url=os.environ.get("SUPABASE_URL") or None,
        supabase_anon_key=os.environ.get("SUPABASE_ANON_KEY") or None,
        seed_path=Path(seed_path) if seed_path else None,
        log_level=os.environ.get("LEARNTRACK_LOG_LEVEL", "INFO").upper(),
    )
