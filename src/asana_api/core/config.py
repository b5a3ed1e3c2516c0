from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from ..client import BASE_URL, AsanaClient

DEFAULT_TOKEN_FILE = ".token"


class MissingTokenError(ValueError):
    """Raised when no personal access token can be found."""


def read_token_file(path: Optional[str] = None) -> str:
    """Read a personal access token from a file, or "" if it does not exist."""
    token_path = Path(path or os.getenv("ASANA_TOKEN_FILE", "") or DEFAULT_TOKEN_FILE)
    if not token_path.is_file():
        return ""
    return token_path.read_text(encoding="utf-8").strip()


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Load Asana base URL and access token from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    base_url = os.getenv("ASANA_BASE_URL", "").strip() or BASE_URL
    token = os.getenv("ASANA_ACCESS_TOKEN", "").strip() or read_token_file()
    return base_url, token


def create_client_from_env(**kwargs) -> AsanaClient:
    """Create an AsanaClient from environment variables."""
    base_url, token = load_env_config()
    if not token:
        raise MissingTokenError(
            "Missing ASANA_ACCESS_TOKEN in environment and no token file found."
        )
    kwargs.setdefault("base_url", base_url)
    return AsanaClient(token, **kwargs)


__all__ = [
    "DEFAULT_TOKEN_FILE",
    "MissingTokenError",
    "read_token_file",
    "load_env_config",
    "create_client_from_env",
]
