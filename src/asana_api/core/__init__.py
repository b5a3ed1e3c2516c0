"""Configuration helpers for asana_api."""

from .config import (
    DEFAULT_TOKEN_FILE,
    MissingTokenError,
    create_client_from_env,
    load_env_config,
    read_token_file,
)

__all__ = [
    "DEFAULT_TOKEN_FILE",
    "MissingTokenError",
    "create_client_from_env",
    "load_env_config",
    "read_token_file",
]
