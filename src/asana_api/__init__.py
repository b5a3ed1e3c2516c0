"""asana_api package exports."""

from .client import BASE_URL, AsanaClient
from .core.config import MissingTokenError, create_client_from_env, load_env_config
from .envelope import (
    Envelope,
    EnvelopeKind,
    Extraction,
    ExtractionFailure,
    parse_envelope,
)
from .errors import (
    AsanaApiErrors,
    AsanaClientError,
    AsanaParseError,
    AsanaTransportError,
)
from .models import (
    ApiError,
    AsanaNamedResource,
    AsanaResource,
    Photo,
    User,
    UserCompact,
    Workspace,
)

__all__ = [
    # Client
    "AsanaClient",
    "BASE_URL",
    # Envelope
    "Envelope",
    "EnvelopeKind",
    "Extraction",
    "ExtractionFailure",
    "parse_envelope",
    # Exceptions
    "AsanaClientError",
    "AsanaTransportError",
    "AsanaParseError",
    "AsanaApiErrors",
    "MissingTokenError",
    # Schemas
    "ApiError",
    "AsanaResource",
    "AsanaNamedResource",
    "UserCompact",
    "Workspace",
    "Photo",
    "User",
    # Config
    "create_client_from_env",
    "load_env_config",
]
