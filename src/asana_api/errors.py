from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .models import ApiError


class AsanaClientError(Exception):
    """Base error for client failures."""


class AsanaTransportError(AsanaClientError):
    def __init__(self, message: str, *, method: str, url: str):
        super().__init__(message)
        self.method = method
        self.url = url


class AsanaParseError(AsanaClientError):
    pass


class AsanaApiErrors(AsanaClientError):
    """
    Raised by the consuming extraction forms.
    - `errors` holds the API-reported errors in response order
    - An empty `errors` list means `data` did not match the requested type;
      `detail` then carries the validation message
    """

    def __init__(self, errors: List["ApiError"], *, detail: Optional[str] = None):
        self.errors = list(errors)
        self.detail = detail
        if self.errors:
            summary = "; ".join(e.message or e.phrase or "unknown error" for e in self.errors)
            message = f"Asana reported {len(self.errors)} error(s): {summary}"
        else:
            message = f"Response data did not match the requested type: {detail}"
        super().__init__(message)


__all__ = [
    "AsanaClientError",
    "AsanaTransportError",
    "AsanaParseError",
    "AsanaApiErrors",
]
