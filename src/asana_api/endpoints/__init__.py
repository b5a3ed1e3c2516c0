"""Resource path builders, relative to the API root."""

from . import users
from ._paths import segment, with_query

__all__ = ["users", "segment", "with_query"]
