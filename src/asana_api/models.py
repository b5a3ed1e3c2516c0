from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ApiError(BaseModel):
    """One entry of an Asana `errors` array. Every field may be absent."""

    help: Optional[str] = None
    message: Optional[str] = None
    phrase: Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


# --- Base Resources ---


class AsanaResource(BaseModel):
    """
    Any Asana entity. The API always returns `gid` as a string,
    even though it looks numeric.
    """

    gid: str
    resource_type: str

    model_config = ConfigDict(extra="ignore")


class AsanaNamedResource(AsanaResource):
    name: str


# --- Compact Records ---


class UserCompact(AsanaNamedResource):
    pass


# --- Full Records ---


class Workspace(AsanaNamedResource):
    email_domains: Optional[List[str]] = None
    is_organization: Optional[bool] = None


class Photo(BaseModel):
    image_21x21: str
    image_27x27: str
    image_36x36: str
    image_60x60: str
    image_128x128: str
    # Only present on some accounts
    image_1024x1024: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class User(AsanaNamedResource):
    email: str
    photo: Optional[Photo] = None
    workspaces: List[Workspace]

    def workspace_gids(self) -> List[str]:
        return [ws.gid for ws in self.workspaces]

    def to_compact(self) -> UserCompact:
        return UserCompact(
            gid=self.gid,
            resource_type=self.resource_type,
            name=self.name,
        )


__all__ = [
    "ApiError",
    "AsanaResource",
    "AsanaNamedResource",
    "UserCompact",
    "Workspace",
    "Photo",
    "User",
]
