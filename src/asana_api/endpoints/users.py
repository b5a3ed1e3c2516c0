"""
Paths for the Asana users endpoints.
See https://developers.asana.com/reference/users
"""

from typing import Optional

from ._paths import segment, with_query


def me(*, opt_fields: Optional[str] = None) -> str:
    """
    The current authenticated user. Equivalent to `user(gid)` with the
    authenticated user's gid.
    """
    return with_query("/users/me", opt_fields=opt_fields)


def users(
    *, workspace: Optional[str] = None, team: Optional[str] = None
) -> str:
    """
    All users in all workspaces and organizations accessible to the
    authenticated user, optionally narrowed to one workspace or team.
    Results are sorted by user ID.
    """
    return with_query("/users", workspace=workspace, team=team)


def user(user_gid: str, *, opt_fields: Optional[str] = None) -> str:
    """The full user record for the single user with the given gid."""
    return with_query(f"/users/{segment(user_gid)}", opt_fields=opt_fields)


def favorites(user_gid: str, resource_type: str, workspace_gid: str) -> str:
    """
    A user's favorites of one resource type in the given workspace, in
    sidebar order.
    """
    return with_query(
        f"/users/{segment(user_gid)}/favorites",
        resource_type=resource_type,
        workspace=workspace_gid,
    )


def team(team_gid: str) -> str:
    """Compact records for all users that are members of the team."""
    return f"/teams/{segment(team_gid)}/users"


def workspace(workspace_gid: str) -> str:
    """
    User records for all users in the workspace or organization, sorted
    alphabetically by name.
    """
    return f"/workspaces/{segment(workspace_gid)}/users"


__all__ = ["me", "users", "user", "favorites", "team", "workspace"]
