"""Manual live check against the real Asana API. Needs ASANA_ACCESS_TOKEN or a .token file."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from asana_api import (
    AsanaApiErrors,
    AsanaClientError,
    MissingTokenError,
    User,
    UserCompact,
    create_client_from_env,
)
from asana_api.endpoints import users


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val else default


def _print_step(title: str) -> None:
    print(f"\n== {title}")


def _fail(msg: str) -> int:
    print(f"FAILED: {msg}")
    return 1


def run_smoke_test() -> int:
    level = _env("SMOKE_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))

    try:
        client = create_client_from_env()
    except MissingTokenError as exc:
        return _fail(str(exc))

    print("Config:")
    print(f"  base_url: {client.base_url}")

    with client:
        # --- Current user ---
        _print_step("Current user")
        try:
            me = client.get_model(User, users.me())
        except AsanaApiErrors as exc:
            return _fail(f"/users/me failed: {exc}")
        except AsanaClientError as exc:
            return _fail(f"/users/me request failed: {exc}")
        print(f"Authenticated as {me.name} <{me.email}> (gid={me.gid})")

        # --- Users in first workspace ---
        _print_step("Workspace users")
        if not me.workspaces:
            return _fail("Authenticated user has no workspaces.")
        ws = me.workspaces[0]
        env = client.get(users.workspace(ws.gid))
        members = env.values(UserCompact)
        if members is None:
            return _fail(f"Unexpected response for workspace users: {env.errors()}")
        print(f"{len(members)} user(s) in workspace '{ws.name}'")

        # --- Invalid gid reports errors in the envelope ---
        _print_step("Invalid user gid")
        env = client.get(users.user("something not valid"))
        errors = env.errors()
        if not errors:
            return _fail("Expected Asana to report an error for an invalid gid.")
        print(f"Asana reported: {errors[0].message}")

    print("\nPASSED smoke test.")
    return 0


def main() -> None:
    sys.exit(run_smoke_test())


if __name__ == "__main__":
    main()
