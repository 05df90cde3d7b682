"""
Role-based permission capability.

Accounts live outside this service; the API only needs to know whether
the caller's role may perform an action.

- ``admin``: everything
- ``coach``: record tests and edit players
- ``viewer``: read only (parents / players)
"""

from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    COACH = "coach"
    VIEWER = "viewer"


class Action(str, Enum):
    CREATE_TEST = "createTest"
    EDIT_PLAYERS = "editPlayers"
    MANAGE_ACCOUNTS = "manageAccounts"


ROLE_LABELS: dict[Role, str] = {
    Role.ADMIN: "Amministratore",
    Role.COACH: "Maestro",
    Role.VIEWER: "Genitore / Allievo",
}

_COACH_ACTIONS = frozenset({Action.CREATE_TEST, Action.EDIT_PLAYERS})


def can(role: Role | None, action: Action) -> bool:
    """Return ``True`` if *role* may perform *action*."""
    if role is None:
        return False
    if role == Role.ADMIN:
        return True
    if role == Role.COACH:
        return action in _COACH_ACTIONS
    return False
