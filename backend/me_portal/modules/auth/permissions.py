"""Role checks for portal actions"""
import enum
from typing import Optional

from me_portal.models.staff import Staff, StaffRole


class Action(str, enum.Enum):
    CREATE_TEAM = "create_team"
    CREATE_STRATEGIC_OBJECTIVE = "create_strategic_objective"
    CREATE_PROJECT = "create_project"
    CREATE_LIVELIHOOD = "create_livelihood"
    CREATE_WORKSHOP = "create_workshop"
    VIEW_RECORDS = "view_records"


# Actions any signed-in staff member may perform
READ_ACTIONS = frozenset({Action.VIEW_RECORDS})


def is_authorized(user: Optional[Staff], action: Action) -> bool:
    """Writes are ADMIN-only; reads need nothing beyond a resolved user"""
    if user is None:
        return False
    if action in READ_ACTIONS:
        return True
    return user.role == StaffRole.ADMIN
