# Re-export all models for convenient imports
from me_portal.models.staff import Staff, StaffRole
from me_portal.models.team import Team
from me_portal.models.progress import ProgressStatus, progress_percentage
from me_portal.models.strategic_objective import StrategicObjective
from me_portal.models.project import Project
from me_portal.models.livelihood import Livelihood, DisaggregatedSex, AgeGroup, AGE_GROUP_LABELS
from me_portal.models.workshop import Workshop

__all__ = [
    # Staff
    "Staff",
    "StaffRole",
    # Organisation
    "Team",
    "StrategicObjective",
    "Project",
    "ProgressStatus",
    "progress_percentage",
    # Participants
    "Livelihood",
    "Workshop",
    "DisaggregatedSex",
    "AgeGroup",
    "AGE_GROUP_LABELS",
]
