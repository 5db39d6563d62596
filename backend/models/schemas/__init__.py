"""Internal Pydantic contracts for the distribution pipeline and upstream records."""

from models.schemas.distribution import DistributionEntry, DistributionResult, ProficiencyBucket
from models.schemas.person_details import PersonDetails
from models.schemas.profile_record import ProfileRecord
from models.schemas.skill_query import SkillQuery

__all__ = [
    "SkillQuery",
    "ProfileRecord",
    "ProficiencyBucket",
    "DistributionEntry",
    "DistributionResult",
    "PersonDetails",
]
