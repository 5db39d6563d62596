"""Aggregator output: proficiency buckets and the final distribution."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ProficiencyBucket(str, Enum):
    """The four proficiency tiers, in enumeration (and output) order."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


DistributionCount = dict[ProficiencyBucket, int]


def empty_count() -> DistributionCount:
    return {bucket: 0 for bucket in ProficiencyBucket}


class DistributionEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: ProficiencyBucket
    percentage: int  # floor(count * 100 / total)
    count: int


class DistributionResult(BaseModel):
    """Structured output of one distribution estimate.

    ``entries`` holds only buckets with a non-zero count. Percentages are
    truncated per bucket, so they may sum to slightly less than 100.
    """
    model_config = ConfigDict(frozen=True)

    skill: str
    entries: tuple[DistributionEntry, ...] = ()
    total_profiles: int = 0
