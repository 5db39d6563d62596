"""Distribution aggregator: fold bucket counts into a percentage breakdown."""

import logging

from models.schemas.distribution import (
    DistributionCount,
    DistributionEntry,
    DistributionResult,
    ProficiencyBucket,
    empty_count,
)

logger = logging.getLogger(__name__)


class DistributionAggregator:
    """Owns the bucket counts for one estimate run.

    ``merge`` adds a partial count from a concurrently processed variant;
    addition is commutative, so merge order does not matter.
    """

    def __init__(self) -> None:
        self._counts: DistributionCount = empty_count()

    @property
    def counts(self) -> DistributionCount:
        return dict(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def add(self, bucket: ProficiencyBucket) -> None:
        self._counts[bucket] += 1

    def merge(self, partial: DistributionCount) -> None:
        for bucket, n in partial.items():
            if n < 0:
                raise ValueError(f"Negative count for {bucket.value}: {n}")
            self._counts[bucket] += n

    def result(self, skill: str) -> DistributionResult:
        total = self.total
        if total == 0:
            return DistributionResult(skill=skill)

        # Truncated independently per bucket: the sum may fall short of 100.
        entries: list[DistributionEntry] = []
        for bucket in ProficiencyBucket:
            count = self._counts[bucket]
            if count > 0:
                percentage = (count * 100) // total
                entries.append(DistributionEntry(level=bucket, percentage=percentage, count=count))
                logger.debug("%s - %s: %d (%d%%)", skill, bucket.value, count, percentage)

        return DistributionResult(skill=skill, entries=tuple(entries), total_profiles=total)
