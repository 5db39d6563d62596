"""Proficiency classifier: score one search hit into a proficiency bucket.

The heuristic reads only the professional headline and two profile-quality
fields, then adds a random jitter in [0, 10) to spread profiles that share
the same headline pattern. It is an approximation, not a measurement.

Scoring:
    headline mentions the skill                        +15
    "senior" / "lead"                                  +25
    "architect" / "expert" / "principal" / "director"  +30
    "junior" / "trainee" / "intern" / "student"        +5
    "developer" / "engineer"                           +10
    completion > 0.7                                   +8
    weight > 1.0                                       +5
    jitter                                             +0..9

Thresholds (first match wins): >=40 expert, >=25 advanced,
>=15 intermediate, else beginner.
"""

import logging
import random
from collections.abc import Mapping
from typing import Any

from models.schemas.distribution import ProficiencyBucket
from models.schemas.profile_record import ProfileRecord

logger = logging.getLogger(__name__)

JITTER_RANGE = 10

# (keywords, points); a group scores once no matter how many keywords hit
_HEADLINE_SIGNALS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("senior", "lead"), 25),
    (("architect", "expert", "principal", "director"), 30),
    (("junior", "trainee", "intern", "student"), 5),
    (("developer", "engineer"), 10),
)

SKILL_MENTION_POINTS = 15
COMPLETION_THRESHOLD = 0.7
COMPLETION_POINTS = 8
WEIGHT_THRESHOLD = 1.0
WEIGHT_POINTS = 5

_THRESHOLDS: tuple[tuple[int, ProficiencyBucket], ...] = (
    (40, ProficiencyBucket.EXPERT),
    (25, ProficiencyBucket.ADVANCED),
    (15, ProficiencyBucket.INTERMEDIATE),
)


def bucket_for_score(score: int) -> ProficiencyBucket:
    for floor, bucket in _THRESHOLDS:
        if score >= floor:
            return bucket
    return ProficiencyBucket.BEGINNER


def base_score(profile: ProfileRecord, base_skill: str) -> int:
    """Score before jitter."""
    headline = profile.professional_headline.lower()
    score = 0

    if base_skill.lower() in headline:
        score += SKILL_MENTION_POINTS

    for keywords, points in _HEADLINE_SIGNALS:
        if any(k in headline for k in keywords):
            score += points

    if profile.completion > COMPLETION_THRESHOLD:
        score += COMPLETION_POINTS
    if profile.weight > WEIGHT_THRESHOLD:
        score += WEIGHT_POINTS

    return score


class ProficiencyClassifier:
    """Total classifier: every profile lands in exactly one bucket.

    Pass a seeded ``random.Random`` (or a stub with ``randrange``/``choice``)
    to pin the jitter in tests.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def classify(
        self, profile: ProfileRecord | Mapping[str, Any], base_skill: str
    ) -> ProficiencyBucket:
        try:
            record = (
                profile if isinstance(profile, ProfileRecord)
                else ProfileRecord.model_validate(profile)
            )
            score = base_score(record, base_skill) + self._rng.randrange(JITTER_RANGE)
        except (ValueError, TypeError, AttributeError) as e:
            bucket = self._rng.choice(list(ProficiencyBucket))
            logger.debug("Unreadable profile, picked %s at random: %s", bucket.value, e)
            return bucket

        bucket = bucket_for_score(score)
        logger.debug(
            "Profile '%s' -> %s (score %d, headline: %.50s)",
            record.name or "Unknown", bucket.value, score, record.professional_headline,
        )
        return bucket
