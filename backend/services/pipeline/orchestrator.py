"""Pipeline orchestrator: estimate a skill's proficiency distribution.

Flow:
    skill
      ├─ plan_queries(skill)                    → 5 × SkillQuery
      ├─ for each variant:
      │     client.search_people(term, cap, offset) → raw profiles ([] on failure)
      │     normalize_skill_name(term)               → base skill
      │     classifier.classify(profile, base skill) → ProficiencyBucket
      └─ DistributionAggregator.result(skill)   → DistributionResult

Variants run sequentially with a courtesy delay after each search, or all at
once via asyncio.gather when ``distribution_concurrent`` is set. Concurrent
variants count into their own partial and are merged afterwards.
"""

import asyncio
import logging
from typing import Any, Protocol

from config import settings
from models.schemas.distribution import DistributionCount, DistributionResult, empty_count
from models.schemas.skill_query import SkillQuery
from services.pipeline.distribution_aggregator import DistributionAggregator
from services.pipeline.proficiency_classifier import ProficiencyClassifier
from services.pipeline.query_planner import plan_queries
from services.pipeline.skill_normalizer import normalize_skill_name

logger = logging.getLogger(__name__)


class PeopleSearcher(Protocol):
    async def search_people(self, term: str, limit: int, offset: int = 0) -> list[dict[str, Any]]:
        ...


def _base_skill_for(query: SkillQuery) -> str:
    if settings.rederive_base_skill:
        return normalize_skill_name(query.display_term)
    return query.base_skill


async def _run_variant(
    client: PeopleSearcher,
    classifier: ProficiencyClassifier,
    query: SkillQuery,
) -> DistributionCount:
    profiles = await client.search_people(query.display_term, query.result_cap, query.result_offset)
    base_skill = _base_skill_for(query)

    partial = empty_count()
    for profile in profiles:
        partial[classifier.classify(profile, base_skill)] += 1

    logger.info("Search '%s' -> %d profiles", query.display_term, len(profiles))
    return partial


async def estimate_distribution(
    skill: str,
    client: PeopleSearcher | None = None,
    classifier: ProficiencyClassifier | None = None,
    concurrent: bool | None = None,
    delay_seconds: float | None = None,
) -> DistributionResult:
    """Run the fan-out search and return the aggregated distribution.

    Never raises: a failing variant is logged and contributes no profiles,
    so a fully unreachable upstream yields an empty result.
    """
    if client is None:
        from services.torre_client import get_client
        client = get_client()
    classifier = classifier or ProficiencyClassifier()
    concurrent = settings.distribution_concurrent if concurrent is None else concurrent
    delay = settings.search_delay_seconds if delay_seconds is None else delay_seconds

    logger.info("Analyzing skill proficiency distribution for: %s", skill)
    queries = plan_queries(skill)
    aggregator = DistributionAggregator()

    if concurrent:
        outcomes = await asyncio.gather(
            *(_run_variant(client, classifier, q) for q in queries),
            return_exceptions=True,
        )
        for query, outcome in zip(queries, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.warning("Search failed for '%s': %s", query.display_term, outcome)
                continue
            aggregator.merge(outcome)
    else:
        for query in queries:
            try:
                aggregator.merge(await _run_variant(client, classifier, query))
            except Exception as e:
                logger.warning("Search failed for '%s': %s", query.display_term, e)
            if delay > 0:
                await asyncio.sleep(delay)

    result = aggregator.result(skill)
    logger.info(
        "Distribution analysis completed for '%s': %d total profiles analyzed across %d levels",
        skill, result.total_profiles, len(result.entries),
    )
    return result
