"""Skill compensation pass-through over Torre.ai's people analysis endpoint."""

import logging
from typing import Any

from models.responses import SkillCompensationResponse
from services.torre_client import TorreClient, UpstreamError

logger = logging.getLogger(__name__)

# Torre.ai reports hourly rates; 40h/week * 50 weeks
HOURS_PER_YEAR = 40 * 50


def build_payload(skill: str) -> dict[str, Any]:
    return {
        "query": {
            "skill": {
                "term": skill,
                "experience": "unknown",
                "proficiency": "no-experience-interested",
            }
        },
        "analysis": {
            "compensation": {
                "mean": True,
                "suggested": True,
                "min": True,
                "max": True,
                "deciles": False,
                "quartiles": False,
                "histogram": False,
            },
            "weighted": True,
        },
    }


def parse_compensation(body: dict[str, Any], skill: str) -> SkillCompensationResponse:
    """Map the analysis body to yearly figures. Missing stats stay at 0."""
    response = SkillCompensationResponse(skill=skill)
    result = body.get("result") or {}
    compensation = result.get("compensation") if isinstance(result, dict) else None

    try:
        if isinstance(compensation, dict):
            if "mean" in compensation:
                response.average_compensation = float(compensation["mean"]) * HOURS_PER_YEAR
            if "suggested" in compensation:
                response.median_compensation = float(compensation["suggested"]) * HOURS_PER_YEAR
            if "min" in compensation:
                response.min_compensation = float(compensation["min"]) * HOURS_PER_YEAR
            if "max" in compensation:
                response.max_compensation = float(compensation["max"]) * HOURS_PER_YEAR
            if "total" in compensation:
                response.data_points = int(compensation["total"] or 0)

        if "total" in body:
            response.data_points = int(body["total"] or 0)
    except (TypeError, ValueError) as e:
        raise UpstreamError(f"Failed to parse Torre.ai compensation response: {e}") from e

    return response


async def analyze_skill_compensation(client: TorreClient, skill: str) -> SkillCompensationResponse:
    logger.info("Getting skill compensation for: %s", skill)
    body = await client.analyze(build_payload(skill))
    return parse_compensation(body, skill)
