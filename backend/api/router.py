import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_torre_client
from config import settings
from models.requests import PeopleSearchRequest
from models.responses import (
    PeopleSearchResponse,
    ProficiencyLevel,
    SkillCompensationResponse,
    SkillDistributionResponse,
)
from models.schemas.person_details import PersonDetails
from services import compensation_service, people_search_service, profile_service
from services.pipeline.orchestrator import estimate_distribution
from services.torre_client import ProfileNotFoundError, TorreClient, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def _require_skill(skill: str) -> str:
    skill = skill.strip()
    if not skill:
        raise HTTPException(status_code=400, detail="Skill cannot be empty")
    return skill


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "torre_search_url": settings.torre_search_url,
    }


@router.get("/api/analyze/skill-distribution", response_model=SkillDistributionResponse)
@limiter.limit(settings.rate_limit)
async def skill_distribution(
    request: Request,
    skill: str = Query(...),
    client: TorreClient = Depends(get_torre_client),
):
    result = await estimate_distribution(skill, client=client)
    return SkillDistributionResponse(
        skill=result.skill,
        distribution=[
            ProficiencyLevel(level=e.level.value, percentage=e.percentage, count=e.count)
            for e in result.entries
        ],
        total_profiles=result.total_profiles,
    )


@router.get("/api/analyze/skill-compensation", response_model=SkillCompensationResponse)
@limiter.limit(settings.rate_limit)
async def skill_compensation(
    request: Request,
    skill: str = Query(..., max_length=100),
    client: TorreClient = Depends(get_torre_client),
):
    skill = _require_skill(skill)
    try:
        return await compensation_service.analyze_skill_compensation(client, skill)
    except UpstreamError as e:
        logger.error("Error analyzing skill compensation for %s: %s", skill, e)
        raise HTTPException(status_code=500, detail="Could not analyze skill compensation")


@router.post("/api/search/people", response_model=PeopleSearchResponse)
@limiter.limit(settings.rate_limit)
async def search_people(
    request: Request,
    body: PeopleSearchRequest,
    client: TorreClient = Depends(get_torre_client),
):
    if body.query is None or not body.query.strip():
        raise HTTPException(status_code=400, detail="Search query cannot be empty.")
    try:
        return await people_search_service.search_people(client, body.query, body.limit)
    except UpstreamError as e:
        logger.error("Error during people search: %s", e)
        raise HTTPException(status_code=500, detail={"message": f"Error searching people: {e}"})


@router.get(
    "/api/profile/{username}",
    response_model=PersonDetails,
    response_model_exclude_none=True,
)
@limiter.limit(settings.rate_limit)
async def get_profile(
    request: Request,
    username: str,
    client: TorreClient = Depends(get_torre_client),
):
    username = username.strip()
    if not username:
        raise HTTPException(status_code=400, detail="Username cannot be empty")
    try:
        return await profile_service.get_person_details(client, username)
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail=f"Profile '{username}' not found")
    except UpstreamError as e:
        logger.error("Failed to retrieve profile for username '%s': %s", username, e)
        raise HTTPException(status_code=500, detail="Could not retrieve profile")
