"""Planner output: one decorated search variant for a skill."""

from pydantic import BaseModel, ConfigDict


class SkillQuery(BaseModel):
    """A single search variant.

    ``display_term`` is the phrase actually sent upstream;
    ``base_skill`` is always the literal skill the caller asked about.
    """
    model_config = ConfigDict(frozen=True)

    base_skill: str
    display_term: str
    result_cap: int
    result_offset: int = 0
