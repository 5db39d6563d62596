"""Query planner: expand one skill into the fixed set of search variants.

Each variant targets a different seniority/role slice of the candidate
population so the combined sample is not dominated by one headline style.
"""

from models.schemas.skill_query import SkillQuery

# (prefix, suffix, cap, offset)
_VARIANTS: tuple[tuple[str, str, int, int], ...] = (
    ("", "", 25, 0),                            # general
    ("senior ", " expert", 15, 0),              # senior professionals
    ("", " developer engineer", 25, 20),        # practitioners, offset for variety
    ("junior ", " trainee", 15, 0),             # entry level
    ("", " professional specialist", 20, 10),   # business / soft-skill profiles
)


def plan_queries(skill: str) -> list[SkillQuery]:
    return [
        SkillQuery(
            base_skill=skill,
            display_term=f"{prefix}{skill}{suffix}",
            result_cap=cap,
            result_offset=offset,
        )
        for prefix, suffix, cap, offset in _VARIANTS
    ]
