"""Recover the bare skill token from a decorated search phrase."""

SENIORITY_PREFIXES = ("senior ", "junior ", "lead ", "entry level ")
ROLE_SUFFIXES = (" developer", " engineer", " programmer", " specialist", " expert", " architect")


def normalize_skill_name(term: str) -> str:
    """Lower-case ``term`` and strip at most one prefix and one suffix.

    >>> normalize_skill_name("senior javascript expert")
    'javascript'
    """
    skill = term.lower()

    for prefix in SENIORITY_PREFIXES:
        if skill.startswith(prefix):
            skill = skill[len(prefix):]
            break

    for suffix in ROLE_SUFFIXES:
        if skill.endswith(suffix):
            skill = skill[: -len(suffix)]
            break

    return skill.strip()
