from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProficiencyLevel(_CamelModel):
    level: str
    percentage: int = 0
    count: int = 0
    average_experience: str | None = None  # reserved, never populated


class SkillDistributionResponse(_CamelModel):
    skill: str
    distribution: list[ProficiencyLevel] = []
    total_profiles: int = 0
    source: str = "Torre.ai"


class SkillCompensationResponse(_CamelModel):
    skill: str
    average_compensation: float = 0.0
    median_compensation: float = 0.0
    min_compensation: float = 0.0
    max_compensation: float = 0.0
    currency: str = "USD"
    periodicity: str = "yearly"
    data_points: int = 0
    source: str = "Torre.ai"


class PersonResult(_CamelModel):
    id: str
    name: str
    professional_headline: str | None = None
    picture: str | None = None
    username: str | None = None


class PaginationInfo(_CamelModel):
    total: int = 0
    current_page: int = 1
    page_size: int = 20
    total_results: int = 0


class PeopleSearchResponse(_CamelModel):
    results: list[PersonResult] = []
    pagination: PaginationInfo = PaginationInfo()
