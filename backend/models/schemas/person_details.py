"""Upstream genome/bios payload, reduced to the fields the frontend renders."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _TorreModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class Location(_TorreModel):
    name: str | None = None
    short_name: str | None = None
    country: str | None = None
    country_code: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    place_id: str | None = None


class Person(_TorreModel):
    id: str | None = None
    name: str | None = None
    professional_headline: str | None = None
    picture: str | None = None
    summary_of_bio: str | None = None
    public_id: str | None = None
    location: Location | None = None


class Strength(_TorreModel):
    """A skill listed on the profile."""
    id: str | None = None
    name: str | None = None
    experience: str | None = None
    proficiency: str | None = None
    weight: float | None = None


class Organization(_TorreModel):
    id: int | None = None
    name: str | None = None
    public_id: str | None = None
    picture: str | None = None
    theme: str | None = None
    service_type: str | None = None
    website_url: str | None = None
    about: str | None = None


class Experience(_TorreModel):
    id: str | None = None
    name: str | None = None
    organizations: list[Organization] | None = None
    from_month: str | None = None
    from_year: str | None = None
    to_month: str | None = None
    to_year: str | None = None


class Education(Experience):
    pass


class PersonDetails(_TorreModel):
    """Profile returned by ``GET /api/profile/{username}``."""
    person: Person | None = None
    strengths: list[Strength] | None = None
    experiences: list[Experience] | None = None
    education: list[Education] | None = None
