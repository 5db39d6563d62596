"""Classifier input: the subset of an upstream search hit the heuristic reads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileRecord(BaseModel):
    """A person returned by the search endpoint.

    Every field is optional upstream; absent or null values fall back to
    the defaults below. Scalar ``name``/``professionalHeadline`` values are
    read as text. Non-numeric ``weight``/``completion`` raise a
    ``ValidationError``.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str = ""
    professional_headline: str = Field(default="", alias="professionalHeadline")
    weight: float = 0.0
    completion: float = 0.0  # 0.0-1.0 fraction

    @field_validator("name", "professional_headline", mode="before")
    @classmethod
    def _as_text(cls, v: Any) -> Any:
        # scalars read as their text form; null and containers read as ""
        if v is None or isinstance(v, (dict, list)):
            return ""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("weight", "completion", mode="before")
    @classmethod
    def _none_to_zero(cls, v: Any) -> Any:
        return 0.0 if v is None else v
