from pydantic import BaseModel, Field


class PeopleSearchRequest(BaseModel):
    query: str | None = Field(None, max_length=500, description="Free-text search term")
    limit: int = Field(100, ge=1, le=1000, description="Maximum number of people to return")
