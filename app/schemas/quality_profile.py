from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    """Filters of a quality profile search."""

    defaults: bool = False
    project_key: str | None = None
    profile_name: str | None = None
    language: str | None = None
    organization_key: str | None = None


class QualityProfile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    name: str
    language: str
    language_name: str | None = None
    organization: str
    is_default: bool
    is_inherited: bool
    parent_key: str | None = None
    rules_updated_at: datetime | None = None


class SearchResponse(BaseModel):
    profiles: list[QualityProfile] = Field(default_factory=list)


class Language(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    name: str
