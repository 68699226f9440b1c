"""Standardized error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error body for domain exceptions."""

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")


class UnresolvedProfileErrorResponse(ErrorResponse):
    """Error body listing the languages left without a quality profile."""

    languages: list[str] = Field(..., description="Unresolved language keys, sorted")
    project: str | None = Field(None, description="Project key, when searching for a project")
