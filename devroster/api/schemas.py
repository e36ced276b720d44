"""
Pydantic models for the developer REST surface.

JSON uses camelCase names (experienceYears, imageUrl); Python code uses
snake_case. Both are accepted on input.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Largest accepted experienceYears
MAX_EXPERIENCE_YEARS = 100


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        from_attributes=True,
    )


class SkillsSchema(CamelModel):
    """All six ratings are required - Skills is never partial"""
    communicative: int
    efficient: int
    immaculate: int
    problemsolver: int
    timely: int
    tinker: int


class DeveloperCreate(CamelModel):
    """Request to add a developer. Any id in the body is ignored."""
    name: str = Field(..., min_length=1, description="Display name")
    position: str = Field(..., description="Job title")
    location: str = Field(..., description="City or region")
    experience_years: int = Field(..., ge=0, le=MAX_EXPERIENCE_YEARS, description="Years of professional experience")
    image_url: str = Field(..., description="Avatar URL")
    skills: SkillsSchema


class DeveloperUpdate(CamelModel):
    """
    Request to edit a developer.

    Only submitted fields are replaced. The form wiring echoes the id in the
    body; when present it must match the id in the URL.
    """
    id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = None
    location: Optional[str] = None
    experience_years: Optional[int] = Field(None, ge=0, le=MAX_EXPERIENCE_YEARS)
    image_url: Optional[str] = None
    skills: Optional[SkillsSchema] = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = [
            name for name in self.model_fields_set
            if name != "id" and getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(sorted(nulls))}")
        return self


class DeveloperResponse(CamelModel):
    """Developer as returned by the API"""
    id: str
    name: str
    position: str
    location: str
    experience_years: int
    image_url: str
    skills: SkillsSchema
