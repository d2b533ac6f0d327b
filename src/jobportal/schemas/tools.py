"""Input models for the portal tools."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Profile criteria that search one sub-field of the experience entries.
PROFILE_CRITERIA_ALIASES = {"company": "experience.company", "role": "experience.role"}


class DeleteProfileInput(BaseModel):
    id: int = Field(ge=1, description="ID of the profile to delete")

    model_config = ConfigDict(extra="forbid")


class DeleteJobInput(BaseModel):
    id: int = Field(ge=1, description="ID of the job to delete")

    model_config = ConfigDict(extra="forbid")


class MatchJobsForProfileInput(BaseModel):
    profile_id: int = Field(ge=1, alias="profileId", description="Candidate profile to match jobs against")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class MatchProfilesForJobInput(BaseModel):
    job_id: int = Field(ge=1, alias="jobId", description="Job posting to match candidates against")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class FilterProfilesInput(BaseModel):
    """Optional profile criteria; every supplied value must match."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    skills: str | None = Field(default=None, description="Matches if the candidate has this skill")
    company: str | None = Field(default=None, description="Company in any experience entry")
    role: str | None = Field(default=None, description="Role in any experience entry")

    model_config = ConfigDict(extra="forbid")

    def to_criteria(self) -> dict[str, str]:
        supplied = _supplied(self.model_dump(exclude_none=True))
        return {PROFILE_CRITERIA_ALIASES.get(key, key): value for key, value in supplied.items()}


class FilterJobsInput(BaseModel):
    """Optional job criteria; every supplied value must match."""

    title: str | None = None
    company: str | None = None
    location: str | None = None
    experience_required: str | None = Field(default=None, alias="experienceRequired")
    salary: int | float | None = Field(default=None, description="Exact salary")
    description: str | None = None
    skills_required: str | None = Field(
        default=None,
        alias="skillsRequired",
        description="Matches if the job requires this skill",
    )

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_criteria(self) -> dict[str, str]:
        supplied = _supplied(self.model_dump(by_alias=True, exclude_none=True))
        return {key: str(value) for key, value in supplied.items()}


def _supplied(values: dict[str, Any]) -> dict[str, Any]:
    """Drop criteria left blank; an empty string counts as not supplied."""
    return {key: value for key, value in values.items() if value != ""}
