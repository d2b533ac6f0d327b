from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ExperienceEntry(BaseModel):
    """Single employment history entry."""

    company: str = Field(min_length=1, description="Company name")
    role: str = Field(min_length=1, description="Role held at the company")
    duration: str = Field(min_length=1, description="Time spent in the role (e.g., 2 years)")

    model_config = ConfigDict(extra="forbid")


class CandidateProfileInput(BaseModel):
    """Payload accepted when registering a candidate profile."""

    name: str = Field(min_length=1, description="Full name of the candidate (e.g., Shrey Singhal)")
    email: EmailStr = Field(description="Email address of the candidate")
    phone: str = Field(min_length=10, description="Contact phone number, at least 10 digits")
    skills: list[str] = Field(description="Skills the candidate possesses (e.g., Python, SQL)")
    experience: list[ExperienceEntry] | None = Field(
        default=None, description="Work experience entries"
    )
    location: str | None = Field(default=None, description="Preferred work location (e.g., Remote)")

    model_config = ConfigDict(extra="forbid")


class CandidateProfile(CandidateProfileInput):
    """Stored candidate profile with its store-assigned identifier."""

    id: int = Field(ge=1)
