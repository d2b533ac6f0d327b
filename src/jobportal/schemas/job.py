from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JobPostingInput(BaseModel):
    """Payload accepted when publishing a job posting."""

    title: str = Field(min_length=1, description="Title of the job")
    company: str = Field(min_length=1, description="Hiring company")
    location: str = Field(min_length=1, description="Job location (e.g., Remote or Noida Sector 90)")
    experience_required: str | None = Field(
        default=None,
        alias="experienceRequired",
        description="Experience required for the job (e.g., 3+ years)",
    )
    salary: int | float | None = Field(default=None, ge=0, description="Annual salary")
    description: str = Field(min_length=10, description="Description of the role")
    skills_required: list[str] = Field(
        alias="skillsRequired", description="Skills required for the job"
    )

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class JobPosting(JobPostingInput):
    """Stored job posting with its store-assigned identifier."""

    id: int = Field(ge=1)
