"""Tool definitions exposed by the portal server."""

from __future__ import annotations

from .handlers import PortalHandlers
from .registry import ToolDefinition
from .schemas import (
    CandidateProfileInput,
    DeleteJobInput,
    DeleteProfileInput,
    FilterJobsInput,
    FilterProfilesInput,
    JobPostingInput,
    MatchJobsForProfileInput,
    MatchProfilesForJobInput,
)


def build_tools(handlers: PortalHandlers) -> list[ToolDefinition]:
    """Return every tool bound to ``handlers``, in registration order."""
    return [
        ToolDefinition(
            name="create_profile",
            title="Create Candidate Profile",
            description=(
                "Create a new candidate profile with name, email, phone, skills, "
                "experience, and location preferences."
            ),
            input_model=CandidateProfileInput,
            handler=handlers.create_profile,
            failure_code="CREATE_PROFILE_FAILED",
        ),
        ToolDefinition(
            name="create_job",
            title="Create Job Posting",
            description=(
                "Create a new job posting with title, company, location, description, "
                "required skills, and experience requirements."
            ),
            input_model=JobPostingInput,
            handler=handlers.create_job,
            failure_code="CREATE_JOB_FAILED",
        ),
        ToolDefinition(
            name="delete_profile",
            title="Delete Candidate Profile",
            description="Delete an existing candidate profile by ID.",
            input_model=DeleteProfileInput,
            handler=handlers.delete_profile,
            failure_code="DELETE_PROFILE_FAILED",
        ),
        ToolDefinition(
            name="delete_job",
            title="Delete Job Posting",
            description="Delete an existing job posting by ID.",
            input_model=DeleteJobInput,
            handler=handlers.delete_job,
            failure_code="DELETE_JOB_FAILED",
        ),
        ToolDefinition(
            name="match_jobs_for_profile",
            title="Match Jobs for Candidate Profile",
            description="Find job opportunities for a candidate profile (simulated match service).",
            input_model=MatchJobsForProfileInput,
            handler=handlers.match_jobs_for_profile,
            failure_code="MATCH_API_ERROR",
        ),
        ToolDefinition(
            name="match_profiles_for_job",
            title="Match Candidates for Job Posting",
            description="Find candidate profiles for a job posting (simulated match service).",
            input_model=MatchProfilesForJobInput,
            handler=handlers.match_profiles_for_job,
            failure_code="MATCH_API_ERROR",
        ),
        ToolDefinition(
            name="filter_profiles",
            title="Filter Candidate Profiles",
            description=(
                "Filter candidate profiles by name, email, phone, location, skill, "
                "or experience company/role. All criteria must match."
            ),
            input_model=FilterProfilesInput,
            handler=handlers.filter_profiles,
            failure_code="FILTER_ERROR",
        ),
        ToolDefinition(
            name="filter_jobs",
            title="Filter Job Postings",
            description=(
                "Filter job postings by title, company, location, experience, salary, "
                "description, or required skill. All criteria must match."
            ),
            input_model=FilterJobsInput,
            handler=handlers.filter_jobs,
            failure_code="FILTER_ERROR",
        ),
    ]
