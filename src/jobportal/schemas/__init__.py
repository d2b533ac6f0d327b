"""Pydantic schema definitions for portal records, tool inputs and envelopes."""

from __future__ import annotations

from .envelope import ErrorObject, ToolResponse, make_error, make_success
from .job import JobPosting, JobPostingInput
from .profile import CandidateProfile, CandidateProfileInput, ExperienceEntry
from .tools import (
    PROFILE_CRITERIA_ALIASES,
    DeleteJobInput,
    DeleteProfileInput,
    FilterJobsInput,
    FilterProfilesInput,
    MatchJobsForProfileInput,
    MatchProfilesForJobInput,
)

__all__ = [
    "PROFILE_CRITERIA_ALIASES",
    "CandidateProfile",
    "CandidateProfileInput",
    "DeleteJobInput",
    "DeleteProfileInput",
    "ErrorObject",
    "ExperienceEntry",
    "FilterJobsInput",
    "FilterProfilesInput",
    "JobPosting",
    "JobPostingInput",
    "MatchJobsForProfileInput",
    "MatchProfilesForJobInput",
    "ToolResponse",
    "make_error",
    "make_success",
]
