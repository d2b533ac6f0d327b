"""Tool handlers operating on the entity store."""

from __future__ import annotations

import structlog

from .core.filters import JOB_FIELDS, PROFILE_FIELDS, filter_records
from .core.matching import RandomMatcher
from .core.store import EntityStore
from .schemas import (
    CandidateProfileInput,
    DeleteJobInput,
    DeleteProfileInput,
    FilterJobsInput,
    FilterProfilesInput,
    JobPostingInput,
    MatchJobsForProfileInput,
    MatchProfilesForJobInput,
    ToolResponse,
    make_error,
    make_success,
)


class PortalHandlers:
    """Implements every portal tool; each call returns a ``ToolResponse``."""

    def __init__(self, *, store: EntityStore, matcher: RandomMatcher | None = None) -> None:
        self._store = store
        self._matcher = matcher or RandomMatcher()
        self._logger = structlog.get_logger(__name__)

    def create_profile(self, params: CandidateProfileInput) -> ToolResponse:
        profile = self._store.profiles.insert(params)
        self._logger.info("profile.created", profile_id=profile["id"])
        return make_success(profile)

    def create_job(self, params: JobPostingInput) -> ToolResponse:
        job = self._store.jobs.insert(params)
        self._logger.info("job.created", job_id=job["id"])
        return make_success(job)

    def delete_profile(self, params: DeleteProfileInput) -> ToolResponse:
        deleted = self._store.profiles.delete(params.id)
        if deleted is None:
            return make_error("PROFILE_NOT_FOUND", f"Profile with ID {params.id} not found")
        self._logger.info("profile.deleted", profile_id=params.id)
        return make_success(
            {
                "message": "Profile deleted successfully",
                "deletedProfile": {"id": deleted["id"], "name": deleted["name"]},
            }
        )

    def delete_job(self, params: DeleteJobInput) -> ToolResponse:
        deleted = self._store.jobs.delete(params.id)
        if deleted is None:
            return make_error("JOB_NOT_FOUND", f"Job with ID {params.id} not found")
        self._logger.info("job.deleted", job_id=params.id)
        return make_success(
            {
                "message": "Job deleted successfully",
                "deletedJob": {
                    "id": deleted["id"],
                    "title": deleted["title"],
                    "company": deleted["company"],
                },
            }
        )

    def match_jobs_for_profile(self, params: MatchJobsForProfileInput) -> ToolResponse:
        if self._store.profiles.get(params.profile_id) is None:
            return make_error(
                "PROFILE_NOT_FOUND", f"Profile with ID {params.profile_id} not found"
            )
        matched = self._matcher.select(self._store.jobs.list())
        return make_success(
            {
                "profileId": params.profile_id,
                "matchedJobs": matched,
                "totalMatches": len(matched),
            }
        )

    def match_profiles_for_job(self, params: MatchProfilesForJobInput) -> ToolResponse:
        if self._store.jobs.get(params.job_id) is None:
            return make_error("JOB_NOT_FOUND", f"Job with ID {params.job_id} not found")
        matched = self._matcher.select(self._store.profiles.list())
        return make_success(
            {
                "jobId": params.job_id,
                "matchedProfiles": matched,
                "totalMatches": len(matched),
            }
        )

    def filter_profiles(self, params: FilterProfilesInput) -> ToolResponse:
        filtered = filter_records(
            self._store.profiles.list(), params.to_criteria(), PROFILE_FIELDS
        )
        return make_success({"count": len(filtered), "profiles": list(filtered)})

    def filter_jobs(self, params: FilterJobsInput) -> ToolResponse:
        filtered = filter_records(self._store.jobs.list(), params.to_criteria(), JOB_FIELDS)
        return make_success({"count": len(filtered), "jobs": list(filtered)})
