from __future__ import annotations

import pytest
from pydantic import ValidationError

from jobportal.schemas import (
    CandidateProfileInput,
    FilterJobsInput,
    FilterProfilesInput,
    JobPostingInput,
    MatchJobsForProfileInput,
    make_error,
    make_success,
)


def test_profile_input_optional_fields_default_to_none():
    profile = CandidateProfileInput(
        name="Shrey Singhal",
        email="shreynbd@gmail.com",
        phone="8057260114",
        skills=["SEO"],
    )

    assert profile.experience is None
    assert profile.location is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"email": "not-an-email"},
        {"phone": "12345"},
        {"experience": [{"company": "", "role": "Dev", "duration": "1 year"}]},
        {"unexpected": "field"},
    ],
)
def test_profile_input_validation(overrides):
    payload = {
        "name": "Shrey Singhal",
        "email": "shreynbd@gmail.com",
        "phone": "8057260114",
        "skills": ["SEO"],
    }
    payload.update(overrides)

    with pytest.raises(ValidationError):
        CandidateProfileInput.model_validate(payload)


def test_job_input_accepts_wire_aliases():
    job = JobPostingInput.model_validate(
        {
            "title": "Backend Developer",
            "company": "AppSquadz",
            "location": "Remote",
            "experienceRequired": "3+ years",
            "salary": 100000,
            "description": "Responsible for developing backend services",
            "skillsRequired": ["Node.js"],
        }
    )

    assert job.experience_required == "3+ years"
    dumped = job.model_dump(by_alias=True, exclude_none=True)
    assert dumped["skillsRequired"] == ["Node.js"]


@pytest.mark.parametrize(
    "overrides",
    [{"salary": -1}, {"description": "short"}, {"title": ""}],
)
def test_job_input_validation(overrides):
    payload = {
        "title": "Backend Developer",
        "company": "AppSquadz",
        "location": "Remote",
        "description": "Responsible for developing backend services",
        "skillsRequired": ["Node.js"],
    }
    payload.update(overrides)

    with pytest.raises(ValidationError):
        JobPostingInput.model_validate(payload)


def test_filter_profiles_maps_experience_criteria():
    params = FilterProfilesInput(name="shrey", company="Digital", role="SEO")

    assert params.to_criteria() == {
        "name": "shrey",
        "experience.company": "Digital",
        "experience.role": "SEO",
    }


def test_filter_jobs_encodes_numbers_as_strings():
    params = FilterJobsInput.model_validate({"salary": 1200000, "skillsRequired": "seo"})

    assert params.to_criteria() == {"salary": "1200000", "skillsRequired": "seo"}


def test_filter_criteria_skip_blank_strings():
    profiles = FilterProfilesInput(name="", skills="", company="", role="Designer")
    jobs = FilterJobsInput.model_validate({"title": "", "salary": 0})

    assert profiles.to_criteria() == {"experience.role": "Designer"}
    assert jobs.to_criteria() == {"salary": "0"}


def test_match_input_requires_positive_id():
    assert MatchJobsForProfileInput.model_validate({"profileId": 2}).profile_id == 2
    with pytest.raises(ValidationError):
        MatchJobsForProfileInput.model_validate({"profileId": 0})


def test_envelope_helpers():
    ok = make_success({"id": 1})
    failed = make_error("JOB_NOT_FOUND", "Job with ID 9 not found")

    assert ok.model_dump() == {"success": True, "data": {"id": 1}, "error": None}
    assert failed.success is False
    assert failed.data is None
    assert failed.error.code == "JOB_NOT_FOUND"
    assert failed.error.details is None
