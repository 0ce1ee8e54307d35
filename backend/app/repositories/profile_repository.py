"""Recruiter and job seeker profile repositories."""

from app.models import JobSeekerProfile, RecruiterProfile

from .base import BaseRepository


class RecruiterProfileRepository(BaseRepository[RecruiterProfile]):
    """Repository for RecruiterProfile, keyed by user_account_id."""

    model = RecruiterProfile


class JobSeekerProfileRepository(BaseRepository[JobSeekerProfile]):
    """Repository for JobSeekerProfile, keyed by user_account_id."""

    model = JobSeekerProfile
