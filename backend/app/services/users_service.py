"""
Account service.

Creates user accounts together with their role profile and resolves the
current user and profile for an explicitly passed Principal.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Literal, Optional, Union

from app.core.config import settings
from app.core.exceptions import UserNotFoundError
from app.core.security import Principal, get_password_hash
from app.models import JobSeekerProfile, RecruiterProfile, User, UserTypeCode
from app.repositories import (
    JobSeekerProfileRepository,
    RecruiterProfileRepository,
    UserRepository,
)

logger = logging.getLogger("users_service")


class ProfileKind(str, Enum):
    RECRUITER = "recruiter"
    JOB_SEEKER = "job_seeker"

    @classmethod
    def for_user_type(cls, user_type_id: Optional[int]) -> "ProfileKind":
        """Recruiter code maps to a recruiter profile, every other code to a job seeker one."""
        if user_type_id == UserTypeCode.RECRUITER:
            return cls.RECRUITER
        return cls.JOB_SEEKER


@dataclass(frozen=True)
class RecruiterProfileResult:
    profile: RecruiterProfile
    kind: Literal["recruiter"] = "recruiter"


@dataclass(frozen=True)
class JobSeekerProfileResult:
    profile: JobSeekerProfile
    kind: Literal["job_seeker"] = "job_seeker"


CurrentProfile = Union[RecruiterProfileResult, JobSeekerProfileResult]


@dataclass(frozen=True)
class UserLookup:
    """Outcome of an email lookup; the caller decides whether a miss is fatal."""

    email: str
    user: Optional[User] = None

    @property
    def found(self) -> bool:
        return self.user is not None

    def get(self) -> Optional[User]:
        return self.user

    def unwrap(self, message: Optional[str] = None) -> User:
        if self.user is None:
            raise UserNotFoundError(self.email, message or "User not found")
        return self.user


class UsersService:
    """Signup and current-user resolution over the account stores."""

    def __init__(
        self,
        users: UserRepository,
        recruiter_profiles: RecruiterProfileRepository,
        job_seeker_profiles: JobSeekerProfileRepository,
        password_hasher: Callable[[str], str] = get_password_hash,
    ):
        self.users = users
        self.recruiter_profiles = recruiter_profiles
        self.job_seeker_profiles = job_seeker_profiles
        self.password_hasher = password_hasher

    def add_new(self, user: User) -> User:
        """
        Activate, stamp, hash and save a new user, then save its profile.

        Both writes go into the caller's session; committing them is the
        caller's job, so a failed profile write is rolled back with the user.
        """
        user.is_active = True
        user.registration_date = datetime.now(timezone.utc)
        user.password = self.password_hasher(user.password)

        saved_user = self.users.save(user)

        user_type_id = saved_user.user_type_id
        if user_type_id is None and saved_user.user_type is not None:
            user_type_id = saved_user.user_type.user_type_id

        kind = ProfileKind.for_user_type(user_type_id)
        if kind is ProfileKind.RECRUITER:
            self.recruiter_profiles.save(RecruiterProfile(saved_user))
        else:
            self.job_seeker_profiles.save(JobSeekerProfile(saved_user))

        logger.info("Registered user %s with %s profile", saved_user.user_id, kind.value)
        return saved_user

    def lookup_by_email(self, email: str) -> UserLookup:
        return UserLookup(email=email, user=self.users.find_by_email(email))

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.lookup_by_email(email).get()

    def find_by_email(self, email: str) -> User:
        """Like get_user_by_email, but a miss raises UserNotFoundError."""
        return self.lookup_by_email(email).unwrap()

    def get_current_user(self, principal: Principal) -> Optional[User]:
        """
        Resolve the user behind a principal.

        Returns None for anonymous principals. An authenticated principal
        with no matching user is an inconsistency and raises UserNotFoundError.
        """
        if principal.is_anonymous:
            return None
        return self._resolve_principal(principal)

    def get_current_user_profile(self, principal: Principal) -> Optional[CurrentProfile]:
        """
        Resolve the profile of the user behind a principal.

        Principals granted the recruiter role get their RecruiterProfile,
        everyone else their JobSeekerProfile. A missing profile row yields
        an empty profile of the right kind.
        """
        if principal.is_anonymous:
            return None

        user = self._resolve_principal(principal)

        if principal.has_role(settings.RECRUITER_ROLE):
            recruiter = self.recruiter_profiles.find_by_id(user.user_id)
            return RecruiterProfileResult(recruiter or RecruiterProfile())

        job_seeker = self.job_seeker_profiles.find_by_id(user.user_id)
        return JobSeekerProfileResult(job_seeker or JobSeekerProfile())

    def _resolve_principal(self, principal: Principal) -> User:
        lookup = self.lookup_by_email(principal.name)
        return lookup.unwrap(f"Could not find user {principal.name}")
