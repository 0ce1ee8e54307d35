from app.services.users_service import (
    CurrentProfile,
    JobSeekerProfileResult,
    ProfileKind,
    RecruiterProfileResult,
    UserLookup,
    UsersService,
)

__all__ = [
    "UsersService",
    "UserLookup",
    "ProfileKind",
    "CurrentProfile",
    "RecruiterProfileResult",
    "JobSeekerProfileResult",
]
