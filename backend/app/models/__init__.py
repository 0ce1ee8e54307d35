from app.models.user_type import UsersType, UserTypeCode, DEFAULT_USER_TYPES
from app.models.user import User
from app.models.profile import RecruiterProfile, JobSeekerProfile

__all__ = [
    "User",
    "UsersType",
    "UserTypeCode",
    "DEFAULT_USER_TYPES",
    "RecruiterProfile",
    "JobSeekerProfile",
]
