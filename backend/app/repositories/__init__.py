"""Persistence stores for accounts and profiles."""

from .base import BaseRepository
from .profile_repository import JobSeekerProfileRepository, RecruiterProfileRepository
from .user_repository import UserRepository, UsersTypeRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "UsersTypeRepository",
    "RecruiterProfileRepository",
    "JobSeekerProfileRepository",
]
