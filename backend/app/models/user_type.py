from enum import IntEnum

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class UserTypeCode(IntEnum):
    """Reference codes of the users_type table."""

    RECRUITER = 1
    JOB_SEEKER = 2


# Rows every database must carry; names double as granted role names.
DEFAULT_USER_TYPES: dict[UserTypeCode, str] = {
    UserTypeCode.RECRUITER: "Recruiter",
    UserTypeCode.JOB_SEEKER: "Job Seeker",
}


class UsersType(Base):
    """Account type a user signs up as (Recruiter or Job Seeker)."""

    __tablename__ = "users_type"

    user_type_id = Column(Integer, primary_key=True)
    user_type_name = Column(String, unique=True, nullable=False)

    users = relationship("User", back_populates="user_type")
