from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class RecruiterProfile(Base):
    """Recruiter details, keyed 1:1 by the owning user's id."""

    __tablename__ = "recruiter_profile"

    user_account_id = Column(Integer, ForeignKey("users.user_id"), primary_key=True)
    first_name = Column(String)
    last_name = Column(String)
    city = Column(String)
    state = Column(String)
    country = Column(String)
    company = Column(String)
    profile_photo = Column(String(64), nullable=True)

    user = relationship("User")

    def __init__(self, user=None, **kwargs):
        super().__init__(**kwargs)
        if user is not None:
            self.user = user
            self.user_account_id = user.user_id


class JobSeekerProfile(Base):
    """Job seeker details, keyed 1:1 by the owning user's id."""

    __tablename__ = "job_seeker_profile"

    user_account_id = Column(Integer, ForeignKey("users.user_id"), primary_key=True)
    first_name = Column(String)
    last_name = Column(String)
    city = Column(String)
    state = Column(String)
    country = Column(String)
    work_authorization = Column(String)
    employment_type = Column(String)
    resume = Column(String, nullable=True)
    profile_photo = Column(String, nullable=True)

    user = relationship("User")

    def __init__(self, user=None, **kwargs):
        super().__init__(**kwargs)
        if user is not None:
            self.user = user
            self.user_account_id = user.user_id
