from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base, UTCDateTime


class User(Base):
    """User account used for login; email is the login key."""

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash once saved
    is_active = Column(Boolean, default=False)
    registration_date = Column(UTCDateTime)
    user_type_id = Column(Integer, ForeignKey("users_type.user_type_id"), nullable=False)

    # Relationships
    user_type = relationship("UsersType", back_populates="users")
