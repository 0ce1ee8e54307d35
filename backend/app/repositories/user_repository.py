"""User and user type repositories."""

import logging

from app.models import DEFAULT_USER_TYPES, User, UsersType

from .base import BaseRepository

logger = logging.getLogger("repository.user")


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    model = User

    def find_by_email(self, email: str) -> User | None:
        """Get user by exact email."""
        return self.session.query(User).filter(User.email == email).first()


class UsersTypeRepository(BaseRepository[UsersType]):
    """Repository for the users_type reference table."""

    model = UsersType

    def find_all(self) -> list[UsersType]:
        return self.session.query(UsersType).order_by(UsersType.user_type_id).all()

    def ensure_defaults(self) -> int:
        """Insert any missing reference rows. Returns how many were added."""
        added = 0
        for code, name in DEFAULT_USER_TYPES.items():
            if self.find_by_id(int(code)) is None:
                self.session.add(UsersType(user_type_id=int(code), user_type_name=name))
                added += 1
        if added:
            self.session.flush()
            logger.info("Inserted %d user type rows", added)
        return added
