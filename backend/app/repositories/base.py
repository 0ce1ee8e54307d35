"""Base repository class with common persistence operations."""

from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from app.db.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base repository bound to a session.

    Repositories flush but never commit; the caller owns the unit of work.

    Usage:
        class UserRepository(BaseRepository[User]):
            model = User

        repo = UserRepository(session)
        user = repo.find_by_id(1)
    """

    model: type[T]

    def __init__(self, session: Session):
        self.session = session

    def save(self, instance: T) -> T:
        """Persist an instance and populate its generated keys."""
        self.session.add(instance)
        self.session.flush()
        return instance

    def find_by_id(self, id: int) -> T | None:
        """Get a single record by primary key."""
        return self.session.get(self.model, id)

    def find_all(self) -> list[T]:
        return self.session.query(self.model).all()
