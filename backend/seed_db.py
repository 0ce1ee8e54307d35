"""
JobPortal Database Seeder

Creates the user type reference rows and two demo accounts:
- a recruiter (with an empty recruiter profile)
- a job seeker (with an empty job seeker profile)
"""

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models import User, UserTypeCode
from app.repositories import (
    JobSeekerProfileRepository,
    RecruiterProfileRepository,
    UserRepository,
    UsersTypeRepository,
)
from app.services import UsersService

DEMO_USERS = [
    ("recruiter@jobportal.com", "recruiter123", UserTypeCode.RECRUITER),
    ("seeker@jobportal.com", "seeker123", UserTypeCode.JOB_SEEKER),
]


def seed_database(session_factory=SessionLocal, bind=engine) -> int:
    """Seed the database with test data. Returns the number of users created."""

    # Create all tables
    Base.metadata.create_all(bind=bind)

    db = session_factory()
    created: list[tuple[str, str, UserTypeCode]] = []

    try:
        UsersTypeRepository(db).ensure_defaults()

        service = UsersService(
            UserRepository(db),
            RecruiterProfileRepository(db),
            JobSeekerProfileRepository(db),
        )

        for email, password, user_type in DEMO_USERS:
            if service.get_user_by_email(email) is not None:
                print(f"{email} already exists. Skipping...")
                continue
            service.add_new(User(email=email, password=password, user_type_id=int(user_type)))
            created.append((email, password, user_type))

        db.commit()

        if created:
            print("Database seeded successfully!")
        for email, password, user_type in created:
            print(f"   - {email} (password: {password}) [{user_type.name}]")

    except Exception as e:
        db.rollback()
        print(f"Error seeding database: {e}")
        raise
    finally:
        db.close()

    return len(created)


if __name__ == "__main__":
    seed_database()
