"""
User account API endpoints.

Handles registration, login with JWT token generation, and the current
user's account and profile.
"""

import re
from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.orm import Session

from app.core.security import (
    Principal,
    create_access_token,
    get_token_principal,
    verify_password,
)
from app.db.session import get_db
from app.models import User
from app.repositories import (
    JobSeekerProfileRepository,
    RecruiterProfileRepository,
    UserRepository,
    UsersTypeRepository,
)
from app.services import JobSeekerProfileResult, RecruiterProfileResult, UsersService

router = APIRouter()

# No token means an anonymous caller rather than an error
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/users/login", auto_error=False)


# ============== Pydantic Schemas ==============


class UserRegister(BaseModel):
    """Schema for user registration."""

    email: str
    password: str
    user_type_id: int

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email format."""
        email_pattern = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"
        if not re.match(email_pattern, v):
            raise ValueError("Invalid email format")
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Password must not be empty")
        return v


class UsersTypeResponse(BaseModel):
    user_type_id: int
    user_type_name: str

    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    """Schema for user response (without password)."""

    user_id: int
    email: str
    is_active: bool
    registration_date: Optional[datetime] = None
    user_type_id: int

    class Config:
        from_attributes = True


class RecruiterProfileResponse(BaseModel):
    user_account_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    company: Optional[str] = None
    profile_photo: Optional[str] = None

    class Config:
        from_attributes = True


class JobSeekerProfileResponse(BaseModel):
    user_account_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    work_authorization: Optional[str] = None
    employment_type: Optional[str] = None
    resume: Optional[str] = None
    profile_photo: Optional[str] = None

    class Config:
        from_attributes = True


class RecruiterProfileView(BaseModel):
    kind: Literal["recruiter"] = "recruiter"
    profile: RecruiterProfileResponse


class JobSeekerProfileView(BaseModel):
    kind: Literal["job_seeker"] = "job_seeker"
    profile: JobSeekerProfileResponse


# Tagged by kind so clients can tell the two profile shapes apart
CurrentProfileResponse = Annotated[
    Union[RecruiterProfileView, JobSeekerProfileView],
    Field(discriminator="kind"),
]


class Token(BaseModel):
    """Schema for JWT token response."""

    access_token: str
    token_type: str = "bearer"


# ============== Dependencies ==============


def get_users_service(db: Session = Depends(get_db)) -> UsersService:
    return UsersService(
        UserRepository(db),
        RecruiterProfileRepository(db),
        JobSeekerProfileRepository(db),
    )


async def get_current_principal(token: Optional[str] = Depends(oauth2_scheme)) -> Principal:
    """
    Dependency building the request's Principal from the bearer token.

    Missing token gives an anonymous principal; an invalid one is rejected.
    """
    if token is None:
        return Principal.anonymous()

    principal = get_token_principal(token)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return principal


def _not_authenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


# ============== API Endpoints ==============


@router.get("/types", response_model=list[UsersTypeResponse])
async def list_user_types(db: Session = Depends(get_db)):
    """List the account types a user can register as."""
    return UsersTypeRepository(db).find_all()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Session = Depends(get_db),
    service: UsersService = Depends(get_users_service),
):
    """
    Register a new user.

    Creates the account and its Recruiter or Job Seeker profile in one
    unit of work.
    """
    if service.get_user_by_email(user_data.email) is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    if UsersTypeRepository(db).find_by_id(user_data.user_type_id) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unknown user type",
        )

    return service.add_new(
        User(
            email=user_data.email,
            password=user_data.password,
            user_type_id=user_data.user_type_id,
        )
    )


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: UsersService = Depends(get_users_service),
):
    """
    Login and get JWT access token.

    Uses OAuth2 password flow. Send username (email) and password
    as form data. The token carries the user type name as its role.
    """
    user = service.get_user_by_email(form_data.username.lower())

    if not user or not user.is_active or not verify_password(form_data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    roles = [user.user_type.user_type_name] if user.user_type else []
    access_token = create_access_token(data={"sub": user.email, "roles": roles})

    return Token(access_token=access_token)


@router.get("/me", response_model=UserResponse)
async def get_me(
    principal: Principal = Depends(get_current_principal),
    service: UsersService = Depends(get_users_service),
):
    """Get the current authenticated user."""
    user = service.get_current_user(principal)
    if user is None:
        raise _not_authenticated()
    return user


@router.get("/me/profile", response_model=CurrentProfileResponse)
async def get_my_profile(
    principal: Principal = Depends(get_current_principal),
    service: UsersService = Depends(get_users_service),
):
    """Get the current user's Recruiter or Job Seeker profile."""
    match service.get_current_user_profile(principal):
        case RecruiterProfileResult(profile=profile):
            return RecruiterProfileView(
                profile=RecruiterProfileResponse.model_validate(profile),
            )
        case JobSeekerProfileResult(profile=profile):
            return JobSeekerProfileView(
                profile=JobSeekerProfileResponse.model_validate(profile),
            )
        case None:
            raise _not_authenticated()
