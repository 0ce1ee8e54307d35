import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import UserNotFoundError
from app.db.base import Base
from app.db.session import SessionLocal, engine

# Import all models so SQLAlchemy can discover them for table creation
from app.models import User, UsersType, RecruiterProfile, JobSeekerProfile  # noqa: F401
from app.repositories import UsersTypeRepository

# Import API router
from app.api.api import api_router

logger = logging.getLogger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables and user type rows on startup."""
    Base.metadata.create_all(bind=engine)
    ensure_user_types()
    yield


def ensure_user_types() -> None:
    """Make sure the users_type reference rows exist."""
    db = SessionLocal()
    try:
        UsersTypeRepository(db).ensure_defaults()
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


app = FastAPI(
    title=settings.APP_NAME,
    description="Job portal accounts: signup and current user profiles",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS Middleware - allowlist from env (comma-separated)
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in settings.BACKEND_CORS_ORIGINS.split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)


@app.exception_handler(UserNotFoundError)
async def user_not_found_handler(request: Request, exc: UserNotFoundError):
    logger.warning("User lookup failed on %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message},
    )


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to {settings.APP_NAME} API"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Include API router with /api/v1 prefix
app.include_router(api_router, prefix="/api/v1")
