from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    DATABASE_URL: str = "sqlite:///./jobportal.db"

    # JWT Authentication
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Granted role that resolves to a recruiter profile
    RECRUITER_ROLE: str = "Recruiter"

    # Application
    APP_NAME: str = "JobPortal"
    DEBUG: bool = True
    BACKEND_CORS_ORIGINS: str = (
        "http://localhost:8080,"
        "http://127.0.0.1:8080"
    )


settings = Settings()
