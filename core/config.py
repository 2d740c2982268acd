from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Organization Portal API"
    ENV: str = "development"
    LOG_LEVEL: str = Field("INFO", description="Level for the orgportal logger (DEBUG, INFO, WARNING, ...)")

    # -------------------------------------------------
    # Frontend (login page, reset links, CORS)
    # -------------------------------------------------
    FRONTEND_URL: str = Field(
        "http://localhost:3000",
        description="Base URL of the web frontend that consumes the redirect routes",
    )
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Supabase (profile store, request store & auth)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # -------------------------------------------------
    # SMTP mail transport
    # -------------------------------------------------
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: Optional[int] = None
    SMTP_USER: Optional[str] = None
    SMTP_PASS: Optional[str] = None
    SMTP_FROM: Optional[str] = Field(None, description="Sender address (defaults to SMTP_USER)")

    # -------------------------------------------------
    # Organization request auto-reply
    # -------------------------------------------------
    AUTO_REPLY_ENABLED: bool = Field(True, description="Send a confirmation email for new organization requests")
    AUTO_REPLY_DELAY_MINUTES: int = Field(10, description="Minutes between submission and confirmation email")

    # Background scheduler that dispatches queued notifications
    SCHEDULER_ENABLED: bool = Field(False, description="Start the APScheduler worker on app startup")

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list dynamically after loading settings
# -------------------------------------------------
cors_origins = [settings.FRONTEND_URL.rstrip("/")]
cors_origins.extend([o.rstrip("/") for o in settings.BACKEND_CORS_ORIGINS])

# remove duplicates
settings.BACKEND_CORS_ORIGINS = sorted(list(set(cors_origins)))
