import os
import logging
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()

class Config(BaseModel):
    app_name: str = "HR Master"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"
    version: str = "1.0.0"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./hr_master.db")
    # e.g. "REPEATABLE READ" on PostgreSQL; unset keeps the driver default
    payroll_isolation_level: Optional[str] = os.getenv("PAYROLL_ISOLATION_LEVEL") or None

    # Auth
    auth_strategy: str = os.getenv("AUTH_STRATEGY", "legacy_plaintext")
    admin_username: Optional[str] = os.getenv("ADMIN_USERNAME") or None
    admin_password: Optional[str] = os.getenv("ADMIN_PASSWORD") or None

    # HTTP surface
    frontend_url: str = os.getenv("FRONTEND_URL", "http://localhost:3000")
    rate_limit: str = os.getenv("RATE_LIMIT", "1000 per 15 minutes")
    request_id_header: str = "X-Request-ID"

    # Unpaid leave is matched by this exact tag
    unpaid_leave_type: str = Field(default="Unpaid")

INSECURE_ADMIN_PASSWORDS = (None, "", "admin", "changeme")

_logger = logging.getLogger(__name__)

def validate_settings(config: Config) -> None:
    """Refuse to boot outside development with a default bootstrap admin password."""
    if config.environment != "development":
        if config.admin_username and config.admin_password in INSECURE_ADMIN_PASSWORDS:
            raise RuntimeError(
                "FATAL: ADMIN_PASSWORD must be set to a non-default value when ADMIN_USERNAME "
                f"is configured ({config.environment})."
            )
    elif config.auth_strategy == "legacy_plaintext":
        _logger.warning("⚠ Plaintext credential comparison is active; only acceptable in development.")

settings = Config()
validate_settings(settings)
