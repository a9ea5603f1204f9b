import logging
from hr_master.core.config import settings
from hr_master.database import session_scope
from hr_master.models.admin import AdminAccount

logger = logging.getLogger(__name__)

def init_system_data() -> bool:
    """
    Seeds the bootstrap admin account when ADMIN_USERNAME and ADMIN_PASSWORD are
    configured and no account with that username exists yet.

    Returns True when an account was created.
    """
    if not settings.admin_username or not settings.admin_password:
        logger.info("System initialization check: no bootstrap admin configured.")
        return False

    try:
        with session_scope() as db:
            existing = db.query(AdminAccount).filter(AdminAccount.username == settings.admin_username).first()
            if existing:
                logger.info(f"System initialization check: admin '{settings.admin_username}' present.")
                return False
            db.add(AdminAccount(username=settings.admin_username, password=settings.admin_password))
    except Exception as e:
        logger.error(f"Error during system initialization check: {str(e)}", exc_info=True)
        raise

    logger.info(f"✓ Created bootstrap admin: {settings.admin_username}")
    return True
