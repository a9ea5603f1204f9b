"""
Create or reset an admin_auth account.

Usage:
    python -m scripts.seed_admin <username> <password>
"""
import logging
import sys

from hr_master.database import init_db, session_scope
from hr_master.models.admin import AdminAccount

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

def seed(username: str, password: str):
    init_db()
    with session_scope() as db:
        admin = db.query(AdminAccount).filter(AdminAccount.username == username).first()
        if not admin:
            db.add(AdminAccount(username=username, password=password))
            logger.info(f"Admin user '{username}' created.")
        else:
            admin.password = password
            logger.info(f"Admin user '{username}' already exists. Password reset.")

if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    seed(sys.argv[1], sys.argv[2])
