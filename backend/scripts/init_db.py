"""
Initialize database tables and the default Admin user
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from hrportal.core.config import settings
from hrportal.core.database import SessionLocal, init_db
from hrportal.auth.service import get_password_hash
from hrportal.users.repository import UserRepository
import structlog

logger = structlog.get_logger()


def create_admin_user(db: Session):
    """Create the bootstrap Admin user unless it already exists"""
    users = UserRepository(db)
    username = settings.DEFAULT_ADMIN_USERNAME

    if users.exists(username):
        logger.info("admin_user_exists", username=username)
        return

    users.create(
        username=username,
        password_hash=get_password_hash(settings.DEFAULT_ADMIN_PASSWORD),
        role="Admin",
    )
    logger.info("admin_user_created", username=username)


def main():
    """Main initialization function"""
    logger.info("initializing_database")

    init_db()

    db: Session = SessionLocal()
    try:
        create_admin_user(db)
        logger.info("database_initialization_complete")
    except Exception as e:
        logger.error("database_initialization_failed", error=str(e))
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
