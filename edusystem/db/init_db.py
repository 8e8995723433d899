"""
Database initialization and seeding.
"""
import logging

from sqlalchemy.orm import Session

from edusystem.core.config import settings
from edusystem.core.security import get_password_hash
from edusystem.models.user import User, UserRole, UserStatus

logger = logging.getLogger(__name__)


def init_db(db: Session) -> User:
    """
    Initialize database with default data.

    Args:
        db: Database session

    Returns:
        The first admin account, created if it did not exist
    """
    admin = db.query(User).filter(User.email == settings.FIRST_ADMIN_EMAIL).first()
    if not admin:
        admin = User(
            email=settings.FIRST_ADMIN_EMAIL,
            name=settings.FIRST_ADMIN_NAME,
            hashed_password=get_password_hash(settings.FIRST_ADMIN_PASSWORD),
            role=UserRole.ADMIN.value,
            status=UserStatus.ACTIVE.value,
            access_key=settings.FIRST_ADMIN_ACCESS_KEY,
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
        logger.info(f"Admin user {admin.email} created")
    return admin
