import logging
import os

from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.core.settings import get_settings
from backend.app.models.user import ROLE_ADMIN, User

logger = logging.getLogger(__name__)


def ensure_default_admin(db: Session) -> None:
    """
    Create a default admin user for local development if it does not exist.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    settings = get_settings()
    existing = db.query(User).filter(User.email == settings.seed_admin_email).first()
    if existing:
        return

    user = User(
        name="Administrator",
        email=settings.seed_admin_email,
        hashed_password=get_password_hash(settings.seed_admin_password),
        role=ROLE_ADMIN,
    )
    db.add(user)
    db.commit()
    logger.info("Seeded default admin user %s", settings.seed_admin_email)
