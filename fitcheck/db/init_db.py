# fitcheck/db/init_db.py
import logging
from sqlalchemy.orm import Session

from fitcheck.core.config import settings
from fitcheck.core.rbac import Role
from fitcheck.crud.user import UserStore

logger = logging.getLogger(__name__)

def init_db(db: Session) -> None:
    users = UserStore(db)
    if users.get(settings.SEED_ADMIN_ID) is None:
        users.create(id=settings.SEED_ADMIN_ID, name="Admin", role=Role.ADMIN)
        logger.info("seeded admin user id=%s", settings.SEED_ADMIN_ID)
