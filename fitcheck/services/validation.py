# fitcheck/services/validation.py
import logging
from datetime import timedelta

from fitcheck.core.clock import Clock, utcnow, as_utc
from fitcheck.core.errors import AlreadyValidatedError, NotFoundError, TooEarlyError, UnauthorizedError
from fitcheck.core.rbac import is_admin
from fitcheck.services.stores import CheckInStore, UserStore
from fitcheck.services.validators import require_id

logger = logging.getLogger(__name__)

VALIDATION_WINDOW = timedelta(minutes=20)


class ValidationEngine:
    """Transição Pending -> Validated de um check-in, feita por um ADMIN."""

    def __init__(self, check_ins: CheckInStore, users: UserStore, clock: Clock = utcnow):
        self.check_ins = check_ins
        self.users = users
        self.clock = clock

    def validate(self, check_in_id: str, admin_user_id: str):
        require_id(check_in_id, "Check-in ID")
        require_id(admin_user_id, "Admin user ID")

        # ordem fixa: existência -> já validado -> admin existe -> é admin -> janela
        check_in = self.check_ins.get(check_in_id)
        if not check_in:
            raise NotFoundError("Check-in not found")
        if check_in.validated_at is not None:
            raise AlreadyValidatedError()

        admin = self.users.get(admin_user_id)
        if not admin:
            raise NotFoundError("User not found")
        if not is_admin(admin):
            logger.info("validation rejected rule=role check_in=%s user=%s", check_in_id, admin_user_id)
            raise UnauthorizedError()

        now = as_utc(self.clock())
        if now - as_utc(check_in.created_at) < VALIDATION_WINDOW:
            logger.info("validation rejected rule=window check_in=%s", check_in_id)
            raise TooEarlyError()

        validated = self.check_ins.mark_validated(check_in_id, validated_at=now)
        if validated is None:
            logger.warning("validation lost race check_in=%s", check_in_id)
            raise AlreadyValidatedError()

        logger.info("check-in validated id=%s by=%s", check_in_id, admin_user_id)
        return validated
