import logging
from datetime import date, datetime
from typing import List, Literal, Optional
from sqlalchemy import select, update, func
from sqlalchemy.exc import IntegrityError
from fitcheck.core.errors import StoreConflictError
from fitcheck.crud.base import CRUDBase
from fitcheck.models.checkin import CheckIn

logger = logging.getLogger(__name__)

class CheckInStore(CRUDBase[CheckIn]):
    model = CheckIn

    def create(self, user_id: str, location_id: str, *, created_at: datetime, calendar_day: date) -> CheckIn:
        obj = CheckIn(user_id=user_id, location_id=location_id, created_at=created_at, calendar_day=calendar_day)
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # uq_check_in_user_per_day: outro request do mesmo usuário ganhou
            self.db.rollback()
            raise StoreConflictError(str(getattr(exc, "orig", exc))) from exc
        self.db.refresh(obj)
        return obj

    def mark_validated(self, id: str, *, validated_at: datetime) -> Optional[CheckIn]:
        """Compare-and-swap: só grava se ``validated_at`` ainda for NULL."""
        result = self.db.execute(
            update(CheckIn)
            .where(CheckIn.id == id, CheckIn.validated_at.is_(None))
            .values(validated_at=validated_at)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        if result.rowcount == 0:
            return None
        obj = self.db.get(CheckIn, id)
        self.db.refresh(obj)
        return obj

    def find_by_user_in_range(self, user_id: str, start: datetime, end: datetime) -> Optional[CheckIn]:
        # start <= created_at < end
        return self.db.scalars(
            select(CheckIn)
            .where(CheckIn.user_id == user_id, CheckIn.created_at >= start, CheckIn.created_at < end)
            .limit(1)
        ).first()

    def find_page_by_user(
        self, user_id: str, skip: int, take: int, order: Literal["asc", "desc"] = "desc"
    ) -> List[CheckIn]:
        ordering = CheckIn.created_at.desc() if order == "desc" else CheckIn.created_at.asc()
        stmt = select(CheckIn).where(CheckIn.user_id == user_id).order_by(ordering).offset(skip).limit(take)
        return list(self.db.scalars(stmt).all())

    def list_by_user(self, user_id: str) -> List[CheckIn]:
        stmt = select(CheckIn).where(CheckIn.user_id == user_id).order_by(CheckIn.created_at.desc())
        return list(self.db.scalars(stmt).all())

    def count_by_user(self, user_id: str) -> int:
        return self.db.scalar(select(func.count(CheckIn.id)).where(CheckIn.user_id == user_id)) or 0

    def find_in_range(self, start: datetime, end: datetime) -> List[CheckIn]:
        # janela fechada nas duas pontas
        stmt = (
            select(CheckIn)
            .where(CheckIn.created_at >= start, CheckIn.created_at <= end)
            .order_by(CheckIn.created_at.asc())
        )
        return list(self.db.scalars(stmt).all())
