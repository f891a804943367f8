import uuid
from datetime import date, datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, UniqueConstraint, Index, DateTime, Date, String
from fitcheck.db.base import Base

class CheckIn(Base):
    __tablename__ = "check_ins"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: uuid.uuid4().hex)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    location_id: Mapped[str] = mapped_column(ForeignKey("locations.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    # dia de calendário local do check-in; chave da unicidade diária
    calendar_day: Mapped[date] = mapped_column(Date)
    validated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    location = relationship("Location", back_populates="check_ins")
    user = relationship("User", back_populates="check_ins")

    __table_args__ = (
        UniqueConstraint("user_id", "calendar_day", name="uq_check_in_user_per_day"),
        Index("ix_check_ins_user_created", "user_id", "created_at"),
    )
