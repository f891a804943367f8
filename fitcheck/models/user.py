from sqlalchemy import Column, String, Enum as SAEnum
from sqlalchemy.orm import relationship

from fitcheck.db.base import Base
from fitcheck.core.rbac import Role


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    name = Column(String(120), nullable=False)
    email = Column(String(160), nullable=True, index=True)
    role = Column(SAEnum(Role, name="user_role"), nullable=False, default=Role.USER)

    check_ins = relationship("CheckIn", back_populates="user")
