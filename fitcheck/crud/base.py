from typing import TypeVar, Generic, Type, Any, Optional
from sqlalchemy import select, func
from sqlalchemy.orm import Session
from fitcheck.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)

class CRUDBase(Generic[ModelType]):
    """Store ligado a uma Session; os motores recebem instâncias prontas."""

    model: Type[ModelType]

    def __init__(self, db: Session): self.db = db

    def get(self, id: Any) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(self.model)) or 0

    def _save(self, obj: ModelType) -> ModelType:
        self.db.add(obj); self.db.commit(); self.db.refresh(obj)
        return obj
