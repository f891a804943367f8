# fitcheck/services/stores.py
"""
Capacidades de armazenamento consumidas pelos motores.

Os motores só conhecem estes contratos; ``fitcheck.crud`` implementa-os sobre
SQLAlchemy. Falhas de I/O do store sobem sem tratamento.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional, Protocol


class LocationStore(Protocol):
    def get(self, id: str) -> Optional[Any]: ...
    def create(self, fields: Dict[str, Any]) -> Any: ...
    def search(self, query: str) -> List[Any]: ...
    def count(self) -> int: ...


class CheckInStore(Protocol):
    def get(self, id: str) -> Optional[Any]: ...

    def create(self, user_id: str, location_id: str, *, created_at: datetime, calendar_day: date) -> Any:
        """Deve levantar ``StoreConflictError`` se já houver check-in do usuário no dia."""
        ...

    def mark_validated(self, id: str, *, validated_at: datetime) -> Optional[Any]:
        """Update condicional; ``None`` quando o registro já não estava pendente."""
        ...

    def find_by_user_in_range(self, user_id: str, start: datetime, end: datetime) -> Optional[Any]: ...
    def find_page_by_user(
        self, user_id: str, skip: int, take: int, order: Literal["asc", "desc"] = "desc"
    ) -> List[Any]: ...
    def list_by_user(self, user_id: str) -> List[Any]: ...
    def count_by_user(self, user_id: str) -> int: ...
    def find_in_range(self, start: datetime, end: datetime) -> List[Any]: ...


class UserStore(Protocol):
    def get(self, id: str) -> Optional[Any]: ...
