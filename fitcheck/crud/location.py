from typing import Any, Dict, List
from sqlalchemy import select, or_
from fitcheck.crud.base import CRUDBase
from fitcheck.models.location import Location

def _like_pattern(query: str) -> str:
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"

class LocationStore(CRUDBase[Location]):
    model = Location

    def create(self, fields: Dict[str, Any]) -> Location:
        return self._save(Location(**fields))

    def search(self, query: str) -> List[Location]:
        """
        Candidatas para a busca textual, na ordem de inserção.

        Só o Postgres pré-filtra com ILIKE; o lower() do SQLite não dobra
        caracteres fora do ASCII ("SÃO" x "São"), então lá o filtro fica todo
        com o ``casefold`` do SearchEngine.
        """
        stmt = select(Location).order_by(Location.created_at.asc(), Location.id.asc())
        if self.db.get_bind().dialect.name == "postgresql":
            pattern = _like_pattern(query.strip())
            stmt = stmt.where(or_(
                Location.title.ilike(pattern, escape="\\"),
                Location.description.ilike(pattern, escape="\\"),
            ))
        return list(self.db.scalars(stmt).all())
