from typing import Optional
from fitcheck.core.rbac import Role
from fitcheck.crud.base import CRUDBase
from fitcheck.models.user import User

class UserStore(CRUDBase[User]):
    model = User

    def create(self, *, id: str, name: str, role: Role = Role.USER, email: Optional[str] = None) -> User:
        return self._save(User(id=id, name=name, email=email, role=role))
