# fitcheck/api/permissions.py
from typing import Callable
from fastapi import Depends, HTTPException, status

from fitcheck.api.deps import get_current_user
from fitcheck.core.rbac import Role
from fitcheck.models.user import User

def require_roles(*roles: Role) -> Callable[[User], User]:
    """
    Use: Depends(require_roles(Role.ADMIN))
    Bloqueia quem não tiver uma das roles permitidas.
    """
    allowed = {Role(r) for r in roles}

    def _checker(user: User = Depends(get_current_user)) -> User:
        if Role(user.role) not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied for role '{Role(user.role).value}'.",
            )
        return user

    return _checker
