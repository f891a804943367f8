# fitcheck/core/rbac.py
from enum import Enum

class Role(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"

def is_admin(user) -> bool:
    # papel é dado, não hierarquia de classes
    return Role(user.role) == Role.ADMIN
