# fitcheck/schemas/user.py
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel

from fitcheck.core.rbac import Role


class UserOut(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    role: Role = Role.USER

    model_config = {"from_attributes": True}
