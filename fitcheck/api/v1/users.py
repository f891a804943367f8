# fitcheck/api/v1/users.py
from fastapi import APIRouter, Depends

from fitcheck.api.deps import get_current_user
from fitcheck.models.user import User
from fitcheck.schemas.user import UserOut

router = APIRouter()

@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return UserOut.model_validate(user)
