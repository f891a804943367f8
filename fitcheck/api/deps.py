from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from fitcheck.core.tokens import decode_access
from fitcheck.crud.checkin import CheckInStore
from fitcheck.crud.location import LocationStore
from fitcheck.crud.user import UserStore
from fitcheck.db.session import get_db
from fitcheck.models.user import User
from fitcheck.services.checkins import CheckInEngine
from fitcheck.services.history import HistoryAndMetricsAggregator
from fitcheck.services.locations import LocationRegistry
from fitcheck.services.search import SearchEngine
from fitcheck.services.validation import ValidationEngine

# ----------------------------------------------------------------------
# Lê o Bearer do header Authorization (sem usar OAuth2PasswordBearer)
# ----------------------------------------------------------------------
def get_bearer_token(authorization: str = Header(None, alias="Authorization")) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing Authorization header")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid Authorization header")
    return parts[1]

def get_current_user(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> User:
    payload = decode_access(token)
    if not payload:
        raise HTTPException(status_code=401, detail="Invalid token")
    user = UserStore(db).get(payload["sub"])
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user

# ----------------------------------------------------------------------
# Motores montados por request, com os stores da Session atual
# ----------------------------------------------------------------------
def get_location_registry(db: Session = Depends(get_db)) -> LocationRegistry:
    return LocationRegistry(LocationStore(db))

def get_check_in_engine(db: Session = Depends(get_db)) -> CheckInEngine:
    return CheckInEngine(CheckInStore(db), LocationStore(db))

def get_validation_engine(db: Session = Depends(get_db)) -> ValidationEngine:
    return ValidationEngine(CheckInStore(db), UserStore(db))

def get_search_engine(db: Session = Depends(get_db)) -> SearchEngine:
    return SearchEngine(LocationStore(db))

def get_aggregator(db: Session = Depends(get_db)) -> HistoryAndMetricsAggregator:
    return HistoryAndMetricsAggregator(CheckInStore(db), LocationStore(db))
