# fitcheck/services/validators.py
from typing import Optional
from fitcheck.core.errors import InvalidArgumentError

MAX_PER_PAGE = 100

def require_id(value: Optional[str], label: str) -> str:
    if not value or not value.strip():
        raise InvalidArgumentError(f"{label} is required")
    return value

def check_latitude(value: float, label: str = "Latitude") -> None:
    if value < -90 or value > 90:
        raise InvalidArgumentError(f"{label} must be between -90 and 90 degrees")

def check_longitude(value: float, label: str = "Longitude") -> None:
    if value < -180 or value > 180:
        raise InvalidArgumentError(f"{label} must be between -180 and 180 degrees")

def check_pagination(page: int, per_page: int) -> None:
    if page < 1:
        raise InvalidArgumentError("Page must be greater than 0")
    if per_page < 1 or per_page > MAX_PER_PAGE:
        raise InvalidArgumentError(f"Per page must be between 1 and {MAX_PER_PAGE}")

def total_pages(total: int, per_page: int) -> int:
    return -(-total // per_page)
