# fitcheck/services/locations.py
import logging
import re
from typing import Optional

from fitcheck.core.clock import Clock, utcnow, as_utc
from fitcheck.core.errors import InvalidArgumentError
from fitcheck.services.stores import LocationStore
from fitcheck.services.validators import check_latitude, check_longitude

logger = logging.getLogger(__name__)

TITLE_MIN, TITLE_MAX = 2, 100
DESCRIPTION_MAX = 500
_PHONE_RE = re.compile(r"^\+?[1-9]\d{0,15}$")
_PHONE_NOISE = re.compile(r"[\s\-()]")

def is_valid_phone(phone: str) -> bool:
    return bool(_PHONE_RE.match(_PHONE_NOISE.sub("", phone)))

class LocationRegistry:
    def __init__(self, locations: LocationStore, clock: Clock = utcnow):
        self.locations = locations
        self.clock = clock

    def create(
        self,
        *,
        title: str,
        latitude: float,
        longitude: float,
        description: Optional[str] = None,
        phone: Optional[str] = None,
    ):
        clean_title = (title or "").strip()
        if not clean_title:
            raise InvalidArgumentError("Title is required")
        if len(clean_title) < TITLE_MIN:
            raise InvalidArgumentError(f"Title must be at least {TITLE_MIN} characters long")
        if len(clean_title) > TITLE_MAX:
            raise InvalidArgumentError(f"Title must be at most {TITLE_MAX} characters long")

        clean_description = description.strip() if description else None
        if clean_description and len(clean_description) > DESCRIPTION_MAX:
            raise InvalidArgumentError(f"Description must be at most {DESCRIPTION_MAX} characters long")

        clean_phone = phone.strip() if phone else None
        if clean_phone and not is_valid_phone(clean_phone):
            raise InvalidArgumentError("Invalid phone number format")

        check_latitude(latitude)
        check_longitude(longitude)

        location = self.locations.create({
            "title": clean_title,
            "description": clean_description or None,
            "phone": clean_phone or None,
            "latitude": latitude,
            "longitude": longitude,
            "created_at": as_utc(self.clock()),
        })
        logger.info("location created id=%s title=%r", location.id, location.title)
        return location
