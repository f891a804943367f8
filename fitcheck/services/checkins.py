# fitcheck/services/checkins.py
import logging

from fitcheck.core.clock import Clock, utcnow, as_utc, day_bounds, local_date
from fitcheck.core.errors import (
    DuplicateForDayError,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
    StoreConflictError,
)
from fitcheck.schemas.location import DistanceCheck, LocationSummary
from fitcheck.services.geo import distance_meters
from fitcheck.services.stores import CheckInStore, LocationStore
from fitcheck.services.validators import require_id, check_latitude, check_longitude

logger = logging.getLogger(__name__)

GEOFENCE_RADIUS_METERS = 100
MAX_PROBE_DISTANCE_METERS = 10000


class CheckInEngine:
    """
    Criação de check-in: existência da academia -> geofence -> um por dia -> grava.

    A checagem diária é só um atalho; quem garante a unicidade é a constraint
    (user_id, calendar_day) do store, cujo conflito vira ``DuplicateForDayError``.
    """

    def __init__(self, check_ins: CheckInStore, locations: LocationStore, clock: Clock = utcnow):
        self.check_ins = check_ins
        self.locations = locations
        self.clock = clock

    def check_in(self, user_id: str, location_id: str, user_latitude: float, user_longitude: float):
        require_id(user_id, "User ID")
        require_id(location_id, "Location ID")
        check_latitude(user_latitude, "User latitude")
        check_longitude(user_longitude, "User longitude")

        location = self.locations.get(location_id)
        if not location:
            raise NotFoundError("Location not found")

        distance = distance_meters(user_latitude, user_longitude, location.latitude, location.longitude)
        if distance > GEOFENCE_RADIUS_METERS:
            logger.info("check-in rejected rule=geofence user=%s location=%s distance=%.2f",
                        user_id, location_id, distance)
            raise OutOfRangeError()

        now = as_utc(self.clock())
        day_start, next_day_start = day_bounds(now)
        if self.check_ins.find_by_user_in_range(user_id, day_start, next_day_start):
            logger.info("check-in rejected rule=one_per_day user=%s", user_id)
            raise DuplicateForDayError()

        try:
            check_in = self.check_ins.create(
                user_id, location_id, created_at=now, calendar_day=local_date(now)
            )
        except StoreConflictError:
            logger.warning("check-in conflict on store user=%s day=%s", user_id, local_date(now))
            raise DuplicateForDayError() from None

        logger.info("check-in created id=%s user=%s location=%s", check_in.id, user_id, location_id)
        return check_in

    def check_distance(
        self,
        location_id: str,
        user_latitude: float,
        user_longitude: float,
        max_distance: float = GEOFENCE_RADIUS_METERS,
    ) -> DistanceCheck:
        """Sonda de geofence sem escrita: diz se o usuário poderia fazer check-in dali."""
        require_id(location_id, "Location ID")
        if max_distance <= 0:
            raise InvalidArgumentError("Maximum distance must be greater than 0")
        if max_distance > MAX_PROBE_DISTANCE_METERS:
            raise InvalidArgumentError("Maximum distance cannot exceed 10,000 meters")
        check_latitude(user_latitude, "User latitude")
        check_longitude(user_longitude, "User longitude")

        location = self.locations.get(location_id)
        if not location:
            raise NotFoundError("Location not found")

        distance = distance_meters(user_latitude, user_longitude, location.latitude, location.longitude)
        if distance > max_distance:
            raise OutOfRangeError()

        return DistanceCheck(
            is_valid=True,
            distance_meters=round(distance, 2),
            location=LocationSummary(
                id=location.id,
                title=location.title,
                latitude=location.latitude,
                longitude=location.longitude,
            ),
        )
