"""Travel-time plausibility check.

Catches gross data-entry errors (wrong day, swapped times) by comparing
the implied average speed with coarse bounds for the distance band.
The bounds are wide and say nothing about the mode of transport.
"""

from datetime import datetime

from ..domain.models import TravelTimeCheck

ARRIVAL_BEFORE_DEPARTURE_MESSAGE = "Arrival time must be after departure time"
IMPLAUSIBLE_JOURNEY_MESSAGE = (
    "This journey appears to exceed realistic travel times. "
    "Please check your departure/arrival times"
)

# km
SHORT_DISTANCE_LIMIT_KM = 50.0
MEDIUM_DISTANCE_LIMIT_KM = 500.0

# km/h
MIN_SPEED_WALKING = 3.0
MIN_SPEED_GROUND = 30.0
MAX_SPEED_AIR = 1000.0


def check_speed(distance_km: float, elapsed_hours: float) -> TravelTimeCheck:
    """Decide whether covering ``distance_km`` in ``elapsed_hours`` is plausible.

    Parameters
    ----------
    distance_km:
        Great-circle distance of the journey.
    elapsed_hours:
        Time between departure and arrival, in hours.

    Returns
    -------
    TravelTimeCheck
        Valid, or invalid with a user-facing message. Non-positive
        elapsed time is rejected before any speed is computed.
    """
    if elapsed_hours <= 0:
        return TravelTimeCheck(is_valid=False, error=ARRIVAL_BEFORE_DEPARTURE_MESSAGE)

    speed = distance_km / elapsed_hours

    if distance_km < SHORT_DISTANCE_LIMIT_KM:
        # walking or local transport, no upper bound
        plausible = speed >= MIN_SPEED_WALKING
    elif distance_km < MEDIUM_DISTANCE_LIMIT_KM:
        # bus/train up to short-hop regional flights
        plausible = MIN_SPEED_GROUND <= speed <= MAX_SPEED_AIR
    else:
        plausible = MIN_SPEED_GROUND <= speed <= MAX_SPEED_AIR

    if not plausible:
        return TravelTimeCheck(
            is_valid=False,
            error=IMPLAUSIBLE_JOURNEY_MESSAGE,
            speed_kmh=speed,
        )
    return TravelTimeCheck(is_valid=True, speed_kmh=speed)


def check_travel_time(
    distance_km: float,
    departure: datetime,
    arrival: datetime,
) -> TravelTimeCheck:
    """Plausibility check from a departure/arrival timestamp pair."""
    elapsed_hours = (arrival - departure).total_seconds() / 3600
    return check_speed(distance_km, elapsed_hours)
