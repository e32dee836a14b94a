"""Journey Core package: travel, phases and arrival"""

from trailsim.core.journey.progression import (
    ArrivalResult,
    check_arrival,
    current_location,
    next_location,
    phase_for_distance,
    progress_percent,
)
from trailsim.core.journey.travel import (
    Consumption,
    consumption_rates,
    deplete,
    draw_weather,
    miles_per_day,
)

__all__ = [
    "ArrivalResult",
    "check_arrival",
    "current_location",
    "next_location",
    "phase_for_distance",
    "progress_percent",
    "Consumption",
    "consumption_rates",
    "deplete",
    "draw_weather",
    "miles_per_day",
]
