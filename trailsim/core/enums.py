"""Simulation enumerations"""

from enum import Enum


class Pace(str, Enum):
    MELLOW = "mellow"
    STEADY = "steady"
    RUSH = "rush"


class Rations(str, Enum):
    BARE = "bare"
    NORMAL = "normal"
    FEAST = "feast"


class Weather(str, Enum):
    CLEAR = "clear"
    RAIN = "rain"
    HOT = "hot"
    BAD = "bad"


class ResourceName(str, Enum):
    FUEL = "fuel"
    FOOD = "food"
    MORALE = "morale"
    CURRENCY = "currency"
    SPECIAL_ITEM = "special_item"


class DoubtTrigger(str, Enum):
    HIGH_SPECIAL_ITEM = "high_special_item"
    LOW_MORALE = "low_morale"


class ArrivalKind(str, Enum):
    ARRIVAL = "arrival"
    WIN = "win"


class FailReason(str, Enum):
    ALL_ABANDONED = "all_abandoned"
    NO_FUEL = "no_fuel"
    STARVED = "starved"
    TIME_EXPIRED = "time_expired"
    MORALE_ABANDONMENT = "morale_abandonment"
    PARANOIA_ABANDONMENT = "paranoia_abandonment"
