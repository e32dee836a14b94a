"""Simulation state (DB independent)"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from trailsim.core.enums import Pace, Rations, ResourceName, Weather
from trailsim.core.theme import ProfessionModifiers, ThemeDescriptor

START_MONTH = 5  # August in the simplified calendar
START_DAY = 1


@dataclass
class PartyMember:
    """One traveller in the party"""

    name: str
    doubting: bool = False
    doubt: Optional[str] = None  # DoubtSpec.name
    abandoned: bool = False  # one-way
    abandon_reason: Optional[str] = None

    @property
    def active(self) -> bool:
        return not self.abandoned


@dataclass
class AbandonmentRecord:
    name: str
    reason: str


@dataclass
class SimulationState:
    """Everything that changes during a journey"""

    resources: dict[str, int]
    total_distance: int
    food_shortfall: int = 0

    # journey
    distance: int = 0
    current_location_index: int = 0

    # calendar
    month: int = START_MONTH
    day: int = START_DAY
    days_elapsed: int = 1

    # travel settings
    pace: Pace = Pace.STEADY
    rations: Rations = Rations.NORMAL
    weather: Weather = Weather.CLEAR

    # profession
    profession_id: Optional[str] = None
    profession_name: Optional[str] = None
    modifiers: ProfessionModifiers = field(default_factory=ProfessionModifiers)
    score_multiplier: float = 1.0

    party: list[PartyMember] = field(default_factory=list)

    used_events: list[str] = field(default_factory=list)
    forage_count: int = 0
    items: dict[str, int] = field(default_factory=dict)

    finished: bool = False
    outcome: Optional[str] = None  # "won" or a FailReason value
    abandoned_this_turn: list[AbandonmentRecord] = field(default_factory=list)

    @classmethod
    def from_theme(cls, theme: ThemeDescriptor) -> "SimulationState":
        return cls(
            resources={
                key.value: theme.resources.get(key).start for key in ResourceName
            },
            total_distance=theme.journey.total_distance,
        )

    # === queries ===

    @property
    def effective_food(self) -> int:
        """Food stock minus unmet demand. Negative means the party is starving."""
        return self.resources[ResourceName.FOOD.value] - self.food_shortfall

    def active_members(self) -> list[PartyMember]:
        return [m for m in self.party if not m.abandoned]

    def doubting_members(self) -> list[PartyMember]:
        return [m for m in self.party if not m.abandoned and m.doubting]

    # === serialization ===

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe deep copy."""
        data = asdict(self)
        data["pace"] = self.pace.value
        data["rations"] = self.rations.value
        data["weather"] = self.weather.value
        data["modifiers"] = self.modifiers.model_dump()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SimulationState":
        return cls(
            resources=dict(data["resources"]),
            total_distance=data["total_distance"],
            food_shortfall=data.get("food_shortfall", 0),
            distance=data.get("distance", 0),
            current_location_index=data.get("current_location_index", 0),
            month=data.get("month", START_MONTH),
            day=data.get("day", START_DAY),
            days_elapsed=data.get("days_elapsed", 1),
            pace=Pace(data.get("pace", Pace.STEADY.value)),
            rations=Rations(data.get("rations", Rations.NORMAL.value)),
            weather=Weather(data.get("weather", Weather.CLEAR.value)),
            profession_id=data.get("profession_id"),
            profession_name=data.get("profession_name"),
            modifiers=ProfessionModifiers.model_validate(data.get("modifiers") or {}),
            score_multiplier=data.get("score_multiplier", 1.0),
            party=[PartyMember(**m) for m in data.get("party", [])],
            used_events=list(data.get("used_events", [])),
            forage_count=data.get("forage_count", 0),
            items=dict(data.get("items", {})),
            finished=data.get("finished", False),
            outcome=data.get("outcome"),
            abandoned_this_turn=[
                AbandonmentRecord(**r) for r in data.get("abandoned_this_turn", [])
            ],
        )
