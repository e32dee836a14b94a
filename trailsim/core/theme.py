"""Theme descriptor models

A theme is read-only configuration injected into a session: resources,
professions, the journey and its locations, event pools, the doubt catalog,
the shop and optional mystery (time-boxed) parameters. Loading and
marketplace validation happen outside the engine; these models only give the
engine a typed, immutable view of the data.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from trailsim.core.enums import DoubtTrigger, ResourceName
from trailsim.core.conditions import EventCondition


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# === Resources ===


class ResourceSpec(_Frozen):
    """One tracked quantity"""

    name: str
    icon: str = ""
    start: int = 0
    max: Optional[int] = None  # None = uncapped
    inverted: bool = False  # high is bad (paranoia-style special item)
    accumulates: bool = False  # never depleted by travel (e.g. evidence)


class ResourceTable(_Frozen):
    fuel: ResourceSpec
    food: ResourceSpec
    morale: ResourceSpec
    currency: ResourceSpec
    special_item: ResourceSpec

    def get(self, key: ResourceName | str) -> ResourceSpec:
        return getattr(self, ResourceName(key).value)


# === Professions ===


class ProfessionModifiers(_Frozen):
    morale_drain_by_phase: dict[str, int] = Field(default_factory=dict)
    forage_bonus: float = 0.0
    forage_morale_change: int = 0
    antagonist_target_chance: float = 0.0


class ProfessionSpec(_Frozen):
    id: str
    display_name: str = ""
    starting_currency: int = 0
    score_multiplier: float = 1.0
    modifiers: ProfessionModifiers = Field(default_factory=ProfessionModifiers)


# === Journey ===


class PhaseSpec(_Frozen):
    """Distance band [start, end)"""

    name: str
    start: int
    end: int


class JourneySpec(_Frozen):
    total_distance: int
    end_location: str
    phases: list[PhaseSpec]


class LandmarkData(_Frozen):
    title: str = ""
    description: str = ""
    morale_boost: int = 0


class LocationSpec(_Frozen):
    name: str
    distance: int
    landmark: Optional[LandmarkData] = None


# === Events ===


class EventChoice(_Frozen):
    text: str
    condition: Optional[EventCondition] = None
    effects: dict[str, int] = Field(default_factory=dict)
    message: str = ""
    risk: float = Field(default=0.0, ge=0.0, le=1.0)
    fail_effects: dict[str, int] = Field(default_factory=dict)
    fail_message: str = ""
    ends_game: bool = False
    fail_ends_game: bool = False


class TrailEvent(_Frozen):
    id: Optional[str] = None
    text: str
    weight: float = 1.0
    antagonist: bool = False
    condition: Optional[EventCondition] = None
    effects: dict[str, int] = Field(default_factory=dict)
    choices: list[EventChoice] = Field(default_factory=list)

    @property
    def key(self) -> str:
        """De-duplication key. Text doubles as id when none is given."""
        return self.id or self.text

    @property
    def is_choice(self) -> bool:
        return bool(self.choices)


class DoubtSpec(_Frozen):
    name: str
    trigger: DoubtTrigger
    morale_drain: int = 0
    abandon_reason: Optional[str] = None


class EventCatalog(_Frozen):
    pools: dict[str, list[TrailEvent]] = Field(default_factory=dict)
    doubts: list[DoubtSpec] = Field(default_factory=list)

    def doubt(self, name: Optional[str]) -> Optional[DoubtSpec]:
        if name is None:
            return None
        return next((d for d in self.doubts if d.name == name), None)


# === Shop / mystery ===


class ShopItem(_Frozen):
    id: str
    name: str
    cost: int
    resource: Optional[ResourceName] = None
    collectible: Optional[str] = None
    amount: int = 0
    effects: dict[str, int] = Field(default_factory=dict)


class MysterySpec(_Frozen):
    enabled: bool = False
    time_limit: int = 0
    bonus_points_per_day: int = 50


class ThemeDescriptor(_Frozen):
    """Complete theme configuration for one session"""

    name: str
    version: str = "1.0"
    resources: ResourceTable
    professions: list[ProfessionSpec]
    journey: JourneySpec
    locations: list[LocationSpec]
    events: EventCatalog = Field(default_factory=EventCatalog)
    shop: list[ShopItem] = Field(default_factory=list)
    mystery: Optional[MysterySpec] = None
    paranoia_reasons: list[str] = Field(default_factory=list)

    def profession(self, profession_id: str) -> Optional[ProfessionSpec]:
        return next((p for p in self.professions if p.id == profession_id), None)

    def shop_item(self, item_id: str) -> Optional[ShopItem]:
        return next((i for i in self.shop if i.id == item_id), None)

    def all_events(self) -> list[TrailEvent]:
        """Every pooled event, phases in journey order, then any extra pools."""
        ordered: list[TrailEvent] = []
        seen: set[str] = set()
        for phase in self.journey.phases:
            ordered.extend(self.events.pools.get(phase.name, []))
            seen.add(phase.name)
        for name, pool in self.events.pools.items():
            if name not in seen:
                ordered.extend(pool)
        return ordered

    @property
    def mystery_enabled(self) -> bool:
        return self.mystery is not None and self.mystery.enabled
