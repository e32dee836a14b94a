"""
Trail Engine - session orchestration
====================================
Ties the ledger, calendar, event selector, party model, journey progression
and fail evaluator together into the operations a presentation layer calls.

One engine instance is one session: it owns its state, its PRNG stream and
its event history. Nothing is shared between sessions.
"""

import copy
import random
import time
from contextlib import nullcontext
from dataclasses import asdict, dataclass, field
from typing import Any, ContextManager, Mapping, Optional

from trailsim.core.conditions import CustomCondition, ItemPresence, evaluate_condition
from trailsim.core.enums import ArrivalKind, Pace, Rations, ResourceName, Weather
from trailsim.core.events.choices import (
    ChoiceOutcome,
    available_choices,
    resolve_choice,
)
from trailsim.core.events.selector import EventHistoryEntry, select_event
from trailsim.core.journey import progression, travel
from trailsim.core.journey.progression import ArrivalResult
from trailsim.core.logging import get_logger
from trailsim.core.minigame import MiniGameResult
from trailsim.core.outcome.fail_conditions import FailCheck, check_fail_conditions
from trailsim.core.outcome.scoring import calculate_score
from trailsim.core.party.morale import clear_doubts, update_party
from trailsim.core.party.roster import build_party
from trailsim.core.resources import calendar, ledger
from trailsim.core.signal_bus import Signal, SignalBus
from trailsim.core.signal_types import SignalTypes
from trailsim.core.state import AbandonmentRecord, SimulationState
from trailsim.core.theme import EventChoice, LocationSpec, ThemeDescriptor, TrailEvent

logger = get_logger(__name__)

SIGNAL_SOURCE = "trail_engine"

# === Foraging ===
FORAGE_MIN = 10
FORAGE_SPREAD = 15  # 10..24 before the profession bonus
FORAGE_REPEAT_PENALTY = -5
FORAGE_OVERSTAY_PENALTY = -10

# === Resting ===
REST_FOOD_COST = 10
REST_CLEARS_DOUBTS_ABOVE = 60


@dataclass
class DayReport:
    """Everything that happened during one travelled day"""

    miles: int
    weather: Weather
    arrival: Optional[ArrivalResult] = None
    abandoned: list[AbandonmentRecord] = field(default_factory=list)
    fail: Optional[FailCheck] = None

    @property
    def won(self) -> bool:
        return self.arrival is not None and self.arrival.kind == ArrivalKind.WIN


@dataclass
class ActionResult:
    """Result of a player action"""

    success: bool
    action_type: str
    message: str
    data: Optional[dict] = None

    def to_dict(self) -> dict:
        result = {
            "success": self.success,
            "action": self.action_type,
            "message": self.message,
        }
        if self.data:
            result["data"] = self.data
        return result


@dataclass
class ForageResult:
    food_found: int
    morale_penalty: int
    forage_morale_change: int
    message: str


class TrailEngine:
    """Theme-agnostic journey simulation for a single session"""

    def __init__(
        self,
        theme: ThemeDescriptor,
        rng: Optional[random.Random] = None,
        bus: Optional[SignalBus] = None,
    ):
        self.rng = rng or random.Random()
        self.bus = bus
        self.initialize(theme)

    # === setup ===

    def initialize(self, theme: ThemeDescriptor) -> None:
        """Fresh state from the theme's defaults."""
        self.theme = theme
        self.state = SimulationState.from_theme(theme)
        self.event_history: list[EventHistoryEntry] = []
        logger.info("Session initialized: %s v%s", theme.name, theme.version)

    def set_profession(self, profession_id: str) -> None:
        profession = self.theme.profession(profession_id)
        if profession is None:
            raise ValueError(f"Unknown profession: {profession_id}")

        self.state.profession_id = profession.id
        self.state.profession_name = profession.display_name or profession.id
        self.state.modifiers = profession.modifiers
        self.state.score_multiplier = profession.score_multiplier
        self.state.resources[ResourceName.CURRENCY.value] = profession.starting_currency
        logger.info("Profession set: %s", profession.id)

    def initialize_party(self, names: list[str]) -> None:
        self.state.party = build_party(names)
        logger.info("Party initialized: %d members", len(self.state.party))

    def set_pace(self, pace: Pace | str) -> None:
        try:
            self.state.pace = Pace(pace)
        except ValueError:
            raise ValueError(f"Unknown pace: {pace}") from None

    def set_rations(self, rations: Rations | str) -> None:
        try:
            self.state.rations = Rations(rations)
        except ValueError:
            raise ValueError(f"Unknown rations: {rations}") from None

    # === daily pipeline ===

    def advance_day(self) -> DayReport:
        """Travel one day.

        distance -> calendar -> depletion -> weather -> party -> arrival -> fail

        Depletion uses the phase of the new position.
        """
        with self._operation():
            state = self.state
            miles = travel.miles_per_day(state.pace)

            state.distance += miles
            calendar.advance(state, 1)
            travel.deplete(state, self.theme, self.get_current_phase())
            state.weather = travel.draw_weather(self.rng)

            abandoned = update_party(state, self.theme, self.rng)
            state.abandoned_this_turn = list(abandoned)
            for record in abandoned:
                self._publish(
                    SignalTypes.MEMBER_ABANDONED,
                    {"name": record.name, "reason": record.reason},
                )

            report = DayReport(miles=miles, weather=state.weather, abandoned=abandoned)
            report.arrival = progression.check_arrival(state, self.theme)
            if report.arrival is not None:
                self._publish_arrival(report.arrival)
            if not report.won:
                report.fail = self._evaluate_fail()

            self._publish(
                SignalTypes.DAY_ADVANCED,
                {"distance": state.distance, "month": state.month, "day": state.day},
            )
        return report

    def clear_abandoned(self) -> None:
        """Caller acknowledges the abandonment list of the last day."""
        self.state.abandoned_this_turn = []

    # === effects & events ===

    def apply_effects(self, effects: Optional[Mapping[str, int]]) -> None:
        ledger.apply_effects(self.state, self.theme, effects)

    def apply_minigame_result(self, result: MiniGameResult) -> None:
        logger.debug(
            "Minigame result: success=%s score=%s", result.success, result.score
        )
        self.apply_effects(result.effects())

    def get_random_event(self) -> Optional[TrailEvent]:
        with self._operation():
            event = select_event(
                self.state,
                self.theme,
                self.get_current_phase(),
                self.rng,
                self.event_history,
            )
            if event is not None:
                self._publish(SignalTypes.EVENT_DRAWN, {"event_id": event.key})
        return event

    def check_event_condition(
        self, condition: Optional[ItemPresence | CustomCondition]
    ) -> bool:
        return evaluate_condition(condition, self.state)

    def available_choices(self, event: TrailEvent) -> list[EventChoice]:
        return available_choices(self.state, event)

    def resolve_choice(self, event: TrailEvent, choice: EventChoice) -> ChoiceOutcome:
        """Roll the choice's risk and apply the resulting effects.

        `outcome.ends_game` is advisory: the state is not marked finished,
        the caller ends the session.
        """
        if choice not in event.choices:
            raise ValueError(f"Choice does not belong to event: {event.key}")
        outcome = resolve_choice(choice, self.rng)
        self.apply_effects(outcome.effects)
        return outcome

    def check_fail_conditions(self) -> Optional[FailCheck]:
        with self._operation():
            result = self._evaluate_fail()
        return result

    # === actions ===

    def forage(self) -> ForageResult:
        """Gather food. Repeated foraging at one location upsets the party."""
        modifiers = self.state.modifiers
        found = int(self.rng.random() * FORAGE_SPREAD) + FORAGE_MIN
        found = int(found * (1 + modifiers.forage_bonus))

        count = self.state.forage_count
        if count == 0:
            penalty = 0
            message = f"You forage and find {found} food!"
        elif count == 1:
            penalty = FORAGE_REPEAT_PENALTY
            message = (
                f"You forage again and find {found} food, "
                f"but the crew is getting restless. ({penalty} morale)"
            )
        else:
            penalty = FORAGE_OVERSTAY_PENALTY
            message = (
                "The locals are giving you dirty looks. You're overstaying "
                f"your welcome. Found {found} food. ({penalty} morale)"
            )

        self.apply_effects(
            {
                ResourceName.FOOD.value: found,
                ResourceName.MORALE.value: modifiers.forage_morale_change + penalty,
            }
        )
        self.state.forage_count += 1
        return ForageResult(
            food_found=found,
            morale_penalty=penalty,
            forage_morale_change=modifiers.forage_morale_change,
            message=message,
        )

    def rest(self, days: int = 2) -> ActionResult:
        """Spend food to pass days in place. High morale cures doubts."""
        if days < 1:
            raise ValueError(f"Rest days must be positive: {days}")
        food = self.state.resources[ResourceName.FOOD.value]
        if food < REST_FOOD_COST:
            return ActionResult(False, "rest", "Not enough food to rest safely.")

        self.apply_effects(
            {ResourceName.FOOD.value: -REST_FOOD_COST, ledger.DAYS_KEY: days}
        )

        morale = self.state.resources[ResourceName.MORALE.value]
        refreshed = morale > REST_CLEARS_DOUBTS_ABOVE
        if refreshed:
            clear_doubts(self.state.party)
            message = (
                f"You rest for {days} days. "
                "Everyone feels refreshed and doubts fade away!"
            )
        else:
            message = f"You rest for {days} days. The rest helps a bit."

        return ActionResult(
            success=True,
            action_type="rest",
            message=message,
            data={"days": days, "doubts_cleared": refreshed},
        )

    def buy_item(self, item_id: str) -> ActionResult:
        item = self.theme.shop_item(item_id)
        if item is None:
            raise ValueError(f"Unknown shop item: {item_id}")

        currency = ResourceName.CURRENCY.value
        if self.state.resources[currency] < item.cost:
            return ActionResult(False, "buy", "Not enough cash!", {"item_id": item.id})

        effects: dict[str, int] = {currency: -item.cost}
        if item.resource is not None:
            key = item.resource.value
            effects[key] = effects.get(key, 0) + item.amount
        for key, value in item.effects.items():
            effects[key] = effects.get(key, 0) + value
        self.apply_effects(effects)

        if item.collectible:
            self.state.items[item.collectible] = (
                self.state.items.get(item.collectible, 0) + max(1, item.amount)
            )

        logger.info("Bought %s for %d", item.id, item.cost)
        self._publish(SignalTypes.ITEM_BOUGHT, {"item_id": item.id, "cost": item.cost})
        return ActionResult(
            success=True,
            action_type="buy",
            message=f"Bought {item.name} for ${item.cost}!",
            data={"item_id": item.id},
        )

    # === queries ===

    def get_current_location(self) -> LocationSpec:
        return progression.current_location(self.theme, self.state)

    def get_current_phase(self) -> str:
        return progression.phase_for_distance(self.theme, self.state.distance)

    def get_progress(self) -> float:
        return progression.progress_percent(self.state)

    def get_score(self) -> int:
        return calculate_score(self.state, self.theme)

    # === snapshots ===

    def serialize_snapshot(self) -> dict[str, Any]:
        """Opaque, JSON-safe deep copy of the session."""
        return {
            "theme_name": self.theme.name,
            "theme_version": self.theme.version,
            "state": self.state.to_dict(),
            "event_history": [asdict(entry) for entry in self.event_history],
            "timestamp": time.time(),
        }

    def restore_snapshot(self, snapshot: Mapping[str, Any]) -> None:
        """Replace the session wholesale. A snapshot of another theme is rejected."""
        theme_name = snapshot.get("theme_name")
        if theme_name != self.theme.name:
            raise ValueError(
                f"Snapshot is for a different theme: {theme_name!r} "
                f"(active: {self.theme.name!r})"
            )
        data = copy.deepcopy(dict(snapshot))
        self.state = SimulationState.from_dict(data["state"])
        self.event_history = [
            EventHistoryEntry(**entry) for entry in data.get("event_history", [])
        ]
        logger.info("Snapshot restored: %s", theme_name)
        self._publish(SignalTypes.SNAPSHOT_RESTORED, {"theme_name": theme_name})

    # === internals ===

    def _evaluate_fail(self) -> Optional[FailCheck]:
        result = check_fail_conditions(self.state, self.theme, self.rng)
        if result is None:
            return None
        if result.terminal:
            self._publish(SignalTypes.JOURNEY_FAILED, {"reason": result.reason.value})
        else:
            self._publish(
                SignalTypes.FORCED_ABANDONMENT,
                {
                    "reason": result.reason.value,
                    "name": result.member.name if result.member else None,
                },
            )
        return result

    def _publish_arrival(self, arrival: ArrivalResult) -> None:
        signal_type = (
            SignalTypes.JOURNEY_WON
            if arrival.kind == ArrivalKind.WIN
            else SignalTypes.LOCATION_ARRIVED
        )
        self._publish(
            signal_type,
            {
                "location": arrival.location.name,
                "index": self.state.current_location_index,
            },
        )

    def _publish(self, signal_type: str, data: dict[str, Any]) -> None:
        if self.bus is not None:
            self.bus.publish(
                Signal(signal_type=signal_type, data=data, source=SIGNAL_SOURCE)
            )

    def _operation(self) -> ContextManager[Any]:
        """Signals published inside are delivered when the block exits."""
        if self.bus is None:
            return nullcontext()
        return self.bus.operation()
