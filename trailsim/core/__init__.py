"""Trail simulation core"""

from trailsim.core.conditions import CustomCondition, ItemPresence
from trailsim.core.engine import ActionResult, DayReport, ForageResult, TrailEngine
from trailsim.core.enums import (
    ArrivalKind,
    DoubtTrigger,
    FailReason,
    Pace,
    Rations,
    ResourceName,
    Weather,
)
from trailsim.core.minigame import MiniGameResult
from trailsim.core.signal_bus import Signal, SignalBus
from trailsim.core.signal_types import SignalTypes
from trailsim.core.state import AbandonmentRecord, PartyMember, SimulationState
from trailsim.core.theme import ThemeDescriptor

__all__ = [
    "CustomCondition",
    "ItemPresence",
    "ActionResult",
    "DayReport",
    "ForageResult",
    "TrailEngine",
    "ArrivalKind",
    "DoubtTrigger",
    "FailReason",
    "Pace",
    "Rations",
    "ResourceName",
    "Weather",
    "MiniGameResult",
    "Signal",
    "SignalBus",
    "SignalTypes",
    "AbandonmentRecord",
    "PartyMember",
    "SimulationState",
    "ThemeDescriptor",
]
