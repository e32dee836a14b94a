"""Event selection Core package"""

from trailsim.core.events.choices import (
    ChoiceOutcome,
    available_choices,
    resolve_choice,
)
from trailsim.core.events.selector import (
    EventHistoryEntry,
    build_pool,
    event_weight,
    filter_unused,
    select_event,
    weighted_pick,
)

__all__ = [
    "ChoiceOutcome",
    "available_choices",
    "resolve_choice",
    "EventHistoryEntry",
    "build_pool",
    "event_weight",
    "filter_unused",
    "select_event",
    "weighted_pick",
]
