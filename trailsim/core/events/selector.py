"""Weighted random event selection

Order of operations for one draw:
1. phase pool (union of every pool when the phase has none)
2. drop already-used events, unless that empties the pool
3. drop events whose condition fails
4. boost antagonist events by the profession's targeting chance
5. weighted draw in pool order
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from trailsim.core.conditions import evaluate_condition
from trailsim.core.state import SimulationState
from trailsim.core.theme import ThemeDescriptor, TrailEvent

logger = logging.getLogger(__name__)


@dataclass
class EventHistoryEntry:
    """Chronological record of a drawn event"""

    event_id: str
    month: int
    day: int


def build_pool(theme: ThemeDescriptor, phase: str) -> list[TrailEvent]:
    pool = theme.events.pools.get(phase, [])
    if not pool:
        pool = theme.all_events()
    return list(pool)


def filter_unused(pool: list[TrailEvent], used: list[str]) -> list[TrailEvent]:
    """Unused events only. Once everything was seen, repeats resume."""
    used_keys = set(used)
    available = [e for e in pool if e.key not in used_keys]
    if not available:
        logger.debug("Event pool exhausted, allowing repeats")
        return list(pool)
    return available


def event_weight(event: TrailEvent, antagonist_target_chance: float) -> float:
    weight = event.weight
    if event.antagonist and antagonist_target_chance > 0:
        weight *= 1 + antagonist_target_chance
    return weight


def weighted_pick(
    candidates: list[tuple[TrailEvent, float]],
    roll: float,
) -> Optional[TrailEvent]:
    """Deterministic given the roll: subtract weights in order until <= 0.

    roll is a uniform value in [0, 1) scaled to the total weight.
    """
    candidates = [(e, w) for e, w in candidates if w > 0]
    if not candidates:
        return None
    total = sum(w for _, w in candidates)
    remainder = roll * total
    for event, weight in candidates:
        remainder -= weight
        if remainder <= 0:
            return event
    # float residue
    return candidates[-1][0]


def select_event(
    state: SimulationState,
    theme: ThemeDescriptor,
    phase: str,
    rng: random.Random,
    history: list[EventHistoryEntry],
) -> Optional[TrailEvent]:
    """Draw one event and record it as used. None when nothing qualifies."""
    pool = filter_unused(build_pool(theme, phase), state.used_events)
    pool = [e for e in pool if evaluate_condition(e.condition, state)]
    if not pool:
        logger.debug("No eligible event for phase %s", phase)
        return None

    chance = state.modifiers.antagonist_target_chance
    candidates = [(e, event_weight(e, chance)) for e in pool]
    winner = weighted_pick(candidates, rng.random())
    if winner is None:
        return None

    state.used_events.append(winner.key)
    history.append(
        EventHistoryEntry(event_id=winner.key, month=state.month, day=state.day)
    )
    logger.debug("Event drawn: %s (phase=%s, pool=%d)", winner.key, phase, len(pool))
    return winner
