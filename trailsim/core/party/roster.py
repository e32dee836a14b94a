"""Party roster construction and forced departures"""

import logging
import random
from typing import Optional

from trailsim.core.party.morale import abandon
from trailsim.core.state import AbandonmentRecord, PartyMember, SimulationState

logger = logging.getLogger(__name__)


def build_party(names: list[str]) -> list[PartyMember]:
    """Fresh roster. Names must be unique and non-empty."""
    cleaned = [name.strip() for name in names]
    if any(not name for name in cleaned):
        raise ValueError("Party member names must be non-empty")
    if len(set(cleaned)) != len(cleaned):
        raise ValueError(f"Duplicate party member names: {cleaned}")
    return [PartyMember(name=name) for name in cleaned]


def all_abandoned(state: SimulationState) -> bool:
    """An empty roster never counts as abandoned."""
    return bool(state.party) and all(m.abandoned for m in state.party)


def force_abandon_random(
    state: SimulationState,
    rng: random.Random,
    reason: str,
) -> Optional[AbandonmentRecord]:
    """Uniformly pick one active member and remove them."""
    remaining = state.active_members()
    if not remaining:
        return None
    victim = remaining[int(rng.random() * len(remaining))]
    return abandon(victim, reason)
