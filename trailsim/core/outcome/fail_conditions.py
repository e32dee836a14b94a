"""Fail-condition evaluation

Checked after the daily pipeline (and after event effects). The first
matching branch wins and only one branch fires per call:

1. every party member gone       -> terminal
2. out of fuel                   -> terminal
3. starved (food <= -20)         -> terminal
4. mystery time limit exceeded   -> terminal
5. morale <= 0                   -> one member leaves, morale reset to 20
6. paranoia (inverted) >= 100    -> one member leaves, special item reset to 80
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from trailsim.core.enums import FailReason, ResourceName
from trailsim.core.party.roster import all_abandoned, force_abandon_random
from trailsim.core.resources import ledger
from trailsim.core.state import AbandonmentRecord, SimulationState
from trailsim.core.theme import ThemeDescriptor

logger = logging.getLogger(__name__)

STARVATION_THRESHOLD = -20
MORALE_RESET = 20
PARANOIA_LIMIT = 100
PARANOIA_RESET = 80
MORALE_ABANDON_REASON = "lost all faith in the journey"

PARANOIA_REASONS: tuple[str, ...] = (
    "fled into the desert muttering about surveillance",
    "destroyed their phone and hitchhiked north",
    "joined a commune to get off the grid",
    "locked themselves in a motel room lined with tinfoil",
    "bought a one-way ticket somewhere remote",
    "disappeared without a trace",
)


@dataclass
class FailCheck:
    """Outcome of one evaluation. `terminal` ends the journey."""

    reason: FailReason
    terminal: bool
    member: Optional[AbandonmentRecord] = None


def check_fail_conditions(
    state: SimulationState,
    theme: ThemeDescriptor,
    rng: random.Random,
) -> Optional[FailCheck]:
    if all_abandoned(state):
        return _terminal(state, FailReason.ALL_ABANDONED)

    if state.resources[ResourceName.FUEL.value] <= 0:
        return _terminal(state, FailReason.NO_FUEL)

    if (
        not theme.resources.food.accumulates
        and state.effective_food <= STARVATION_THRESHOLD
    ):
        return _terminal(state, FailReason.STARVED)

    if theme.mystery_enabled and state.days_elapsed > theme.mystery.time_limit:
        return _terminal(state, FailReason.TIME_EXPIRED)

    if state.resources[ResourceName.MORALE.value] <= 0 and state.active_members():
        record = force_abandon_random(state, rng, MORALE_ABANDON_REASON)
        ledger.set_value(state, theme, ResourceName.MORALE, MORALE_RESET)
        return FailCheck(
            reason=FailReason.MORALE_ABANDONMENT, terminal=False, member=record
        )

    if (
        theme.resources.special_item.inverted
        and state.resources[ResourceName.SPECIAL_ITEM.value] >= PARANOIA_LIMIT
        and state.active_members()
    ):
        reasons = theme.paranoia_reasons or PARANOIA_REASONS
        reason = reasons[int(rng.random() * len(reasons))]
        record = force_abandon_random(state, rng, reason)
        ledger.set_value(state, theme, ResourceName.SPECIAL_ITEM, PARANOIA_RESET)
        return FailCheck(
            reason=FailReason.PARANOIA_ABANDONMENT, terminal=False, member=record
        )

    return None


def _terminal(state: SimulationState, reason: FailReason) -> FailCheck:
    state.finished = True
    state.outcome = reason.value
    logger.info("Journey failed: %s", reason.value)
    return FailCheck(reason=reason, terminal=True)
