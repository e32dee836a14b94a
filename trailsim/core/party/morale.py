"""Party morale, doubt and abandonment: pure Python

Runs once per travelled day, after resource depletion and before the
arrival check.

Doubters by morale:
    >= 75: 0 | < 75: 1 | < 50: 2 | < 30: 3

Abandonment chance per doubting member is the larger of two curves:
    morale:      100% at <= 0, 10%->100% over [30, 0), 5%->10% over [50, 30),
                 0%->5% over [75, 50), 0% at >= 75
    special item (paranoia):
                 100% at >= 100, 20%->100% over [85, 100),
                 5%->20% over [70, 85), 0% below 70
"""

import logging
import random
from typing import Optional

from trailsim.core.enums import DoubtTrigger, ResourceName
from trailsim.core.resources import ledger
from trailsim.core.state import AbandonmentRecord, PartyMember, SimulationState
from trailsim.core.theme import DoubtSpec, ThemeDescriptor

logger = logging.getLogger(__name__)

# === Doubter targets ===
DOUBT_THRESHOLDS: tuple[tuple[int, int], ...] = (
    (30, 3),
    (50, 2),
    (75, 1),
)
CLEAR_DOUBTS_ABOVE = 75

# === Doubt class selection ===
HIGH_SPECIAL_ITEM_THRESHOLD = 50
LOW_MORALE_THRESHOLD = 50
# When both problems are present the class is a coin flip.
DOUBT_CLASS_TIE_BREAK = 0.5

# === Abandonment ===
PARANOIA_REASON_THRESHOLD = 0.1
PARANOIA_ABANDON_REASON = "became too paranoid and fled"
DEFAULT_ABANDON_REASON = "gave up on the trip"


def target_doubters(morale: int) -> int:
    for threshold, count in DOUBT_THRESHOLDS:
        if morale < threshold:
            return count
    return 0


def morale_abandon_chance(morale: float) -> float:
    if morale <= 0:
        return 1.0
    if morale < 30:
        return 0.1 + 0.9 * (30 - morale) / 30
    if morale < 50:
        return 0.05 + 0.05 * (50 - morale) / 20
    if morale < 75:
        return 0.05 * (75 - morale) / 25
    return 0.0


def paranoia_abandon_chance(special_item: float) -> float:
    if special_item >= 100:
        return 1.0
    if special_item >= 85:
        return 0.2 + 0.8 * (special_item - 85) / 15
    if special_item >= 70:
        return 0.05 + 0.15 * (special_item - 70) / 15
    return 0.0


def doubt_candidates(
    doubts: list[DoubtSpec],
    special_item: int,
    morale: int,
    rng: random.Random,
) -> list[DoubtSpec]:
    """Doubts matching whatever is actually going wrong.

    Neither problem present defaults to the low-morale class. An empty
    filtered set falls back to the whole catalog.
    """
    high_special = special_item >= HIGH_SPECIAL_ITEM_THRESHOLD
    low_morale = morale < LOW_MORALE_THRESHOLD

    if high_special and low_morale:
        trigger = (
            DoubtTrigger.HIGH_SPECIAL_ITEM
            if rng.random() < DOUBT_CLASS_TIE_BREAK
            else DoubtTrigger.LOW_MORALE
        )
    elif high_special:
        trigger = DoubtTrigger.HIGH_SPECIAL_ITEM
    else:
        trigger = DoubtTrigger.LOW_MORALE

    filtered = [d for d in doubts if d.trigger == trigger]
    return filtered or list(doubts)


def assign_doubt(
    member: PartyMember,
    theme: ThemeDescriptor,
    state: SimulationState,
    rng: random.Random,
) -> None:
    member.doubting = True
    candidates = doubt_candidates(
        theme.events.doubts,
        state.resources[ResourceName.SPECIAL_ITEM.value],
        state.resources[ResourceName.MORALE.value],
        rng,
    )
    if not candidates:
        logger.warning("Doubt catalog is empty: %s doubts without a cause", member.name)
        member.doubt = None
        return
    member.doubt = rng.choice(candidates).name
    logger.debug("%s starts doubting: %s", member.name, member.doubt)


def clear_doubts(members: list[PartyMember]) -> None:
    for member in members:
        if member.abandoned:
            continue
        member.doubting = False
        member.doubt = None


def abandon(member: PartyMember, reason: str) -> AbandonmentRecord:
    """One-way transition. The reason is set only once."""
    member.abandoned = True
    member.doubting = False
    if member.abandon_reason is None:
        member.abandon_reason = reason
    logger.info("%s abandoned the party: %s", member.name, member.abandon_reason)
    return AbandonmentRecord(name=member.name, reason=member.abandon_reason)


def abandonment_reason(
    doubt: Optional[DoubtSpec],
    morale_chance: float,
    paranoia_chance: float,
) -> str:
    if paranoia_chance > morale_chance and paranoia_chance > PARANOIA_REASON_THRESHOLD:
        return PARANOIA_ABANDON_REASON
    if doubt is not None and doubt.abandon_reason:
        return doubt.abandon_reason
    return DEFAULT_ABANDON_REASON


def update_party(
    state: SimulationState,
    theme: ThemeDescriptor,
    rng: random.Random,
) -> list[AbandonmentRecord]:
    """Daily party update. Returns the members who left during this call."""
    morale = state.resources[ResourceName.MORALE.value]
    abandoned: list[AbandonmentRecord] = []

    target = target_doubters(morale)
    current = len(state.doubting_members())

    if current < target:
        idle = [m for m in state.active_members() if not m.doubting]
        for member in idle[: target - current]:
            assign_doubt(member, theme, state, rng)

    if morale > CLEAR_DOUBTS_ABOVE and current > 0:
        logger.debug("Morale recovered (%d), doubts cleared", morale)
        clear_doubts(state.party)

    doubters = state.doubting_members()

    drain = 0
    for member in doubters:
        doubt = theme.events.doubt(member.doubt)
        if doubt is not None:
            drain += doubt.morale_drain
    if drain:
        ledger.adjust(state, theme, ResourceName.MORALE, -drain)

    special_item = state.resources[ResourceName.SPECIAL_ITEM.value]
    for member in doubters:
        morale_chance = morale_abandon_chance(morale)
        paranoia_chance = paranoia_abandon_chance(special_item)
        chance = max(morale_chance, paranoia_chance)
        if rng.random() < chance:
            reason = abandonment_reason(
                theme.events.doubt(member.doubt), morale_chance, paranoia_chance
            )
            abandoned.append(abandon(member, reason))

    return abandoned
