"""Journey progression: phases, locations and arrival"""

import logging
from dataclasses import dataclass
from typing import Optional

from trailsim.core.enums import ArrivalKind, ResourceName
from trailsim.core.state import SimulationState
from trailsim.core.theme import LocationSpec, ThemeDescriptor

logger = logging.getLogger(__name__)

WON = "won"


@dataclass
class ArrivalResult:
    kind: ArrivalKind
    location: LocationSpec
    morale_boost: int = 0


def phase_for_distance(theme: ThemeDescriptor, distance: int) -> str:
    """First phase containing the distance. The last phase is open-ended."""
    phases = theme.journey.phases
    for phase in phases:
        if phase.start <= distance < phase.end:
            return phase.name
    return phases[-1].name


def current_location(theme: ThemeDescriptor, state: SimulationState) -> LocationSpec:
    return theme.locations[state.current_location_index]


def next_location(
    theme: ThemeDescriptor, state: SimulationState
) -> Optional[LocationSpec]:
    index = state.current_location_index + 1
    if index < len(theme.locations):
        return theme.locations[index]
    return None


def check_arrival(
    state: SimulationState, theme: ThemeDescriptor
) -> Optional[ArrivalResult]:
    """Advance at most one location.

    A jump past several thresholds in one call only reaches the first of
    them; the daily pipeline moves less than one leg per day so this does
    not happen in normal play.
    """
    upcoming = next_location(theme, state)
    if upcoming is None or state.distance < upcoming.distance:
        return None

    state.current_location_index += 1
    state.forage_count = 0

    boost = _apply_landmark_boost(state, theme, upcoming)

    if upcoming.name == theme.journey.end_location:
        state.finished = True
        state.outcome = WON
        logger.info("Journey complete: reached %s", upcoming.name)
        return ArrivalResult(ArrivalKind.WIN, upcoming, boost)

    logger.info("Arrived at %s (mile %d)", upcoming.name, state.distance)
    return ArrivalResult(ArrivalKind.ARRIVAL, upcoming, boost)


def progress_percent(state: SimulationState) -> float:
    if state.total_distance <= 0:
        return 100.0
    return min(100.0, state.distance / state.total_distance * 100)


def _apply_landmark_boost(
    state: SimulationState, theme: ThemeDescriptor, location: LocationSpec
) -> int:
    if location.landmark is None or not location.landmark.morale_boost:
        return 0
    key = ResourceName.MORALE.value
    before = state.resources[key]
    cap = theme.resources.morale.max
    raised = before + location.landmark.morale_boost
    state.resources[key] = min(cap, raised) if cap is not None else raised
    return state.resources[key] - before
