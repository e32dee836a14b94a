"""Party Core package: roster, doubt and abandonment model"""

from trailsim.core.party.morale import (
    DOUBT_CLASS_TIE_BREAK,
    abandon,
    clear_doubts,
    doubt_candidates,
    morale_abandon_chance,
    paranoia_abandon_chance,
    target_doubters,
    update_party,
)
from trailsim.core.party.roster import all_abandoned, build_party, force_abandon_random

__all__ = [
    "DOUBT_CLASS_TIE_BREAK",
    "abandon",
    "clear_doubts",
    "doubt_candidates",
    "morale_abandon_chance",
    "paranoia_abandon_chance",
    "target_doubters",
    "update_party",
    "all_abandoned",
    "build_party",
    "force_abandon_random",
]
