"""Outcome Core package: fail conditions and scoring"""

from trailsim.core.outcome.fail_conditions import (
    MORALE_RESET,
    PARANOIA_REASONS,
    PARANOIA_RESET,
    FailCheck,
    check_fail_conditions,
)
from trailsim.core.outcome.scoring import calculate_score, days_remaining

__all__ = [
    "MORALE_RESET",
    "PARANOIA_REASONS",
    "PARANOIA_RESET",
    "FailCheck",
    "check_fail_conditions",
    "calculate_score",
    "days_remaining",
]
