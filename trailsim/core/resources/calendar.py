"""Simplified seven-month calendar"""

from trailsim.core.state import SimulationState

MONTH_DAYS: tuple[int, ...] = (31, 30, 31, 30, 31, 31, 30)
MONTH_NAMES: tuple[str, ...] = (
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
)


def advance(state: SimulationState, days: int) -> None:
    """Move the calendar forward. The month index wraps after September."""
    state.day += days
    state.days_elapsed += days
    while state.day > MONTH_DAYS[state.month]:
        state.day -= MONTH_DAYS[state.month]
        state.month = (state.month + 1) % len(MONTH_DAYS)


def month_name(month: int) -> str:
    return MONTH_NAMES[month % len(MONTH_NAMES)]


def format_date(state: SimulationState) -> str:
    """e.g. "August 1" """
    return f"{month_name(state.month)} {state.day}"
