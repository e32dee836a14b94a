"""Resource ledger and calendar: pure Python, DB independent"""

from trailsim.core.resources.calendar import (
    MONTH_DAYS,
    MONTH_NAMES,
    advance,
    format_date,
    month_name,
)
from trailsim.core.resources.ledger import (
    EFFECT_KEYS,
    RESOURCE_KEYS,
    adjust,
    apply_effects,
    clamp_resources,
    set_value,
)

__all__ = [
    # calendar
    "MONTH_DAYS",
    "MONTH_NAMES",
    "advance",
    "format_date",
    "month_name",
    # ledger
    "EFFECT_KEYS",
    "RESOURCE_KEYS",
    "adjust",
    "apply_effects",
    "clamp_resources",
    "set_value",
]
