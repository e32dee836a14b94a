"""Event condition variants

A condition is either an item presence check against the state's item
counters or a custom predicate over the whole state. No magic strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from trailsim.core.state import SimulationState


class ItemPresence(BaseModel):
    """True when the named item counter is non-zero."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["item"] = "item"
    item: str


class CustomCondition(BaseModel):
    """True when the predicate returns truthy for the current state."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    predicate: Callable[[Any], bool]


EventCondition = Annotated[
    Union[ItemPresence, CustomCondition], Field(discriminator="kind")
]


def evaluate_condition(
    condition: Optional[ItemPresence | CustomCondition],
    state: "SimulationState",
) -> bool:
    """Resolve a condition. A missing condition always passes."""
    if condition is None:
        return True
    if isinstance(condition, ItemPresence):
        return bool(state.items.get(condition.item))
    if isinstance(condition, CustomCondition):
        return bool(condition.predicate(state))
    raise ValueError(f"Unsupported condition: {condition!r}")
