"""Minigame result contract

Arcade minigames run outside the engine. They report back with this
normalized result, which the engine applies through its effect ledger:
`bonus` on success, `penalty` otherwise.
"""

from pydantic import BaseModel, Field


class MiniGameResult(BaseModel):
    success: bool
    score: float = 0
    bonus: dict[str, int] = Field(default_factory=dict)
    penalty: dict[str, int] = Field(default_factory=dict)
    message: str = ""

    def effects(self) -> dict[str, int]:
        return dict(self.bonus if self.success else self.penalty)
