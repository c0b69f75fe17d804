from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RollMode(Enum):
    NORMAL = ""
    ADVANTAGE = "a"
    DISADVANTAGE = "d"

    @property
    def suffix(self) -> str:
        return self.value

    @classmethod
    def from_suffix(cls, suffix: str | None) -> RollMode:
        return cls(suffix or "")


@dataclass(frozen=True)
class DiceRequest:
    count: int
    sides: int
    mode: RollMode = RollMode.NORMAL

    @property
    def expression(self) -> str:
        """Canonical ``NdS[m]`` form; parsing it gives back an equal request."""
        return f"{self.count}d{self.sides}{self.mode.suffix}"


@dataclass(frozen=True)
class RollOutcome:
    sides: int
    mode: RollMode
    kept: int
    dropped: int | None = None

    @property
    def label(self) -> str:
        return f"d{self.sides}{self.mode.suffix}"


@dataclass(frozen=True)
class RollReport:
    outcomes: tuple[RollOutcome, ...]
    total: int
