"""On-screen counters: the score and the remaining health."""

from __future__ import annotations

from dataclasses import dataclass

HUD_COLOR = "blue"
HUD_FONT = ("times", 16)
INITIAL_HEALTH = 3


@dataclass
class Score:
    """Number of enemies destroyed so far."""

    value: int = 0
    x: float = 0.0
    y: float = 0.0
    color: str = HUD_COLOR
    font: tuple[str, int] = HUD_FONT

    def increase(self) -> None:
        """Count one more destroyed enemy."""
        self.value += 1

    def text(self) -> str:
        """The label drawn on screen."""
        return f"Score: {self.value}"


@dataclass
class Health:
    """Lives left; every enemy that reaches the ground costs one."""

    value: int = INITIAL_HEALTH
    x: float = 0.0
    y: float = 0.0
    color: str = HUD_COLOR
    font: tuple[str, int] = HUD_FONT

    def decrease(self) -> None:
        """Lose one life."""
        self.value -= 1

    def text(self) -> str:
        """The label drawn on screen."""
        return f"Health: {self.value}"