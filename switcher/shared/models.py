"""Data models for AutoSwitcher."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SlideDirection(Enum):
    """Direction in which the incoming view travels for carousel switching."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class StrategyKind(Enum):
    """Built-in strategy presets."""

    DEFAULT = "default"
    FADE = "fade"
    CAROUSEL = "carousel"


@dataclass
class SwitcherConfig:
    """Configuration for an AutoSwitchWidget."""

    interval_ms: int = 3000  # Pause between two switches
    duration_ms: int = 500   # Length of the switch animation (animated strategies)
    max_switches: Optional[int] = None  # None = switch forever
    direction: SlideDirection = SlideDirection.UP
    auto_start: bool = False  # Start when the widget is shown

    def __post_init__(self):
        """Validate configuration."""
        if self.interval_ms < 0:
            raise ValueError(f"Invalid interval_ms: {self.interval_ms}")
        if self.duration_ms < 0:
            raise ValueError(f"Invalid duration_ms: {self.duration_ms}")
        if self.max_switches is not None and self.max_switches < 0:
            raise ValueError(f"Invalid max_switches: {self.max_switches}")
        if not isinstance(self.direction, SlideDirection):
            self.direction = SlideDirection(self.direction)

    @property
    def is_endless(self) -> bool:
        """Check if the sequence never stops on its own."""
        return self.max_switches is None
