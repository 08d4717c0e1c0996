"""Strategy assembly: collects the init/next/stop steps into a controller."""
from dataclasses import dataclass
from typing import Any, Optional

from switcher.core.contracts import StepOperator, as_step
from switcher.core.controller import SwitchController
from switcher.shared.errors import BuilderConsumedError


@dataclass(frozen=True)
class SwitchStrategy:
    """Three optional steps. A strategy with no steps only resets the index."""

    init_step: Optional[StepOperator] = None
    next_step: Optional[StepOperator] = None
    stop_step: Optional[StepOperator] = None


class StrategyBuilder:
    """
    Chained configuration of a SwitchStrategy.

    Each step may be a StepOperator or a plain ``fn(surface, controller)``.
    The builder is consumed by build(); configure a new one to build again.

    Example:
        controller = (
            StrategyBuilder()
            .with_init(lambda s, c: c.schedule_advance(3000))
            .with_next(lambda s, c: c.schedule_advance(3000))
            .build()
        )
    """

    def __init__(self):
        self._init_step: Optional[StepOperator] = None
        self._next_step: Optional[StepOperator] = None
        self._stop_step: Optional[StepOperator] = None
        self._consumed = False

    def _check_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError()

    def with_init(self, op: Any) -> "StrategyBuilder":
        """Step run once by initialize()."""
        self._check_open()
        self._init_step = as_step(op)
        return self

    def with_next(self, op: Any) -> "StrategyBuilder":
        """Step run after every successful advance."""
        self._check_open()
        self._next_step = as_step(op)
        return self

    def with_stop(self, op: Any) -> "StrategyBuilder":
        """Step run once when the sequence stops or the surface goes away."""
        self._check_open()
        self._stop_step = as_step(op)
        return self

    def strategy(self) -> SwitchStrategy:
        """Snapshot of the current configuration (does not consume the builder)."""
        return SwitchStrategy(
            init_step=self._init_step,
            next_step=self._next_step,
            stop_step=self._stop_step,
        )

    def build(self) -> SwitchController:
        """Return a new, unbound controller for the configured steps."""
        self._check_open()
        controller = SwitchController(self.strategy())
        self._consumed = True
        return controller
