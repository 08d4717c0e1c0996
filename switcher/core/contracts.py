"""Contracts between the switch controller, its steps and the display surface."""
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from PySide6.QtWidgets import QWidget

    from switcher.core.controller import SwitchController


@runtime_checkable
class DisplaySurface(Protocol):
    """
    The owning widget driven by a SwitchController.

    The surface keeps the index bookkeeping and decides when the sequence
    is over; the controller only calls these hooks.
    """

    def reset_index(self) -> None: ...

    def step_over(self) -> None: ...

    def need_stop(self) -> bool: ...

    def get_current_view(self) -> Optional["QWidget"]: ...

    def get_previous_view(self) -> Optional["QWidget"]: ...

    def update_current_view(self) -> None: ...

    def show_interval_state(self) -> None: ...

    def stop_switcher(self) -> None: ...


@runtime_checkable
class StepOperator(Protocol):
    """A unit of behavior run at one lifecycle point (init, next or stop)."""

    def operate(self, surface: DisplaySurface, controller: "SwitchController") -> None: ...


class CallableStep:
    """Adapts a plain function ``fn(surface, controller)`` to StepOperator."""

    def __init__(self, fn: Callable[[DisplaySurface, "SwitchController"], None]):
        self.fn = fn

    def operate(self, surface: DisplaySurface, controller: "SwitchController") -> None:
        self.fn(surface, controller)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__qualname__", repr(self.fn))
        return f"CallableStep({name})"


def as_step(op: Any) -> Optional[StepOperator]:
    """Return *op* as a StepOperator, wrapping plain callables."""
    if op is None or isinstance(op, StepOperator):
        return op
    if callable(op):
        return CallableStep(op)
    raise TypeError(f"{op!r} is neither a StepOperator nor callable")


def is_cancelable(handle: Any) -> bool:
    """Return True if *handle* exposes cancel() or stop()."""
    return callable(getattr(handle, "cancel", None)) or callable(getattr(handle, "stop", None))


def cancel_handle(handle: Any) -> None:
    """Cancel a registered resource: cancel() if it has one, otherwise stop()."""
    cancel = getattr(handle, "cancel", None)
    if callable(cancel):
        cancel()
    else:
        handle.stop()
