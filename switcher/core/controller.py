"""Switch controller: runs a strategy's steps against a display surface.

Scheduling is single-threaded: every method must be called on the Qt GUI
thread, and delayed advances are timeouts of one held single-shot QTimer
posted to that thread's event loop.
"""
import logging
import weakref
from typing import TYPE_CHECKING, Any, Optional

from PySide6.QtCore import QObject, Qt, QTimer, Signal

from switcher.core.contracts import DisplaySurface, cancel_handle, is_cancelable
from switcher.core.switch_state import SwitchState, assert_transition
from switcher.shared.errors import ErrorCode, ValidationError
from switcher.shared.logging_ import log_switch_event

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from switcher.core.builder import SwitchStrategy

logger = logging.getLogger(__name__)


class SwitchController(QObject):
    """
    State machine driving one switching sequence.
    
    State transitions:
    - ready -> running (initialize) -> stopped (stop)
    - running -> running (initialize again restarts index/visual state)
    - stopped -> running (initialize after stop restarts the sequence)
    
    Guarantees:
    - at most one delayed advance is pending at any time
    - the stop step runs at most once per stop, however often stop() is called
    - every registered cancelable is cancelled exactly once by stop()
    
    Calling advance_now() or schedule_advance() before bind() and
    initialize() is a caller error and is not checked.
    """

    initialized = Signal()
    advanced = Signal()
    interval_started = Signal(int)
    stopped = Signal()

    def __init__(self, strategy: "SwitchStrategy", parent: Optional[QObject] = None):
        super().__init__(parent)
        self.strategy = strategy

        self._state = SwitchState.READY
        self._is_stopped = False
        self._stopping = False
        self._interval_ms = 0
        self._cancelables: list[Any] = []
        self._surface_ref: Optional[weakref.ReferenceType] = None

        # The one and only pending advance
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self.advance_now)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> SwitchState:
        return self._state

    @property
    def is_stopped(self) -> bool:
        return self._is_stopped

    @property
    def interval_ms(self) -> int:
        """Delay of the most recent schedule_advance() call."""
        return self._interval_ms

    @property
    def has_pending_advance(self) -> bool:
        return self._timer.isActive()

    @property
    def surface(self) -> Optional[DisplaySurface]:
        """The bound surface, or None if unbound or already garbage collected."""
        if self._surface_ref is None:
            return None
        return self._surface_ref()

    def _set_state(self, target: SwitchState) -> None:
        assert_transition(self._state, target)
        self._state = target

    def _surface_name(self) -> str:
        surface = self.surface
        return type(surface).__name__ if surface is not None else "<unbound>"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def bind(self, surface: DisplaySurface) -> None:
        """Attach the owning surface. Only a weak reference is kept."""
        self._surface_ref = weakref.ref(surface)

    def unbind(self) -> None:
        """Detach from the surface (the surface's own detach hook calls this)."""
        self._surface_ref = None

    def initialize(self) -> None:
        """
        Start (or restart) the sequence.
        
        Does not cancel an advance that is already pending; call stop()
        first when restarting a running controller.
        """
        surface = self.surface
        self._set_state(SwitchState.RUNNING)
        self._is_stopped = False

        surface.reset_index()
        surface.show_interval_state()
        log_switch_event(logger, self._surface_name(), "initialize")
        self.initialized.emit()

        if self.strategy.init_step is not None:
            self.strategy.init_step.operate(surface, self)

    def advance_now(self) -> None:
        """Show the next view and run the next step."""
        surface = self.surface
        if surface is None:
            if self._is_stopped:
                return
            log_switch_event(
                logger, "<gone>", "advance",
                error_code=ErrorCode.SURFACE_GONE,
                message="surface was released, stopping",
            )
            self.stop()
            return

        # Always count the attempt, even when it ends the sequence
        surface.step_over()

        if self._is_stopped:
            return
        if surface.need_stop():
            surface.stop_switcher()
            self.stop()
            return

        for view in (surface.get_current_view(), surface.get_previous_view()):
            if view is not None:
                view.setVisible(True)
        surface.update_current_view()
        log_switch_event(logger, self._surface_name(), "advance")
        self.advanced.emit()

        if self.strategy.next_step is not None:
            self.strategy.next_step.operate(surface, self)

    def schedule_advance(self, delay_ms: int) -> None:
        """
        Run advance_now() once after *delay_ms* milliseconds.
        
        Replaces any advance that is still pending. Ignored once stopped.
        
        Raises:
            ValidationError: if delay_ms is negative
        """
        if delay_ms < 0:
            raise ValidationError(f"delay must be >= 0, got {delay_ms}")
        if self._is_stopped or self._stopping:
            logger.debug(f"Ignoring schedule_advance({delay_ms}) on a stopped controller")
            return

        self._interval_ms = int(delay_ms)
        surface = self.surface
        if surface is not None:
            surface.show_interval_state()
        log_switch_event(logger, self._surface_name(), "schedule", interval_ms=self._interval_ms)
        self.interval_started.emit(self._interval_ms)

        # Restarting an active single-shot timer drops its previous timeout
        self._timer.start(self._interval_ms)

    def stop(self) -> None:
        """Stop the sequence. Safe to call any number of times."""
        self._timer.stop()
        if self._is_stopped or self._stopping:
            return

        self._stopping = True
        try:
            for handle in tuple(self._cancelables):
                cancel_handle(handle)

            surface = self.surface
            if self.strategy.stop_step is not None and surface is not None:
                self.strategy.stop_step.operate(surface, self)

            self._cancelables.clear()
            self._set_state(SwitchState.STOPPED)
            log_switch_event(logger, self._surface_name(), "stop")
            self._is_stopped = True
        finally:
            self._stopping = False

        self.stopped.emit()

    # ------------------------------------------------------------------
    # Cancelables
    # ------------------------------------------------------------------

    def register_cancelable(self, *handles: Any) -> None:
        """
        Hand over resources (animations, timers) to be cancelled by stop().
        
        The controller never starts or inspects them; it only calls their
        cancel() (or stop()) once when the sequence stops. Handles registered
        while stopping or after the stop are cancelled right away.
        """
        for handle in handles:
            if handle is None:
                continue
            if not is_cancelable(handle):
                raise TypeError(f"{handle!r} has neither cancel() nor stop()")
            if self._stopping or self._is_stopped:
                cancel_handle(handle)
            elif not any(h is handle for h in self._cancelables):
                self._cancelables.append(handle)

    def unregister_cancelable(self, *handles: Any) -> None:
        """Forget handles without cancelling them."""
        self._cancelables = [
            h for h in self._cancelables if not any(h is handle for handle in handles)
        ]

    def get_cancelables(self) -> tuple[Any, ...]:
        return tuple(self._cancelables)
