"""Widget that rotates through a set of child views."""
import logging
from typing import Optional, Sequence, Union

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget

from switcher.core.builder import StrategyBuilder
from switcher.core.controller import SwitchController
from switcher.core.switch_state import SwitchState
from switcher.services.strategies import default_strategy
from switcher.shared.errors import ErrorCode, SurfaceError
from switcher.shared.logging_ import log_switch_event
from switcher.shared.models import SwitcherConfig

logger = logging.getLogger(__name__)


class AutoSwitchWidget(QWidget):
    """
    Display surface stacking its views on top of each other.
    
    The widget owns the index bookkeeping; how a switch looks is decided by
    the bound SwitchController's strategy.
    
    Signals:
    - switched(int): the current view changed to the given index
    - interval_started(int): an interval is in progress; carries its length in ms
    - finished: the sequence stopped
    """

    switched = Signal(int)
    interval_started = Signal(int)
    finished = Signal()

    def __init__(self, parent=None, config: Optional[SwitcherConfig] = None):
        super().__init__(parent)
        self.config = config or SwitcherConfig()
        self.controller: Optional[SwitchController] = None

        self._views: list[QWidget] = []
        self.current_index = 0
        self.previous_index = 0
        self.switch_count = 0

    # ------------------------------------------------------------------
    # Views & configuration
    # ------------------------------------------------------------------

    def set_views(self, views: Sequence[QWidget]) -> None:
        """Replace the rotated views. Stops a running sequence."""
        if self.controller is not None:
            self.controller.stop()
        for view in self._views:
            if view not in views:
                view.setParent(None)
        self._views = list(views)
        for view in self._views:
            view.setParent(self)
            view.setGeometry(self.rect())
        self.reset_index()
        for i, view in enumerate(self._views):
            view.setVisible(i == self.current_index)

    def views(self) -> list[QWidget]:
        return list(self._views)

    def set_config(self, config: SwitcherConfig) -> None:
        self.config = config

    def set_strategy(self, strategy: Union[StrategyBuilder, SwitchController]) -> SwitchController:
        """Bind a new controller (or build one from a builder), replacing the old one."""
        controller = strategy.build() if isinstance(strategy, StrategyBuilder) else strategy
        if self.controller is not None and self.controller is not controller:
            self.controller.stop()
            self.controller.unbind()

        self.controller = controller
        controller.setParent(self)
        controller.bind(self)
        return controller

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start switching with the bound strategy (default strategy if none)."""
        if not self._views:
            raise SurfaceError(ErrorCode.NO_VIEWS, "no views to switch between")
        if self.controller is None:
            self.set_strategy(default_strategy(self.config.interval_ms))
        elif self.controller.state is SwitchState.RUNNING:
            self.controller.stop()
        self.controller.initialize()

    def is_running(self) -> bool:
        return self.controller is not None and self.controller.state is SwitchState.RUNNING

    def show_next(self) -> None:
        """Advance immediately, without waiting for the pending interval."""
        if self.controller is not None:
            self.controller.advance_now()

    # ------------------------------------------------------------------
    # DisplaySurface
    # ------------------------------------------------------------------

    def reset_index(self) -> None:
        self.current_index = 0
        self.previous_index = 0
        self.switch_count = 0

    def step_over(self) -> None:
        self.switch_count += 1
        if not self._views:
            return
        self.previous_index = self.current_index
        self.current_index = (self.current_index + 1) % len(self._views)

    def need_stop(self) -> bool:
        if len(self._views) < 2:
            return True
        max_switches = self.config.max_switches
        return max_switches is not None and self.switch_count > max_switches

    def get_current_view(self) -> Optional[QWidget]:
        if not self._views:
            return None
        return self._views[self.current_index]

    def get_previous_view(self) -> Optional[QWidget]:
        if not self._views:
            return None
        return self._views[self.previous_index]

    def update_current_view(self) -> None:
        current = self.get_current_view()
        if current is not None:
            current.raise_()
        self.switched.emit(self.current_index)

    def show_interval_state(self) -> None:
        if self.controller is not None:
            self.interval_started.emit(self.controller.interval_ms)

    def stop_switcher(self) -> None:
        if self.controller is not None:
            self.controller.stop()
        log_switch_event(
            logger, self.objectName() or type(self).__name__, "stop",
            index=self.current_index, switch_count=self.switch_count,
        )
        self.finished.emit()

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------

    def resizeEvent(self, event):
        for view in self._views:
            view.setGeometry(self.rect())
        super().resizeEvent(event)

    def showEvent(self, event):
        super().showEvent(event)
        if self.config.auto_start and self._views and not self.is_running():
            self.start()

    def hideEvent(self, event):
        # Detached from screen: nothing may keep running behind it
        if self.controller is not None:
            self.controller.stop()
        super().hideEvent(event)
