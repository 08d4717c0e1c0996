"""Built-in switching strategies.

Every preset is only a combination of steps assembled by StrategyBuilder:

- default:  instant swap, then wait ``interval_ms``
- fade:     cross-fade of the outgoing and incoming views (plain animation)
- carousel: incoming view slides in, outgoing view slides out (property animator)

Animated presets register their running animation group with the controller,
so stop() cancels it wherever the sequence happens to be.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from PySide6.QtCore import QAbstractAnimation, QParallelAnimationGroup, QPoint, QPropertyAnimation
from PySide6.QtWidgets import QGraphicsOpacityEffect, QWidget

from switcher.core.builder import StrategyBuilder
from switcher.core.contracts import DisplaySurface
from switcher.core.controller import SwitchController
from switcher.shared.models import SlideDirection, StrategyKind, SwitcherConfig

logger = logging.getLogger(__name__)


def _distinct_previous(surface: DisplaySurface) -> Optional[QWidget]:
    previous = surface.get_previous_view()
    if previous is None or previous is surface.get_current_view():
        return None
    return previous


def _reset_view(view: QWidget) -> None:
    """Undo whatever an animated step left on a view."""
    view.setGraphicsEffect(None)
    view.move(0, 0)


class SwapViews:
    """Show only the current view, then schedule the next advance."""

    def __init__(self, interval_ms: int):
        self.interval_ms = interval_ms

    def operate(self, surface: DisplaySurface, controller: SwitchController) -> None:
        previous = _distinct_previous(surface)
        if previous is not None:
            previous.setVisible(False)
        current = surface.get_current_view()
        if current is not None:
            current.setVisible(True)
            current.raise_()
        controller.schedule_advance(self.interval_ms)


class RestoreViews:
    """Stop step: leave the current view fully visible and in place."""

    def operate(self, surface: DisplaySurface, controller: SwitchController) -> None:
        previous = _distinct_previous(surface)
        if previous is not None:
            _reset_view(previous)
            previous.setVisible(False)
        current = surface.get_current_view()
        if current is not None:
            _reset_view(current)
            current.setVisible(True)


class _AnimatedSwitch(ABC):
    """
    Base for steps that animate the outgoing/incoming pair.
    
    The next advance is scheduled only once the animation has finished,
    so the interval is the time a view rests fully visible.
    """

    def __init__(self, interval_ms: int, duration_ms: int):
        self.interval_ms = interval_ms
        self.duration_ms = duration_ms
        self._outgoing: Optional[QWidget] = None

    @abstractmethod
    def _animations(self, current: QWidget, previous: Optional[QWidget]) -> list[QPropertyAnimation]:
        """Animations moving *previous* out and *current* in."""

    def _finish_active(self, controller: SwitchController) -> None:
        # An advance came in before the last animation ended
        for handle in controller.get_cancelables():
            if isinstance(handle, QAbstractAnimation):
                controller.unregister_cancelable(handle)
                handle.stop()
                handle.deleteLater()
        if self._outgoing is not None:
            _reset_view(self._outgoing)
            self._outgoing.setVisible(False)
            self._outgoing = None

    def operate(self, surface: DisplaySurface, controller: SwitchController) -> None:
        self._finish_active(controller)

        current = surface.get_current_view()
        if current is None:
            controller.schedule_advance(self.interval_ms)
            return
        previous = _distinct_previous(surface)
        current.raise_()

        group = QParallelAnimationGroup(current)
        for animation in self._animations(current, previous):
            animation.setDuration(self.duration_ms)
            group.addAnimation(animation)

        self._outgoing = previous
        group.finished.connect(lambda: self._on_finished(controller, group, previous))
        controller.register_cancelable(group)
        group.start()

    def _on_finished(
        self,
        controller: SwitchController,
        group: QParallelAnimationGroup,
        previous: Optional[QWidget],
    ) -> None:
        controller.unregister_cancelable(group)
        group.deleteLater()
        if previous is not None:
            _reset_view(previous)
            previous.setVisible(False)
        self._outgoing = None
        controller.schedule_advance(self.interval_ms)


class FadeViews(_AnimatedSwitch):
    """Cross-fade using opacity effects."""

    @staticmethod
    def _opacity(view: QWidget, start: float) -> QGraphicsOpacityEffect:
        effect = QGraphicsOpacityEffect(view)
        effect.setOpacity(start)
        view.setGraphicsEffect(effect)
        return effect

    def _animations(self, current: QWidget, previous: Optional[QWidget]) -> list[QPropertyAnimation]:
        fade_in = QPropertyAnimation(self._opacity(current, 0.0), b"opacity")
        fade_in.setStartValue(0.0)
        fade_in.setEndValue(1.0)
        animations = [fade_in]
        if previous is not None:
            fade_out = QPropertyAnimation(self._opacity(previous, 1.0), b"opacity")
            fade_out.setStartValue(1.0)
            fade_out.setEndValue(0.0)
            animations.append(fade_out)
        return animations


class SlideViews(_AnimatedSwitch):
    """Carousel slide: the incoming view pushes the outgoing one away."""

    def __init__(self, interval_ms: int, duration_ms: int, direction: SlideDirection = SlideDirection.UP):
        super().__init__(interval_ms, duration_ms)
        self.direction = direction

    def entry_offset(self, width: int, height: int) -> QPoint:
        """Where the incoming view starts, relative to its resting position."""
        return {
            SlideDirection.UP: QPoint(0, height),
            SlideDirection.DOWN: QPoint(0, -height),
            SlideDirection.LEFT: QPoint(width, 0),
            SlideDirection.RIGHT: QPoint(-width, 0),
        }[self.direction]

    def _animations(self, current: QWidget, previous: Optional[QWidget]) -> list[QPropertyAnimation]:
        offset = self.entry_offset(current.width(), current.height())

        slide_in = QPropertyAnimation(current, b"pos")
        slide_in.setStartValue(offset)
        slide_in.setEndValue(QPoint(0, 0))
        current.move(offset)
        animations = [slide_in]
        if previous is not None:
            slide_out = QPropertyAnimation(previous, b"pos")
            slide_out.setStartValue(QPoint(0, 0))
            slide_out.setEndValue(QPoint(-offset.x(), -offset.y()))
            animations.append(slide_out)
        return animations


def default_strategy(interval_ms: int) -> StrategyBuilder:
    swap = SwapViews(interval_ms)
    return StrategyBuilder().with_init(swap).with_next(swap).with_stop(RestoreViews())


def fade_strategy(interval_ms: int, duration_ms: int) -> StrategyBuilder:
    return (
        StrategyBuilder()
        .with_init(SwapViews(interval_ms))
        .with_next(FadeViews(interval_ms, duration_ms))
        .with_stop(RestoreViews())
    )


def carousel_strategy(
    interval_ms: int,
    duration_ms: int,
    direction: SlideDirection = SlideDirection.UP,
) -> StrategyBuilder:
    return (
        StrategyBuilder()
        .with_init(SwapViews(interval_ms))
        .with_next(SlideViews(interval_ms, duration_ms, direction))
        .with_stop(RestoreViews())
    )


def strategy_for(config: SwitcherConfig, kind: StrategyKind = StrategyKind.DEFAULT) -> StrategyBuilder:
    """Return an unbuilt builder for one of the presets."""
    logger.debug(f"Building {kind.value} strategy (interval={config.interval_ms}ms)")
    if kind is StrategyKind.FADE:
        return fade_strategy(config.interval_ms, config.duration_ms)
    if kind is StrategyKind.CAROUSEL:
        return carousel_strategy(config.interval_ms, config.duration_ms, config.direction)
    return default_strategy(config.interval_ms)
