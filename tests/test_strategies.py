"""Tests for the built-in switching strategies."""
from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QAbstractAnimation, QPoint
from PySide6.QtWidgets import QGraphicsOpacityEffect, QLabel

from switcher.services.strategies import (
    FadeViews,
    RestoreViews,
    SlideViews,
    SwapViews,
    strategy_for,
)
from switcher.shared.models import SlideDirection, StrategyKind, SwitcherConfig
from switcher.ui.switch_widget import AutoSwitchWidget


def _mock_surface(current, previous):
    surface = MagicMock()
    surface.get_current_view.return_value = current
    surface.get_previous_view.return_value = previous
    return surface


def _labeled_widget(qtbot, config, count=3):
    widget = AutoSwitchWidget(config=config)
    qtbot.addWidget(widget)
    widget.resize(200, 100)
    widget.set_views([QLabel(f"item {i}") for i in range(count)])
    return widget


class TestSwapViews:
    def test_hides_previous_and_schedules(self):
        current, previous = MagicMock(), MagicMock()
        controller = MagicMock()

        SwapViews(1500).operate(_mock_surface(current, previous), controller)

        previous.setVisible.assert_called_once_with(False)
        current.setVisible.assert_called_once_with(True)
        controller.schedule_advance.assert_called_once_with(1500)

    def test_keeps_view_that_is_both_current_and_previous(self):
        view = MagicMock()
        controller = MagicMock()

        SwapViews(10).operate(_mock_surface(view, view), controller)

        view.setVisible.assert_called_once_with(True)


def test_restore_views_clears_effects_and_offsets(qtbot):
    current, previous = QLabel("a"), QLabel("b")
    qtbot.addWidget(current)
    qtbot.addWidget(previous)
    current.setGraphicsEffect(QGraphicsOpacityEffect(current))
    current.move(0, 40)

    RestoreViews().operate(_mock_surface(current, previous), MagicMock())

    assert current.graphicsEffect() is None
    assert current.pos() == QPoint(0, 0)
    assert previous.isHidden()


@pytest.mark.parametrize(
    "direction,expected",
    [
        (SlideDirection.UP, QPoint(0, 100)),
        (SlideDirection.DOWN, QPoint(0, -100)),
        (SlideDirection.LEFT, QPoint(200, 0)),
        (SlideDirection.RIGHT, QPoint(-200, 0)),
    ],
)
def test_slide_entry_offset(direction, expected):
    assert SlideViews(0, 0, direction).entry_offset(200, 100) == expected


@pytest.mark.parametrize(
    "kind,next_type",
    [
        (StrategyKind.DEFAULT, SwapViews),
        (StrategyKind.FADE, FadeViews),
        (StrategyKind.CAROUSEL, SlideViews),
    ],
)
def test_strategy_for_picks_next_step(kind, next_type):
    config = SwitcherConfig(interval_ms=700, duration_ms=200, direction=SlideDirection.LEFT)

    strategy = strategy_for(config, kind).strategy()

    assert isinstance(strategy.init_step, SwapViews)
    assert isinstance(strategy.next_step, next_type)
    assert isinstance(strategy.stop_step, RestoreViews)
    assert strategy.next_step.interval_ms == 700
    if kind is StrategyKind.CAROUSEL:
        assert strategy.next_step.direction is SlideDirection.LEFT


def test_fade_sequence_runs_to_completion(qtbot):
    config = SwitcherConfig(interval_ms=20, duration_ms=30, max_switches=2)
    widget = _labeled_widget(qtbot, config)
    widget.set_strategy(strategy_for(config, StrategyKind.FADE))
    switched = []
    widget.switched.connect(switched.append)

    with qtbot.waitSignal(widget.finished, timeout=5000):
        widget.start()

    assert switched == [1, 2]
    assert widget.controller.is_stopped is True
    assert widget.controller.get_cancelables() == ()
    current = widget.get_current_view()
    assert current.graphicsEffect() is None
    assert not current.isHidden()


def test_stop_cancels_running_slide(qtbot):
    config = SwitcherConfig(interval_ms=10, duration_ms=5000)
    widget = _labeled_widget(qtbot, config)
    controller = widget.set_strategy(strategy_for(config, StrategyKind.CAROUSEL))

    with qtbot.waitSignal(widget.switched, timeout=2000):
        widget.start()

    handles = controller.get_cancelables()
    assert len(handles) == 1
    group = handles[0]
    assert group.state() == QAbstractAnimation.State.Running

    controller.stop()

    assert group.state() == QAbstractAnimation.State.Stopped
    assert controller.has_pending_advance is False
    assert widget.get_current_view().pos() == QPoint(0, 0)
    assert widget.get_previous_view().isHidden()


def test_animated_switch_requires_animations():
    from switcher.services.strategies import _AnimatedSwitch

    with pytest.raises(TypeError):
        _AnimatedSwitch(100, 100)
