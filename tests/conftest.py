"""Shared fixtures for switcher tests."""
import os
from unittest.mock import MagicMock

import pytest

from switcher.core.builder import StrategyBuilder

# Headless runs (CI) have no display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeSurface:
    """Index bookkeeping stand-in that stops after ``stop_after`` advances."""

    def __init__(self, stop_after=None):
        self.stop_after = stop_after
        self.step_count = 0
        self.reset_count = 0
        self.interval_hints = 0
        self.stop_switcher_count = 0
        self.current_view = MagicMock(name="current_view")
        self.previous_view = MagicMock(name="previous_view")
        self.update_count = 0

    def reset_index(self):
        self.reset_count += 1
        self.step_count = 0

    def step_over(self):
        self.step_count += 1

    def need_stop(self):
        return self.stop_after is not None and self.step_count > self.stop_after

    def get_current_view(self):
        return self.current_view

    def get_previous_view(self):
        return self.previous_view

    def update_current_view(self):
        self.update_count += 1

    def show_interval_state(self):
        self.interval_hints += 1

    def stop_switcher(self):
        self.stop_switcher_count += 1


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def make_controller(qapp, surface):
    """Build and bind a controller from step mocks/callables."""

    def _make(init=None, next=None, stop=None, bound_surface=None):
        controller = (
            StrategyBuilder()
            .with_init(init)
            .with_next(next)
            .with_stop(stop)
            .build()
        )
        controller.bind(bound_surface or surface)
        return controller

    return _make

