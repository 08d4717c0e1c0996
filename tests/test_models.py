"""Tests for configuration models."""
import pytest

from switcher.shared.models import SlideDirection, SwitcherConfig


def test_defaults():
    config = SwitcherConfig()
    assert config.interval_ms == 3000
    assert config.is_endless is True
    assert config.direction is SlideDirection.UP


def test_direction_accepts_string():
    assert SwitcherConfig(direction="left").direction is SlideDirection.LEFT


@pytest.mark.parametrize(
    "kwargs",
    [
        {"interval_ms": -1},
        {"duration_ms": -5},
        {"max_switches": -1},
        {"direction": "sideways"},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        SwitcherConfig(**kwargs)
