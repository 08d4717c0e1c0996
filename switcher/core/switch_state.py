"""Switch controller state machine – validates and enforces legal state transitions."""
from enum import Enum


class SwitchState(Enum):
    READY = "ready"
    RUNNING = "running"
    STOPPED = "stopped"


# Legal transitions: current_state -> set of allowed next states
TRANSITIONS: dict[SwitchState, set[SwitchState]] = {
    SwitchState.READY:   {SwitchState.RUNNING, SwitchState.STOPPED},
    SwitchState.RUNNING: {SwitchState.RUNNING, SwitchState.STOPPED},
    SwitchState.STOPPED: {SwitchState.RUNNING},
}

ALL_STATES = set(TRANSITIONS.keys())


def is_valid_transition(current: SwitchState, target: SwitchState) -> bool:
    """Return True if *current -> target* is a legal transition."""
    return target in TRANSITIONS.get(current, set())


def assert_transition(current: SwitchState, target: SwitchState) -> None:
    """Raise ValueError if the transition is illegal."""
    if not is_valid_transition(current, target):
        allowed = sorted(s.value for s in TRANSITIONS.get(current, set()))
        raise ValueError(
            f"Illegal switch state transition: {current.value!r} -> {target.value!r}. "
            f"Allowed from {current.value!r}: {allowed}"
        )
