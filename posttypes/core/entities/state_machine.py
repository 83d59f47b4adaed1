from __future__ import annotations

from typing import Set, Tuple

from ..errors import IllegalTransitionError
from .models import RegistrationState


_ALLOWED: Set[Tuple[RegistrationState, RegistrationState]] = {
    (RegistrationState.UNREGISTERED, RegistrationState.PENDING),
    (RegistrationState.PENDING, RegistrationState.REGISTERED),
}

_TERMINAL: Set[RegistrationState] = {
    RegistrationState.REGISTERED,
}


def is_terminal(state: RegistrationState) -> bool:
    return state in _TERMINAL


def can_transition(src: RegistrationState, dst: RegistrationState) -> bool:
    # staying put is always allowed; the host may fire init more than once
    if src == dst:
        return True
    if src in _TERMINAL:
        return False
    return (src, dst) in _ALLOWED


def ensure_transition(src: RegistrationState, dst: RegistrationState) -> None:
    if not can_transition(src, dst):
        raise IllegalTransitionError(f"Illegal transition: {src.value} -> {dst.value}")
