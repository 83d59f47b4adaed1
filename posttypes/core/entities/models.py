from __future__ import annotations

from enum import Enum


class RegistrationState(str, Enum):
    UNREGISTERED = "UNREGISTERED"
    PENDING = "PENDING"
    REGISTERED = "REGISTERED"
