"""Domain models for delivery stops and positions."""

from dataclasses import dataclass
from enum import Enum


class StopStatus(str, Enum):
    """Lifecycle state of a delivery stop."""

    PENDING = "pending"
    CURRENT = "current"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class Position:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Stop:
    """Represents a delivery destination.

    ``name``, ``address`` and ``phone`` are carried for display only; sequencing
    looks at ``position`` and ``status`` alone.
    """

    stop_id: str
    name: str
    address: str
    phone: str
    position: Position
    status: StopStatus = StopStatus.PENDING
