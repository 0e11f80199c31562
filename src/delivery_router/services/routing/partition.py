"""Split a stop set into completed, current and pending groups."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import Stop, StopStatus
from .models import Partition

logger = logging.getLogger(__name__)


def partition_stops(stops: Sequence[Stop]) -> Partition:
    """Stable partition of ``stops`` by status.

    Only the first Current stop is kept as current; any later Current stop is
    sequenced as if it were pending, at its original position in the input.
    """
    completed: list[Stop] = []
    pending: list[Stop] = []
    current: Stop | None = None

    for stop in stops:
        if stop.status is StopStatus.COMPLETED:
            completed.append(stop)
        elif stop.status is StopStatus.CURRENT:
            if current is None:
                current = stop
            else:
                logger.warning(
                    f"Multiple current stops found; treating {stop.stop_id} as pending "
                    f"(keeping {current.stop_id} as current)"
                )
                pending.append(stop)
        elif stop.status is StopStatus.PENDING:
            pending.append(stop)
        else:
            raise ValueError(f"Unknown stop status: {stop.status!r}")

    return Partition(completed=completed, current=current, pending=pending)
