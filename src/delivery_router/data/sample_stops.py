"""Sample delivery stops around Bangalore for demos and manual testing."""

from __future__ import annotations

from ..models.domain import Position, Stop, StopStatus

_SAMPLE_ROWS = (
    ("1", "Rahul Sharma", "42, Richmond Road, Bangalore, 560025", "+91 98765 43210", 12.9647, 77.6082),
    ("2", "Priya Patel", "121, MG Road, Bangalore, 560001", "+91 87654 32109", 12.9758, 77.6065),
    ("3", "Vikram Malhotra", "78, Indiranagar 100ft Road, Bangalore, 560038", "+91 76543 21098", 12.9784, 77.6408),
    ("4", "Ananya Desai", "22, Koramangala 5th Block, Bangalore, 560095", "+91 65432 10987", 12.9340, 77.6155),
    ("5", "Karthik Iyer", "155, HSR Layout, Bangalore, 560102", "+91 54321 09876", 12.9116, 77.6416),
)


def get_sample_stops() -> list[Stop]:
    """Return a fresh list of pending sample stops."""
    return [
        Stop(
            stop_id=stop_id,
            name=name,
            address=address,
            phone=phone,
            position=Position(latitude=lat, longitude=lon),
            status=StopStatus.PENDING,
        )
        for stop_id, name, address, phone, lat, lon in _SAMPLE_ROWS
    ]
