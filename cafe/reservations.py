from __future__ import annotations

from dataclasses import asdict, dataclass
from threading import RLock
from typing import Dict, List

CONFIRMED = "Confirmed"

# Labels offered by the booking form; not enforced on submission.
GUEST_OPTIONS: List[str] = ["1 Person", "2 People", "3-5 People", "6+ (Large Group)"]


@dataclass(frozen=True)
class Reservation:
    """A guest's table booking. Fields are stored exactly as submitted."""

    id: int
    name: str
    time: str
    guests: str
    status: str = CONFIRMED

    def to_api(self) -> Dict[str, object]:
        return asdict(self)


class ReservationBook:
    """Append-only in-memory reservation store.

    Ids are ``count_before_insert + 1``. The lock keeps them unique inside one
    process only; separate processes each hold their own book.
    """

    def __init__(self) -> None:
        self._reservations: List[Reservation] = []
        self._lock = RLock()

    def create(self, name: str, time: str, guests: str) -> Reservation:
        with self._lock:
            reservation = Reservation(
                id=len(self._reservations) + 1,
                name=name,
                time=time,
                guests=guests,
            )
            self._reservations.append(reservation)
            return reservation

    def list(self) -> List[Reservation]:
        with self._lock:
            return list(self._reservations)

    def __len__(self) -> int:
        with self._lock:
            return len(self._reservations)


__all__ = ["CONFIRMED", "GUEST_OPTIONS", "Reservation", "ReservationBook"]
