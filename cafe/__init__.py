"""In-memory stores for The Grand Café website."""

from .menus import HOUSE_MENU, MenuCatalog, MenuItem
from .reservations import CONFIRMED, GUEST_OPTIONS, Reservation, ReservationBook
from .reviews import HOUSE_REVIEWS, Review, ReviewBoard

__all__ = [
    "CONFIRMED",
    "GUEST_OPTIONS",
    "HOUSE_MENU",
    "HOUSE_REVIEWS",
    "MenuCatalog",
    "MenuItem",
    "Reservation",
    "ReservationBook",
    "Review",
    "ReviewBoard",
]
