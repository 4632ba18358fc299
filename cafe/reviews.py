from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Review:
    user: str
    rating: int
    comment: str


HOUSE_REVIEWS: Tuple[Review, ...] = (
    Review(user="Alice", rating=5, comment="Best coffee in town!"),
    Review(user="Bob", rating=4, comment="Great atmosphere, but crowded."),
)


class ReviewBoard:
    """Fixed review source backed by in-memory literals."""

    def __init__(self, reviews: Iterable[Review] = ()) -> None:
        self._reviews: List[Review] = list(reviews)

    @classmethod
    def house_reviews(cls) -> "ReviewBoard":
        return cls(HOUSE_REVIEWS)

    def list(self) -> List[Review]:
        return list(self._reviews)


__all__ = ["HOUSE_REVIEWS", "Review", "ReviewBoard"]
