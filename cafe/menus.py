from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union


@dataclass(frozen=True)
class MenuItem:
    """Represents a single menu item."""

    id: int
    category: str
    name: str
    price: Union[int, float]
    desc: str = ""

    def to_api(self) -> Dict[str, object]:
        return asdict(self)

    @property
    def display_price(self) -> str:
        return f"${self.price:.2f}"


HOUSE_MENU: Tuple[MenuItem, ...] = (
    MenuItem(1, "Coffee", "Signature Espresso", 3.50, "Rich, dark roast with notes of chocolate."),
    MenuItem(2, "Coffee", "Hazelnut Latte", 4.75, "Steamed milk, espresso, and roasted hazelnut syrup."),
    MenuItem(3, "Coffee", "Cold Brew Nitro", 5, "Velvety smooth cold brew infused with nitrogen."),
    MenuItem(4, "Breakfast", "Avocado Smash", 9.50, "Sourdough, poached egg, chili flakes, and avocado."),
    MenuItem(5, "Breakfast", "Berry Acai Bowl", 10, "Organic acai, granola, honey, and seasonal berries."),
    MenuItem(6, "Pastry", "Almond Croissant", 4.25, "Buttery layers filled with sweet almond paste."),
    MenuItem(7, "Pastry", "Lemon Poppy Muffin", 3.75, "Zesty lemon glaze with organic poppy seeds."),
)


class MenuCatalog:
    """Read-only in-memory catalogue backing the menu pages and API."""

    def __init__(self, items: Iterable[MenuItem] = ()) -> None:
        self._items: List[MenuItem] = list(items)

    @classmethod
    def house_menu(cls) -> "MenuCatalog":
        return cls(HOUSE_MENU)

    # ------------------------------------------------------------------
    def list(self) -> List[MenuItem]:
        return list(self._items)

    def categories(self) -> List[str]:
        seen: List[str] = []
        for item in self.list():
            if item.category not in seen:
                seen.append(item.category)
        return seen

    def by_category(self) -> List[Tuple[str, List[MenuItem]]]:
        """Group items under their category, categories in first-appearance order."""
        items = self.list()
        return [
            (category, [item for item in items if item.category == category])
            for category in self.categories()
        ]

    def find(self, name: str) -> Optional[MenuItem]:
        needle = name.replace(" ", "").lower()
        for item in self.list():
            if item.name.replace(" ", "").lower() == needle:
                return item
        return None

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["HOUSE_MENU", "MenuCatalog", "MenuItem"]
