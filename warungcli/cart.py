"""The shopping cart."""

from __future__ import annotations

from collections.abc import Iterator

from warungcli.catalog import Food

__all__ = ["Cart", "format_item"]


def format_item(number: int, food: Food) -> str:
    """Render one numbered line of a listing."""
    return f"{number}. {food.name}: Rp{food.price}"


class Cart:
    """Items chosen for purchase, in the order they were added."""

    def __init__(self) -> None:
        self._items: list[Food] = []

    def add(self, food: Food) -> None:
        """Put ``food`` in the cart; the same item may be added again."""
        self._items.append(food)

    def clear(self) -> None:
        """Empty the cart."""
        self._items.clear()

    def lines(self) -> list[str]:
        """Return the numbered listing of the cart, starting at 1."""
        return [format_item(number, food) for number, food in enumerate(self._items, start=1)]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Food]:
        return iter(list(self._items))