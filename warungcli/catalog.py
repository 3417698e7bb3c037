"""The food catalogue offered by the stall."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CATEGORIES", "FOOD_LIST", "Food", "foods_in_category", "search_foods"]


@dataclass(frozen=True)
class Food:
    """A single item on the menu."""

    name: str
    price: int
    category: str


CATEGORIES: tuple[str, ...] = ("Meals", "Drinks", "Snacks", "Desserts")


def _items(category: str, entries: list[tuple[str, int]]) -> list[Food]:
    return [Food(name, price, category) for name, price in entries]


FOOD_LIST: tuple[Food, ...] = tuple(
    _items(
        "Meals",
        [
            ("Nasi Goreng Kampung", 15000),
            ("Mie Ayam Wonogiri", 14000),
            ("Soto Betawi", 20000),
            ("Ketoprak Cirebon", 12000),
            ("Bakso Malang", 17000),
            ("Ayam Geprek", 18000),
            ("Nasi Uduk Jakarta", 13000),
            ("Gado-Gado", 15000),
            ("Sate Ayam Madura", 20000),
            ("Rawon Surabaya", 22000),
            ("Nasi Pecel Madiun", 14000),
            ("Lontong Sayur", 16000),
            ("Nasi Kuning Manado", 18000),
            ("Rendang Padang", 25000),
            ("Sop Buntut", 30000),
            ("Ikan Bakar Jimbaran", 28000),
            ("Nasi Campur Bali", 20000),
            ("Tahu Telor", 12000),
            ("Ayam Penyet", 17000),
            ("Nasi Liwet Solo", 19000),
        ],
    )
    + _items(
        "Drinks",
        [
            ("Es Teh Kampul", 4000),
            ("Es Jeruk Liar", 5000),
            ("Jus Terong Belanda", 8000),
            ("Air Kelapa", 6000),
            ("Air Putih Anget", 1000),
            ("Es Kopi Susu", 10000),
            ("Teh Tarik", 7000),
            ("Jus Alpukat", 12000),
            ("Es Cincau", 6000),
            ("Soda Gembira", 9000),
            ("Es Buah", 15000),
            ("Wedang Jahe", 8000),
            ("Jus Mangga", 10000),
            ("Es Kelapa Muda", 12000),
            ("Milkshake Coklat", 15000),
            ("Es Teh Manis", 5000),
            ("Jus Tomat", 8000),
            ("Lemon Tea", 7000),
            ("Es Lidah Buaya", 10000),
            ("Smoothie Strawberry", 18000),
        ],
    )
    + _items(
        "Snacks",
        [
            ("Kacang Atom", 3000),
            ("Kerupuk Jangek", 5000),
            ("Otak-otak", 2000),
            ("Peyek", 4000),
            ("Gorengan", 1500),
            ("Tempe Mendoan", 3000),
            ("Cireng", 4000),
            ("Batagor", 7000),
            ("Siomay", 6000),
            ("Risol Mayo", 5000),
            ("Lumpia Semarang", 8000),
            ("Tahu Isi", 3000),
            ("Bakwan Jagung", 4000),
            ("Keripik Singkong", 5000),
            ("Emping Melinjo", 6000),
            ("Kue Cubit", 4000),
            ("Pastel", 5000),
            ("Keripik Tempe", 7000),
            ("Tahu Gejrot", 6000),
            ("Cilok", 3000),
        ],
    )
    + _items(
        "Desserts",
        [
            ("Es Krim Xue", 19000),
            ("Cendol Dawet", 15000),
            ("Martabak Mesir", 20000),
            ("Coklat Dubai", 60000),
            ("Mango Sago", 30000),
            ("Kue Lapis", 10000),
            ("Puding Coklat", 12000),
            ("Klepon", 5000),
            ("Onde-Onde", 6000),
            ("Bika Ambon", 25000),
            ("Kue Putu", 4000),
            ("Serabi Solo", 8000),
            ("Es Teler", 15000),
            ("Kolplay", 12000),
            ("Kue Sus", 7000),
            ("Bolu Kukus", 10000),
            ("Lemper", 6000),
            ("Pancake Durian", 20000),
            ("Wajik", 8000),
            ("Dodol Garut", 15000),
        ],
    )
)


def foods_in_category(category: str) -> list[Food]:
    """Return the catalogue items of one category, in catalogue order."""
    return [food for food in FOOD_LIST if food.category == category]


def search_foods(keyword: str) -> list[Food]:
    """Return items whose name contains ``keyword``, ignoring case."""
    needle = keyword.lower()
    return [food for food in FOOD_LIST if needle in food.name.lower()]