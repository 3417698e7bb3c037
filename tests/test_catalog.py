import dataclasses

import pytest

from warungcli.catalog import (
    CATEGORIES,
    FOOD_LIST,
    Food,
    foods_in_category,
    search_foods,
)


def test_first_item_is_fixed_by_source():
    assert FOOD_LIST[0] == Food("Nasi Goreng Kampung", 15000, "Meals")


def test_categories_partition_the_catalogue():
    total = sum(len(foods_in_category(c)) for c in CATEGORIES)
    assert total == len(FOOD_LIST)


@pytest.mark.parametrize("category", CATEGORIES)
def test_foods_in_category_only_that_category(category):
    items = foods_in_category(category)
    assert items
    assert all(food.category == category for food in items)


def test_foods_in_category_preserves_order():
    meals = foods_in_category("Meals")
    positions = [FOOD_LIST.index(f) for f in meals]
    assert positions == sorted(positions)


def test_unknown_category_is_empty():
    assert foods_in_category("Soups") == []


def test_category_match_is_exact():
    assert foods_in_category("meals") == []


def test_search_finds_item():
    names = [f.name for f in search_foods("soto")]
    assert "Soto Betawi" in names


def test_search_is_case_insensitive():
    assert search_foods("KOPI") == search_foods("kopi")
    assert search_foods("kopi")


def test_search_results_contain_keyword():
    for food in search_foods("es"):
        assert "es" in food.name.lower()


def test_search_results_follow_catalogue_order():
    results = search_foods("a")
    positions = [FOOD_LIST.index(f) for f in results]
    assert positions == sorted(positions)


def test_search_no_match():
    assert search_foods("pizza") == []


def test_empty_keyword_matches_everything():
    assert search_foods("") == list(FOOD_LIST)


def test_food_is_immutable():
    food = foods_in_category("Snacks")[0]
    assert food == Food("Kacang Atom", 3000, "Snacks")
    with pytest.raises(dataclasses.FrozenInstanceError):
        food.price = 1
    assert food.price == 3000