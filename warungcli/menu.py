"""Interactive screens of the food ordering program."""

from __future__ import annotations

import argparse
import functools
import math
import re
from collections.abc import Callable, Sequence
from typing import Any, Optional

from warungcli.cart import Cart, format_item
from warungcli.catalog import CATEGORIES, Food, foods_in_category, search_foods
from warungcli.console import Console, InputError

__all__ = ["ITEMS_PER_PAGE", "MAIN_MENU_ITEMS", "App", "main"]

ITEMS_PER_PAGE = 5

MAIN_MENU_ITEMS: tuple[str, ...] = (
    "1. Order",
    "2. Cart",
    "3. Checkout",
    "4. Search",
    "e. Exit",
)

_INTEGER = re.compile(r"[+-]?[0-9]+")

# A screen returns the next screen to show, or None to stop.
Step = Optional[Callable[[], Any]]


def _parse_int(text: str) -> int | None:
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


class App:
    """The menu-driven ordering program, one screen at a time."""

    def __init__(self, console: Console | None = None, cart: Cart | None = None) -> None:
        self.console = console if console is not None else Console()
        self.cart = cart if cart is not None else Cart()

    # -- helpers -----------------------------------------------------------

    def _say(self, *lines: str) -> None:
        for line in lines:
            self.console.write(line + "\n")

    def _refresh(self, message: str) -> None:
        self.console.clear()
        if message:
            self._say(message)

    def _word(self, prompt: str) -> str:
        """Read a word, keeping whatever was read when the line is malformed."""
        try:
            return self.console.ask(prompt)
        except InputError as error:
            return error.value

    def _back_to(self, message: str) -> Step:
        return functools.partial(self.main_menu, message)

    # -- screens -----------------------------------------------------------

    def run(self) -> None:
        """Show screens until the user exits or input runs out."""
        step: Step = self.main_menu
        try:
            while step is not None:
                step = step()
        except EOFError:
            pass

    def main_menu(self, message: str = "") -> Step:
        """The home screen."""
        choices: dict[str, Callable[[], Any]] = {
            "1": self.food_categories,
            "2": self.show_cart,
            "3": self.checkout,
            "4": self.search,
        }
        while True:
            self._refresh(message)
            message = ""
            self._say("--- Home ---", *MAIN_MENU_ITEMS)
            try:
                choice = self.console.ask("Input choice: ")
            except InputError:
                message = "Invalid input."
                continue
            if choice == "e":
                self._say("Thank you!")
                return None
            if choice in choices:
                return choices[choice]
            message = "Invalid input."

    def show_cart(self) -> Step:
        """List the cart contents."""
        message = ""
        while True:
            self._refresh(message)
            message = ""
            empty = len(self.cart) == 0
            if empty:
                self._say("Cart is empty.", "o. Order", "b. Back")
            else:
                self._say("--- Cart ---", *self.cart.lines(), "\nb. Back")
            try:
                choice = self.console.ask("Input choice: ")
            except InputError:
                message = "Invalid input."
                continue
            if choice == "b":
                return self.main_menu
            if empty and choice == "o":
                return self.food_categories
            message = "Invalid input."

    def checkout(self) -> Step:
        """Confirm and pay for the cart."""
        message = ""
        while True:
            self._refresh(message)
            message = ""
            if len(self.cart) == 0:
                return self._back_to("Cart is empty. Nothing to checkout.")
            self._say("--- Checkout ---", *self.cart.lines())
            answer = self._word("Proceed to checkout? (y/n): ")
            if answer in ("y", "Y"):
                self.cart.clear()
                return self._back_to("✅ Checkout successful! Thank you for your purchase.")
            if answer in ("n", "N"):
                return self._back_to("Checkout canceled.")
            message = "Invalid input."

    def food_categories(self) -> Step:
        """Choose a food category."""
        choices = {str(number): category for number, category in enumerate(CATEGORIES, start=1)}
        message = ""
        while True:
            self._refresh(message)
            message = ""
            self._say(
                "--- Food Category ---",
                *(f"{number}. {category}" for number, category in choices.items()),
                "b. Back",
            )
            try:
                choice = self.console.ask("Input choice: ")
            except InputError:
                message = "Invalid input."
                continue
            if choice == "b":
                return self.main_menu
            if choice in choices:
                return functools.partial(self.foods_by_category, choices[choice])
            message = "Invalid input."

    def foods_by_category(self, category: str) -> Step:
        """Page through one category and add items to the cart."""
        available = foods_in_category(category)
        total_pages = max(1, math.ceil(len(available) / ITEMS_PER_PAGE))
        page = 1
        message = ""
        while True:
            self._refresh(message)
            message = ""
            self._say(f"--- {category} (Page {page}) ---")
            start = (page - 1) * ITEMS_PER_PAGE
            end = min(start + ITEMS_PER_PAGE, len(available))
            self._say(
                *(
                    format_item(number, food)
                    for number, food in enumerate(available[start:end], start=start + 1)
                )
            )
            navigation = []
            if page > 1:
                navigation.append("[p. Previous]")
            if page < total_pages:
                navigation.append("[n. Next]")
            navigation.append("[c. Cancel]")
            self._say(f"\nNavigation: {' '.join(navigation)}")

            try:
                choice = self.console.ask("Input choice: ")
            except InputError:
                message = "Invalid input."
                continue

            if choice == "p":
                if page > 1:
                    page -= 1
                else:
                    message = "No previous page."
                continue
            if choice == "n":
                if page < total_pages:
                    page += 1
                else:
                    message = "No next page."
                continue
            if choice == "c":
                return self.food_categories

            number = _parse_int(choice)
            if number is not None and start + 1 <= number <= end:
                added = self.confirm_add(available[number - 1])
                message = "Item added to cart." if added else "Cancelled."
            else:
                message = "Invalid input."

    def search(self) -> Step:
        """Find items by name and add them to the cart."""
        message = ""
        while True:
            self._refresh(message)
            message = ""
            self._say("--- Search ---")
            keyword = self._word("Enter keyword to search (or 'back' to return): ")
            if keyword == "back":
                return self.main_menu

            results = search_foods(keyword)
            if not results:
                message = "❌ No matching items found."
                continue

            self._say(
                "\n--- Search Results ---",
                *(format_item(number, food) for number, food in enumerate(results, start=1)),
                "b. Back",
            )
            try:
                choice = self.console.ask("Select item to add to cart: ")
            except InputError:
                message = "Invalid choice."
                continue
            if choice == "b":
                return self.main_menu

            number = _parse_int(choice)
            if number is not None and 0 < number <= len(results):
                added = self.confirm_add(results[number - 1])
                message = "Item added to cart." if added else "Cancelled."
                continue
            message = "Invalid choice."

    def confirm_add(self, food: Food) -> bool:
        """Ask whether to add ``food``; add it and return True on yes."""
        answer = self._word(f"Add '{food.name}' to cart? (y/n): ")
        if answer in ("y", "Y"):
            self.cart.add(food)
            return True
        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Start the ordering program on the terminal."""
    parser = argparse.ArgumentParser(
        prog="warungcli", description="Order food from the stall menu."
    )
    parser.parse_args(argv)
    try:
        App(Console(), Cart()).run()
    except KeyboardInterrupt:
        return 130
    return 0