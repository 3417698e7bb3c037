# warungcli

A small interactive food-ordering menu for the terminal. Browse a fixed
catalogue of Indonesian meals, drinks, snacks and desserts, add items to a
cart, and check out.

## Installation

```
pip install .
```

## Running

```
warungcli
```

`warungcli --help` shows the usage line; the command takes no other options.

The home screen offers:

```
--- Home ---
1. Order
2. Cart
3. Checkout
4. Search
e. Exit
```

- **Order** shows the four categories (Meals, Drinks, Snacks, Desserts).
  Each category is listed five items per page; type `n` for the next page,
  `p` for the previous one and `c` to go back to the categories. Type an
  item's number (as shown on the current page) to add it to the cart, then
  confirm with `y` or `Y`; any other answer cancels.
- **Cart** lists what you have picked so far, with prices in rupiah. When
  the cart is empty it offers `o` to start ordering; `b` goes back home.
- **Checkout** shows the cart and asks for confirmation; `y` empties the
  cart and completes the purchase, `n` cancels. With an empty cart it goes
  straight back home with a notice.
- **Search** finds items whose name contains a keyword, ignoring case, and
  lets you add a result to the cart by its number. Type `back` to return
  home.
- **e** prints "Thank you!" and leaves the program.

Every answer is a single word. The program also stops when input runs out,
and exits with status 130 on Ctrl-C.

## Using the pieces from Python

The catalogue and cart can be used without the interactive menu:

```python
from warungcli.catalog import foods_in_category, search_foods
from warungcli.cart import Cart

cart = Cart()
for food in search_foods("jus"):
    cart.add(food)

for line in cart.lines():
    print(line)          # e.g. "1. Jus Terong Belanda: Rp8000"

print(len(foods_in_category("Desserts")))
```

- `warungcli.catalog` holds the frozen `Food` dataclass (`name`, `price`,
  `category`), the `FOOD_LIST` and `CATEGORIES` tuples, and the
  `foods_in_category` and `search_foods` functions.
- `warungcli.cart` holds `Cart` (`add`, `clear`, `lines`, `len()` and
  iteration) and `format_item(number, food)`.
- `warungcli.console` holds `Console`, which writes to and reads single
  words from a pair of text streams (standard input and output by
  default), and `InputError`, raised for an empty line or one with more
  than one word.
- `warungcli.menu` holds `App`, the screens, and `main`.

To drive the menu with your own input and output streams, build an `App`
from a `Console` and a `Cart`:

```python
import io
from warungcli.console import Console
from warungcli.cart import Cart
from warungcli.menu import App

out = io.StringIO()
app = App(Console(io.StringIO("e\n"), out), Cart())
app.run()
```

## What it does not do

The catalogue is fixed in code and cannot be edited from the program.
The cart lives only in memory: nothing is saved between runs, checkout
records no order and takes no payment, and there is no total or receipt.

## Tests

```
pip install ".[test]"
pytest
```