"""The shop: users, products, carts, orders and its command loop."""

from __future__ import annotations

import argparse
import os
import re
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO, Union

from .cart import Cart, CartFullError
from .cheque import Cheque
from .order import Order, OrderStatus, latest_order_id
from .paths import data_paths
from .product import Product, latest_product_id
from .textutil import parse_float, parse_int, split_fields
from .users import Admin, Business, Client, User

__all__ = [
    "MAX_CARTS",
    "MAX_USERS",
    "MAX_PRODUCTS",
    "MAX_ORDERS",
    "MAX_CHEQUES",
    "ShopError",
    "Shop",
    "main",
]

PathLike = Union[str, "os.PathLike[str]"]

MAX_CARTS = 100
MAX_USERS = 100
MAX_PRODUCTS = 100
MAX_ORDERS = 100
MAX_CHEQUES = 100

LOYALTY_RATE = 0.05

_VIEW_PRODUCT = re.compile(r"view-product\s+([+-]?\d+)")
_ADD_TO_CART = re.compile(r"add-to-cart\s+([+-]?\d+)\s+([+-]?\d+)")
_REMOVE_FROM_CART = re.compile(r"remove-from-cart\s+([+-]?\d+)\s+([+-]?\d+)")

_REGISTER_PROMPTS = (
    "Name: ",
    "EGN: ",
    "Password: ",
    "Select Role (Client, Business, Admin): ",
)
_LOGIN_PROMPTS = ("Name: ", "Password: ")


class ShopError(Exception):
    """Raised when a shop operation cannot be carried out."""


def _write_records(path: Path, records: Iterable[str], what: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as handle:
            for record in records:
                handle.write(f"{record}\n")
    except OSError as exc:
        raise ShopError(f"{what} save was unsuccessful!") from exc


class Shop:
    """All shop state plus the operations users perform on it."""

    def __init__(self, data_dir: PathLike = "data", out: Optional[TextIO] = None) -> None:
        self.paths = data_paths(data_dir)
        self.users: list[User] = []
        self.products: list[Product] = []
        self.orders: list[Order] = []
        self.cheques: list[Cheque] = []
        self.carts: list[Cart] = []
        self.current_user: Optional[User] = None
        self._out = out

    # ---------- users ----------

    def register_user(self, name: str, egn: str, password: str, role: str) -> User:
        """Create a user of the given role and add it to the shop."""
        if role == "Client":
            user: User = Client(name, egn, password)
        elif role == "Business":
            user = Business(name, egn, password)
        elif role == "Admin":
            user = Admin(name, egn, password)
        else:
            raise ShopError("Invalid role.")
        if len(self.users) >= MAX_USERS:
            raise ShopError("User list is full.")
        self.users.append(user)
        return user

    def login(self, name: str, password: str) -> User:
        """Make the user with this name and password the current one."""
        for user in self.users:
            if user.name == name and user.check_password(password):
                self.current_user = user
                return user
        raise ShopError("Login failed.")

    def logout(self) -> Optional[str]:
        """Log the current user out and return the farewell, if anyone was in."""
        if self.current_user is None:
            return None
        message = self.current_user.logout_message()
        self.current_user = None
        return message

    # ---------- products ----------

    def _require_business(self) -> Business:
        user = self.current_user
        if user is None:
            raise ShopError("You must be logged in as a Business.")
        if not isinstance(user, Business):
            raise ShopError("Only Business users can add items.")
        return user

    def _next_product_id(self) -> int:
        known = [product.id for product in self.products]
        if self.paths.products.exists():
            known.append(latest_product_id(self.paths.products))
        return max([0, *known]) + 1

    def add_item(self, name: str, price: float, quantity: int, description: str) -> Product:
        """List a new product for the logged-in business."""
        business = self._require_business()
        if len(self.products) >= MAX_PRODUCTS - 1:
            raise ShopError("Product list is full.")
        product = Product(
            id=self._next_product_id(),
            name=name,
            business_egn=business.egn,
            price=price,
            quantity=quantity,
            description=description,
        )
        self.products.append(product)
        return product

    def list_products(self) -> str:
        """Return one summary line per product still in stock."""
        if not self.products:
            return "No products in the system."
        return "\n".join(p.summary() for p in self.products if p.is_available())

    def view_product(self, product_id: int) -> str:
        """Return the detailed description of a product."""
        product = self.find_product(product_id)
        if product is None:
            raise ShopError(f"Product with ID {product_id} not found.")
        return product.details()

    def find_product(self, product_id: int) -> Optional[Product]:
        """Return the product with this id, or ``None``."""
        return next((p for p in self.products if p.id == product_id), None)

    # ---------- client commands ----------

    def handle_command(self, command: str) -> str:
        """Carry out a client command and return the message to show."""
        client = self.current_user
        if not isinstance(client, Client):
            return ""
        if command.startswith("add-to-cart"):
            match = _ADD_TO_CART.match(command)
            if not match:
                raise ShopError("Usage: add-to-cart [product_id] [qty]")
            product_id, quantity = int(match[1]), int(match[2])
            product = self.find_product(product_id)
            if product is None or not product.is_available() or product.quantity < quantity:
                raise ShopError("Invalid product or quantity.")
            try:
                client.add_to_cart(product_id, quantity)
            except CartFullError as exc:
                raise ShopError(str(exc)) from exc
            return "Added to cart."
        if command.startswith("remove-from-cart"):
            match = _REMOVE_FROM_CART.match(command)
            if not match:
                raise ShopError("Usage: remove-from-cart [product_id] [qty]")
            client.remove_from_cart(int(match[1]), int(match[2]))
            return "Item removed from cart."
        if command == "view-cart":
            return client.view_cart(self.products)
        if command == "checkout":
            self.checkout()
            return "Order placed successfully. Awaiting approval."
        return ""

    def _next_order_id(self) -> int:
        known = [order.id for order in self.orders]
        if self.paths.orders.exists():
            known.append(latest_order_id(self.paths.orders))
        return max([0, *known]) + 1

    def checkout(self) -> Order:
        """Turn the current client's cart into a pending order."""
        client = self.current_user
        if not isinstance(client, Client):
            raise ShopError("Only clients can checkout.")
        if client.cart.is_empty():
            raise ShopError("Your cart is empty.")
        if len(self.orders) >= MAX_ORDERS:
            raise ShopError("Order system is full.")

        purchases: list[tuple[Product, int]] = []
        for product_id, quantity in client.cart.items():
            if quantity <= 0:
                continue
            product = self.find_product(product_id)
            if product is None or not product.is_available() or product.quantity < quantity:
                raise ShopError(f"Checkout failed. Invalid product ID: {product_id}")
            purchases.append((product, quantity))

        order = Order(id=self._next_order_id(), client_egn=client.egn)
        total = 0.0
        for product, quantity in purchases:
            product.decrease_quantity(quantity)
            order.add_item(product.id, quantity)
            total += product.price * quantity
        order.total = total
        order.points = int(total * LOYALTY_RATE)
        order.status = OrderStatus.PENDING

        self.orders.append(order)
        client.cart = Cart(client_egn=client.egn)
        return order

    # ---------- persistence ----------

    def _cart_for(self, egn: str) -> Cart:
        for cart in self.carts:
            if cart.client_egn == egn:
                return cart
        return Cart(client_egn=egn)

    def _user_from_record(self, record: str) -> Optional[User]:
        fields = split_fields(record, ":")
        if len(fields) < 4:
            raise ShopError(f"Malformed user record: {record!r}")
        role, name, egn, stored = fields[:4]
        if role == "Admin":
            return Admin(name, egn, stored)
        if role == "Business":
            return Business(name, egn, stored)
        if role == "Client":
            balance = 0.0
            points = 0
            if len(fields) > 4:
                try:
                    balance = parse_float(fields[4])
                except ValueError:
                    pass
            if len(fields) > 5:
                try:
                    points = parse_int(fields[5])
                except ValueError:
                    pass
            return Client(name, egn, stored, balance, points, self._cart_for(egn))
        return None

    def load(self) -> None:
        """Read the registered users from the users file."""
        try:
            lines = self.paths.users.read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            raise ShopError("Users load failed!") from exc
        if not lines:
            return
        try:
            count = parse_int(lines[0].strip())
        except ValueError as exc:
            raise ShopError("Users load failed!") from exc
        for record in lines[1 : 1 + max(count, 0)]:
            user = self._user_from_record(record)
            if user is not None:
                self.users.append(user)

    def save(self) -> None:
        """Write cheques, orders, users and products to their files."""
        last_cheque = self.cheques[-1].id if self.cheques else -1
        _write_records(
            self.paths.cheques,
            [str(last_cheque), str(len(self.cheques))]
            + [cheque.save_data() for cheque in self.cheques],
            "Cheques",
        )
        last_order = self.orders[-1].id if self.orders else -1
        _write_records(
            self.paths.orders,
            [str(last_order)] + [line for order in self.orders for line in order.save_lines()],
            "Orders",
        )
        _write_records(
            self.paths.users,
            [str(len(self.users))] + [user.save_data() for user in self.users],
            "Users",
        )
        last_product = self.products[-1].id if self.products else -1
        _write_records(
            self.paths.products,
            [str(last_product), str(len(self.products))]
            + [product.save_data() for product in self.products],
            "Products",
        )

    # ---------- command loop ----------

    def _write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out if self._out is not None else sys.stdout)

    def _say(self, text: Optional[str]) -> None:
        if text:
            self._write(text)

    def _dispatch(self, command: str, ask: Callable[[str], str]) -> None:
        if command == "register":
            name, egn, given, role = [ask(prompt) for prompt in _REGISTER_PROMPTS]
            user = self.register_user(name, egn, given, role)
            self._write(f"{user.role} registered.")
        elif command == "login":
            name, given = [ask(prompt) for prompt in _LOGIN_PROMPTS]
            self.login(name, given)
            self._write("Login successful.")
        elif command == "logout":
            self._say(self.logout())
        elif command == "help" and self.current_user is not None:
            self._write(self.current_user.help_text())
        elif command == "add-item":
            self._require_business()
            name = ask("Product name: ")
            price = parse_float(ask("Price: ").strip())
            quantity = parse_int(ask("Quantity: ").strip())
            description = ask("Description: ")
            self.add_item(name, price, quantity, description)
            self._write("Product added successfully.")
        elif command == "list-products":
            self._say(self.list_products())
        elif command.startswith("view-product"):
            match = _VIEW_PRODUCT.match(command)
            if not match:
                raise ShopError("Usage: view-product [product_id]")
            self._write(self.view_product(int(match[1])))
        elif self.current_user is not None:
            self._say(self.handle_command(command))
        else:
            raise ShopError("Unknown or unauthorized command.")

    def run(self, lines: Iterable[str]) -> None:
        """Read commands from ``lines`` until ``exit`` or the input ends."""
        feed = (line.rstrip("\r\n") for line in lines)

        def ask(prompt: str) -> str:
            self._write(prompt, end="")
            return next(feed, "")

        while True:
            self._write("> ", end="")
            command = next(feed, None)
            if command is None or command == "exit":
                self._say(self.logout())
                break
            try:
                self._dispatch(command, ask)
            except (ShopError, ValueError) as exc:
                self._write(str(exc))


def main(argv: Optional[list[str]] = None) -> int:
    """Run the shop's interactive command loop on standard input."""
    parser = argparse.ArgumentParser(prog="marketdesk", description="Run the shop.")
    parser.add_argument("--data-dir", default="data", help="directory of the data files")
    args = parser.parse_args(argv)
    Shop(args.data_dir).run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())