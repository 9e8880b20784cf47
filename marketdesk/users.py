"""Shop users: admins, businesses and clients."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Iterable, Union

from .cart import Cart
from .cheque import Cheque, ChequeError, cheque_code_exists, latest_cheque_id
from .product import Product
from .textutil import format_float

__all__ = ["User", "Admin", "Business", "Client"]

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class User:
    """A registered account identified by name and EGN."""

    name: str
    egn: str
    password: str

    role: ClassVar[str] = "User"
    _COMMANDS: ClassVar[tuple[str, ...]] = ()
    _FAREWELL: ClassVar[str] = "Logged out."

    def help_text(self) -> str:
        """Return the list of commands available to this kind of user."""
        lines = [f"Available commands for {self.role}:"]
        lines += [f"- {command}" for command in self._COMMANDS]
        return "\n".join(lines)

    def logout_message(self) -> str:
        """Return the message shown when the user logs out."""
        return self._FAREWELL

    def check_password(self, password: str) -> bool:
        """Return whether ``password`` matches the user's password."""
        return self.password == password

    def save_data(self) -> str:
        """Return the user as one colon-separated record."""
        return ":".join([self.role, self.name, self.egn, self.password])


@dataclass
class Admin(User):
    """An administrator who issues cheques."""

    role: ClassVar[str] = "Admin"
    _COMMANDS: ClassVar[tuple[str, ...]] = (
        "send-check [amount] [code] [client_egn]",
        "customer-insights",
        "view-transactions",
    )
    _FAREWELL: ClassVar[str] = "Logged out from Admin profile."

    def send_cheque(
        self, amount: float, code: str, client_egn: str, cheques_path: PathLike
    ) -> Cheque:
        """Create a new cheque for a client; its code must not be taken."""
        path = Path(cheques_path)
        if path.exists() and cheque_code_exists(path, code):
            raise ChequeError("Cheque with that code already Exists!")
        if amount <= 0:
            raise ValueError("Amount is not acceptable!")
        latest = latest_cheque_id(path) if path.exists() else 0
        return Cheque(
            id=max(latest, 0) + 1, code=code, client_egn=client_egn, amount=amount
        )


@dataclass
class Business(User):
    """A seller that lists products and handles their orders."""

    role: ClassVar[str] = "Business"
    _COMMANDS: ClassVar[tuple[str, ...]] = (
        "add-item [name] [price] [qty] [desc]",
        "remove-item [name]",
        "list-pending-orders",
        "approve-order [index]",
        "reject-order [index] [reason]",
        "list-orders",
        "list-best-selling-products",
        "view-revenue",
        "list-refunds",
        "approve-refund [index]",
        "reject-refund [index] [reason]",
    )
    _FAREWELL: ClassVar[str] = "Logged out from Business profile."


@dataclass
class Client(User):
    """A buyer with a balance, loyalty points and a cart."""

    balance: float = 0.0
    points: int = 0
    cart: Cart = field(default_factory=Cart)

    role: ClassVar[str] = "Client"
    _COMMANDS: ClassVar[tuple[str, ...]] = (
        "check-balance",
        "redeem [code]",
        "list-products",
        "filter-by-rating",
        "filter-by-price",
        "filter-by-alphabetical-order",
        "view-product [id]",
        "add-to-cart [id] [qty]",
        "remove-from-cart [id] [qty]",
        "apply-discount",
        "remove-discount",
        "view-cart",
        "checkout",
        "list-orders",
        "confirm-order [index]",
        "order-history",
        "rate [product_id] [1-5]",
        "request-refund",
        "refunded-orders",
    )
    _FAREWELL: ClassVar[str] = "Logged out successfully."

    def __post_init__(self) -> None:
        if not self.cart.client_egn:
            self.cart.client_egn = self.egn

    def save_data(self) -> str:
        """Return the client as one colon-separated record."""
        return ":".join(
            [super().save_data(), format_float(self.balance), str(self.points)]
        )

    def add_to_cart(self, product_id: int, quantity: int) -> None:
        """Put ``quantity`` of a product into the cart."""
        self.cart.add_item(product_id, quantity)

    def remove_from_cart(self, product_id: int, quantity: int) -> None:
        """Take ``quantity`` of a product out of the cart."""
        self.cart.remove_item(product_id, quantity)

    def view_cart(self, products: Iterable[Product]) -> str:
        """Return a printable listing of the cart."""
        return self.cart.view(products)

    def redeem_cheque(self, cheque: Cheque, code: str) -> None:
        """Cash a cheque issued to this client into the balance."""
        if cheque.used:
            raise ChequeError("Cheque already used!")
        if not cheque.is_authorized(self.egn):
            raise ChequeError("You are not authorized to use this cheque!")
        if cheque.code != code:
            raise ChequeError("Code or information about the cheque is incorrect!")
        cheque.used = True
        self.balance += cheque.amount

    def balance_report(self) -> str:
        """Return the balance and loyalty points as two lines."""
        return f"Balance: {self.balance:g}\nPoints: {self.points}"