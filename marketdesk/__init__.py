"""Console marketplace: users, products, carts, orders and cheques in plain text files."""

__version__ = "0.1.0"