# marketdesk

A small console marketplace. Users register as a **Client**, a **Business**
or an **Admin**. Businesses list products; clients browse them, fill a cart
and check out into pending orders; admins issue cheques that clients can
cash into their balance. Records are written as colon-separated lines in
plain text files.

## Installation

```
pip install .
```

## Running the shop

```
marketdesk
marketdesk --data-dir path/to/data
```

This starts a prompt (`> `) that reads one command per line from standard
input. `--data-dir` (default `data`) sets the directory of the data files.

| Command                       | Who       | What it does                                          |
|-------------------------------|-----------|-------------------------------------------------------|
| `register`                    | anyone    | asks for name, EGN, password and role (`Client`, `Business` or `Admin`) |
| `login`                       | anyone    | asks for name and password                            |
| `logout`                      | logged in | ends the current session                              |
| `help`                        | logged in | lists the commands for your role                      |
| `add-item`                    | Business  | asks for name, price, quantity and description        |
| `list-products`               | anyone    | lists products that are in stock                      |
| `view-product <id>`           | anyone    | shows one product in detail                           |
| `add-to-cart <id> <qty>`      | Client    | adds a product to your cart if enough is in stock     |
| `remove-from-cart <id> <qty>` | Client    | takes a quantity out of your cart                     |
| `view-cart`                   | Client    | shows the cart and its total                          |
| `checkout`                    | Client    | turns the cart into a pending order                   |
| `exit`                        | anyone    | logs out and quits (so does the end of input)         |

Errors such as a failed login or an unknown command are printed and the
prompt carries on. Checking out takes the ordered quantities out of stock
and earns loyalty points worth 5% of the order total, rounded down.

## Using it as a library

```python
from marketdesk.shop import Shop

password = "password"

shop = Shop("data")
shop.register_user("acme", "egn-001", password, "Business")
shop.login("acme", password)
product = shop.add_item("Lamp", 25.0, 4, "Desk lamp")
shop.logout()

shop.register_user("ana", "egn-002", password, "Client")
shop.login("ana", password)
shop.handle_command(f"add-to-cart {product.id} 2")
order = shop.checkout()
print(order.summary())   # Order total: 50 BGN | Status: Pending

shop.save()
```

`Shop.run(lines)` drives the same command loop from any iterable of lines;
`Shop(data_dir, out)` sends its output to a text stream of your choice.
Failed operations raise `marketdesk.shop.ShopError`.

The building blocks can be used on their own:

- `marketdesk.product`: `Product` (stock, price, 1–5 star ratings) and
  `latest_product_id`
- `marketdesk.cart`: `Cart` and `CartFullError` (at most 100 distinct products)
- `marketdesk.order`: `Order`, `OrderStatus` (`PENDING`, `SHIPPED`,
  `DELIVERED`) and `latest_order_id`
- `marketdesk.cheque`: `Cheque`, `ChequeError`, `latest_cheque_id`,
  `cheque_code_exists`
- `marketdesk.refund`: `Refund` and `latest_refund_id`
- `marketdesk.users`: `User`, `Admin` (`send_cheque`), `Business`,
  `Client` (`add_to_cart`, `remove_from_cart`, `view_cart`,
  `redeem_cheque`, `balance_report`)
- `marketdesk.textutil`: `split_fields`, `parse_int`, `parse_float`,
  `format_float`, `str_equal`, `starts_with`
- `marketdesk.linefile`: `replace_line_in_file`, `delete_line_from_file`
  for editing one numbered line of a text file in place
- `marketdesk.paths`: `data_paths(directory)` returns a `DataPaths` with the
  location of every data file

## Data files

`Shop.save()` writes four files into the data directory:

- `Users.txt`: the user count, then `Role:name:egn:password` per user;
  clients add `:balance:points`
- `Products.txt`: latest id, count, then one product record per line
- `Cheques.txt`: latest id, count, then `id:code:amount:used` per cheque
- `Orders.txt`: latest id, then each order header followed by one
  `order_id:product_id:quantity` line per item

`Shop.load()` reads users back from `Users.txt`.

## What it does not do

- The `marketdesk` command neither loads nor saves: every session starts
  empty and nothing is kept when it ends. Call `Shop.load()` and
  `Shop.save()` yourself to keep users between runs.
- Only users are loaded; products, orders and cheques are written but not
  read back. `Refunds.txt`, `Carts.txt`, `Transactions.txt` and
  `LastData.txt` are named by `data_paths` but never written by the shop.
- `help` lists more commands than the prompt understands. Cheques
  (`send-check`, `redeem`), ratings, filters, discounts, order approval,
  refunds, revenue reports and profile views are not available as commands;
  cheques and ratings exist only through the library classes.
- Checkout does not charge the client's balance or add the earned points to it.

## Running the tests

```
pip install ".[test]"
pytest
```