#!/usr/bin/env python
import os

import requests
from rich import print

from sdk.menu_client import MenuClient, validation_errors


def main():
    c = MenuClient(base_url=os.getenv("MENU_API_URL", "http://127.0.0.1:3000"))

    # -----------------------------
    # Reset everything for demo
    # -----------------------------
    print("Checking server...", c.status())
    print(c.reset())

    # -----------------------------
    # List and fetch
    # -----------------------------
    print("\nListing menu...")
    for item in c.list_items():
        print(f"  {item['id']}: {item['name']} (${item['price']:.2f})")

    print("\nFetching item 3...")
    print(c.get_item(3))

    # -----------------------------
    # Create
    # -----------------------------
    print("\nAdding Veggie Wrap...")
    wrap = c.create_item(
        "Veggie Wrap",
        "Fresh vegetables in a tortilla wrap",
        6.50,
        "entree",
        ["tortilla", "lettuce"],
    )
    print(wrap)

    print("\nAdding an item with a negative price...")
    try:
        c.create_item("Bad Soup", "Soup with a price that makes no sense", -5, "appetizer", ["water"])
    except requests.HTTPError as e:
        print(validation_errors(e))

    # -----------------------------
    # Update
    # -----------------------------
    print("\nRaising the burger price...")
    print(c.update_item(1, price=13.99))

    # -----------------------------
    # Delete
    # -----------------------------
    print(f"\nDeleting item {wrap['id']}...")
    print(c.delete_item(wrap["id"]))
    print("Lookup after delete:", c.get_item(wrap["id"]))


if __name__ == "__main__":
    main()
