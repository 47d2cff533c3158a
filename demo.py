#!/usr/bin/env python
import asyncio

from product_api import config
from sdk.products import ProductClient

def main():
    c = ProductClient(base_url=config.PRODUCTS_API_URL)

    # -----------------------------
    # Create
    # -----------------------------
    print("Creating product...")
    pen = c.create_product("Pen", "Blue pen", 1.5, "stationery", 100)
    print(pen)

    # -----------------------------
    # List
    # -----------------------------
    print("\nListing products...")
    products = c.list_products()
    print(products)
    assert any(p["id"] == pen["id"] for p in products)

    # -----------------------------
    # Update
    # -----------------------------
    print(f"\nRaising price of {pen['id']}...")
    updated = c.update_product(pen["id"], "Pen", "Blue pen", 2.0, "stationery", 100)
    print(updated)

    # -----------------------------
    # Delete
    # -----------------------------
    print(f"\nDeleting {pen['id']}...")
    c.delete_product(pen["id"])
    remaining = c.list_products()
    print(remaining)
    assert all(p["id"] != pen["id"] for p in remaining)

    # -----------------------------
    # Async create
    # -----------------------------
    print("\nCreating product asynchronously...")
    marker = asyncio.run(c.create_product_async("Marker", "Black marker", 3, "stationery", 20))
    print(marker)
    c.delete_product(marker["id"])

if __name__ == "__main__":
    main()
