#!/usr/bin/env python3
# =============================================================================
# scripts/products_demo.py - Interactive Products Client
# =============================================================================
# A terminal front end for the Products API. Every action goes through the
# client request pipeline, so failures (server down, timeouts, 404s) are
# printed as ApiResult messages instead of tracebacks.
#
# Usage:
#   uvicorn app.main:app                      # in another terminal
#   python scripts/products_demo.py
#   python scripts/products_demo.py --base-url http://localhost:8000 --timeout 5
#
# Commands:
#   list                 - List all products
#   show <id>            - Show one product
#   add <name> <price> <stock> [category]
#   stock <id> <stock>   - Change a product's stock
#   delete <id>          - Delete a product
#   stats | categories | health
#   quit                 - Exit
# =============================================================================

import argparse
import asyncio
import os
import shlex
import sys
from decimal import Decimal, InvalidOperation

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from core.models.product import Product, ProductInput
from lib.api_client import ApiClient
from lib.api_result import ApiResult
from lib.products_client import ProductsClient


def print_failure(result: ApiResult) -> None:
    print(f"  ! [{result.error_code.value}] {result.error_message}")


def print_product(product: Product) -> None:
    flag = "" if product.is_available else " (unavailable)"
    category = product.category or "-"
    print(f"  #{product.id:<4} {product.name:<28} {product.price:>10}  stock {product.stock:<5} {category}{flag}")


async def run_command(products: ProductsClient, parts: list[str]) -> None:
    command, args = parts[0].lower(), parts[1:]

    if command == "list":
        result = await products.list_products()
        if not result.is_success:
            return print_failure(result)
        for product in result.data:
            print_product(product)
        print(f"  {len(result.data)} products")

    elif command == "show" and len(args) == 1:
        result = await products.get_product(int(args[0]))
        if not result.is_success:
            return print_failure(result)
        print_product(result.data)
        if result.data.description:
            print(f"        {result.data.description}")

    elif command == "add" and len(args) >= 3:
        new_product = ProductInput(
            name=args[0],
            price=Decimal(args[1]),
            stock=int(args[2]),
            category=args[3] if len(args) > 3 else None,
        )
        result = await products.create_product(new_product)
        if not result.is_success:
            return print_failure(result)
        print("  Created:")
        print_product(result.data)

    elif command == "stock" and len(args) == 2:
        product_id = int(args[0])
        current = await products.get_product(product_id)
        if not current.is_success:
            return print_failure(current)
        fields = current.data.model_dump(exclude={"id", "created_at"})
        changes = ProductInput(**{**fields, "stock": int(args[1])})
        result = await products.update_product(product_id, changes)
        if not result.is_success:
            return print_failure(result)
        print_product(result.data)

    elif command == "delete" and len(args) == 1:
        result = await products.delete_product(int(args[0]))
        if not result.is_success:
            return print_failure(result)
        print(f"  Deleted product {args[0]}")

    elif command == "stats":
        result = await products.get_stats()
        if not result.is_success:
            return print_failure(result)
        print(f"  {result.data.model_dump_json(by_alias=True, exclude_none=True, indent=2)}")

    elif command == "categories":
        result = await products.get_categories()
        if not result.is_success:
            return print_failure(result)
        print("  " + ", ".join(result.data))

    elif command == "health":
        result = await products.get_health()
        if not result.is_success:
            return print_failure(result)
        print(f"  {result.data.status} - {result.data.database.product_count} products")

    else:
        print("  Unknown command. Try: list, show, add, stock, delete, stats, categories, health, quit")


async def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive Products API client")
    parser.add_argument("--base-url", default=None, help="API base URL (default: API_BASE_URL)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    args = parser.parse_args()

    api = ApiClient(base_url=args.base_url, default_timeout_seconds=args.timeout)

    print("=" * 60)
    print(f"Products client -> {api.base_url}")
    print("=" * 60)

    async with ProductsClient(api) as products:
        while True:
            try:
                line = input("products> ").strip()
            except (EOFError, KeyboardInterrupt):
                print()
                break

            if not line:
                continue
            if line.lower() in ("quit", "exit", "/quit", "/exit"):
                break

            try:
                await run_command(products, shlex.split(line))
            except (ValueError, InvalidOperation) as e:
                print(f"  ! Invalid input: {e}")


if __name__ == "__main__":
    asyncio.run(main())
