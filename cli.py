# cli.py
import argparse
import sys
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from product_api import config
from sdk.products import ProductClient

console = Console()

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Products",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=14)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("Stock", justify="right", width=8)

    for p in products:
        price = p.get("price")
        table.add_row(
            str(p.get("id", "N/A")),
            str(p.get("name", "N/A")),
            str(p.get("description", "")),
            f"{price:.2f}" if isinstance(price, (int, float)) else str(price),
            str(p.get("category", "N/A")),
            str(p.get("stock", 0)),
        )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner. On failure the error is
    shown in a status panel and None is returned.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


# ---------------------------
# Interactive menu
# ---------------------------
def get_product_completer(c: ProductClient):
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []
    return WordCompleter([str(p.get("id")) for p in product_cache], ignore_case=True)


def ask_number(message: str, default: str = "0") -> float:
    while True:
        raw = Prompt.ask(message, default=default)
        try:
            value = float(raw)
            return int(value) if value.is_integer() and "." not in raw else value
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None):
    current = current or {}
    name = Prompt.ask("Name", default=str(current.get("name", "")))
    description = Prompt.ask("Description", default=str(current.get("description", "")))
    price = ask_number("Price", default=str(current.get("price", 0)))
    category = Prompt.ask("Category", default=str(current.get("category", "")))
    stock = ask_number("Stock", default=str(current.get("stock", 0)))
    return name, description, price, category, stock


def ask_product_id(c: ProductClient) -> Optional[int]:
    raw = prompt("Product ID ", completer=get_product_completer(c), style=custom_style).strip()
    try:
        return int(raw)
    except ValueError:
        console.print(show_status(f"'{raw}' is not a product id", False))
        return None


def menu(c: ProductClient):
    global product_cache

    console.clear()
    console.print(Panel("[bold blue]Product Store CLI[/bold blue]", style="bold blue"))

    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in (("1", "📦 List products"), ("2", "➕ Create product"),
                    ("3", "✏️ Update product"), ("4", "🗑️ Delete product"), ("q", "👋 Quit")):
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt("Choose an option ", completer=WordCompleter(["1", "2", "3", "4", "q"]),
                        style=custom_style).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded")
            if products is not None:
                product_cache = products
                show_products(products)

        elif choice == "2":
            fields = ask_product_fields()
            created = try_api(c.create_product, *fields, success_msg=f"Product '{fields[0]}' created")
            if created:
                show_products([created])
                product_cache = []

        elif choice == "3":
            pid = ask_product_id(c)
            if pid is not None:
                current = try_api(c.get_product, pid)
                if current is None:
                    console.print(show_status(f"Product {pid} not found", False))
                else:
                    fields = ask_product_fields(current)
                    updated = try_api(c.update_product, pid, *fields, success_msg=f"Product {pid} updated")
                    if updated:
                        show_products([updated])
                        product_cache = []

        elif choice == "4":
            pid = ask_product_id(c)
            if pid is not None and Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                product_cache = []

        elif choice.lower() in ("q", "quit", "exit"):
            console.print(Panel.fit("[bold green]Bye 👋[/bold green]", title="Goodbye"))
            return

        console.print()
        console.rule(style="dim")


# ---------------------------
# Argument parsing
# ---------------------------
def _add_product_fields(p: argparse.ArgumentParser):
    p.add_argument("--name", required=True, help="Product name")
    p.add_argument("--description", required=True, help="Product description")
    p.add_argument("--price", type=float, required=True, help="Unit price")
    p.add_argument("--category", required=True, help="Product category")
    p.add_argument("--stock", type=int, required=True, help="Units in stock")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Product Store CLI")
    parser.add_argument("--url", default=config.PRODUCTS_API_URL, help="Base URL of the product API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all products")

    cp = subparsers.add_parser("create", help="Create a product")
    _add_product_fields(cp)

    up = subparsers.add_parser("update", help="Replace a product by id")
    up.add_argument("--id", type=int, required=True, help="Product id")
    _add_product_fields(up)

    dp = subparsers.add_parser("delete", help="Delete a product by id")
    dp.add_argument("--id", type=int, required=True, help="Product id")

    subparsers.add_parser("menu", help="Interactive menu")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    c = ProductClient(base_url=args.url)

    if args.command == "list":
        products = try_api(c.list_products)
        if products is None:
            return 1
        show_products(products)

    elif args.command == "create":
        created = try_api(c.create_product, args.name, args.description, args.price, args.category,
                          args.stock, success_msg="Product created")
        if created is None:
            return 1
        show_products([created])

    elif args.command == "update":
        updated = try_api(c.update_product, args.id, args.name, args.description, args.price,
                          args.category, args.stock, success_msg=f"Product {args.id} updated")
        if updated is None:
            return 1
        show_products([updated])

    elif args.command == "delete":
        try_api(c.delete_product, args.id, success_msg=f"Product {args.id} deleted")
        if status_message.startswith("Error"):
            return 1

    elif args.command == "menu":
        menu(c)

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
