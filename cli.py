# cli.py
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests
from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm, Prompt
from rich.table import Table

from sdk.menu_client import MenuClient, validation_errors

console = Console()
c = MenuClient(base_url=os.getenv("MENU_API_URL", "http://127.0.0.1:3000"))

CATEGORIES = ["appetizer", "entree", "dessert", "beverage"]

status_message = "Ready"
item_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_items(items: List[Dict[str, Any]]):
    if not items:
        console.print("[italic yellow]No menu items found[/italic yellow]")
        return

    table = Table(
        title="🍽️ Menu",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", justify="right", width=4)
    table.add_column("Name", style="bold", width=22)
    table.add_column("Category", width=10)
    table.add_column("Price", justify="right", width=8)
    table.add_column("Available", justify="center", width=9)
    table.add_column("Ingredients", width=36)

    for it in items:
        available = "[green]yes[/green]" if it.get("available", True) else "[red]no[/red]"
        table.add_row(
            str(it.get("id", "?")),
            it.get("name", "N/A"),
            it.get("category", "N/A"),
            f"${it.get('price', 0):.2f}",
            available,
            ", ".join(it.get("ingredients", []))
        )
    console.print(table)


def show_errors(errors: List[Dict[str, str]]):
    table = Table(box=box.SIMPLE, header_style="bold red")
    table.add_column("Field", style="bold")
    table.add_column("Problem")
    for e in errors:
        table.add_row(e.get("field", "?"), e.get("message", ""))
    console.print(Panel(table, title="❌ Rejected", border_style="red"))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing what went wrong.
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
    except requests.HTTPError as e:
        errors = validation_errors(e)
        if errors:
            show_errors(errors)
        status_message = f"Error: {e}"
        console.print(show_status(status_message, False))
        return None
    except requests.RequestException as e:
        status_message = f"Error: {e}"
        console.print(show_status(status_message, False))
        return None

    if success_msg:
        status_message = success_msg
        console.print(show_status(success_msg, True))
    return result


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def get_item_completer():
    global item_cache
    if not item_cache:
        item_cache = try_api(c.list_items) or []
    return WordCompleter([str(it.get("id")) for it in item_cache], ignore_case=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_item_id() -> Optional[int]:
    raw = prompt_with_autocomplete("Menu item ID", completer=get_item_completer()).strip()
    try:
        return int(raw)
    except ValueError:
        console.print("[red]Please enter a numeric ID.[/red]")
        return None


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🍔 Restaurant Menu",
        "[bold blue]Menu admin CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, item_cache

    console.clear()
    console.print(create_header())
    item_cache = try_api(c.list_items) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        options = [
            ("1", "📋 List menu", "5", "🔁 Toggle availability"),
            ("2", "ℹ️ Show item by ID", "6", "🗑️ Delete item"),
            ("3", "➕ Add item", "7", "🔄 Reset menu"),
            ("4", "💲 Change price", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Options", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            items = try_api(c.list_items, success_msg="Menu loaded")
            if items is not None:
                item_cache = items
                show_items(items)

        elif choice == "2":
            item_id = ask_item_id()
            if item_id is None:
                continue
            item = try_api(c.get_item, item_id)
            if item is None:
                console.print(f"[yellow]No menu item with ID {item_id}[/yellow]")
            else:
                show_items([item])

        elif choice == "3":
            name = prompt_with_autocomplete("Name")
            description = prompt_with_autocomplete("Description")
            price = ask_float("💰 Price", default=10.0)
            category = prompt_with_autocomplete("🏷️ Category", completer=WordCompleter(CATEGORIES), default="entree")
            raw_ingredients = prompt_with_autocomplete("Ingredients (comma separated)")
            ingredients = [i.strip() for i in raw_ingredients.split(",") if i.strip()]
            available = Confirm.ask("Available now?", default=True)
            created = try_api(
                c.create_item, name, description, price, category, ingredients, available,
                success_msg=f"'{name}' added to the menu"
            )
            if created:
                show_items([created])
                item_cache = try_api(c.list_items) or []

        elif choice == "4":
            item_id = ask_item_id()
            if item_id is None:
                continue
            price = ask_float("💰 New price", default=10.0)
            updated = try_api(c.update_item, item_id, price=price, success_msg=f"Price of item {item_id} updated")
            if updated:
                show_items([updated])

        elif choice == "5":
            item_id = ask_item_id()
            if item_id is None:
                continue
            current = try_api(c.get_item, item_id)
            if current is None:
                console.print(f"[yellow]No menu item with ID {item_id}[/yellow]")
                continue
            updated = try_api(
                c.update_item, item_id, available=not current.get("available", True),
                success_msg=f"Availability of item {item_id} toggled"
            )
            if updated:
                show_items([updated])

        elif choice == "6":
            item_id = ask_item_id()
            if item_id is None:
                continue
            if Confirm.ask(f"[red]Delete item {item_id}?[/red]"):
                resp = try_api(c.delete_item, item_id)
                if resp is None:
                    console.print(f"[yellow]No menu item with ID {item_id}[/yellow]")
                else:
                    console.print(show_status(f"Deleted '{resp['item']['name']}'", True))
                    item_cache = []

        elif choice == "7":
            if Confirm.ask("[red]This restores the starting menu. Continue?[/red]"):
                try_api(c.reset, success_msg="Menu reset")
                item_cache = []

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
