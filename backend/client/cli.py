"""
Command-line interface for OrderDesk.

Usage:
    orderdesk login --token <jwt>
    orderdesk dashboard [--profile] [--new]
    orderdesk orders --filter upcoming --sort-by status --order asc
    orderdesk order --date 2099-01-05 --time "10 AM" --location Colombo --product Laptop --quantity 2
    orderdesk profile --contact "+94 77 123 4567" --country "Sri Lanka"
    orderdesk options
    orderdesk logout
"""

import argparse
import asyncio
import logging
import sys
from typing import Awaitable, Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from modules.catalog.models import CatalogOptions
from modules.orders.models import Order
from modules.orders.validation import OrderPolicy
from modules.users.models import UserProfile
from shared.config import get_settings

from .api import OrderDeskClient
from .dashboard import DashboardError, load_dashboard
from .exceptions import APIError, ClientError, SessionExpiredError
from .session import SessionStore
from .state import DashboardState, OrderFormState, OrdersView, ProfileFormState

console = Console()

STATUS_STYLES = {
    "pending": "yellow",
    "processing": "blue",
    "shipped": "magenta",
    "delivered": "green",
}


def _session(args: argparse.Namespace) -> SessionStore:
    return SessionStore(args.session_file or get_settings().session_file)


def _client(args: argparse.Namespace) -> OrderDeskClient:
    settings = get_settings()
    return OrderDeskClient(
        args.api_url or settings.api_base_url,
        _session(args),
        timeout=settings.api_timeout,
    )


def _policy() -> OrderPolicy:
    """The server's delivery policy, so local checks agree with it."""
    return OrderPolicy.from_settings(get_settings())


def _run(args: argparse.Namespace, action: Callable[[OrderDeskClient], Awaitable[int]]) -> int:
    """Run an async action with a client, turning client failures into exit codes."""

    async def runner() -> int:
        async with _client(args) as client:
            return await action(client)

    try:
        return asyncio.run(runner())
    except SessionExpiredError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        console.print("Run [bold]orderdesk login --token <token>[/bold] to sign in.")
        return 1
    except ClientError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        return 1


def _print_failure(message: str, field_errors: dict[str, str]) -> None:
    console.print(f"[red]{escape(message)}[/red]")
    for field, text in field_errors.items():
        console.print(f"  [yellow]{escape(field)}[/yellow]: {escape(text)}")


# =============================================================================
# Rendering
# =============================================================================

# Stored text is HTML-escaped by the server but may still contain rich markup,
# so every user-derived value goes through escape() before rendering.


def render_profile(profile: UserProfile) -> Panel:
    lines = [
        f"[bold]{escape(profile.name)}[/bold] ({escape(profile.username)})",
        f"Email: {escape(profile.email or '-')}",
        f"Contact: {escape(profile.contact_number or '-')}",
        f"Country: {escape(profile.country or '-')}",
    ]
    if profile.last_login:
        lines.append(f"[dim]Last login: {profile.last_login:%Y-%m-%d %H:%M}[/dim]")
    return Panel("\n".join(lines), title="Profile", border_style="blue")


def render_orders(orders: list[Order], title: str = "Orders") -> Table:
    table = Table(title=title)
    table.add_column("Date", style="cyan")
    table.add_column("Time")
    table.add_column("Product")
    table.add_column("Qty", justify="right")
    table.add_column("Location")
    table.add_column("Status")
    table.add_column("Message", overflow="fold")

    for order in orders:
        status = order.status.value
        style = STATUS_STYLES.get(status, "white")
        table.add_row(
            order.purchase_date.isoformat(),
            escape(order.delivery_time),
            escape(order.product_name),
            str(order.quantity),
            escape(order.delivery_location),
            f"[{style}]{status.capitalize()}[/{style}]",
            escape(order.message or ""),
        )
    return table


def render_options(options: CatalogOptions) -> Table:
    table = Table(title="Order Options")
    table.add_column("Delivery times", style="cyan")
    table.add_column("Locations")
    table.add_column("Products")
    rows = max(len(options.delivery_times), len(options.locations), len(options.products))
    for i in range(rows):
        table.add_row(*(
            escape(values[i]) if i < len(values) else ""
            for values in (options.delivery_times, options.locations, options.products)
        ))
    return table


def render_dashboard(state: DashboardState) -> None:
    console.print(f"[bold]Welcome, {escape(state.profile.name)}[/bold]")
    if state.show_profile:
        console.print(render_profile(state.profile))

    if state.active_tab == "new":
        console.print(render_options(state.options))
        console.print("Place an order with [bold]orderdesk order[/bold].")
    elif state.orders:
        console.print(render_orders(state.orders, title="My Orders"))
    else:
        console.print("No orders yet. Create one with [bold]orderdesk order[/bold].")


# =============================================================================
# Commands
# =============================================================================


def cmd_login(args: argparse.Namespace) -> int:
    """Store a bearer credential obtained from the identity provider."""
    token = args.token.strip()
    if not token:
        console.print("[red]Error:[/red] token must not be empty")
        return 1
    session = _session(args)
    session.save(token)
    console.print(f"[green]✓[/green] Session saved to {escape(str(session.path))}")
    return 0


def cmd_logout(args: argparse.Namespace) -> int:
    _session(args).clear()
    console.print("Logged out.")
    return 0


def cmd_dashboard(args: argparse.Namespace) -> int:
    policy = _policy()

    async def action(client: OrderDeskClient) -> int:
        result = await load_dashboard(client)
        if isinstance(result, DashboardError):
            console.print(f"[red]{escape(result.message)}[/red]")
            console.print(f"[dim]{result.hint}[/dim]")
            return 1

        state = result.model_copy(update={
            "orders": OrdersView().apply(result.orders, policy.today()),
        })
        if args.profile:
            state = state.toggle_profile()
        if args.new:
            state = state.select_tab("new")
        render_dashboard(state)
        return 0

    return _run(args, action)


def cmd_orders(args: argparse.Namespace) -> int:
    view = OrdersView().with_filter(args.filter).with_sort_by(args.sort_by)
    if view.sort_order != args.order:
        view = view.toggle_order()
    policy = _policy()

    async def action(client: OrderDeskClient) -> int:
        orders = view.apply(await client.get_orders(), policy.today())
        if not orders:
            console.print("No orders found.")
            return 0
        console.print(render_orders(orders, title=f"Orders ({view.filter})"))
        return 0

    return _run(args, action)


def cmd_order(args: argparse.Namespace) -> int:
    """Submit a new order from the dashboard's new-order tab."""
    policy = _policy()
    form = OrderFormState()
    for name, value in (
        ("purchase_date", args.date),
        ("delivery_time", args.time),
        ("delivery_location", args.location),
        ("product_name", args.product),
        ("quantity", args.quantity),
        ("message", args.message or ""),
    ):
        form = form.with_field(name, value)

    problem = form.precheck(policy.today(), policy.non_delivery_weekday)
    if problem:
        console.print(f"[red]{escape(problem)}[/red]")
        return 1

    async def action(client: OrderDeskClient) -> int:
        dashboard = await load_dashboard(client)
        if isinstance(dashboard, DashboardError):
            console.print(f"[red]{escape(dashboard.message)}[/red]")
            console.print(f"[dim]{dashboard.hint}[/dim]")
            return 1
        dashboard = dashboard.select_tab("new")

        problem = form.check_slot(dashboard.options.delivery_times)
        if problem:
            console.print(f"[red]{escape(problem)}[/red]")
            return 1

        state = form.submitting()
        try:
            order = await client.create_order(state.to_payload())
        except APIError as e:
            state = state.failed(e.message, e.field_errors())
            _print_failure(state.error, state.field_errors)
            return 1

        state = state.succeeded()
        dashboard = dashboard.order_created(order)
        console.print(f"[green]✓[/green] {state.success}")
        render_dashboard(dashboard)
        return 0

    return _run(args, action)


def cmd_profile(args: argparse.Namespace) -> int:
    """Show the profile, or update contact number and country."""

    async def action(client: OrderDeskClient) -> int:
        profile = await client.get_profile()
        if args.contact is None and args.country is None:
            console.print(render_profile(profile))
            return 0

        form = ProfileFormState.from_profile(profile).start_edit()
        if args.contact is not None:
            form = form.with_field("contact_number", args.contact)
        if args.country is not None:
            form = form.with_field("country", args.country)

        form = form.saving_started()
        try:
            updated = await client.update_profile(
                contact_number=args.contact,
                country=args.country,
            )
        except APIError as e:
            form = form.failed(e.message)
            _print_failure(form.error, e.field_errors())
            return 1

        console.print("[green]✓[/green] Profile updated")
        console.print(render_profile(updated))
        return 0

    return _run(args, action)


def cmd_options(args: argparse.Namespace) -> int:
    async def action(client: OrderDeskClient) -> int:
        console.print(render_options(await client.get_options()))
        return 0

    return _run(args, action)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="orderdesk",
        description="Place and track delivery orders.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {settings.app_version}"
    )
    parser.add_argument("--api-url", help=f"API base URL (default: {settings.api_base_url})")
    parser.add_argument("--session-file", help=f"Session file (default: {settings.session_file})")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    login_parser = subparsers.add_parser("login", help="Store a bearer token")
    login_parser.add_argument("--token", required=True, help="Token issued by the identity provider")

    subparsers.add_parser("logout", help="Forget the stored token")
    dashboard_parser = subparsers.add_parser("dashboard", help="Show your orders")
    dashboard_parser.add_argument("--profile", action="store_true", help="Also show your profile")
    dashboard_parser.add_argument("--new", action="store_true", help="Show the new-order options instead of orders")
    subparsers.add_parser("options", help="List delivery times, locations and products")

    orders_parser = subparsers.add_parser("orders", help="List your orders")
    orders_parser.add_argument(
        "--filter", choices=["all", "past", "upcoming"], default="all", help="Which orders to show"
    )
    orders_parser.add_argument(
        "--sort-by", choices=["date", "status"], default="date", help="Sort key (default: date)"
    )
    orders_parser.add_argument(
        "--order", choices=["asc", "desc"], default="desc", help="Sort direction (default: desc)"
    )

    order_parser = subparsers.add_parser("order", help="Place a new order")
    order_parser.add_argument("--date", required=True, help="Purchase date (YYYY-MM-DD)")
    order_parser.add_argument("--time", required=True, help="Delivery time slot, e.g. '10 AM'")
    order_parser.add_argument("--location", required=True, help="Delivery location")
    order_parser.add_argument("--product", required=True, help="Product name")
    order_parser.add_argument("--quantity", "-q", default="1", help="Quantity (default: 1)")
    order_parser.add_argument("--message", "-m", help="Optional note for the delivery")

    profile_parser = subparsers.add_parser("profile", help="Show or update your profile")
    profile_parser.add_argument("--contact", help="New contact number")
    profile_parser.add_argument("--country", help="New country")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    commands = {
        "login": cmd_login,
        "logout": cmd_logout,
        "dashboard": cmd_dashboard,
        "orders": cmd_orders,
        "order": cmd_order,
        "profile": cmd_profile,
        "options": cmd_options,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        return cmd_func(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
