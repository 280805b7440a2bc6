"""Command line entry point: serve the API, seed demo data, print board status."""

import argparse
import asyncio

from rich.console import Console
from rich.table import Table

from mission_control.backends import InMemoryDocumentStore
from mission_control.client import MissionControl
from mission_control.models import AgentStatus
from mission_control.seed import seed_all
from mission_control.settings import settings
from mission_control.tasks import STATUS_LABELS


async def print_status(mc: MissionControl, console: Console) -> None:
    counts = await mc.views.counts()
    table = Table(title="Task board")
    table.add_column("Column")
    table.add_column("Tasks", justify="right")
    for status, label in STATUS_LABELS.items():
        table.add_row(label, str(getattr(counts, status.value)))
    table.add_row("Total", str(counts.total), style="bold")
    console.print(table)

    agents = await mc.agents.list()
    working = [agent.name for agent in agents if agent.status == AgentStatus.WORKING]
    console.print(f"Agents: {len(agents)} ({len(working)} working)")
    for activity in await mc.activity.list(settings.status_activity_limit):
        console.print(f"  [dim]{activity.type}[/dim] {activity.description}")


async def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    console = Console()
    mc = MissionControl.from_settings()
    if args.command in ("seed", "status") and isinstance(mc.db, InMemoryDocumentStore):
        console.print(
            "[yellow]Warning: using the in-memory store, nothing is shared with a running server "
            "or kept after exit. Set STORE_BACKEND=supabase to use the shared store.[/yellow]"
        )

    if args.command == "seed":
        result = await seed_all(mc)
        console.print(f"Seeded: {result}")
    elif args.command == "status":
        await print_status(mc, console)
    else:
        parser.print_help()


def main() -> None:
    parser = argparse.ArgumentParser(description="Mission Control dashboard backend")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("serve", help="Run the HTTP API")
    subparsers.add_parser("dev", help="Run the HTTP API with hot reload")
    subparsers.add_parser("seed", help="Insert demo data into empty tables")
    subparsers.add_parser("status", help="Print task counts, agents and recent activity")

    args = parser.parse_args()

    # The server modules configure logging and logfire on import
    if args.command == "serve":
        from api.server import run_http

        run_http()
    elif args.command == "dev":
        from api.server import run_dev

        run_dev()
    else:
        asyncio.run(run(args, parser))


if __name__ == "__main__":
    main()
