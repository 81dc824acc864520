#!/usr/bin/env python3
"""
CLI for fleet maintenance requests.

Commands:
  tasks     - List maintenance tasks a request can reference
  request   - Submit a new maintenance request for a task
  requests  - List submitted maintenance requests
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

import config
from models import (
    LoadStatus,
    MaintenanceRequestWorkflow,
    MaintenanceTask,
    RequestRecord,
    SubmitStatus,
    load_fleet,
)
from services import make_backend
from services.yaml_store import fleet_path

# =============================================================================
# Formatting helpers
# =============================================================================


def format_created(record: RequestRecord) -> str:
    """Format a request's creation time for display."""
    if record.created is None:
        return "-"
    return record.created.strftime("%Y-%m-%d %H:%M")


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def make_tasks_table(
    tasks: List[MaintenanceTask], selected_id: Optional[str] = None
) -> List[List[str]]:
    """Convert tasks to table rows, marking the selected one."""
    rows = []
    for task in tasks:
        rows.append(
            [
                "*" if task.id == selected_id else "",
                task.id,
                truncate(task.task_name, 40),
                f"Every {task.interval_description}",
            ]
        )
    return rows


def make_requests_table(records: List[RequestRecord], fleet) -> List[List[str]]:
    """Convert request records to table rows."""
    rows = []
    for record in records:
        # Fall back to the task id if the task was removed from the catalog
        task = fleet.get_task(record.maintenance_task_id)
        rows.append(
            [
                format_created(record),
                record.id,
                task.label if task else record.maintenance_task_id,
                record.status,
            ]
        )
    return rows


def build_workflow(args) -> MaintenanceRequestWorkflow:
    catalog, request_service = make_backend(
        args.fleet_dir, args.pocketbase, timeout=config.POCKETBASE_TIMEOUT
    )
    return MaintenanceRequestWorkflow(catalog, request_service)


def print_load_problem(workflow: MaintenanceRequestWorkflow) -> int:
    """Print why tasks are not selectable. Returns exit code."""
    view = workflow.get_view_state()
    if view.load.status == LoadStatus.FAILED:
        print(f"Error: {view.load.message}")
    else:
        print(
            "No maintenance tasks defined for this truck. "
            "Please add maintenance tasks first."
        )
    return 1


# =============================================================================
# Tasks command
# =============================================================================


async def cmd_tasks(args):
    """List maintenance tasks a request can reference."""
    workflow = build_workflow(args)
    await workflow.initialize(args.fleet_id)

    print(f"Truck: {args.fleet_id}")
    if workflow.get_view_state().load.status != LoadStatus.LOADED:
        return print_load_problem(workflow)

    selection = workflow.selection
    print(f"Tasks: {len(selection.candidates)}")
    print()

    headers = ["", "ID", "Task", "Interval"]
    print(
        tabulate(
            make_tasks_table(selection.candidates, selection.selected_id),
            headers=headers,
            tablefmt="simple",
        )
    )
    print()
    print("* default selection")

    return 0


# =============================================================================
# Request command
# =============================================================================


async def cmd_request(args):
    """Submit a new maintenance request for a task."""
    workflow = build_workflow(args)
    await workflow.initialize(args.fleet_id)

    if workflow.get_view_state().load.status != LoadStatus.LOADED:
        return print_load_problem(workflow)

    if args.task and not workflow.select_task(args.task):
        print(f"Error: Unknown maintenance task '{args.task}'")
        print("\nAvailable tasks:")
        for task in workflow.selection.candidates:
            print(f"  {task.label}")
            print(f"    ID: {task.id}")
        return 1

    view = workflow.get_view_state()
    print(f"New maintenance request for {args.fleet_id}:")
    print(f"  Task:   {view.selection.selected_label}")
    print("  Status: pending")
    print()

    if args.dry_run:
        print("(dry run - no request submitted)")
        return 0

    state = await workflow.submit()
    if state.status == SubmitStatus.SUCCEEDED:
        print("Maintenance request submitted successfully")
        if state.record is not None:
            print(f"  Request ID: {state.record.id}")
        return 0

    print(f"Error: {state.message or 'Failed to submit maintenance request'}")
    return 1


# =============================================================================
# Requests command
# =============================================================================


def cmd_requests(args):
    """List submitted maintenance requests."""
    if args.pocketbase:
        print("Error: requests listing is only available for fleet YAML files")
        return 1

    path = fleet_path(args.fleet_dir, args.fleet_id)
    if not path.exists():
        print(f"Error: File not found: {path}")
        return 1

    fleet = load_fleet(path)
    records = sorted(
        fleet.requests,
        key=lambda r: r.created.isoformat() if r.created else "",
        reverse=not args.asc,
    )
    if args.task:
        records = [r for r in records if r.maintenance_task_id == args.task]

    print(f"Truck: {fleet.display_name}")
    print(f"Total requests: {len(fleet.requests)}")
    if args.task:
        print(f"Showing: {len(records)} (filtered)")
    print()

    if not records:
        print("No maintenance requests found.")
        return 0

    headers = ["Created", "ID", "Task", "Status"]
    print(tabulate(make_requests_table(records, fleet), headers=headers, tablefmt="simple"))

    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fleet maintenance requests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s truck-1 tasks
  %(prog)s truck-1 request
  %(prog)s truck-1 request --task t2
  %(prog)s truck-1 request --task t2 --dry-run
  %(prog)s truck-1 requests --task t1
  %(prog)s --pocketbase http://127.0.0.1:8090 truck-1 request
""",
    )
    parser.add_argument(
        "fleet_id",
        type=str,
        help="Truck / fleet id (fleet YAML file name without extension)",
    )
    parser.add_argument(
        "--fleet-dir",
        type=Path,
        default=config.FLEET_DIR,
        help="Directory of fleet YAML files (default: FLEET_DIR or ./fleet)",
    )
    parser.add_argument(
        "--pocketbase",
        type=str,
        default=config.POCKETBASE_URL,
        help="PocketBase server URL (default: POCKETBASE_URL; unset uses YAML files)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Tasks subcommand
    subparsers.add_parser("tasks", help="List maintenance tasks for the truck")

    # Request subcommand
    request_parser = subparsers.add_parser(
        "request", help="Submit a new maintenance request"
    )
    request_parser.add_argument(
        "--task",
        type=str,
        help="Task id to request (default: first task)",
    )
    request_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be submitted without submitting",
    )

    # Requests subcommand
    requests_parser = subparsers.add_parser(
        "requests", help="List submitted maintenance requests"
    )
    requests_parser.add_argument(
        "--task",
        type=str,
        help="Filter to requests for a task id",
    )
    requests_parser.add_argument(
        "--asc",
        action="store_true",
        help="Sort oldest first instead of newest first",
    )

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to command handler
    if args.command == "tasks":
        return asyncio.run(cmd_tasks(args))
    elif args.command == "request":
        return asyncio.run(cmd_request(args))
    elif args.command == "requests":
        return cmd_requests(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
