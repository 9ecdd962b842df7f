from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from airsync.adapters.sheets import ValueRangeFiles
from airsync.adapters.shippo import TrackingStatusFiles
from airsync.app import (
    handle_github_push,
    mirror_swag_inventory,
    record_swag_stock,
    sync_auth_logins,
    sync_inbound_shipments,
    sync_outbound_shipments,
)
from airsync.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from airsync.domain.reconciliation import SyncResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile derived records into Airtable")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-record decisions at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    outbound = subparsers.add_parser(
        "outbound-shipments",
        help="Sync swag request sheet rows into the outbound shipments table",
    )
    outbound.add_argument(
        "--values",
        type=Path,
        nargs="+",
        required=True,
        help="Exported ValueRange JSON file per swag request sheet",
    )

    inbound = subparsers.add_parser(
        "inbound-shipments",
        help="Expand inbound shipments with their tracking status",
    )
    inbound.add_argument(
        "--tracking-dir",
        type=Path,
        required=True,
        help="Directory of captured tracking statuses (<carrier>/<tracking number>.json)",
    )

    subparsers.add_parser("auth-logins", help="Sync Auth0 users into the auth logins table")

    stock = subparsers.add_parser("swag-stock", help="Record the stock count of one swag item")
    stock.add_argument("--item", type=str, required=True, help="Item name")
    stock.add_argument("--size", type=str, required=True, help="Item size")
    stock.add_argument("--stock", type=float, required=True, help="Current stock count")
    stock.add_argument("--barcode", type=str, default="", help="Optional barcode")

    subparsers.add_parser("swag-mirror", help="Copy the swag inventory table into the mirror")

    github = subparsers.add_parser("github-push", help="Evaluate a GitHub push webhook payload")
    github.add_argument(
        "--payload",
        type=Path,
        required=True,
        help="JSON body of the webhook delivery",
    )
    github.add_argument(
        "--event",
        type=str,
        default="push",
        help="Value of the X-GitHub-Event header (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _validate(args: argparse.Namespace) -> None:
    paths: list[Path] = []
    if args.command == "outbound-shipments":
        paths = list(args.values)
    elif args.command == "github-push":
        paths = [args.payload]
    for path in paths:
        if not path.is_file():
            raise ValueError(f"No such file: {path}")
    if args.command == "inbound-shipments" and not args.tracking_dir.is_dir():
        raise ValueError(f"No such directory: {args.tracking_dir}")
    if args.command == "swag-stock" and args.stock < 0:
        raise ValueError("Stock count must be non-negative")


def _log_result(name: str, result: SyncResult) -> None:
    log.info(
        "%s sync finished: created=%s, updated=%s, unchanged=%s, failed=%s",
        name,
        result.created,
        result.updated,
        result.unchanged,
        result.failed,
    )
    for failure in result.failures:
        log.warning(
            "  %s %s failed (%s): %s",
            failure.action,
            failure.key,
            "transient" if failure.transient else "permanent",
            failure.error,
        )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        _validate(parsed_args)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "outbound-shipments":
            result = sync_outbound_shipments(sources=ValueRangeFiles.of(*parsed_args.values))
            _log_result("Outbound shipment", result)
        elif parsed_args.command == "inbound-shipments":
            result = sync_inbound_shipments(
                tracking_lookup=TrackingStatusFiles(parsed_args.tracking_dir)
            )
            _log_result("Inbound shipment", result)
        elif parsed_args.command == "auth-logins":
            _log_result("Auth login", sync_auth_logins())
        elif parsed_args.command == "swag-stock":
            result = record_swag_stock(
                item=parsed_args.item,
                size=parsed_args.size,
                current_stock=parsed_args.stock,
                barcode=parsed_args.barcode,
            )
            _log_result("Swag inventory", result)
        elif parsed_args.command == "swag-mirror":
            mirror_swag_inventory()
        elif parsed_args.command == "github-push":
            decision = handle_github_push(
                parsed_args.payload.read_text(encoding="utf-8"),
                event_name=parsed_args.event,
            )
            log.info("%s", decision.message)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
