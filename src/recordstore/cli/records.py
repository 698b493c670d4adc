"""
CLI for inspecting and maintaining record collections.

Operates directly on the JSON stores through the same repositories the
API uses, so locking and atomic writes apply here too.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from recordstore.exceptions import NotFoundError, StorageError
from recordstore.io.writers import atomic_write_csv
from recordstore.logging_setup import setup_logging
from recordstore.repositories.local import LocalFileRepository
from recordstore.resources import RESOURCES, build_search_predicate, get_resource
from recordstore.settings import get_settings

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def export_collection(repo: LocalFileRepository, out: Path) -> int:
    """
    Flatten a collection to CSV.

    Nested mappings become dotted columns (``address.city``); lists such as
    order items are kept as a single cell.

    Returns:
        Number of exported records
    """
    records = repo.list_records()
    df = pd.json_normalize(records) if records else pd.DataFrame(columns=["id"])
    atomic_write_csv(df, out)
    return len(df)


def build_parser() -> argparse.ArgumentParser:
    cfg = get_settings()

    parser = argparse.ArgumentParser(
        description="Inspect and maintain the JSON record collections"
    )
    parser.add_argument(
        "resource",
        choices=sorted(RESOURCES),
        help="Collection to operate on"
    )
    parser.add_argument(
        "--db-dir",
        type=Path,
        default=cfg.db_dir,
        help=f"Directory holding the collection files (default: {cfg.db_dir})"
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: APP_LOG_LEVEL or INFO)")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Print every record")

    show = sub.add_parser("show", help="Print one record by id")
    show.add_argument("record_id")

    find = sub.add_parser("find", help="Search with the resource's search rule")
    find.add_argument("term")

    delete = sub.add_parser("delete", help="Remove one record by id")
    delete.add_argument("record_id")

    export = sub.add_parser("export", help="Write the collection to CSV")
    export.add_argument(
        "--out",
        type=Path,
        default=None,
        help=f"Output CSV path (default: {cfg.exports_dir}/<resource>.csv)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    resource = get_resource(args.resource)
    repo = LocalFileRepository(resource, path=args.db_dir / resource.filename)

    try:
        if args.command == "list":
            _print_json(repo.list_records())

        elif args.command == "show":
            _print_json(repo.get_by_id(args.record_id))

        elif args.command == "find":
            _print_json(list(repo.find(build_search_predicate(resource, args.term))))

        elif args.command == "delete":
            removed = repo.delete(args.record_id)
            logger.info(f"✓ Removed {resource.label.lower()} {removed['id']}")

        elif args.command == "export":
            out = args.out or get_settings().exports_dir / f"{resource.name}.csv"
            count = export_collection(repo, out)
            logger.info(f"✓ Exported {count} {resource.name} to {out}")

        return 0

    except NotFoundError as e:
        logger.warning(str(e))
        return 1
    except StorageError as e:
        logger.error(f"Storage failure: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    exit(main())
