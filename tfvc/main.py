import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from tfvc.core.config import get_settings
from tfvc.core.exceptions import TfvcError
from tfvc.schemas.server_context import ServerContext
from tfvc.services.commands import StatusCommand
from tfvc.services.runner import TfvcRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfvc-status", description="Show TFVC pending changes as JSON"
    )
    parser.add_argument("paths", nargs="*", help="Local paths to restrict the status to")
    parser.add_argument("--collection", help="Team project collection URL")
    parser.add_argument("--username", help="User name for the collection")
    parser.add_argument("--password", help="Password or personal access token")
    parser.add_argument(
        "--ignore-folders", action="store_true", help="Leave out folders that exist locally"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    server_context = None
    if args.collection:
        server_context = ServerContext(
            collection_url=args.collection,
            username=args.username,
            password=args.password,
        )
    command = StatusCommand(server_context, args.ignore_folders, args.paths)

    try:
        changes = asyncio.run(TfvcRunner(settings).run(command))
    except TfvcError as e:
        logging.getLogger(__name__).error(str(e))
        return 1

    json.dump([change.model_dump(by_alias=True) for change in changes], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
