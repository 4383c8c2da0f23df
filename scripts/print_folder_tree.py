"""Print the folder tree a user sees, with locked folders marked.

Usage:
    python -m scripts.print_folder_tree <email> <password> [--expand-all]
Signs in against BACKEND_API_URL. Without --expand-all only top-level folders
are shown.
"""

import argparse
import asyncio
import sys

from docshare.application.dtos.auth import Credentials
from docshare.application.services.folder_tree import compose_folder_tree, flatten_tree
from docshare.core.config import get_settings
from docshare.domain.exceptions import DocshareException
from docshare.infrastructure.backend import DocumentBackendClient
from docshare.shared.telemetry import setup_logging


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--expand-all", action="store_true")
    args = parser.parse_args(argv)
    setup_logging()

    settings = get_settings()
    client = DocumentBackendClient(
        settings.backend_api_url, timeout=settings.backend_timeout_seconds
    )
    try:
        session = await client.login(args.email, args.password)
        folders = await client.list_folders(Credentials(token=session.token))
    except DocshareException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    finally:
        await client.aclose()

    expanded = {f.id for f in folders} if args.expand_all else set()
    print(f"Folders visible to {session.user.name} ({session.user.role.value}):")
    for node in flatten_tree(compose_folder_tree(folders, expanded)):
        marker = " [locked]" if node.locked else ""
        print(f"{'  ' * node.level}- {node.folder.name}{marker}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
