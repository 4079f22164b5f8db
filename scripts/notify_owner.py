#!/usr/bin/env python3
"""
Send one owner notification through the Forge notification service.

Reads BUILT_IN_FORGE_API_URL / BUILT_IN_FORGE_API_KEY from the environment
(or .env), the same way the API does.

Usage:
    python scripts/notify_owner.py --title "Deploy finished" --content "v1.2 is live"
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Allow running this file directly from repository root.
API_ROOT = Path(__file__).resolve().parents[1] / "api"
if str(API_ROOT) not in sys.path:
    sys.path.insert(0, str(API_ROOT))

from devcore.notifications import NotificationConfigError, NotificationPayload
from devcore.notifications.notifier import notify_owner


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Notify the project owner.")
    parser.add_argument("--title", required=True)
    parser.add_argument("--content", required=True)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        delivered = asyncio.run(
            notify_owner(NotificationPayload(title=args.title, content=args.content))
        )
    except NotificationConfigError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 2

    print("delivered" if delivered else "not delivered")
    return 0 if delivered else 1


if __name__ == "__main__":
    sys.exit(main())
