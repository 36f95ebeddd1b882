# chancellor/__main__.py
"""
Load an asset directory headlessly and list what each file became.

    python -m chancellor assets --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import List, Optional

from chancellor import APPLICATION_TITLE, __version__
from chancellor.assets import AssetRootNotFoundError, AssetStore, NullBackend


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="chancellor", description="List the assets found under ROOT."
    )
    parser.add_argument("root", help="asset directory to load")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    store = AssetStore(NullBackend())
    try:
        store.load_assets(args.root)
    except AssetRootNotFoundError as e:
        print(f"{APPLICATION_TITLE} {__version__}: {e}", file=sys.stderr)
        return 1

    try:
        for key, kind in store.summary():
            print(f"{key} -> {kind}")
    finally:
        store.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
