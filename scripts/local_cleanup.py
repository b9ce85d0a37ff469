#!/usr/bin/env python3
"""Local Cleanup - deletes the JSON data files.

This script is for LOCAL TESTING ONLY.

Usage:
    python scripts/local_cleanup.py                   # Delete every collection
    python scripts/local_cleanup.py --keep-settings   # Keep calendar settings
"""

import argparse
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from salon.config.env import get_data_dir
from salon.constants.config_keys import Collections

COLLECTIONS = [
    Collections.SERVICES,
    Collections.CUSTOMERS,
    Collections.APPOINTMENTS,
    Collections.SETTINGS,
]


def delete_collections(data_dir: Path, keep_settings: bool = False) -> int:
    """Deletes the collection files in data_dir. Returns how many were removed."""
    removed = 0
    for collection in COLLECTIONS:
        if keep_settings and collection == Collections.SETTINGS:
            continue
        path = data_dir / f"{collection}.json"
        if path.exists():
            path.unlink()
            print(f"   ✓ Deleted {path.name}")
            removed += 1
        else:
            print(f"   - {path.name} not found")
    return removed


def main():
    parser = argparse.ArgumentParser(description="Delete local JSON data")
    parser.add_argument("--data-dir", help="Directory for the JSON files (default: SALON_DATA_DIR)")
    parser.add_argument(
        "--keep-settings",
        action="store_true",
        help="Keep settings.json (calendar preferences)",
    )
    args = parser.parse_args()

    data_dir = Path(args.data_dir) if args.data_dir else get_data_dir()

    print("=" * 70)
    print("LOCAL CLEANUP - Salon Manager")
    print("=" * 70)
    print(f"\n   Data directory: {data_dir}\n")

    delete_collections(data_dir, args.keep_settings)

    print("\n" + "=" * 70)
    print("CLEANUP COMPLETE")
    print("=" * 70)
    print("\nTo recreate: python scripts/seed_data.py")


if __name__ == "__main__":
    main()
