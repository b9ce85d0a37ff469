#!/usr/bin/env python3
"""
Populates the JSON store with demo data.

Usage:
    python scripts/seed_data.py
    python scripts/seed_data.py --data-dir /tmp/salon-data
"""
import argparse
import os
import sys

# Project root on the path so the salon package imports without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from salon.db.seed import seed_all
from salon.repositories.json_store.factory import create_json_container


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo data")
    parser.add_argument("--data-dir", help="Directory for the JSON files (default: SALON_DATA_DIR)")
    args = parser.parse_args()

    seed_all(create_json_container(args.data_dir))
