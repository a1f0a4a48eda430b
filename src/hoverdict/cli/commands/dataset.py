"""
Dataset commands.
"""

import sys
from rich import print_json

from hoverdict.cli import client
from hoverdict.config import STORAGE_DIR, dataset_path
from hoverdict.core.dataset import ensure_dataset


def add_subparser(subparsers):
    parser = subparsers.add_parser("dataset", help="Dictionary dataset")
    ds_sub = parser.add_subparsers(dest="dataset_command", required=True)
    
    # fetch
    fetch_p = ds_sub.add_parser("fetch", help="Download the dataset if missing")
    fetch_p.set_defaults(func=dataset_fetch)
    
    # info
    info_p = ds_sub.add_parser("info", help="Show local dataset and server store status")
    info_p.set_defaults(func=dataset_info)


def dataset_fetch(args):
    try:
        path = ensure_dataset(STORAGE_DIR)
        print(f"✓ Dataset: {path}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dataset_info(args):
    path = dataset_path()
    if path.exists():
        print(f"Local: {path} ({path.stat().st_size} bytes)")
    else:
        print(f"Local: {path} (missing)")
    
    try:
        print_json(data=client.store_info())
    except Exception as e:
        print(f"✗ Server: {e}")
        sys.exit(1)
