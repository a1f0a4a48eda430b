"""
Lookup command.
"""

import sys
from rich import print_json

from hoverdict.cli import client
from hoverdict.config import STORAGE_DIR
from hoverdict.core.dataset import ensure_dataset
from hoverdict.core.format import render_doc
from hoverdict.core.store import DictionaryStore


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Look up a word")
    parser.add_argument("word", help="Word to look up")
    parser.add_argument("--local", action="store_true", help="Load the dataset here instead of asking the server")
    parser.add_argument("--json", action="store_true", help="Print the raw record")
    parser.set_defaults(func=lookup)


def lookup_local(word: str) -> dict | None:
    store = DictionaryStore()
    store.initialize(ensure_dataset(STORAGE_DIR))
    record = store.lookup(word)
    if record is None:
        return None
    return {"word": word, **record.to_dict(), "markdown": render_doc(word, record)}


def lookup(args):
    try:
        result = lookup_local(args.word) if args.local else client.get_word(args.word)
        if result is None:
            print(f"✗ Not found: {args.word}")
            sys.exit(1)
        if args.json:
            print_json(data=result)
        else:
            print(result["markdown"])
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
