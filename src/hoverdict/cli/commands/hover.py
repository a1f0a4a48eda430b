"""
Hover commands.
"""

import sys
from hoverdict.cli import client


def add_subparser(subparsers):
    # hover
    hover_p = subparsers.add_parser("hover", help="Hover content for a cursor position")
    hover_p.add_argument("line", help="Line of text")
    hover_p.add_argument("character", type=int, help="Cursor column (0-based)")
    hover_p.set_defaults(func=hover)
    
    # resolve
    resolve_p = subparsers.add_parser("resolve", help="Show candidate keys for a word")
    resolve_p.add_argument("text", help="Word under the cursor")
    resolve_p.add_argument("offset", type=int, nargs="?", default=0, help="Cursor offset in the word")
    resolve_p.set_defaults(func=resolve)


def hover(args):
    try:
        result = client.hover(args.line, args.character)
        if result is None:
            print("No content.")
            return
        print(result["contents"]["value"])
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def resolve(args):
    try:
        candidates = client.resolve(args.text, args.offset)
        if not candidates:
            print("No candidates.")
            return
        for c in candidates:
            mark = "✓" if c["found"] else " "
            print(f"{mark} {c['strategy']:10} {c['key']:30} ({c['display']})")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
