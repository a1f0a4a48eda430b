"""
hoverdict CLI.
"""

import argparse
from hoverdict.cli.commands import dataset, hover, lookup


def main():
    parser = argparse.ArgumentParser(prog="hoverdict", description="English-Chinese hover dictionary")
    subparsers = parser.add_subparsers(dest="command")
    
    hover.add_subparser(subparsers)
    lookup.add_subparser(subparsers)
    dataset.add_subparser(subparsers)
    
    args = parser.parse_args()
    
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
