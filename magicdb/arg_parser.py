"""
MagicDB Arg Parser to determine what actions to take
"""

import argparse
import pathlib
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments from user to determine which catalog
    to load and what to do with it.
    :param argv: Arguments to parse, defaults to sys.argv
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("magicdb")

    parser.add_argument(
        "catalog",
        type=pathlib.Path,
        metavar="CATALOG",
        help="MTGJSON card catalog to load (card name => card object).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=pathlib.Path,
        default=None,
        metavar="PATH",
        help="Write the validated, normalized catalog to PATH.",
    )
    parser.add_argument(
        "--pretty",
        "-p",
        action="store_true",
        help="Indent the output file. Defaults to the [Output] pretty config value.",
    )
    parser.add_argument(
        "--card",
        "-n",
        action="append",
        default=[],
        metavar="NAME",
        help="Print the normalized JSON of a card. May be given more than once.",
    )

    return parser.parse_args(argv)
