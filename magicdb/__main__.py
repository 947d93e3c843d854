"""
MagicDB Main Executor
"""

import logging
import sys
from typing import List, Optional

import orjson

from magicdb.arg_parser import parse_args
from magicdb.catalog_builder import load_from_reader, summarize_catalog
from magicdb.errors import CatalogBuildError
from magicdb.magicdb_config import MagicdbConfig
from magicdb.serialize import card_to_json, dump_catalog, index_face_keys
from magicdb.utils import init_logger

LOGGER: logging.Logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    MagicDB Main Executor
    :param argv: Command line arguments, defaults to sys.argv
    :return: Process exit status
    """
    args = parse_args(argv)
    init_logger()
    config = MagicdbConfig()

    LOGGER.info(f"MagicDB {config.magicdb_version}: loading {args.catalog}")
    try:
        with args.catalog.open("rb") as catalog_file:
            catalog = load_from_reader(catalog_file)
    except OSError as error:
        LOGGER.error(f"Unable to read {args.catalog}: {error}")
        return 1
    except CatalogBuildError as error:
        LOGGER.error(f"Unable to load {args.catalog}: {error}")
        return 1

    for kind, count in summarize_catalog(catalog).items():
        LOGGER.info(f"{kind}: {count}")

    face_keys = index_face_keys(catalog)
    for card_name in args.card:
        if card_name not in catalog:
            LOGGER.warning(f"{card_name} not found in {args.catalog}")
            continue
        card_json = card_to_json(catalog[card_name], face_keys)
        print(orjson.dumps(card_json, option=orjson.OPT_INDENT_2).decode())

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_bytes(
            dump_catalog(catalog, pretty=args.pretty or config.output_pretty)
        )
        LOGGER.info(f"Wrote {len(catalog)} cards to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
