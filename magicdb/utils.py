"""
MagicDB simple utilities
"""

import logging
import os
import time

from . import constants

LOGGER = logging.getLogger(__name__)


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")

    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get("MAGICDB_DEBUG", "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"magicdb_{start_time}.log"))
            ),
        ],
    )


def to_camel_case(snake_str: str) -> str:
    """
    Convert "snake_case" => "camelCase"
    :param snake_str: Snake String
    :return: Camel String
    """
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
