"""
MagicDB Constants that cannot be changed and are hardcoded intentionally
"""

import os
import pathlib
from typing import Dict

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("magicdb").joinpath("resources")
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("magicdb.properties")
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("MAGICDB_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)
LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("magicdb_logs")

MANA_COST_FIELD: str = "manaCost"
NAMES_FIELD: str = "names"
LAYOUT_FIELD: str = "layout"

TYPE_LINE_SEPARATOR: str = " — "

SYMBOL_MAP: Dict[str, str] = {
    "White": "W",
    "Blue": "U",
    "Black": "B",
    "Red": "R",
    "Green": "G",
}

# X, Y and Z, in identifier order
ARBITRARY_MANA_LETTERS: str = "XYZ"
