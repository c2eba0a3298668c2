"""Project-wide constants."""

from .columns import FAMILY_COLUMNS, FAMILY_ID, WORD
from .defaults import (
    ENCODING_UTF8,
    ENV_DEBUG_MERGES,
    ENV_DEBUG_SUBSETS,
    ENV_PITHY_FILTER,
    ENV_SMALLMERGE_RATIO,
    NOISE_FAMILY_SIZE,
    PITHY_FILTER_DEFAULT,
    SMALLMERGE_RATIO_DEFAULT,
)
from .files import EXT_CSV, EXT_JSONL, EXT_PARQUET, EXT_TXT

__all__ = [
    "ENCODING_UTF8",
    "ENV_DEBUG_MERGES",
    "ENV_DEBUG_SUBSETS",
    "ENV_PITHY_FILTER",
    "ENV_SMALLMERGE_RATIO",
    "EXT_CSV",
    "EXT_JSONL",
    "EXT_PARQUET",
    "EXT_TXT",
    "FAMILY_COLUMNS",
    "FAMILY_ID",
    "NOISE_FAMILY_SIZE",
    "PITHY_FILTER_DEFAULT",
    "SMALLMERGE_RATIO_DEFAULT",
    "WORD",
]
