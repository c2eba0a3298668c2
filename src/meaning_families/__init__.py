"""Consolidate overlapping meaning families into larger, non-redundant ones.

Basic usage:
    >>> from meaning_families import MergeConfig, small_merge
    >>> result = small_merge(families, MergeConfig(minimum_output_size=2))
    >>> result.families, result.stats.merges_performed
"""

from meaning_families.contract import FamilyContractError, assert_family_contract
from meaning_families.merger import (
    MergeConfig,
    MergeResult,
    MergeStats,
    normalize_families,
    small_merge,
)
from meaning_families.set_compare import SetComparison, set_comparison

__version__ = "0.1.0"

__all__ = [
    "FamilyContractError",
    "MergeConfig",
    "MergeResult",
    "MergeStats",
    "SetComparison",
    "assert_family_contract",
    "normalize_families",
    "set_comparison",
    "small_merge",
]
