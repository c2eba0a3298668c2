"""Smallmerge: consolidate overlapping meaning families.

Upstream expansion produces many small families that overlap heavily. This
module folds them into fewer, larger families:

- families of exactly two words are dropped before any comparison
- a family fully contained in another is cleared (subset elimination)
- two families whose overlap covers at least ``similarity_threshold`` of
  either side are merged, the later one into the earlier one
- families with ``minimum_output_size`` words or fewer are left out of the
  output (pithy filter)

The procedure is greedy and depends on input order. Input lists are mutated
in place; the surviving families are returned as copies together with
per-call statistics.
"""

from __future__ import annotations

import bisect
import logging
import math
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field

from meaning_families.constants import (
    ENV_DEBUG_MERGES,
    ENV_DEBUG_SUBSETS,
    ENV_PITHY_FILTER,
    ENV_SMALLMERGE_RATIO,
    NOISE_FAMILY_SIZE,
    PITHY_FILTER_DEFAULT,
    SMALLMERGE_RATIO_DEFAULT,
)
from meaning_families.contract import assert_family_contract
from meaning_families.set_compare import set_comparison

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass
class MergeConfig:
    """Smallmerge settings.

    Args:
        similarity_threshold: Minimum overlap ratio, on either side, that
            triggers a merge. Above 1.0 no ratio merge can happen and only
            subset elimination runs; 0.0 merges any two families.
        minimum_output_size: Families with this many words or fewer are
            dropped from the output.
        trace_subsets: Log each subset elimination at DEBUG level.
        trace_merges: Log each similarity merge at DEBUG level.
    """

    similarity_threshold: float = SMALLMERGE_RATIO_DEFAULT
    minimum_output_size: int = PITHY_FILTER_DEFAULT
    trace_subsets: bool = False
    trace_merges: bool = False

    def __post_init__(self) -> None:
        if math.isnan(self.similarity_threshold):
            raise ValueError("similarity_threshold must be a number, got NaN")
        if self.minimum_output_size < 0:
            raise ValueError(
                f"minimum_output_size must be >= 0, got {self.minimum_output_size}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MergeConfig:
        """Build a config from environment variables, falling back to defaults.

        Reads SMALLMERGE_RATIO, PITHY_FILTER, SMALLMERGE_DEBUG_SUBSETS and
        SMALLMERGE_DEBUG_MERGES.

        Raises:
            ValueError: If a variable is set to an unparsable value.
        """
        env = os.environ if environ is None else environ
        return cls(
            similarity_threshold=_env_float(env, ENV_SMALLMERGE_RATIO, SMALLMERGE_RATIO_DEFAULT),
            minimum_output_size=_env_int(env, ENV_PITHY_FILTER, PITHY_FILTER_DEFAULT),
            trace_subsets=_env_bool(env, ENV_DEBUG_SUBSETS),
            trace_merges=_env_bool(env, ENV_DEBUG_MERGES),
        )


@dataclass
class MergeStats:
    """Counters for a single smallmerge call."""

    input_families: int = 0
    pairs_destroyed: int = 0
    subsets_eliminated: int = 0
    merges_performed: int = 0
    output_families: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class MergeResult:
    """Surviving families (copies, input order) and call statistics."""

    families: list[list[str]] = field(default_factory=list)
    stats: MergeStats = field(default_factory=MergeStats)


@dataclass
class _Slot:
    """A family in the working set: live, or merged into another family."""

    index: int
    words: list[str]
    merged: bool = False

    @property
    def active(self) -> bool:
        return not self.merged and bool(self.words)

    def mark_merged(self) -> None:
        self.words.clear()
        self.merged = True


def normalize_families(families: list[list[str]]) -> int:
    """Sort and de-duplicate every family in place, clearing two-word families.

    Running this twice gives the same result as running it once.

    Returns:
        Number of families cleared by the two-word rule.
    """
    destroyed = 0
    for family in families:
        # Size is checked after de-duplication so that a second pass is a no-op.
        family[:] = sorted(set(family))
        if len(family) == NOISE_FAMILY_SIZE:
            family.clear()
            destroyed += 1
    return destroyed


def small_merge(
    families: list[list[str]],
    config: MergeConfig | None = None,
) -> MergeResult:
    """Merge overlapping families and filter out pithy ones.

    Args:
        families: Family collection. Mutated in place: families are sorted,
            cleared when destroyed or absorbed, and grown when they absorb.
        config: Merge settings. If None, read from the environment at call
            time (see MergeConfig.from_env).

    Returns:
        MergeResult with copies of the surviving families in input order.

    Raises:
        FamilyContractError: If families is not a list of lists of str.
    """
    assert_family_contract(families)
    if config is None:
        config = MergeConfig.from_env()

    stats = MergeStats(input_families=len(families))
    stats.pairs_destroyed = normalize_families(families)

    slots = [_Slot(index=i, words=family) for i, family in enumerate(families)]
    _reduce(slots, config, stats)

    output = [
        list(slot.words) for slot in slots if len(slot.words) > config.minimum_output_size
    ]
    stats.output_families = len(output)

    logger.info(
        f"Smallmerge: {stats.input_families} families -> {stats.output_families} "
        f"(pairs destroyed={stats.pairs_destroyed}, subsets={stats.subsets_eliminated}, "
        f"merges={stats.merges_performed}, ratio={config.similarity_threshold}, "
        f"pithy={config.minimum_output_size})"
    )
    return MergeResult(families=output, stats=stats)


def _reduce(slots: list[_Slot], config: MergeConfig, stats: MergeStats) -> None:
    """Pairwise subset elimination and similarity merging.

    Each anchor is compared with every later live family. Whenever the
    anchor absorbs another family its scan restarts, since families it
    already passed over may now qualify.
    """
    trace_subsets = config.trace_subsets and logger.isEnabledFor(logging.DEBUG)
    trace_merges = config.trace_merges and logger.isEnabledFor(logging.DEBUG)
    threshold = config.similarity_threshold

    for i, anchor in enumerate(slots):
        changed = True
        while changed and anchor.active:
            changed = False
            for other in slots[i + 1 :]:
                if not other.active:
                    continue

                comparison = set_comparison(anchor.words, other.words)

                if comparison.rhs_is_subset:
                    if trace_subsets:
                        _trace_pair(f"{other.index} is a subset of {anchor.index}", anchor, other)
                    stats.subsets_eliminated += 1
                    other.mark_merged()
                    continue

                if comparison.lhs_is_subset:
                    if trace_subsets:
                        _trace_pair(f"{anchor.index} is a subset of {other.index}", anchor, other)
                    stats.subsets_eliminated += 1
                    anchor.mark_merged()
                    break

                lratio, rratio = comparison.overlap_ratios()
                if lratio >= threshold or rratio >= threshold:
                    if trace_merges:
                        _trace_pair(
                            f"smallmerge: {other.index} into {anchor.index} "
                            f"(lratio={lratio:.2f}, rratio={rratio:.2f})",
                            anchor,
                            other,
                        )
                    _absorb(anchor.words, other.words)
                    other.mark_merged()
                    stats.merges_performed += 1
                    if trace_merges:
                        _trace_pair("post merge", anchor, other)
                    changed = True
                    break


def _absorb(target: list[str], source: list[str]) -> None:
    """Insert the words of source missing from target, keeping target sorted."""
    for word in source:
        pos = bisect.bisect_left(target, word)
        if pos == len(target) or target[pos] != word:
            target.insert(pos, word)


def _trace_pair(message: str, lhs: _Slot, rhs: _Slot) -> None:
    logger.debug(message)
    logger.debug(f"  lhs = {{ {', '.join(lhs.words)} }}")
    logger.debug(f"  rhs = {{ {', '.join(rhs.words)} }}")


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_bool(env: Mapping[str, str], name: str) -> bool:
    raw = env.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag (1/0, true/false), got {raw!r}")
