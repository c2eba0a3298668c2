"""Three-way comparison of two sorted word sequences."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class SetComparison:
    """Partition of two sorted sequences.

    Attributes:
        left: Elements only in the left sequence.
        right: Elements only in the right sequence.
        common: Elements present in both.
    """

    left: list[str] = field(default_factory=list)
    right: list[str] = field(default_factory=list)
    common: list[str] = field(default_factory=list)

    @property
    def rhs_is_subset(self) -> bool:
        """Every element of the right sequence is also in the left one."""
        return not self.right

    @property
    def lhs_is_subset(self) -> bool:
        """Every element of the left sequence is also in the right one."""
        return not self.left

    def overlap_ratios(self) -> tuple[float, float]:
        """Return (lratio, rratio).

        lratio is the share of the left sequence found in the right one,
        rratio the share of the right sequence found in the left one.
        An empty side yields 0.0.
        """
        n_common = len(self.common)
        lhs_size = n_common + len(self.left)
        rhs_size = n_common + len(self.right)
        lratio = n_common / lhs_size if lhs_size else 0.0
        rratio = n_common / rhs_size if rhs_size else 0.0
        return lratio, rratio


def set_comparison(lhs: Sequence[str], rhs: Sequence[str]) -> SetComparison:
    """Compare two ascending, duplicate-free sequences in one merge-scan.

    Args:
        lhs: Left sequence, sorted ascending.
        rhs: Right sequence, sorted ascending.

    Returns:
        SetComparison whose three lists are each sorted ascending.
    """
    result = SetComparison()
    i = j = 0
    n, m = len(lhs), len(rhs)

    while i < n and j < m:
        a, b = lhs[i], rhs[j]
        if a < b:
            result.left.append(a)
            i += 1
        elif b < a:
            result.right.append(b)
            j += 1
        else:
            result.common.append(a)
            i += 1
            j += 1

    result.left.extend(lhs[i:])
    result.right.extend(rhs[j:])
    return result
