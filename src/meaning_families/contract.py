"""Input invariants for family collections: fail before any mutation.

A family collection must be a list of lists of strings. Anything else cannot
be sorted or compared reliably, so it is rejected up front rather than
producing an arbitrary clustering.

Actionable: every raise includes "How to fix" hint.
"""

from __future__ import annotations

from typing import Any


class FamilyContractError(ValueError):
    """Raised when a family collection violates the input contract."""

    def __init__(self, message: str, hint: str) -> None:
        self.hint = hint
        super().__init__(f"{message} How to fix: {hint}")


def assert_family_contract(families: Any) -> None:
    """Raise FamilyContractError if families is not a list of lists of str.

    Args:
        families: Candidate family collection. An empty list is valid.
    """
    if not isinstance(families, list):
        raise FamilyContractError(
            f"Family collection must be a list, got {type(families).__name__}.",
            "Pass a list of families (list[list[str]]); families are mutated in place.",
        )

    for i, family in enumerate(families):
        if not isinstance(family, list):
            raise FamilyContractError(
                f"Family at index {i} is not a list (got {type(family).__name__}).",
                "Convert each family to a list of words, e.g. list(words).",
            )
        for word in family:
            if not isinstance(word, str):
                raise FamilyContractError(
                    f"Family at index {i} contains non-string word {word!r}.",
                    "Families hold words only; cast or drop non-string values when loading.",
                )
