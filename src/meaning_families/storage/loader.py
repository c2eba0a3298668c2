"""Pick a family storage backend from a file suffix."""

from __future__ import annotations

from pathlib import Path

from meaning_families.constants import EXT_CSV, EXT_JSONL, EXT_PARQUET, EXT_TXT
from meaning_families.storage.backends import (
    CSVFamilyBackend,
    FamilyBackend,
    JsonlFamilyBackend,
    ParquetFamilyBackend,
    TextFamilyBackend,
)

_BACKENDS: dict[str, type[FamilyBackend]] = {
    EXT_TXT: TextFamilyBackend,
    EXT_JSONL: JsonlFamilyBackend,
    EXT_CSV: CSVFamilyBackend,
    EXT_PARQUET: ParquetFamilyBackend,
}


def load_families(source: str | Path) -> list[list[str]]:
    """Load a family collection.

    Supports:
    - .txt: one family per line, words separated by whitespace
    - .jsonl: one JSON array of words per line
    - .csv / .parquet: long format with columns family_id, word

    Args:
        source: Path to the file.

    Returns:
        Families in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the suffix is unknown or the content is malformed.

    Examples:
        >>> families = load_families("data/families.txt")
        >>> families = load_families(Path("data/families.parquet"))
    """
    return get_backend(source).load()


def save_families(families: list[list[str]], source: str | Path) -> None:
    """Save a family collection, choosing the format from the suffix.

    Raises:
        ValueError: If the suffix is unknown.
    """
    get_backend(source).save(families)


def get_backend(source: str | Path) -> FamilyBackend:
    """Get the backend for the given path.

    Raises:
        ValueError: If the suffix is not recognized.
    """
    path = Path(source)
    suffix = path.suffix.lower()
    backend_cls = _BACKENDS.get(suffix)
    if backend_cls is None:
        supported = ", ".join(sorted(_BACKENDS))
        raise ValueError(f"Unsupported family file type '{suffix}' for {path} (expected one of: {supported})")
    return backend_cls(path)
