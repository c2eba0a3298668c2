"""Storage backends for family collections."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd

from ..constants import ENCODING_UTF8, FAMILY_COLUMNS, FAMILY_ID, WORD


class FamilyBackend(ABC):
    """Abstract base class for family collection storage.

    A family collection is a ``list[list[str]]``. Order is significant: it
    decides merge precedence, so every backend preserves it.

    **Core Methods (Required):**
        - `load()`: Load all families
        - `save(families)`: Replace the stored collection
        - `exists()`: Check if the source exists
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    @abstractmethod
    def load(self) -> list[list[str]]:
        """Load families.

        Raises:
            FileNotFoundError: If the source doesn't exist.
            ValueError: If the data format is invalid.
        """
        pass

    @abstractmethod
    def save(self, families: list[list[str]]) -> None:
        """Save families, replacing existing content."""
        pass

    def exists(self) -> bool:
        return self.path.exists()

    def _require_path(self) -> None:
        if not self.path.exists():
            raise FileNotFoundError(self.path)

    def _prepare_target(self, families: list[list[str]] | None) -> None:
        if families is None:
            raise ValueError("families must not be None")
        self.path.parent.mkdir(parents=True, exist_ok=True)


class TextFamilyBackend(FamilyBackend):
    """Plain text: one family per line, words separated by whitespace.

    Blank lines load as empty families so that indices stay aligned with the
    file. Words must not contain whitespace.
    """

    def load(self) -> list[list[str]]:
        self._require_path()
        text = self.path.read_text(encoding=ENCODING_UTF8)
        return [line.split() for line in text.splitlines()]

    def save(self, families: list[list[str]]) -> None:
        self._prepare_target(families)
        lines = [" ".join(family) for family in families]
        self.path.write_text("".join(f"{line}\n" for line in lines), encoding=ENCODING_UTF8)


class JsonlFamilyBackend(FamilyBackend):
    """JSON lines: one JSON array of words per line."""

    def load(self) -> list[list[str]]:
        self._require_path()
        families = []
        with open(self.path, encoding=ENCODING_UTF8) as f:
            for line_no, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    data = json.loads(line)
                except json.JSONDecodeError as exc:
                    raise ValueError(f"{self.path}:{line_no}: invalid JSON: {exc}") from exc
                if not isinstance(data, list):
                    raise ValueError(
                        f"{self.path}:{line_no}: expected a JSON array of words, "
                        f"got {type(data).__name__}"
                    )
                bad = [word for word in data if not isinstance(word, str)]
                if bad:
                    raise ValueError(
                        f"{self.path}:{line_no}: words must be JSON strings, got {bad[0]!r}"
                    )
                families.append(data)
        return families

    def save(self, families: list[list[str]]) -> None:
        self._prepare_target(families)
        with open(self.path, "w", encoding=ENCODING_UTF8) as f:
            for family in families:
                f.write(json.dumps(family, ensure_ascii=False) + "\n")


class CSVFamilyBackend(FamilyBackend):
    """CSV in long format: columns family_id, word."""

    def load(self) -> list[list[str]]:
        self._require_path()
        try:
            df = pd.read_csv(
                self.path,
                dtype=str,
                keep_default_na=False,
                encoding=ENCODING_UTF8,
            )
        except pd.errors.EmptyDataError:
            return []
        return frame_to_families(df)

    def save(self, families: list[list[str]]) -> None:
        self._prepare_target(families)
        families_to_frame(families).to_csv(self.path, index=False, encoding=ENCODING_UTF8)


class ParquetFamilyBackend(FamilyBackend):
    """Parquet in long format: columns family_id, word."""

    def load(self) -> list[list[str]]:
        self._require_path()
        return frame_to_families(pd.read_parquet(self.path))

    def save(self, families: list[list[str]]) -> None:
        self._prepare_target(families)
        families_to_frame(families).to_parquet(self.path, index=False)


def families_to_frame(families: list[list[str]]) -> pd.DataFrame:
    """Flatten families into a long DataFrame (one row per word).

    Empty families produce no rows.
    """
    rows = [
        {FAMILY_ID: family_id, WORD: word}
        for family_id, family in enumerate(families)
        for word in family
    ]
    if not rows:
        return pd.DataFrame(columns=FAMILY_COLUMNS)
    return pd.DataFrame(rows, columns=FAMILY_COLUMNS)


def frame_to_families(df: pd.DataFrame) -> list[list[str]]:
    """Group a long DataFrame back into families, in first-seen family order.

    Raises:
        ValueError: If required columns are missing.
    """
    missing = [col for col in FAMILY_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Family data missing columns: {missing}")
    if df.empty:
        return []

    words = df[WORD].astype(str).str.strip()
    words = words[words != ""]
    grouped = words.groupby(df.loc[words.index, FAMILY_ID], sort=False)
    return [group.tolist() for _, group in grouped]
