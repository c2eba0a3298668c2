"""Tests for family storage backends."""

from pathlib import Path

import pandas as pd
import pytest

from meaning_families.constants import FAMILY_ID, WORD
from meaning_families.storage import (
    CSVFamilyBackend,
    JsonlFamilyBackend,
    ParquetFamilyBackend,
    TextFamilyBackend,
    families_to_frame,
    frame_to_families,
    get_backend,
    load_families,
    save_families,
)

FAMILIES = [
    ["cat", "feline", "kitty"],
    ["dog", "hound", "pup", "canine"],
    ["bird"],
]


def test_text_backend_reads_one_family_per_line(tmp_path: Path) -> None:
    path = tmp_path / "families.txt"
    path.write_text("cat  feline kitty\n\ndog\thound\n", encoding="utf-8")

    families = load_families(path)

    assert families == [["cat", "feline", "kitty"], [], ["dog", "hound"]]


def test_text_backend_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "out" / "families.txt"

    save_families(FAMILIES + [[]], path)

    assert path.read_text(encoding="utf-8").splitlines()[0] == "cat feline kitty"
    assert load_families(path) == FAMILIES + [[]]


def test_jsonl_backend_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "families.jsonl"
    families = [["café", "coffee"], [], ["new york", "nyc", "big apple"]]

    JsonlFamilyBackend(path).save(families)

    assert JsonlFamilyBackend(path).load() == families
    assert "café" in path.read_text(encoding="utf-8")


def test_jsonl_backend_rejects_non_array(tmp_path: Path) -> None:
    path = tmp_path / "families.jsonl"
    path.write_text('["a", "b"]\n{"words": ["c"]}\n', encoding="utf-8")

    with pytest.raises(ValueError, match=":2: expected a JSON array"):
        load_families(path)


def test_jsonl_backend_rejects_non_string_words(tmp_path: Path) -> None:
    path = tmp_path / "families.jsonl"
    path.write_text('["a", "b", "c"]\n["a", null, 3]\n', encoding="utf-8")

    with pytest.raises(ValueError, match=":2: words must be JSON strings, got None"):
        load_families(path)


def test_jsonl_backend_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "families.jsonl"
    path.write_text("[\"a\", \n", encoding="utf-8")

    with pytest.raises(ValueError, match="invalid JSON"):
        load_families(path)


def test_csv_backend_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "families.csv"

    CSVFamilyBackend(path).save(FAMILIES)
    loaded = CSVFamilyBackend(path).load()

    assert loaded == FAMILIES
    df = pd.read_csv(path)
    assert list(df.columns) == [FAMILY_ID, WORD]
    assert len(df) == 8


def test_csv_backend_keeps_na_like_words(tmp_path: Path) -> None:
    path = tmp_path / "families.csv"
    path.write_text("family_id,word\n0,null\n0,none\n0,NA\n", encoding="utf-8")

    assert load_families(path) == [["null", "none", "NA"]]


def test_csv_backend_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("")

    assert CSVFamilyBackend(path).load() == []


def test_csv_backend_missing_columns(tmp_path: Path) -> None:
    path = tmp_path / "bad.csv"
    path.write_text("group,lemma\n0,cat\n", encoding="utf-8")

    with pytest.raises(ValueError, match="missing columns"):
        load_families(path)


def test_parquet_backend_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "families.parquet"

    ParquetFamilyBackend(path).save(FAMILIES)

    assert ParquetFamilyBackend(path).load() == FAMILIES


def test_frame_to_families_keeps_first_seen_order() -> None:
    df = pd.DataFrame(
        {
            FAMILY_ID: [5, 2, 5, 2, 9],
            WORD: ["b", "x", "a", "y", " "],
        }
    )

    assert frame_to_families(df) == [["b", "a"], ["x", "y"]]


def test_families_to_frame_skips_empty_families() -> None:
    df = families_to_frame([["a", "b"], [], ["c"]])

    assert df[FAMILY_ID].tolist() == [0, 0, 2]
    assert df[WORD].tolist() == ["a", "b", "c"]
    assert families_to_frame([]).empty


def test_get_backend_by_suffix(tmp_path: Path) -> None:
    assert isinstance(get_backend(tmp_path / "f.txt"), TextFamilyBackend)
    assert isinstance(get_backend(tmp_path / "f.JSONL"), JsonlFamilyBackend)
    assert isinstance(get_backend(str(tmp_path / "f.csv")), CSVFamilyBackend)
    assert isinstance(get_backend(tmp_path / "f.parquet"), ParquetFamilyBackend)


def test_unknown_suffix_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unsupported family file type"):
        load_families(tmp_path / "families.xlsx")


def test_missing_file_raises(tmp_path: Path) -> None:
    backend = TextFamilyBackend(tmp_path / "missing.txt")

    assert not backend.exists()
    with pytest.raises(FileNotFoundError):
        backend.load()


def test_save_none_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="must not be None"):
        save_families(None, tmp_path / "families.txt")
