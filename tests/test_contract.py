"""Tests for meaning_families.contract."""

from __future__ import annotations

import pytest

from meaning_families.contract import FamilyContractError, assert_family_contract


def test_valid_collection_passes() -> None:
    assert_family_contract([["a", "b", "c"], [], ["x"]])
    assert_family_contract([])


def test_collection_must_be_list() -> None:
    with pytest.raises(FamilyContractError, match="must be a list"):
        assert_family_contract((["a"],))


def test_family_must_be_list() -> None:
    with pytest.raises(FamilyContractError, match="index 1"):
        assert_family_contract([["a"], {"b", "c"}])


def test_words_must_be_strings() -> None:
    with pytest.raises(FamilyContractError, match="non-string word 3"):
        assert_family_contract([["a", "b"], ["c", 3]])


def test_error_is_value_error_with_hint() -> None:
    with pytest.raises(ValueError) as excinfo:
        assert_family_contract("cat dog")

    assert isinstance(excinfo.value, FamilyContractError)
    assert "How to fix:" in str(excinfo.value)
    assert excinfo.value.hint
