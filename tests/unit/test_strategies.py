"""Unit tests for the shortcut search strategies."""

import re

import pytest

from tamer.contexts.shortcuts import (
    SearchState,
    column_aligned,
    default_strategies,
    first_free,
    shared_prefix_word,
)

ALNUM = re.compile("[a-zA-Z0-9]")


@pytest.mark.unit
def test_search_state_setup():
    state = SearchState.for_words(["test_unit", "test", "test_e2e"], ALNUM)

    assert state.words == ["test", "test_e2e", "test_unit"]
    assert state.shared_prefix == "test"
    assert state.max_length == 9
    assert state.start_index("test") == 0
    assert state.start_index("test_unit") == 4


@pytest.mark.unit
def test_column_uniqueness():
    state = SearchState.for_words(["abc", "abd", "xbc"], ALNUM)

    assert state.is_column_unique("xbc", 0)
    assert not state.is_column_unique("abc", 0)
    assert not state.is_column_unique("abc", 1)
    assert state.is_column_unique("abd", 2)


@pytest.mark.unit
def test_key_variants_order_and_filtering():
    state = SearchState.for_words(["a"], ALNUM)

    assert list(state.key_variants("a")) == ["a", "A"]
    assert list(state.key_variants("-")) == []

    state.taken.add("a")
    assert list(state.key_variants("a")) == ["A"]


@pytest.mark.unit
def test_key_variants_without_case_fold():
    state = SearchState.for_words(["a"], ALNUM, case_fold=False)

    assert list(state.key_variants("a")) == ["a"]


@pytest.mark.unit
def test_shared_prefix_word_strategy():
    state = SearchState.for_words(["test", "test_unit"], ALNUM)

    candidate = shared_prefix_word(state)

    assert (candidate.word, candidate.index, candidate.key) == ("test", 0, "t")


@pytest.mark.unit
def test_shared_prefix_word_strategy_without_prefix_word():
    state = SearchState.for_words(["test_e2e", "test_unit"], ALNUM)

    assert shared_prefix_word(state) is None


@pytest.mark.unit
def test_column_aligned_strategy():
    state = SearchState.for_words(["abc", "abd", "xbc"], ALNUM)

    candidate = column_aligned(state)

    assert (candidate.word, candidate.index, candidate.key) == ("abd", 2, "d")


@pytest.mark.unit
def test_first_free_strategy_skips_assigned_words():
    state = SearchState.for_words(["abc", "abd", "xyz"], ALNUM)
    state.assign("abc", "a")

    candidate = first_free(state)

    assert (candidate.word, candidate.index, candidate.key) == ("abd", 0, "A")


@pytest.mark.unit
def test_default_strategy_order():
    assert default_strategies(True) == [shared_prefix_word, column_aligned, first_free]
    assert default_strategies(False) == [shared_prefix_word, first_free]
