"""Unit tests for shortcut key assignment."""

import re

import pytest

from tamer.contexts.shortcuts import (
    FALLBACK_ALPHABET,
    PLACEHOLDER_KEY,
    KeyAssignment,
    assign_keys,
    fallback_key,
)
from tamer.utils.exceptions import ConfigurationError


def keys_of(assignments):
    return {word: assignment.key for word, assignment in assignments.items()}


@pytest.mark.unit
def test_group_names_keyed_on_first_character():
    keys = assign_keys(["default", "build"], is_group_header=True)

    assert keys_of(keys) == {"default": "d", "build": "b"}
    assert list(keys) == ["default", "build"]
    assert all(assignment.is_header for assignment in keys.values())


@pytest.mark.unit
def test_targets_skip_shared_prefix():
    keys = assign_keys(["build", "build_debug", "build_release"])

    assert keys_of(keys) == {"build": "b", "build_debug": "d", "build_release": "r"}
    assert keys["build"].index == 0
    assert keys["build_debug"].index == 6
    assert keys["build_release"].marked() == "build_[r]elease"


@pytest.mark.unit
def test_single_word_uses_first_character():
    keys = assign_keys(["test"])

    assert keys["test"].key == "t"
    assert keys["test"].index == 0


@pytest.mark.unit
def test_column_aligned_keys_preferred_for_targets():
    keys = assign_keys(["abc", "abd", "xbc"])

    assert keys_of(keys) == {"abc": "a", "abd": "d", "xbc": "x"}


@pytest.mark.unit
def test_alignment_can_be_disabled():
    keys = assign_keys(["abc", "abd", "xbc"], align_columns=False)

    assert keys_of(keys) == {"abc": "a", "abd": "A", "xbc": "x"}
    assert keys["abd"].label == "Abd"


@pytest.mark.unit
def test_case_variant_used_when_character_taken():
    keys = assign_keys(["ka", "kb", "ak"], is_group_header=True)

    assert keys_of(keys) == {"ak": "a", "ka": "k", "kb": "K"}
    assert keys["kb"].marked() == "[K]b"


@pytest.mark.unit
def test_without_case_fold_next_character_used():
    keys = assign_keys(["ka", "kb", "ak"], is_group_header=True, case_fold=False)

    assert keys_of(keys) == {"ak": "a", "ka": "k", "kb": "b"}


@pytest.mark.unit
def test_lowercase_only_pattern_folds_capitals():
    keys = assign_keys(["Build", "build"], is_group_header=True, allowed_chars="[a-z]")

    assert keys_of(keys) == {"Build": "b", "build": "u"}
    assert keys["Build"].label == "build"


@pytest.mark.unit
def test_lowercase_only_pattern_without_case_fold():
    keys = assign_keys(
        ["Build", "build"], is_group_header=True, allowed_chars=re.compile("[a-z]"), case_fold=False
    )

    assert keys_of(keys) == {"Build": "u", "build": "b"}


@pytest.mark.unit
def test_keys_unique_for_many_words():
    words = [f"target_{i}" for i in range(40)]

    keys = assign_keys(words)

    assert len(keys) == 40
    assert len({assignment.key for assignment in keys.values()}) == 40
    assert not any(assignment.placeholder for assignment in keys.values())


@pytest.mark.unit
def test_assignment_is_deterministic():
    words = ["compile", "check", "clean", "clippy", "coverage", "c", "cov"]

    assert assign_keys(words) == assign_keys(words)
    assert assign_keys(words) == assign_keys(list(reversed(words)))


@pytest.mark.unit
def test_hash_fallback_for_words_without_allowed_characters():
    keys = assign_keys(["--", "__"])

    first = fallback_key("--", set(), lambda char: True)
    second = fallback_key("__", {first}, lambda char: True)
    assert keys_of(keys) == {"--": first, "__": second}
    assert keys["--"].index is None
    assert keys["--"].marked() == f"-- [{first}]"
    assert first in FALLBACK_ALPHABET


@pytest.mark.unit
def test_placeholder_when_alphabet_exhausted(log_records):
    keys = assign_keys(["x", "y"], allowed_chars="[a]")

    assert keys["x"].key == "a"
    assert keys["y"].key == PLACEHOLDER_KEY
    assert keys["y"].placeholder
    warnings = [record for record in log_records if record["level"].name == "WARNING"]
    assert any("'y'" in record["message"] for record in warnings)


@pytest.mark.unit
def test_empty_input():
    assert assign_keys([]) == {}


@pytest.mark.unit
def test_duplicate_words_collapse():
    keys = assign_keys(["lint", "lint", "test"])

    assert list(keys) == ["lint", "test"]


@pytest.mark.unit
def test_invalid_pattern_rejected():
    with pytest.raises(ConfigurationError):
        assign_keys(["a"], allowed_chars="[a-")


@pytest.mark.unit
def test_char_chooser_override():
    def chooser(word, taken):
        return "z" if word == "build" else None

    keys = assign_keys(["build", "bench"], is_group_header=True, char_chooser=chooser)

    assert keys["build"].key == "z"
    assert keys["build"].index is None
    assert keys["bench"].key == "b"


@pytest.mark.unit
def test_char_chooser_key_found_in_word():
    keys = assign_keys(["build"], char_chooser=lambda word, taken: "U")

    assert keys["build"].index == 1
    assert keys["build"].label == "bUild"


@pytest.mark.unit
def test_char_chooser_key_inside_shared_prefix():
    def chooser(word, taken):
        return "B" if word == "build_debug" else None

    keys = assign_keys(["build_debug", "build_release"], char_chooser=chooser)

    assert keys["build_debug"].index == 0
    assert keys["build_debug"].label == "Build_debug"
    assert keys["build_debug"].marked() == "[B]uild_debug"
    assert keys["build_release"].key == "r"


@pytest.mark.unit
def test_char_chooser_receives_taken_keys():
    seen = []

    def chooser(word, taken):
        seen.append((word, set(taken)))
        return word[-1]

    assign_keys(["ab", "cd"], char_chooser=chooser)

    assert seen == [("ab", set()), ("cd", {"b"})]


@pytest.mark.unit
@pytest.mark.parametrize("bad_key", ["ab", "", 7, "-"])
def test_char_chooser_invalid_key_rejected(bad_key):
    with pytest.raises(ConfigurationError) as exc_info:
        assign_keys(["build"], char_chooser=lambda word, taken: bad_key)

    assert exc_info.value.setting == "char_chooser"


@pytest.mark.unit
def test_char_chooser_taken_key_rejected():
    with pytest.raises(ConfigurationError):
        assign_keys(["build", "bench"], char_chooser=lambda word, taken: "q")


@pytest.mark.unit
def test_key_assignment_label_and_marked():
    assignment = KeyAssignment("build_debug", "D", 6)

    assert assignment.label == "build_Debug"
    assert assignment.marked("<", ">") == "build_<D>ebug"
