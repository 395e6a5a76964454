"""
Shortcut Key Assignment

Gives every word of a batch (all group names, or all target names of one group)
a unique single-character shortcut. Keys are drawn from the word itself when
possible so the mnemonic stays visible in the label:

1. An optional caller-supplied chooser gets the first say for every word.
2. Built-in strategies run in order (shared-prefix word, column-aligned,
   first free character), assigning one word per round.
3. Words with no free character left get a deterministic hash-based key, or
   the placeholder key when even the fallback alphabet is exhausted.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Optional, Pattern, Sequence, Union

from tamer.contexts.shortcuts.fallback import PLACEHOLDER_KEY, fallback_key
from tamer.contexts.shortcuts.logger import _log_debug, log_placeholder_key
from tamer.contexts.shortcuts.strategies import SearchState, Strategy, default_strategies
from tamer.utils.exceptions import ConfigurationError

DEFAULT_ALLOWED_CHARS = "[a-zA-Z0-9]"

CharChooser = Callable[[str, FrozenSet[str]], Optional[str]]


@dataclass(frozen=True)
class KeyAssignment:
    """
    Shortcut chosen for one word.

    Attributes:
        word: The original word
        key: The shortcut character
        index: Position in `word` the key was drawn from (None for synthetic keys)
        is_header: True when the word is a group name
        placeholder: True when no unique key could be found
    """

    word: str
    key: str
    index: Optional[int] = None
    is_header: bool = False
    placeholder: bool = False

    @property
    def label(self) -> str:
        """The word with the shortcut character in the case it was assigned."""
        if self.index is None:
            return self.word
        return self.word[: self.index] + self.key + self.word[self.index + 1 :]

    def marked(self, open_mark: str = "[", close_mark: str = "]") -> str:
        """
        Render the label with the shortcut bracketed.

        Example:
            >>> KeyAssignment("build_debug", "d", 6).marked()
            'build_[d]ebug'
            >>> KeyAssignment("build", "Q").marked()
            'build [Q]'
        """
        if self.index is None:
            return f"{self.word} {open_mark}{self.key}{close_mark}"
        label = self.label
        return (
            label[: self.index]
            + open_mark
            + label[self.index]
            + close_mark
            + label[self.index + 1 :]
        )


def _compile_allowed(allowed_chars: Union[str, Pattern]) -> Pattern:
    if not isinstance(allowed_chars, str):
        return allowed_chars
    try:
        return re.compile(allowed_chars)
    except re.error as e:
        raise ConfigurationError(
            f"Invalid shortcut character pattern: {e}", "allowed_key_pattern", allowed_chars
        ) from e


def _locate(word: str, key: str) -> Optional[int]:
    """
    Index of `key` in `word`, ignoring case; None when absent.

    Used for chooser overrides, which are not bound by the shared prefix: the
    first occurrence wins even when it lies inside the shared prefix, and the
    label is rewritten at that position.
    """
    index = word.find(key)
    if index >= 0:
        return index
    for index, char in enumerate(word):
        if char.lower() == key.lower():
            return index
    return None


def _choose_with_override(
    state: SearchState,
    char_chooser: CharChooser,
    is_group_header: bool,
) -> Dict[str, KeyAssignment]:
    """
    Let the caller's chooser pick keys before the built-in search runs.

    Raises:
        ConfigurationError: If the chooser returns a non-character, a taken key
                            or a disallowed key
    """
    chosen = {}
    for word in list(state.unassigned):
        key = char_chooser(word, frozenset(state.taken))
        if key is None:
            continue
        if not isinstance(key, str) or len(key) != 1:
            raise ConfigurationError(
                f"Character chooser must return a single character for '{word}'",
                "char_chooser",
                key,
            )
        if key in state.taken:
            raise ConfigurationError(
                f"Character chooser returned a key already taken for '{word}'",
                "char_chooser",
                key,
            )
        if not state.is_allowed(key):
            raise ConfigurationError(
                f"Character chooser returned a disallowed key for '{word}'",
                "char_chooser",
                key,
            )
        state.assign(word, key)
        chosen[word] = KeyAssignment(word, key, _locate(word, key), is_header=is_group_header)
    return chosen


def assign_keys(
    words: Sequence[str],
    is_group_header: bool = False,
    allowed_chars: Union[str, Pattern] = DEFAULT_ALLOWED_CHARS,
    case_fold: bool = True,
    char_chooser: Optional[CharChooser] = None,
    align_columns: Optional[bool] = None,
    strategies: Optional[List[Strategy]] = None,
) -> Dict[str, KeyAssignment]:
    """
    Assign a unique shortcut character to every word.

    Args:
        words: Words of one batch (group names, or target names of one group)
        is_group_header: True when the words are group names
        allowed_chars: Regex a key character must fully match
        case_fold: Allow the upper/lower case variant of a character as key
        char_chooser: Optional override called as chooser(word, taken_keys);
                      returns a key or None to defer to the built-in search
        align_columns: Prefer characters unique within their column across
                       words. Defaults to True for targets, False for headers
        strategies: Replace the built-in strategy list entirely

    Returns:
        Dict mapping each word to its KeyAssignment, in input order. Keys are
        pairwise distinct unless a placeholder key had to be used

    Raises:
        ConfigurationError: If allowed_chars does not compile or the chooser
                            breaks its contract

    Example:
        >>> keys = assign_keys(["default", "build"], is_group_header=True)
        >>> keys["default"].key, keys["build"].key
        ('d', 'b')
    """
    unique_words = list(dict.fromkeys(words))
    if not unique_words:
        return {}

    allowed = _compile_allowed(allowed_chars)
    if align_columns is None:
        align_columns = not is_group_header
    if strategies is None:
        strategies = default_strategies(align_columns)

    state = SearchState.for_words(unique_words, allowed, case_fold=case_fold)
    assigned: Dict[str, KeyAssignment] = {}

    if char_chooser is not None:
        assigned.update(_choose_with_override(state, char_chooser, is_group_header))

    while state.unassigned:
        candidate = None
        for strategy in strategies:
            candidate = strategy(state)
            if candidate is not None:
                break

        if candidate is None:
            break

        state.assign(candidate.word, candidate.key)
        assigned[candidate.word] = KeyAssignment(
            candidate.word, candidate.key, candidate.index, is_header=is_group_header
        )

    # Whatever is left has no free character of its own
    for word in list(state.unassigned):
        key = fallback_key(word, state.taken, state.is_allowed)
        if key is None:
            log_placeholder_key(word)
            state.unassigned.remove(word)
            assigned[word] = KeyAssignment(
                word, PLACEHOLDER_KEY, is_header=is_group_header, placeholder=True
            )
            continue

        _log_debug(f"Hash fallback key '{key}' for '{word}'")
        state.assign(word, key)
        assigned[word] = KeyAssignment(word, key, is_header=is_group_header)

    return {word: assigned[word] for word in unique_words}
