"""
Shortcut search strategies.

A strategy looks at the current search state and proposes one (word, index,
key) candidate, or None. The key assigner tries its strategies in order and
takes the first proposal, assigns it, and starts over until no strategy has
anything left to propose.

Words are always scanned in lexicographic order and, within a word, from its
start index up to the longest word length.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Pattern, Set, Tuple

from tamer.utils.text_processing import common_prefix


@dataclass(frozen=True)
class Candidate:
    """A proposed shortcut: `key` for `word`, drawn from `word[index]`."""

    word: str
    index: int
    key: str


@dataclass
class SearchState:
    """
    Mutable bookkeeping for one key assignment run.

    Attributes:
        words: All words of the batch, sorted
        allowed: Pattern a key character must fully match
        case_fold: Whether upper/lower variants of a character may be used
        shared_prefix: Longest prefix common to all words
        max_length: Length of the longest word
        taken: Keys already assigned
        unassigned: Words still waiting for a key, sorted
    """

    words: List[str]
    allowed: Pattern
    case_fold: bool = True
    shared_prefix: str = ""
    max_length: int = 0
    taken: Set[str] = field(default_factory=set)
    unassigned: List[str] = field(default_factory=list)

    # Characters seen per column across all words: index -> char -> count
    _column_counts: Dict[int, Dict[str, int]] = field(default_factory=dict)

    @classmethod
    def for_words(cls, words: List[str], allowed: Pattern, case_fold: bool = True) -> "SearchState":
        ordered = sorted(words)
        state = cls(
            words=ordered,
            allowed=allowed,
            case_fold=case_fold,
            shared_prefix=common_prefix(ordered),
            max_length=max((len(word) for word in ordered), default=0),
            unassigned=list(ordered),
        )
        for word in ordered:
            for index, char in enumerate(word):
                column = state._column_counts.setdefault(index, {})
                column[char] = column.get(char, 0) + 1
        return state

    def is_allowed(self, char: str) -> bool:
        return len(char) == 1 and self.allowed.fullmatch(char) is not None

    def start_index(self, word: str) -> int:
        """Where the search in `word` begins: past the shared prefix, or 0 for the prefix word itself."""
        if word == self.shared_prefix:
            return 0
        return len(self.shared_prefix)

    def is_column_unique(self, word: str, index: int) -> bool:
        """True when no other word has the same character at `index`."""
        return self._column_counts.get(index, {}).get(word[index], 0) == 1

    def key_variants(self, char: str) -> Iterator[str]:
        """Yield the free, allowed variants of a character: as-is, upper, lower."""
        variants = [char, char.upper(), char.lower()] if self.case_fold else [char]
        seen = set()
        for variant in variants:
            if variant in seen:
                continue
            seen.add(variant)
            if self.is_allowed(variant) and variant not in self.taken:
                yield variant

    def positions(self) -> Iterator[Tuple[str, int]]:
        """Yield (word, index) pairs of unassigned words in search order."""
        for word in self.unassigned:
            for index in range(self.start_index(word), len(word)):
                yield word, index

    def assign(self, word: str, key: str) -> None:
        self.taken.add(key)
        self.unassigned.remove(word)


Strategy = Callable[[SearchState], Optional[Candidate]]


def shared_prefix_word(state: SearchState) -> Optional[Candidate]:
    """
    Key the word that equals the shared prefix on its first usable character.

    Such a word would otherwise have no characters left to search.
    """
    word = state.shared_prefix
    if not word or word not in state.unassigned:
        return None

    for index in range(len(word)):
        for key in state.key_variants(word[index]):
            return Candidate(word, index, key)
    return None


def column_aligned(state: SearchState) -> Optional[Candidate]:
    """
    First free character that no other word has in the same column.

    Keys picked this way tend to line up vertically in the rendered menu.
    """
    for word, index in state.positions():
        if not state.is_column_unique(word, index):
            continue
        for key in state.key_variants(word[index]):
            return Candidate(word, index, key)
    return None


def first_free(state: SearchState) -> Optional[Candidate]:
    """First free, allowed character at the lowest index of any unassigned word."""
    for word, index in state.positions():
        for key in state.key_variants(word[index]):
            return Candidate(word, index, key)
    return None


def default_strategies(align_columns: bool) -> List[Strategy]:
    """
    Strategy order for one assignment run.

    Args:
        align_columns: Try column-aligned keys before falling back to the
                       first free character
    """
    strategies: List[Strategy] = [shared_prefix_word]
    if align_columns:
        strategies.append(column_aligned)
    strategies.append(first_free)
    return strategies

