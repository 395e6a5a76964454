"""
Deterministic fallback keys.

When no character of a word is free, the word gets a key derived from a stable
hash of its text, so the same word maps to the same fallback key on every run.

Hash: 64-bit FNV-1a over the UTF-8 bytes of the text.
"""

import string
from typing import AbstractSet, Callable, Optional

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF

# Uppercase, lowercase, then digits
FALLBACK_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

# Used when the whole alphabet is taken or disallowed
PLACEHOLDER_KEY = "?"

# Re-hashing stops once every alphabet character has been seen; this caps the
# walk in case the hash sequence misses some characters.
MAX_REHASHES = len(FALLBACK_ALPHABET) ** 2


def fnv1a_64(text: str) -> int:
    """
    64-bit FNV-1a hash of a string.

    Example:
        >>> hex(fnv1a_64(""))
        '0xcbf29ce484222325'
        >>> hex(fnv1a_64("a"))
        '0xaf63dc4c8601ec8c'
    """
    value = FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * FNV_PRIME) & _MASK_64
    return value


def fallback_key(
    word: str,
    taken: AbstractSet[str],
    is_allowed: Callable[[str], bool],
) -> Optional[str]:
    """
    Pick a free alphabet character for a word by hashing it.

    The first candidate is FALLBACK_ALPHABET[hash(word) % 62]. While the
    candidate is taken or disallowed, the decimal text of the previous hash is
    hashed again.

    Args:
        word: Word that needs a key
        taken: Keys already in use
        is_allowed: Predicate for admissible key characters

    Returns:
        A free allowed character, or None when the alphabet is exhausted
    """
    value = fnv1a_64(word)
    seen = set()

    for _ in range(MAX_REHASHES):
        candidate = FALLBACK_ALPHABET[value % len(FALLBACK_ALPHABET)]
        if candidate not in taken and is_allowed(candidate):
            return candidate

        seen.add(candidate)
        if len(seen) == len(FALLBACK_ALPHABET):
            break
        value = fnv1a_64(str(value))

    return None
