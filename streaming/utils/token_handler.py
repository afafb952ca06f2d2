import unicodedata
from typing import AbstractSet, Iterator

import regex

# Anything that is not an alphabetic character (Unicode Alphabetic property,
# combining vowel signs included), an ASCII digit or an apostrophe separates tokens.
_SEPARATOR = regex.compile(r"[^\p{Alpha}0-9']+")


def split_tokens(line: str) -> Iterator[str]:
    """
    Lazily split a line of raw text into lowercase candidate tokens.
    The line is NFC-normalized first so that decomposed accents stay attached
    to their letter. Empty pieces (leading/trailing separators) are skipped.
    """
    for piece in _SEPARATOR.split(unicodedata.normalize("NFC", line)):
        if piece:
            yield piece.lower()


def is_accepted(token: str, min_length: int = 0, ignore: AbstractSet[str] = frozenset()) -> bool:
    """Return True if the token should be counted."""
    return bool(token) and len(token) >= min_length and token not in ignore


def filter_tokens(line: str, min_length: int = 0, ignore: AbstractSet[str] = frozenset()) -> Iterator[str]:
    """Yield the tokens of a line that pass the length and ignore-list filters."""
    return (token for token in split_tokens(line) if is_accepted(token, min_length, ignore))
