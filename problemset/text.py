"""Word and character puzzles: string filtering, bracket matching, grid search."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable, Mapping, Sequence

_CHAR_PATTERN = re.compile("char", re.IGNORECASE)
_DIGITS = string.digits + string.ascii_uppercase
_CLOSING = {")": "(", "}": "{", "]": "["}


def strip_char(word: str) -> str:
    """Remove every "char" (any case) when it occurs at least twice.

    With fewer than two occurrences the word comes back unchanged; if nothing
    is left after removal the fixed complaint is returned instead.
    """
    pieces = _CHAR_PATTERN.split(word)
    if len(pieces) - 1 < 2:
        return word
    remainder = "".join(pieces)
    return remainder or "I Hate CharChar!"


def brackets_balanced(text: str) -> bool:
    """Return True if every bracket closes its partner and nothing is left open.

    Any character that is not a closing bracket is treated as an opener, so
    stray characters make the text unbalanced.
    """
    stack: list[str] = []
    for ch in text:
        opener = _CLOSING.get(ch)
        if opener is None:
            stack.append(ch)
        elif stack and stack[-1] == opener:
            stack.pop()
        else:
            return False
    return not stack


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def swap_pair(a: int, b: int) -> str:
    """Describe two character codes.

    Two letters of the same case are returned with their case flipped, two
    letters of mixed case are returned as they are.
    """
    if (_is_upper(a) and _is_upper(b)) or (_is_lower(a) and _is_lower(b)):
        return chr(a ^ 32) + chr(b ^ 32)
    if (_is_upper(a) or _is_lower(a)) and (_is_upper(b) or _is_lower(b)):
        return chr(a) + chr(b)
    return "No Alphabet!"


def _octet_bits(value: int) -> str:
    if value >= 0:
        return format(value, "08b")
    # Negative remainders never produce a one bit, only zeros.
    return "0" * max(8, abs(value).bit_length())


def ip_to_binary(address: str) -> str:
    """Write each dot-separated number as at least eight bits, concatenated."""
    if not address:
        return ""
    return "".join(_octet_bits(int(segment)) for segment in address.split("."))


def _digits_in_base(value: int, base: int) -> str:
    digits = []
    while value:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
    return "".join(digits)


def is_palindrome_in_some_base(x: int) -> bool:
    """Return True if x reads the same both ways in any base from 2 to 36."""
    if x < 0:
        raise ValueError("value must be non-negative")
    for base in range(2, 37):
        digits = _digits_in_base(x, base)
        if digits == digits[::-1]:
            return True
    return False


def grid_contains_word(grid: Sequence[str], word: str) -> bool:
    """Return True if word appears left-to-right in a row or top-down in a column.

    Only the leading n-by-n square of the grid is searched, n being the
    number of rows.
    """
    if not word:
        return False
    size = len(grid)
    rows = [row[:size] for row in grid]
    columns = ["".join(row[col] for row in rows) for col in range(size)]
    return any(word in line for line in (*rows, *columns))


def score_sentence(words: Iterable[str], vocabulary: Mapping[str, int]) -> int:
    """Score a sentence.

    Known words earn their vocabulary score; unknown all-lowercase words earn
    half their length; any other unknown word costs two points.
    """
    total = 0
    for word in words:
        if word in vocabulary:
            total += vocabulary[word]
        elif all(_is_lower(ord(ch)) for ch in word):
            total += len(word) // 2
        else:
            total -= 2
    return total


def grade(score: int) -> str:
    """Turn a sentence score into its verdict."""
    if score >= 100:
        return "Perfect!"
    if score < 60:
        return "Fail!"
    return str(score)


def toggle_case(ch: str) -> str:
    """Flip the case bit of a single character."""
    return chr(ord(ch) ^ 32)