"""Text-art patterns built from stars, hashes and letters, one string per line."""

from __future__ import annotations

from collections.abc import Sequence

_TENT_LETTERS = "ABCGJLMPT"


def secret_map(n: int, first: Sequence[int], second: Sequence[int]) -> list[str]:
    """Overlay two bit-encoded maps of width n; a set bit in either is a wall."""
    first, second = list(first), list(second)
    if len(first) != n or len(second) != n:
        raise ValueError("both maps must have exactly n rows")
    lines = []
    for a, b in zip(first, second):
        merged = a | b
        # The leftmost cell takes everything above the lower n-1 bits.
        cells = ["#" if merged >> (n - 1) else " "]
        cells.extend("#" if (merged >> shift) & 1 else " " for shift in range(n - 2, -1, -1))
        lines.append("[" + "".join(cells) + "]")
    return lines


def hollow_box(width: int, height: int) -> list[str]:
    """A rectangle of stars with a blank interior."""
    lines = []
    for row in range(height):
        if row in (0, height - 1):
            lines.append("*" * width)
        else:
            lines.append("".join("*" if col in (0, width - 1) else " " for col in range(width)))
    return lines


def zigzag_frame(size: int) -> list[str]:
    """A frame whose even rows carry a shrinking bar of stars."""
    edges = (0, size - 1)
    lines = []
    for row in range(size):
        if row % 2 == 0:
            cells = []
            for col in range(size):
                if col in edges:
                    cells.append("*")
                cells.append("*" if row <= col <= size - 1 - row else " ")
            lines.append("".join(cells))
        else:
            lines.append("".join("*" if col in edges else " " for col in range(size)))
    return lines


def butterfly(n: int) -> list[str]:
    """Two star wings meeting in the middle row; even sizes are rounded up."""
    if n % 2 == 0:
        n += 1
    lines = []
    wing = 0
    for row in range(n):
        lines.append("".join("*" if col <= wing or col >= n - wing - 1 else " " for col in range(n)))
        wing += 1 if row < n // 2 else -1
    return lines


def letter_pyramid(height: int) -> list[str]:
    """A centred pyramid whose rows read A, ABA, ABCBA and so on."""
    lines = []
    for row in range(height):
        rising = [chr(ord("A") + k) for k in range(row + 1)]
        lines.append(" " * (height - 1 - row) + "".join(rising + rising[-2::-1]))
    return lines


def cup(n: int) -> list[str]:
    """An inverted triangle of at-signs standing on a solid square."""
    width = 2 * n - 1
    top = [" " * row + "@" * ((n - row) * 2 - 1) for row in range(n)]
    return top + ["@" * width] * width


def star_arrow(n: int) -> list[str]:
    """Rows of stars growing to n and shrinking back to one."""
    return ["*" * k for k in range(1, n + 1)] + ["*" * k for k in range(n - 1, 0, -1)]


def letter_tent(n: int) -> list[str]:
    """A square of letters climbing from the edges towards the centre."""
    lines = []
    for row in range(n):
        level = 0
        cells = []
        for col in range(n):
            if not 0 <= level < len(_TENT_LETTERS):
                raise ValueError("pattern too large for the letter set")
            cells.append(_TENT_LETTERS[level])
            if col < row:
                level += 1
            if col > (n - 2) - row:
                level -= 1
        lines.append("".join(cells))
    return lines