"""Number puzzles: quadratics, Collatz chains, prime triplets, bit tricks."""

from __future__ import annotations

import math

_INT_BITS = 32
_SHORT_MASK = 0xFFFF


def _wrap_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def speed_report(speed: float, hours: float) -> str:
    """Speed, time and distance travelled, formatted to fixed decimals."""
    return f"{speed:.3f} {hours:.3f} {speed * hours:.2f}"


def shift_left(a: int, n: int) -> int:
    """Shift a 32-bit signed integer left by n bits, wrapping on overflow."""
    if not 0 <= n < _INT_BITS:
        raise ValueError("shift must be between 0 and 31")
    return _wrap_int32(a << n)


def fizzbuzz(n: int) -> str:
    """The FizzBuzz word for n, or n itself."""
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def sum_multiples_of_seven(m: int, n: int) -> int:
    """Sum of the multiples of seven between m and n inclusive."""
    return sum(i for i in range(m, n + 1) if i % 7 == 0)


def classify_quadratic(a: int, b: int, c: int) -> str:
    """Say whether an integer quadratic has real, repeated or imaginary roots.

    A repeated root is given as its value to three decimals.
    """
    if a == 0:
        return "No quadratic"
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        return "Real"
    if discriminant == 0:
        return f"{-b / (2.0 * a):.3f}"
    return "Imaginary"


def triangle_area(a: float) -> float:
    """Area of an equilateral triangle with side a."""
    return math.sqrt(3.0) * a * a / 4.0


def solve_quadratic(a: float, b: float, c: float) -> str:
    """Roots of a quadratic, larger first, to three decimals.

    The discriminant's sign is judged after truncating it to an integer, and
    each root is computed as (-b +- sqrt(d)) / 2 * a.
    """
    if a == 0:
        return "No quadratic"
    discriminant = b * b - 4 * a * c
    truncated = int(discriminant)
    if truncated > 0:
        root = math.sqrt(discriminant)
        first = (-b + root) / 2 * a
        second = (-b - root) / 2 * a
        return f"{max(first, second):.3f} {min(first, second):.3f}"
    if truncated == 0:
        return f"{-b / 2 * a:.3f}"
    return "Imaginary"


def range_sum(n: int, m: int) -> int:
    """Sum of the integers from n to m, computed in floating point and truncated."""
    return int((n + m) / 2.0 * float(m - n + 1))


def is_finite_decimal(a: int, b: int) -> bool:
    """Return True if a / b has a terminating decimal expansion."""
    if b == 0:
        raise ValueError("denominator must not be zero")
    for factor in (2, 5):
        while b % factor == 0:
            b //= factor
    return a % b == 0


def collatz_steps(n: int) -> int:
    """Number of Collatz steps needed to bring n down to 1."""
    if n < 1:
        raise ValueError("value must be positive")
    steps = 0
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        steps += 1
    return steps


def collatz_length(n: int) -> int:
    """Length of the Collatz chain from n, counting n and the final 1."""
    return collatz_steps(n) + 1


def _ordered(a: int, b: int) -> range:
    low, high = (b, a) if a > b else (a, b)
    return range(low, high + 1)


def collatz_range_extremes(a: int, b: int) -> tuple[int, int]:
    """Longest and shortest chain length over the numbers between a and b."""
    lengths = [collatz_length(i) for i in _ordered(a, b)]
    return max(lengths), min(lengths)


def collatz_range_max(a: int, b: int) -> int:
    """Longest chain length over the numbers between a and b."""
    return max(collatz_length(i) for i in _ordered(a, b))


def prime_sieve(n: int) -> list[bool]:
    """Primality flags for 0..n."""
    if n < 0:
        raise ValueError("limit must be non-negative")
    flags = [True] * (n + 1)
    flags[0] = False
    if n >= 1:
        flags[1] = False
    for i in range(2, math.isqrt(n) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return flags


def sexy_prime_triplets(m: int, n: int) -> list[tuple[int, int, int]]:
    """Prime triplets (p, p+6, p+12) with p from m up to, not including, n-11."""
    if m > n:
        m, n = n, m
    start, stop = max(m, 0), n - 11
    if start >= stop:
        return []
    flags = prime_sieve(n)
    return [
        (p, p + 6, p + 12)
        for p in range(start, stop)
        if flags[p] and flags[p + 6] and flags[p + 12]
    ]


def swap_bits(a: int, b: int, n: int) -> tuple[int, int]:
    """Exchange the low 16-n bits of two 16-bit values, keeping the top n bits."""
    if not 0 <= n <= 16:
        raise ValueError("bit count must be between 0 and 16")
    a &= _SHORT_MASK
    b &= _SHORT_MASK
    high = (_SHORT_MASK << (16 - n)) & _SHORT_MASK
    low = ~high & _SHORT_MASK
    return (a & high) | (b & low), (b & high) | (a & low)