"""Command-line front end: feed a problem's input text and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterator, Sequence

from problemset import arith, patterns, sequences, simulations, text


class _Reader:
    """Whitespace-separated tokens of an input text, consumed front to back."""

    def __init__(self, source: str) -> None:
        self._tokens = deque(source.split())

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def word(self) -> str:
        if not self._tokens:
            raise ValueError("unexpected end of input")
        return self._tokens.popleft()

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def real(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def cases(self) -> range:
        return range(self.integer())

    def rest(self) -> list[str]:
        remaining = list(self._tokens)
        self._tokens.clear()
        return remaining


_Solver = Callable[[_Reader], Iterator[str]]
_SOLVERS: dict[str, _Solver] = {}


def _problem(*ids: str) -> Callable[[_Solver], _Solver]:
    def register(func: _Solver) -> _Solver:
        for problem_id in ids:
            _SOLVERS[problem_id] = func
        return func

    return register


def _lines(lines: Sequence[str]) -> Iterator[str]:
    for line in lines:
        yield line + "\n"


def _until_zero(reader: _Reader) -> Iterator[int]:
    """Counts read one after another until a zero or the end of input."""
    while reader:
        count = reader.integer()
        if count == 0:
            return
        yield count


@_problem("1001")
def _solve_1001(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield text.strip_char(reader.word()) + "\n"


@_problem("1016")
def _solve_1016(reader: _Reader) -> Iterator[str]:
    speed, hours = reader.real(), reader.real()
    yield arith.speed_report(speed, hours) + "\n"


@_problem("1040")
def _solve_1040(reader: _Reader) -> Iterator[str]:
    a, n = reader.integer(), reader.integer()
    yield str(arith.shift_left(a, n))


@_problem("1043")
def _solve_1043(reader: _Reader) -> Iterator[str]:
    n = reader.integer()
    first = reader.integers(n)
    second = reader.integers(n)
    yield from _lines(patterns.secret_map(n, first, second))


@_problem("1054")
def _solve_1054(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        width, height = reader.integer(), reader.integer()
        yield from _lines(patterns.hollow_box(width, height))


@_problem("1084")
def _solve_1084(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield from _lines(patterns.zigzag_frame(reader.integer()))


@_problem("1085")
def _solve_1085(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield from _lines(patterns.butterfly(reader.integer()))


@_problem("1088")
def _solve_1088(reader: _Reader) -> Iterator[str]:
    for count in _until_zero(reader):
        yield sequences.spread_verdict(reader.integers(count)) + "\n"


@_problem("1089")
def _solve_1089(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        high, low = arith.collatz_range_extremes(reader.integer(), reader.integer())
        yield f"{high} {low}\n"


@_problem("1098")
def _solve_1098(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield arith.fizzbuzz(reader.integer()) + "\n"


@_problem("1106")
def _solve_1106(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield ("Good!" if text.brackets_balanced(reader.word()) else "Retry...") + "\n"


@_problem("1116")
def _solve_1116(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        count = reader.integer()
        yield sequences.sum_verdict(reader.integers(count)) + "\n"


@_problem("1156")
def _solve_1156(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield f"{simulations.weeks_to_afford(reader.integer())}\n"


@_problem("1158")
def _solve_1158(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield from _lines(patterns.letter_pyramid(reader.integer()))


@_problem("1163")
def _solve_1163(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        count = reader.integer()
        negatives, positives = sequences.count_signs(reader.integers(count))
        yield f"{negatives} {positives}\n"


@_problem("1164")
def _solve_1164(reader: _Reader) -> Iterator[str]:
    for price in _until_zero(reader):
        yield f"{simulations.days_to_save(price)}\n"


@_problem("1175")
def _solve_1175(reader: _Reader) -> Iterator[str]:
    m, n = reader.integer(), reader.integer()
    yield f"{arith.sum_multiples_of_seven(m, n)}\n"


@_problem("1193")
def _solve_1193(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        a, b, c = reader.integers(3)
        yield arith.classify_quadratic(a, b, c) + "\n"


@_problem("1194")
def _solve_1194(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        a, b = reader.integer(), reader.integer()
        yield text.swap_pair(a, b) + "\n"


@_problem("1195")
def _solve_1195(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield sequences.score_verdict(reader.integers(6)) + "\n"


@_problem("1201")
def _solve_1201(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield f"{simulations.days_to_afford(reader.integer())}\n"


@_problem("1207")
def _solve_1207(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield f"{arith.triangle_area(reader.integer()):.5f}\n"


@_problem("1208")
def _solve_1208(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        a, b, c = reader.real(), reader.real(), reader.real()
        yield arith.solve_quadratic(a, b, c) + "\n"


@_problem("1209")
def _solve_1209(reader: _Reader) -> Iterator[str]:
    for count in _until_zero(reader):
        high, low = sequences.extremes(reader.integers(count))
        yield f"{high} {low}\n"


@_problem("1228")
def _solve_1228(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        n, m = reader.integer(), reader.integer()
        yield f"{arith.range_sum(n, m)}\n"


@_problem("1230")
def _solve_1230(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        count = reader.integer()
        yield f"{sequences.largest_triangle_perimeter(reader.integers(count))}\n"


@_problem("1231")
def _solve_1231(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        a, b = reader.integer(), reader.integer()
        yield ("Limited" if arith.is_finite_decimal(a, b) else "Unlimited") + "\n"


@_problem("1236")
def _solve_1236(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield f"{arith.collatz_steps(reader.integer())}\n"


@_problem("1237")
def _solve_1237(reader: _Reader) -> Iterator[str]:
    while reader:
        a, b = reader.integer(), reader.integer()
        yield f"{a} {b} {arith.collatz_range_max(a, b)}\n"


@_problem("1253")
def _solve_1253(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield text.ip_to_binary(reader.word()) + "\n"


@_problem("1262")
def _solve_1262(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        count = reader.integer()
        values = sequences.distinct_sorted(reader.integers(count))
        yield "".join(f"{value} " for value in values) + "\n"


@_problem("1275")
def _solve_1275(reader: _Reader) -> Iterator[str]:
    yield from _lines(patterns.cup(reader.integer()))


@_problem("1287")
def _solve_1287(reader: _Reader) -> Iterator[str]:
    for case in reader.cases():
        yield f"Case #{case + 1}:\n"
        yield from _lines(patterns.star_arrow(reader.integer()))
        yield "\n"


@_problem("1292")
def _solve_1292(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        count = reader.integer()
        above = sequences.count_above_average(reader.integers(count))
        yield f"{above} from total {count}\n"


@_problem("1303")
def _solve_1303(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield from _lines(patterns.letter_tent(reader.integer()))
        yield "\n"


@_problem("1311")
def _solve_1311(reader: _Reader) -> Iterator[str]:
    yield from _lines(simulations.run_stack_commands(reader.rest()))


@_problem("1348")
def _solve_1348(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        m, n = reader.integer(), reader.integer()
        triplets = arith.sexy_prime_triplets(m, n)
        if not triplets:
            yield "No Sexy Prime Triplets!\n"
        for index, (p, q, r) in enumerate(triplets, start=1):
            yield f"{index}: {p}-{q}-{r}\n"


@_problem("1363")
def _solve_1363(reader: _Reader) -> Iterator[str]:
    hour, minute, duration = reader.integers(3)
    yield from _lines(simulations.cooking_schedule(hour, minute, duration))


@_problem("1408")
def _solve_1408(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        yield ("YES" if text.is_palindrome_in_some_base(reader.integer()) else "NO") + "\n"


@_problem("1423", "1432")
def _solve_word_grid(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        size = reader.integer()
        grid = [reader.word() for _ in range(size)]
        word = reader.word()
        yield ("YES" if text.grid_contains_word(grid, word) else "NO") + "\n"


@_problem("1425")
def _solve_1425(reader: _Reader) -> Iterator[str]:
    entries, sentences = reader.integer(), reader.integer()
    vocabulary: dict[str, int] = {}
    for _ in range(entries):
        word, score = reader.word(), reader.integer()
        vocabulary[word] = vocabulary.get(word, 0) + score
    for _ in range(sentences):
        words = []
        while (word := reader.word()) != ".":
            words.append(word)
        yield text.grade(text.score_sentence(words, vocabulary)) + "\n"


@_problem("1437")
def _solve_1437(reader: _Reader) -> Iterator[str]:
    yield text.toggle_case(reader.word()[0])


@_problem("1439")
def _solve_1439(reader: _Reader) -> Iterator[str]:
    adults, children = reader.integer(), reader.integer()
    big, small = simulations.bus_plan(adults, children)
    if big > 0:
        yield f"Big bus : {big}\n"
    if small > 0:
        yield f"Small bus : {small}\n"


@_problem("1440")
def _solve_1440(reader: _Reader) -> Iterator[str]:
    a, b, n = reader.integers(3)
    first, second = arith.swap_bits(a, b, n)
    yield f"{first} {second}"


@_problem("1452")
def _solve_1452(reader: _Reader) -> Iterator[str]:
    for count in _until_zero(reader):
        yield f"{sequences.count_fixed_positions(reader.integers(count))}\n"


@_problem("1453")
def _solve_1453(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        count = reader.integer()
        yield ("YES" if sequences.is_consecutive(reader.integers(count)) else "NO") + "\n"


@_problem("1454")
def _solve_1454(reader: _Reader) -> Iterator[str]:
    board = [reader.integers(5) for _ in range(5)]
    called = reader.integers(reader.integer())
    yield f"{simulations.bingo_lines(board, called)}\n"


def problem_ids() -> list[str]:
    """Identifiers of every problem that can be solved, in ascending order."""
    return sorted(_SOLVERS)


def solve(problem: str, text: str) -> str:
    """Run one problem on its input text and return everything it prints.

    Raises ValueError for an unknown problem or malformed input.
    """
    solver = _SOLVERS.get(problem)
    if solver is None:
        raise ValueError(f"unknown problem: {problem}")
    return "".join(solver(_Reader(text)))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="problemset", description="Solve a numbered exercise from standard input."
    )
    parser.add_argument("problem", choices=problem_ids(), help="problem number")
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except ValueError as exc:
        sys.stderr.write(f"problemset: {exc}\n")
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())