"""Small simulations: savings plans, cooking clocks, buses, bingo and a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


class IntStack:
    """A last-in, first-out stack of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


def run_stack_commands(tokens: Iterable[str]) -> list[str]:
    """Run PUSH/POP/SIZE/CLEAR commands and return the lines they print.

    Any other command, or running out of tokens, ends the run. A PUSH whose
    argument is missing or not a number pushes 0 and ends the run.
    """
    stack = IntStack()
    output: list[str] = []
    stream = iter(tokens)
    for command in stream:
        if command == "PUSH":
            try:
                value = int(next(stream))
            except (StopIteration, ValueError):
                stack.push(0)
                break
            stack.push(value)
        elif command == "POP":
            try:
                output.append(str(stack.pop()))
            except IndexError:
                output.append("ERROR")
        elif command == "SIZE":
            output.append(str(stack.size()))
        elif command == "CLEAR":
            stack.clear()
        else:
            break
    return output


def weeks_to_afford(price: int) -> int:
    """Weeks of pay at 9000 a day, raised by 200 each week after the first."""
    weeks, pay = 0, 9000
    while price > 0:
        if weeks and weeks % 7 == 0:
            pay += 200
        price -= pay * 7
        weeks += 1
    return weeks


def days_to_save(price: int) -> int:
    """Days of saving 5000, then 100 more each following day."""
    days, money = 0, 5000
    while price > 0:
        price -= money
        days += 1
        money += 100
    return days


def days_to_afford(price: int) -> int:
    """Rounds of six days' pay at 9500 a day needed to cover the price."""
    rounds = 0
    while price > 0:
        price -= 9500 * 6
        rounds += 1
    return rounds


def _clock(label: str, hour: int, minute: int) -> str:
    if hour < 12:
        return f"Cook {label}->AM{hour}:{minute} "
    if hour == 12:
        return f"Cook {label}->PM{hour}:{minute}"
    return f"Cook {label}->PM{hour - 12}:{minute}"


def cooking_schedule(hour: int, minute: int, duration: int) -> tuple[str, str]:
    """Start and end lines of a cooking session lasting duration minutes."""
    start = _clock("start", hour, minute)
    extra_hours, extra_minutes = _trunc_divmod(duration, 60)
    hour += extra_hours
    minute += extra_minutes
    if minute > 59:
        hour += 1
        minute -= 60
    if hour > 23:
        hour -= 24
    return start, _clock("end", hour, minute)


def bus_plan(adults: int, children: int) -> tuple[int, int]:
    """Number of big (45-seat) and small buses to hire."""
    big, rest = _trunc_divmod(adults, 45)
    small = 0
    if rest > 25:
        big += 1
    else:
        small += 1
    if children >= 15:
        small += 1
    return big, small


def bingo_lines(board: Sequence[Sequence[int]], called: Iterable[int]) -> int:
    """Completed rows, columns and diagonals on a 5x5 board of numbers 1-25.

    The main diagonal is judged on its first four cells only.
    """
    grid = [list(row) for row in board]
    if len(grid) != 5 or any(len(row) != 5 for row in grid):
        raise ValueError("board must be 5 by 5")
    positions: dict[int, tuple[int, int]] = {}
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if not 1 <= value <= 25:
                raise ValueError("board numbers must be between 1 and 25")
            positions[value] = (i, j)
    for number in called:
        if not 1 <= number <= 25:
            raise ValueError("called numbers must be between 1 and 25")
        # A number missing from the board marks the top-left cell.
        i, j = positions.get(number, (0, 0))
        grid[i][j] = 0
    lines = sum(all(v == 0 for v in row) for row in grid)
    lines += sum(all(row[j] == 0 for row in grid) for j in range(5))
    if all(grid[k][k] == 0 for k in range(4)):
        lines += 1
    if all(grid[k][4 - k] == 0 for k in range(5)):
        lines += 1
    return lines