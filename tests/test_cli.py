import io

import pytest

from problemset import arith, patterns, sequences, simulations, text
from problemset.cli import main, problem_ids, solve


def test_problem_ids_cover_every_exercise_sorted():
    ids = problem_ids()
    assert len(ids) == 48
    assert ids == sorted(ids)
    assert {"1001", "1348", "1423", "1432", "1454"} <= set(ids)


def test_unknown_problem_rejected():
    with pytest.raises(ValueError):
        solve("9999", "1\n")


def test_truncated_input_rejected():
    with pytest.raises(ValueError):
        solve("1098", "3\n3 5\n")


def test_non_numeric_input_rejected():
    with pytest.raises(ValueError):
        solve("1098", "1\nabc\n")


def test_strip_char_problem():
    output = solve("1001", "2\ncharCHAR\nabc\n")
    assert output == "I Hate CharChar!\nabc\n"


def test_fizzbuzz_problem():
    assert solve("1098", "3\n3 5 15\n") == "Fizz\nBuzz\nFizzBuzz\n"


def test_brackets_problem():
    assert solve("1106", "2\n([]) (]\n") == "Good!\nRetry...\n"


def test_spread_problem_stops_at_zero():
    output = solve("1088", "3 1 4 7\n2 5 5\n0\n3 1 2 3\n")
    assert output == "Yes\nSame\n"


def test_extremes_problem_matches_library():
    output = solve("1209", "3 4 -2 9\n1 7\n0\n")
    first = sequences.extremes([4, -2, 9])
    second = sequences.extremes([7])
    assert output == f"{first[0]} {first[1]}\n{second[0]} {second[1]}\n"


def test_savings_problem_stops_at_zero():
    output = solve("1164", "12000\n5000\n0\n99999\n")
    expected = f"{simulations.days_to_save(12000)}\n{simulations.days_to_save(5000)}\n"
    assert output == expected


def test_collatz_range_echoes_input_order():
    output = solve("1237", "1 10\n10 1\n")
    lines = output.splitlines()
    best = arith.collatz_range_max(1, 10)
    assert lines == [f"1 10 {best}", f"10 1 {best}"]


def test_secret_map_problem():
    output = solve("1043", "3\n5 0 2\n2 4 0\n")
    assert output == "".join(line + "\n" for line in patterns.secret_map(3, [5, 0, 2], [2, 4, 0]))
    assert all(line.startswith("[") and line.endswith("]") for line in output.splitlines())


def test_star_arrow_cases_are_numbered():
    output = solve("1287", "2\n2\n3\n")
    assert output.startswith("Case #1:\n")
    assert "Case #2:\n" in output
    second_body = output.split("Case #2:\n")[1]
    assert second_body == "".join(line + "\n" for line in patterns.star_arrow(3)) + "\n"


def test_stack_problem_matches_command_runner():
    tokens = "PUSH 5 PUSH 8 SIZE POP POP POP CLEAR SIZE END PUSH 1"
    expected = simulations.run_stack_commands(tokens.split())
    assert solve("1311", tokens) == "".join(line + "\n" for line in expected)
    assert solve("1311", tokens).splitlines()[-2] == "ERROR"


def test_sentence_scores():
    assert solve("1425", "2 1\nhello 60\nworld 50\nhello world .\n") == "Perfect!\n"
    assert solve("1425", "1 1\nhi 10\nhi .\n") == "Fail!\n"


def test_sentence_scores_several_sentences():
    vocabulary = {"good": 40, "day": 30}
    output = solve("1425", "2 2\ngood 40\nday 30\ngood day .\ngood .\n")
    expected = [
        text.grade(text.score_sentence(["good", "day"], vocabulary)),
        text.grade(text.score_sentence(["good"], vocabulary)),
    ]
    assert output.splitlines() == expected


def test_bingo_problem_matches_library():
    board = [[row * 5 + col + 1 for col in range(5)] for row in range(5)]
    board_text = "\n".join(" ".join(str(v) for v in row) for row in board)
    output = solve("1454", f"{board_text}\n5\n1 2 3 4 5\n")
    assert output == f"{simulations.bingo_lines(board, [1, 2, 3, 4, 5])}\n"


def test_shift_problem_has_no_trailing_newline():
    assert solve("1040", "1 3") == str(arith.shift_left(1, 3))


def test_toggle_case_problem():
    assert solve("1437", "a\n") == "A"


def test_sexy_primes_without_triplets():
    assert solve("1348", "1\n1 5\n") == "No Sexy Prime Triplets!\n"


def test_sexy_primes_listing():
    triplets = arith.sexy_prime_triplets(1, 40)
    output = solve("1348", "1\n40 1\n")
    assert output == "".join(
        f"{k}: {p}-{q}-{r}\n" for k, (p, q, r) in enumerate(triplets, start=1)
    )


def test_word_grid_problems_agree():
    source = "1\n3\ncat\nxax\nyty\ncat\n"
    assert solve("1423", source) == solve("1432", source) == "YES\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3 7\n"))
    assert main(["1098"]) == 0
    assert capsys.readouterr().out == "Fizz\n7\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n1\n"))
    assert main(["1098"]) == 1
    assert "end of input" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["0000"])