"""Command line front end: read a problem's input and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from cfkit import arithmetic, counting, numbers, replace
from cfkit import text as strings


class _Reader:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, data: str) -> None:
        self.data = data
        self._tokens: Iterator[str] = iter(data.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended early") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]

    def rows(self, count: int, width: int) -> list[tuple[int, ...]]:
        return [tuple(self.integers(width)) for _ in range(count)]

    def first_line(self) -> str:
        lines = self.data.splitlines()
        if not lines:
            raise ValueError("input ended early")
        return lines[0]


_Solver = Callable[[_Reader], str]
_SOLVERS: dict[str, _Solver] = {}


def _problem(*names: str) -> Callable[[_Solver], _Solver]:
    def register(solver: _Solver) -> _Solver:
        for name in names:
            _SOLVERS[name] = solver
        return solver

    return register


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


@_problem("1A")
def _theatre_square(r: _Reader) -> str:
    n, m, a = r.integers(3)
    return str(arithmetic.theatre_square(n, m, a))


@_problem("118A")
def _strip_vowels(r: _Reader) -> str:
    return strings.strip_vowels(r.word())


@_problem("122A")
def _almost_lucky(r: _Reader) -> str:
    return _yes_no(numbers.is_almost_lucky(r.integer()))


@_problem("158B")
def _taxi(r: _Reader) -> str:
    return str(counting.taxis_needed(r.integers(r.integer())))


@_problem("479A")
def _expression(r: _Reader) -> str:
    return str(arithmetic.max_expression(*r.integers(3)))


@_problem("58A")
def _hello(r: _Reader) -> str:
    return _yes_no(strings.can_say_hello(r.word()))


@_problem("69A")
def _equilibrium(r: _Reader) -> str:
    return _yes_no(counting.is_in_equilibrium(r.rows(r.integer(), 3)))


@_problem("25A")
def _iq_test(r: _Reader) -> str:
    return str(counting.odd_one_out(r.integers(r.integer())))


@_problem("1030A")
def _easy(r: _Reader) -> str:
    return "EASY" if counting.is_easy(r.integers(r.integer())) else "HARD"


@_problem("110A")
def _nearly_lucky(r: _Reader) -> str:
    return _yes_no(numbers.is_nearly_lucky(r.word()))


@_problem("112A")
def _compare(r: _Reader) -> str:
    first, second = r.words(2)
    return str(strings.compare_ignoring_case(first, second))


@_problem("116A")
def _tram(r: _Reader) -> str:
    stops = [(a, b) for a, b in r.rows(r.integer(), 2)]
    return str(counting.tram_capacity(stops))


@_problem("1294A")
def _coins(r: _Reader) -> str:
    cases = r.rows(r.integer(), 4)
    return "\n".join(_yes_no(arithmetic.can_distribute_coins(*case)) for case in cases)


@_problem("136A")
def _presents(r: _Reader) -> str:
    received = counting.invert_presents(r.integers(r.integer()))
    return " ".join(map(str, received))


@_problem("158A")
def _advancers(r: _Reader) -> str:
    n, k = r.integers(2)
    return str(counting.advancers(r.integers(n), k))


@_problem("1915C")
def _square_sum(r: _Reader) -> str:
    answers = []
    for _ in range(r.integer()):
        answers.append(_yes_no(arithmetic.is_square_sum(r.integers(r.integer()))))
    return "\n".join(answers)


@_problem("200B")
def _drinks(r: _Reader) -> str:
    return f"{counting.average_fraction(r.integers(r.integer())):.6f}"


@_problem("228A")
def _horseshoes(r: _Reader) -> str:
    return str(counting.horseshoes_to_buy(r.integers(4)))


@_problem("231A")
def _team(r: _Reader) -> str:
    opinions = [(a, b, c) for a, b, c in r.rows(r.integer(), 3)]
    return str(counting.problems_solved(opinions))


@_problem("236A")
def _username(r: _Reader) -> str:
    return strings.gender_by_username(r.word())


@_problem("263A")
def _matrix(r: _Reader) -> str:
    return str(counting.moves_to_center([r.integers(5) for _ in range(5)]))


@_problem("266A")
def _stones(r: _Reader) -> str:
    n = r.integer()
    return str(strings.stones_to_remove(r.word()[:n]))


@_problem("266B")
def _queue(r: _Reader) -> str:
    n, seconds = r.integers(2)
    return strings.queue_after(r.word()[:n], seconds)


@_problem("271A")
def _beautiful_year(r: _Reader) -> str:
    return str(numbers.next_distinct_year(r.integer()))


@_problem("281A")
def _capitalize(r: _Reader) -> str:
    return strings.capitalize_word(r.word())


@_problem("282A")
def _bit(r: _Reader) -> str:
    return str(counting.bit_plus_plus(r.words(r.integer())))


@_problem("339A")
def _helpful_maths(r: _Reader) -> str:
    return strings.sort_summands(r.word())


@_problem("344A")
def _magnets(r: _Reader) -> str:
    return str(counting.count_groups(r.words(r.integer())))


@_problem("41A")
def _translation(r: _Reader) -> str:
    s, t = r.words(2)
    return _yes_no(strings.is_reverse(s, t))


@_problem("467A")
def _rooms(r: _Reader) -> str:
    rooms = [(p, q) for p, q in r.rows(r.integer(), 2)]
    return str(counting.free_rooms(rooms))


@_problem("486A")
def _alternating(r: _Reader) -> str:
    return str(arithmetic.alternating_sum(r.integer()))


@_problem("4A")
def _watermelon(r: _Reader) -> str:
    return _yes_no(arithmetic.can_split_evenly(r.integer()))


@_problem("50A")
def _dominoes(r: _Reader) -> str:
    m, n = r.integers(2)
    return str(arithmetic.max_dominoes(m, n))


@_problem("546A")
def _bananas(r: _Reader) -> str:
    k, n, w = r.integers(3)
    return str(arithmetic.borrow_needed(k, n, w))


@_problem("59A")
def _word_case(r: _Reader) -> str:
    return strings.normalize_case(r.word())


@_problem("617A")
def _elephant(r: _Reader) -> str:
    return str(arithmetic.elephant_steps(r.integer()))


@_problem("61A")
def _ultra_fast(r: _Reader) -> str:
    first, second = r.words(2)
    return strings.xor_digits(first, second)


@_problem("677A")
def _fence(r: _Reader) -> str:
    n, fence = r.integers(2)
    return str(counting.road_width(r.integers(n), fence))


@_problem("705A")
def _hulk(r: _Reader) -> str:
    return counting.hulk_feeling(r.integer())


@_problem("71A")
def _long_words(r: _Reader) -> str:
    return "\n".join(strings.abbreviate(word) for word in r.words(r.integer()))


@_problem("734A")
def _anton_danik(r: _Reader) -> str:
    n = r.integer()
    return strings.game_winner(r.word()[:n])


@_problem("750A")
def _party(r: _Reader) -> str:
    n, k = r.integers(2)
    return str(arithmetic.problems_before_party(n, k))


@_problem("791A")
def _bear(r: _Reader) -> str:
    a, b = r.integers(2)
    return str(arithmetic.years_to_outgrow(a, b))


@_problem("977A")
def _wrong_subtraction(r: _Reader) -> str:
    n, k = r.integers(2)
    return str(numbers.wrong_subtract(n, k))


@_problem("133A")
def _hq9(r: _Reader) -> str:
    return _yes_no(strings.produces_output(r.first_line()))


@_problem("160A")
def _twins(r: _Reader) -> str:
    return str(counting.min_coins_taken(r.integers(r.integer())))


@_problem("2047B")
def _replace_character(r: _Reader) -> str:
    answers = []
    for _ in range(r.integer()):
        n = r.integer()
        answers.append(replace.replace_character(r.word()[:n]))
    return "\n".join(answers)


@_problem("208A")
def _dubstep(r: _Reader) -> str:
    return strings.restore_song(r.word())


@_problem("318A")
def _even_odds(r: _Reader) -> str:
    n, k = r.integers(2)
    return str(arithmetic.odd_then_even(n, k))


@_problem("405A")
def _gravity(r: _Reader) -> str:
    return " ".join(map(str, counting.gravity_flip(r.integers(r.integer()))))


@_problem("580A")
def _subsegment(r: _Reader) -> str:
    return str(counting.longest_non_decreasing(r.integers(r.integer())))


@_problem("96A")
def _football(r: _Reader) -> str:
    return _yes_no(strings.is_dangerous(r.word()))


def problems() -> list[str]:
    """Names of the problems that can be solved."""
    return sorted(_SOLVERS)


def solve(problem: str, text: str) -> str:
    """Answer for a problem given its input text, without a final newline."""
    solver = _SOLVERS.get(problem.strip().upper())
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return solver(_Reader(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="cfkit", description="Solve a contest problem from its input."
    )
    parser.add_argument("problem", help="problem name, such as 4A or 1294A")
    parser.add_argument("input", nargs="?", help="input file (standard input if omitted)")
    args = parser.parse_args(argv)

    try:
        if args.input is None:
            data = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                data = handle.read()
        answer = solve(args.problem, data)
    except (OSError, ValueError) as error:
        print(f"cfkit: {error}", file=sys.stderr)
        return 1

    sys.stdout.write(answer + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())