# cfkit

Solutions to classic beginner competitive-programming problems. Each problem
is a plain Python function. A command-line tool reads a problem's input text
and prints its answer in the usual judge format.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

The functions are grouped by the kind of work they do:

- `cfkit.arithmetic`: closed-form and small-loop problems. It has
  `theatre_square`, `max_expression`, `alternating_sum`, `can_split_evenly`,
  `max_dominoes`, `borrow_needed`, `elephant_steps`, `years_to_outgrow`,
  `odd_then_even`, `can_distribute_coins`, `problems_before_party` and
  `is_square_sum`.
- `cfkit.numbers`: problems about decimal digits. It has `is_lucky`,
  `is_almost_lucky`, `is_nearly_lucky`, `has_distinct_digits`,
  `next_distinct_year` and `wrong_subtract`.
- `cfkit.text`: string problems. It has `strip_vowels`, `can_say_hello`,
  `compare_ignoring_case`, `gender_by_username`, `stones_to_remove`,
  `queue_after`, `capitalize_word`, `sort_summands`, `is_reverse`,
  `normalize_case`, `xor_digits`, `abbreviate`, `game_winner`,
  `produces_output`, `restore_song` and `is_dangerous`.
- `cfkit.counting`: problems about sequences and tallies. It has
  `bit_plus_plus`, `count_groups`, `taxis_needed`, `is_in_equilibrium`,
  `odd_one_out`, `is_easy`, `tram_capacity`, `invert_presents`, `advancers`,
  `average_fraction`, `horseshoes_to_buy`, `problems_solved`,
  `moves_to_center`, `free_rooms`, `road_width`, `hulk_feeling`,
  `min_coins_taken`, `gravity_flip` and `longest_non_decreasing`.
- `cfkit.replace`: `replace_character` changes one character of a string
  to the most common one. The helpers `most_repeated` and `least_repeated`
  return a `(character, index)` pair. They can leave out one excluded
  character.

```python
from cfkit.arithmetic import theatre_square
from cfkit.text import abbreviate

theatre_square(6, 6, 4)                 # 4
abbreviate("localization")              # "l10n"
```

When an input cannot have an answer, the functions raise `ValueError`. This
happens, for example, with a non-positive flagstone size, a position outside
`1..n`, or a matrix that is not 5x5.

## Command line

`cfkit` takes a problem identifier. It reads that problem's input from
standard input, or from a file given as a second argument, and prints the
answer:

```
echo 8 | cfkit 4A
```

This prints `YES`. Run `cfkit --help` to see the usage.

Problem identifiers do not depend on case. These are the known ones:

1A, 4A, 25A, 41A, 50A, 58A, 59A, 61A, 69A, 71A, 96A, 110A, 112A, 116A,
118A, 122A, 133A, 136A, 158A, 158B, 160A, 200B, 208A, 228A, 231A, 236A,
263A, 266A, 266B, 271A, 281A, 282A, 318A, 339A, 344A, 405A, 467A, 479A,
486A, 546A, 580A, 617A, 677A, 705A, 734A, 750A, 791A, 977A, 1030A, 1294A,
1915C, 2047B.

Some inputs cannot be used:

- an unknown problem identifier
- input that ends early or has a malformed number
- a file that cannot be read

In each of these cases the tool prints a message starting with `cfkit:` to
standard error and exits with status 1.

The same work is available from Python:

- `cfkit.cli.solve(problem, text)` returns the output as a string, without a final newline.
- `cfkit.cli.problems()` lists the known identifiers.

## What it does not do

cfkit only computes answers from input you give it. It does not download
problem statements, submit solutions, or check answers against expected
output.