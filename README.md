# paxkit

A small collection of pure-Python helpers with no dependencies.

- `paxkit.comparison`: chained comparisons (`lt`, `le`, `eq`, `ne`, `ge`, `gt`),
  predicates such as `is_negative`, `is_finite` and `is_nan`, `every`/`some`/`none`,
  `abs_diff`, `in_range`, `minimum`/`maximum`/`mid`, approximate equality
  (`similar`, `about_zero`, `default_digits`) and the `Minmax` accumulator.
- `paxkit.sequences`: slicing and searching helpers for sequences and strings:
  `first`, `last`, `not_first`, `not_last`, `subview`, `find`, `find_sub`,
  `find_if`, `rfind`, `until`, `starts_with`, `trim`, `split_at`, `split_by`,
  `split_by_sub`, and pairwise checks such as `all_pairs` and `any_pairs`.
  Counts past the end are clamped and a failed search returns the length of the
  sequence instead of raising.
- `paxkit.text`: newline-aware helpers (`find_newline`, `split_by_newline`,
  `trim_last_newline`, `identify_newline`, `split_all`) and `luhn_sum`.
- `paxkit.ordered`: `OrderedVector`, a container of floats that appends cheaply
  and sorts lazily when `ordered()` is called.

## Installation

```
pip install paxkit
```

## Examples

```python
from paxkit.comparison import lt, similar, Minmax
from paxkit.sequences import first, find, trim, split_by_sub
from paxkit.text import split_all, identify_newline, luhn_sum
from paxkit.ordered import OrderedVector

lt(1, 2, 3)                         # True
similar(1.0, 1.0 + 1e-12, 8)        # True

mm = Minmax(3, 1, 4)
mm.add(0)
mm.to_dict()                        # {"min": 0, "max": 4}

first("hello", 2)                   # "he"
find([1, 2, 3], 5)                  # 3 (not found: the length)
trim("  hi  ", " ")                 # "hi"
split_by_sub("key=value", "=")      # ("key", "value")

list(split_all("a\nb\r\nc"))        # ["a", "b", "c"]
identify_newline("x\r\ny")          # "\r\n"
luhn_sum("12")                      # 4

ov = OrderedVector([3, 1, 2])
ov.append(0)
ov.ordered()                        # (0.0, 1.0, 2.0, 3.0)
```

## What this package does not do

paxkit is a library only. It has no command-line tool, does not parse
command-line arguments, does not build formatted error reports, and does not
read point-cloud data or compute metrics over it.

## Running the tests

```
pip install -e ".[test]"
pytest
```