# algocollection

A small library of classic algorithms and data structures, each in its own
module and usable on its own. It has no dependencies beyond the standard
library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## What is inside

| Module | Contents |
| --- | --- |
| `algocollection.sorting` | `merge_sort`, `quick_sort`, `quick_sort_classic`, `insertion_sort` (each returns a sorted copy) |
| `algocollection.graphs` | `build_adjacency`, `bfs`, `dijkstra`, `format_distances`, `has_cycle` |
| `algocollection.linked_list` | `Node`, `push`, `from_values`, `iter_values`, `format_list`, `add_two_lists`, `reverse` |
| `algocollection.infix` | `infix_to_postfix`, `precedence`, `ExpressionError` |
| `algocollection.text` | `is_anagram`, `is_palindrome` |
| `algocollection.trie` | `Trie` with `insert`, `search`, `starts_with` |
| `algocollection.tree` | `TreeNode`, `inorder` |
| `algocollection.hanoi` | `Move`, `hanoi_moves` |
| `algocollection.arith` | `gcd`, `lcm`, `factorial`, `triangular`, `is_prime`, `is_perfect_square`, `integer_sqrt`, `reverse_integer`, `hamming_weight` |
| `algocollection.arrays` | `max_cake_area`, `two_sum_sorted`, `rotate`, `search_insert`, `max_subarray`, `merge_sorted_into` |

## Examples

```python
from algocollection.sorting import merge_sort
from algocollection.text import is_anagram, is_palindrome
from algocollection.trie import Trie
from algocollection.infix import infix_to_postfix
from algocollection.graphs import dijkstra, EXAMPLE_GRAPH

merge_sort([12, 11, 13, 5, 6, 7])      # [5, 6, 7, 11, 12, 13]
is_anagram("gram", "arm")              # False
is_palindrome("A man, a plan, a canal: Panama")  # True
infix_to_postfix("a+b*c")              # "abc*+"
dijkstra(EXAMPLE_GRAPH, 0)             # [0, 4, 12, 19, 21, 11, 9, 8, 14]

trie = Trie()
trie.insert("apple")
trie.search("apple")      # True
trie.starts_with("app")   # True
```

Some behaviours worth knowing:

- `infix_to_postfix` treats every non-operator character as a one-character
  operand and skips spaces and tabs. An unmatched `)` raises `ExpressionError`;
  an unmatched `(` is copied to the output as it is.
- `dijkstra` takes an adjacency matrix where `0` means no edge; unreachable
  vertices get `graphs.UNREACHABLE` (2**31 - 1).
- `Trie` accepts only the letters `a` to `z` and raises `ValueError` otherwise.
- `two_sum_sorted` returns 1-based positions and raises `ValueError` when no
  pair matches; `max_subarray` raises `ValueError` on an empty sequence.
- `reverse_integer` returns 0 when the reversed value would not fit a signed
  32-bit integer; `hamming_weight` counts bits of the value taken as unsigned
  32-bit.
- `rotate` and `merge_sorted_into` change their list argument in place.

## Commands

Installing the package also installs a few small command-line programs:

- `algo-sort [-a {insertion,merge,quick,quick-classic}] [numbers ...]` – sorts
  the integers given; with none, reads `n v1 ... vn` from standard input.
  Merge sort is the default.
- `algo-graphs [bfs|dijkstra]` – `dijkstra` (the default) prints the distance
  table for a built-in nine-vertex example graph from vertex 0; `bfs` reads
  `size edge_count x1 y1 x2 y2 ...` from standard input and prints the
  breadth-first order.
- `algo-infix [expression]` – prints the postfix form of the expression, read
  from standard input when not given.
- `algo-add-lists` – adds 75946 and 84 stored as linked lists of digits and
  prints the lists and the result.
- `algo-hanoi [disks]` – prints the moves that carry the disks (3 by default)
  from rod A to rod C.

Run any of them with `--help` to see its options.