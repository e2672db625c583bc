import io

import pytest

from algocollection.sorting import (
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    quick_sort_classic,
)

CASES = [
    [],
    [1],
    [12, 11, 13, 5, 6, 7],
    [2, 1, 5, 3, 9, 8],
    [12, 11, 13, 5, 6],
    [3, 1, 2],
    [2, 2],
    [5, 5, 5, 1, 5],
    list(range(50)),
    list(range(50, 0, -1)),
    [0, -3, 7, -3, 2, 9, 0, -1],
]


@pytest.mark.parametrize("values", CASES)
def test_sorts_match_builtin(values):
    expected = sorted(values)
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert quick_sort_classic(values) == expected
    assert insertion_sort(values) == expected


def test_input_not_modified():
    values = [4, 2, 3, 1]
    original = list(values)
    assert merge_sort(values) == [1, 2, 3, 4]
    assert quick_sort(values) == [1, 2, 3, 4]
    assert quick_sort_classic(values) == [1, 2, 3, 4]
    assert insertion_sort(values) == [1, 2, 3, 4]
    assert values == original


def test_accepts_iterables():
    values = (9, 8, 7)
    expected = sorted(values)
    assert merge_sort(iter(values)) == expected
    assert quick_sort(iter(values)) == expected
    assert quick_sort_classic(iter(values)) == expected
    assert insertion_sort(iter(values)) == expected


def test_long_sorted_input_does_not_overflow_stack():
    values = list(range(3000))
    assert merge_sort(values) == values
    assert quick_sort(values) == values
    assert quick_sort_classic(values) == values
    assert insertion_sort(values) == values


def test_merge_sort_is_stable():
    class Key:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __le__(self, other):
            return self.key <= other.key

    items = [Key(1, "a"), Key(0, "b"), Key(1, "c"), Key(0, "d")]
    assert [k.tag for k in merge_sort(items)] == ["b", "d", "a", "c"]


def test_sorts_strings():
    words = ["pear", "apple", "fig"]
    assert quick_sort(words) == sorted(words)


def test_main_with_arguments(capsys):
    assert main(["-a", "quick", "3", "1", "2"]) == 0
    assert capsys.readouterr().out.split() == ["1", "2", "3"]


def test_main_reads_counted_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n9 -1 4 4 100\n"))
    assert main(["--algorithm", "insertion"]) == 0
    out = [int(x) for x in capsys.readouterr().out.split()]
    assert out == sorted([9, -1, 4, 4])


def test_main_short_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n1 2\n"))
    assert main([]) == 1