"""Moves that solve the Tower of Hanoi."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """Moving one disk from one rod to another."""

    disk: int
    from_rod: str
    to_rod: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.from_rod} to rod {self.to_rod}"


def hanoi_moves(
    n: int, from_rod: str = "A", to_rod: str = "C", aux_rod: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``from_rod`` to ``to_rod``."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    if n == 0:
        return
    yield from hanoi_moves(n - 1, from_rod, aux_rod, to_rod)
    yield Move(n, from_rod, to_rod)
    yield from hanoi_moves(n - 1, aux_rod, to_rod, from_rod)


def main(argv: list[str] | None = None) -> int:
    """Print the moves for a tower of disks, three by default."""
    parser = argparse.ArgumentParser(description="Solve the Tower of Hanoi.")
    parser.add_argument("disks", nargs="?", type=int, default=3)
    args = parser.parse_args(argv)
    if args.disks < 0:
        parser.error("number of disks must not be negative")
    for move in hanoi_moves(args.disks, "A", "C", "B"):
        print(move)
    return 0