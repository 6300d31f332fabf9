"""Iterative Tower of Hanoi over pegs labelled S (source), A (auxiliary), D (destination)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """One disk moved from one peg to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move the disk {self.disk} from {self.source} to {self.target}"


def _legal_move(pegs: dict[str, list[int]], first: str, second: str) -> Move:
    one, two = pegs[first], pegs[second]
    if not one or (two and one[-1] > two[-1]):
        disk = two.pop()
        one.append(disk)
        return Move(disk, second, first)
    disk = one.pop()
    two.append(disk)
    return Move(disk, first, second)


def hanoi_moves(disk_count: int) -> list[Move]:
    """Return the moves that carry ``disk_count`` disks from peg S to peg D."""
    if disk_count < 0:
        raise ValueError("disk_count must not be negative")
    source, spare, target = "S", "A", "D"
    if disk_count % 2 == 0:
        spare, target = target, spare
    pegs: dict[str, list[int]] = {
        "S": list(range(disk_count, 0, -1)),
        "A": [],
        "D": [],
    }
    cycle = ((source, target), (source, spare), (spare, target))
    return [
        _legal_move(pegs, *cycle[step % 3]) for step in range(2**disk_count - 1)
    ]