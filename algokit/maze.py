"""Rat-in-a-maze path finding by backtracking, moving down or right."""

from __future__ import annotations

from collections.abc import Sequence


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Return a grid marking a path from the top-left to the bottom-right cell.

    Cells holding 1 are open. The path moves only down or right, trying down
    first. Returns None when no such path exists.
    """
    rows = len(maze)
    if rows == 0 or len(maze[0]) == 0:
        raise ValueError("maze must have at least one cell")
    cols = len(maze[0])
    if any(len(row) != cols for row in maze):
        raise ValueError("maze rows differ in length")

    solution = [[0] * cols for _ in range(rows)]
    dead_ends: set[tuple[int, int]] = set()

    def is_open(x: int, y: int) -> bool:
        return 0 <= x < rows and 0 <= y < cols and maze[x][y] == 1

    def walk(x: int, y: int) -> bool:
        if x == rows - 1 and y == cols - 1 and maze[x][y] == 1:
            solution[x][y] = 1
            return True
        if not is_open(x, y) or solution[x][y] == 1 or (x, y) in dead_ends:
            return False
        solution[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        solution[x][y] = 0
        dead_ends.add((x, y))
        return False

    return solution if walk(0, 0) else None