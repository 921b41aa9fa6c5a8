"""Reachability checks for so_long maps."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

TILE_SIZE = 32

_WALKER = set("POK")
_FLOOR_MARKS = {"0": "O", "C": "K"}


class InvalidMapError(ValueError):
    """Raised when a map cannot be completed."""


def _neighbours(grid: list[list[str]], y: int, x: int):
    for ny, nx in ((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)):
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]):
            yield ny, nx


def mark_reachable(grid: Iterable[str]) -> list[str]:
    """Return a copy of ``grid`` with every tile reachable from the player marked.

    Reachable floor ('0') becomes 'O' and reachable coins ('C') become 'K'.
    """
    cells = [list(row) for row in grid]
    queue = deque(
        (y, x) for y, row in enumerate(cells) for x, tile in enumerate(row) if tile in _WALKER
    )
    while queue:
        y, x = queue.popleft()
        for ny, nx in _neighbours(cells, y, x):
            mark = _FLOOR_MARKS.get(cells[ny][nx])
            if mark is not None:
                cells[ny][nx] = mark
                queue.append((ny, nx))
    return ["".join(row) for row in cells]


def exit_reachable(grid: Iterable[str]) -> bool:
    """Tell whether any exit touches the player or a marked tile."""
    cells = [list(row) for row in grid]
    return any(
        cells[ny][nx] in _WALKER
        for y, row in enumerate(cells)
        for x, tile in enumerate(row)
        if tile == "E"
        for ny, nx in _neighbours(cells, y, x)
    )


def check_route(grid: Iterable[str]) -> bool:
    """Check that every coin can be collected and report whether the exit is reachable.

    Raises InvalidMapError if a coin is out of reach.
    """
    marked = mark_reachable(grid)
    if any("C" in row for row in marked):
        raise InvalidMapError("Error\nInvalid map")
    return exit_reachable(marked)