from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from catan_board_generator.domain.board import HOT_TOKENS, STANDARD_GRID, HexGrid, Point, VertexKey, vertex_key

from .types import NumberScore, ViolationBreakdown

PIP_VALUES = {
    2: 1,
    3: 2,
    4: 3,
    5: 4,
    6: 5,
    8: 5,
    9: 4,
    10: 3,
    11: 2,
    12: 1,
}


@dataclass(frozen=True)
class VertexPips:
    key: VertexKey
    point: Point
    score: int
    tile_count: int

    @property
    def is_interior(self) -> bool:
        return self.tile_count == 3


def pip_value(token_number: Optional[int]) -> int:
    if token_number is None:
        return 0
    return PIP_VALUES.get(token_number, 0)


def is_hot(token_number: Optional[int]) -> bool:
    return token_number in HOT_TOKENS


def vertex_pip_sums(
    numbers: Sequence[Optional[int]],
    size: float = 1.0,
    grid: HexGrid = STANDARD_GRID,
) -> Dict[VertexKey, VertexPips]:
    """Sum pip values onto every hexagon corner.

    Each cell adds its token's pip value to all six of its corners, so a corner
    shared by three cells ends up with the production score of that spot. The
    returned points are at ``size``; the keys are divided by ``size`` before
    rounding, so sums taken at display size line up with the search's unit-size
    violation keys.
    """
    if len(numbers) != len(grid):
        raise ValueError(f"Expected {len(grid)} number slots, received {len(numbers)}.")

    sums: Dict[VertexKey, VertexPips] = {}
    for cell_index, token_number in enumerate(numbers):
        value = pip_value(token_number)
        for corner_index in range(6):
            point = grid.corner_of(cell_index, corner_index, size)
            key = vertex_key(point, size)
            previous = sums.get(key)
            if previous is None:
                sums[key] = VertexPips(key=key, point=point, score=value, tile_count=1)
            else:
                sums[key] = VertexPips(
                    key=key,
                    point=previous.point,
                    score=previous.score + value,
                    tile_count=previous.tile_count + 1,
                )
    return sums


def score_numbers(
    numbers: Sequence[Optional[int]],
    *,
    pip_min: int,
    pip_max: int,
    no_same_neighbors: bool,
    desert_index: Optional[int] = None,
    grid: HexGrid = STANDARD_GRID,
) -> NumberScore:
    if len(numbers) != len(grid):
        raise ValueError(f"Expected {len(grid)} number slots, received {len(numbers)}.")

    hot_tiles: set[int] = set()
    same_number_tiles: set[int] = set()
    for cell_index, token_number in enumerate(numbers):
        if cell_index == desert_index or token_number is None:
            continue
        neighbor_tokens = [numbers[neighbor] for neighbor in grid.neighbors_of(cell_index)]
        if is_hot(token_number) and any(is_hot(neighbor) for neighbor in neighbor_tokens):
            hot_tiles.add(cell_index)
        if no_same_neighbors and token_number in neighbor_tokens:
            same_number_tiles.add(cell_index)

    pip_below: set[VertexKey] = set()
    pip_above: set[VertexKey] = set()
    for vertex in grid.interior_vertices():
        score = sum(pip_value(numbers[cell_index]) for cell_index in vertex.cell_ids)
        if score < pip_min:
            pip_below.add(vertex.key)
        elif score > pip_max:
            pip_above.add(vertex.key)

    return NumberScore(
        breakdown=ViolationBreakdown(
            hot_adjacency=len(hot_tiles),
            same_number_adjacency=len(same_number_tiles),
            pip_below=len(pip_below),
            pip_above=len(pip_above),
        ),
        hot_tiles=frozenset(hot_tiles),
        same_number_tiles=frozenset(same_number_tiles),
        pip_below_vertices=frozenset(pip_below),
        pip_above_vertices=frozenset(pip_above),
    )
