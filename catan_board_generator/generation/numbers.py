from __future__ import annotations

import random
from typing import List, Optional

from catan_board_generator.domain.board import NUMBER_TOKENS, STANDARD_GRID, HexGrid

from .scoring import score_numbers
from .types import NumberLayer, NumberLayerConfig, NumberScore

MAX_NUMBER_TRIALS = 7_000


def generate_numbers(
    desert_index: int,
    config: Optional[NumberLayerConfig] = None,
    seed: Optional[int] = None,
    *,
    max_trials: int = MAX_NUMBER_TRIALS,
    grid: HexGrid = STANDARD_GRID,
) -> NumberLayer:
    """Deal number tokens onto every non-desert tile, keeping the best deal.

    Deals are scored on hot-token adjacency, identical neighbours (when enabled)
    and interior corner pip sums outside ``[pip_min, pip_max]``. The search stops
    on the first deal with no violations.
    """
    config = config or NumberLayerConfig()
    if not 0 <= desert_index < len(grid):
        raise ValueError(f"Desert index {desert_index} is outside the board.")

    rng = random.Random(seed)
    bag = list(NUMBER_TOKENS)
    rng.shuffle(bag)

    best_numbers: Optional[List[Optional[int]]] = None
    best_score: Optional[NumberScore] = None
    trials = 0
    while trials < max_trials:
        trials += 1
        numbers = deal_tokens(bag, desert_index, len(grid))
        score = score_numbers(
            numbers,
            pip_min=config.pip_min,
            pip_max=config.pip_max,
            no_same_neighbors=config.no_same_neighbors,
            desert_index=desert_index,
            grid=grid,
        )
        if best_score is None or score.breakdown.total < best_score.breakdown.total:
            best_numbers, best_score = numbers, score
            if score.breakdown.total == 0:
                break
        rng.shuffle(bag)

    if best_numbers is None or best_score is None:
        return NumberLayer(numbers=(None,) * len(grid), trials=trials)

    return NumberLayer(
        numbers=tuple(best_numbers),
        breakdown=best_score.breakdown,
        hot_tiles=best_score.hot_tiles,
        same_number_tiles=best_score.same_number_tiles,
        pip_below_vertices=best_score.pip_below_vertices,
        pip_above_vertices=best_score.pip_above_vertices,
        trials=trials,
    )


def deal_tokens(bag: List[int], desert_index: int, cell_count: int) -> List[Optional[int]]:
    expected = cell_count - 1
    if len(bag) != expected:
        raise ValueError(f"Expected {expected} number tokens, received {len(bag)}.")

    numbers: List[Optional[int]] = []
    tokens = iter(bag)
    for cell_index in range(cell_count):
        numbers.append(None if cell_index == desert_index else next(tokens))
    return numbers
