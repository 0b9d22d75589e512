from __future__ import annotations

from typing import Dict, Optional

from catan_board_generator.domain.board import (
    HOT_TOKENS,
    NUMBER_TOKENS,
    RESOURCE_COUNTS,
    STANDARD_GRID,
    HexGrid,
    Resource,
)

from .numbers import generate_numbers
from .resources import generate_resources
from .seeding import draw_seed
from .types import BoardBreakdown, BoardConfig, GeneratedBoard


def generate_board(
    config: Optional[BoardConfig] = None,
    *,
    resource_seed: Optional[int] = None,
    number_seed: Optional[int] = None,
) -> GeneratedBoard:
    """Run the resource layer, then the number layer around its desert.

    Missing seeds are drawn fresh and stored on the result, so any board can be
    rebuilt later from ``(config, resource_seed, number_seed)``.
    """
    config = config or BoardConfig()
    resource_seed = draw_seed() if resource_seed is None else int(resource_seed)
    number_seed = draw_seed() if number_seed is None else int(number_seed)

    resource_layer = generate_resources(config.resource_layer(), seed=resource_seed)
    number_layer = generate_numbers(
        resource_layer.desert_index,
        config.number_layer(),
        seed=number_seed,
    )

    breakdown = BoardBreakdown(
        hot_adjacency=number_layer.breakdown.hot_adjacency,
        same_number_adjacency=number_layer.breakdown.same_number_adjacency,
        pip_below=number_layer.breakdown.pip_below,
        pip_above=number_layer.breakdown.pip_above,
        same_resource_adjacency=resource_layer.violation_count,
    )
    return GeneratedBoard(
        resources=resource_layer.resources,
        numbers=number_layer.numbers,
        desert_index=resource_layer.desert_index,
        breakdown=breakdown,
        resource_seed=resource_seed,
        number_seed=number_seed,
        config=config,
        hot_tiles=number_layer.hot_tiles,
        same_number_tiles=number_layer.same_number_tiles,
        same_resource_tiles=resource_layer.violating_cells,
        pip_below_vertices=number_layer.pip_below_vertices,
        pip_above_vertices=number_layer.pip_above_vertices,
    )


def validate_standard_counts(board: GeneratedBoard) -> bool:
    resource_counts: Dict[Resource, int] = {resource: 0 for resource in RESOURCE_COUNTS}
    numbers = []
    for resource, token_number in zip(board.resources, board.numbers):
        resource_counts[resource] += 1
        if resource is Resource.DESERT:
            if token_number is not None:
                return False
        elif token_number is None:
            return False
        else:
            numbers.append(token_number)

    if resource_counts != RESOURCE_COUNTS:
        return False
    if board.resources[board.desert_index] is not Resource.DESERT:
        return False

    return sorted(numbers) == sorted(NUMBER_TOKENS)


def validate_hot_token_spacing(board: GeneratedBoard, grid: HexGrid = STANDARD_GRID) -> bool:
    hot_tile_ids = {index for index, token in enumerate(board.numbers) if token in HOT_TOKENS}
    if len(hot_tile_ids) <= 1:
        return True

    for tile_id in hot_tile_ids:
        if hot_tile_ids.intersection(grid.neighbors_of(tile_id)):
            return False
    return True
