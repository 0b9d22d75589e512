from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from catan_board_generator.domain.board import STANDARD_GRID, HexGrid, Resource, resource_bag

from .types import ResourceLayer, ResourceLayerConfig

MAX_RESOURCE_TRIALS = 20_000


def generate_resources(
    config: Optional[ResourceLayerConfig] = None,
    seed: Optional[int] = None,
    *,
    max_trials: int = MAX_RESOURCE_TRIALS,
    grid: HexGrid = STANDARD_GRID,
) -> ResourceLayer:
    """Shuffle the resource bag until no two neighbouring tiles share a resource.

    Without ``prevent_same_resources`` every shuffle scores zero, so the first
    one wins. Otherwise the lowest-scoring shuffle within ``max_trials`` is kept.
    """
    config = config or ResourceLayerConfig()
    rng = random.Random(seed)
    pool = resource_bag()
    center_index = grid.center_index

    best: Optional[ResourceLayer] = None
    trials = 0
    while trials < max_trials:
        trials += 1
        resources = pool[:]
        rng.shuffle(resources)
        if config.keep_desert_center:
            _move_desert_to(resources, center_index)

        if config.prevent_same_resources:
            violation_count, violating_cells = count_same_resource_neighbors(resources, grid)
        else:
            violation_count, violating_cells = 0, frozenset()

        if best is None or violation_count < best.violation_count:
            best = ResourceLayer(
                resources=tuple(resources),
                desert_index=resources.index(Resource.DESERT),
                violation_count=violation_count,
                violating_cells=violating_cells,
            )
            if violation_count == 0:
                break

    if best is None:
        resources = pool[:]
        if config.keep_desert_center:
            _move_desert_to(resources, center_index)
        best = ResourceLayer(resources=tuple(resources), desert_index=resources.index(Resource.DESERT))

    return ResourceLayer(
        resources=best.resources,
        desert_index=best.desert_index,
        violation_count=best.violation_count,
        violating_cells=best.violating_cells,
        trials=trials,
    )


def count_same_resource_neighbors(
    resources: Sequence[Resource],
    grid: HexGrid = STANDARD_GRID,
) -> Tuple[int, frozenset[int]]:
    # A cell counts once, on its first matching neighbour, and flags that neighbour too.
    violation_count = 0
    violating_cells: set[int] = set()
    for cell_index, resource in enumerate(resources):
        for neighbor in grid.neighbors_of(cell_index):
            if resources[neighbor] is resource:
                violation_count += 1
                violating_cells.add(cell_index)
                violating_cells.add(neighbor)
                break
    return violation_count, frozenset(violating_cells)


def _move_desert_to(resources: List[Resource], target_index: int) -> None:
    desert_index = resources.index(Resource.DESERT)
    if desert_index != target_index:
        resources[desert_index], resources[target_index] = resources[target_index], Resource.DESERT
