from __future__ import annotations

from typing import Any, Dict, Iterable, List

from rich.table import Table
from rich.text import Text

from catan_board_generator.domain.board import STANDARD_GRID, HexGrid, Resource, VertexKey
from catan_board_generator.generation.scoring import is_hot, vertex_pip_sums
from catan_board_generator.generation.types import GeneratedBoard

DISPLAY_SIZE = 50.0
CELL_WIDTH = 10

RESOURCE_STYLES = {
    Resource.WOOD: "bold green4",
    Resource.SHEEP: "bold pale_green3",
    Resource.WHEAT: "bold gold1",
    Resource.BRICK: "bold dark_orange",
    Resource.ORE: "bold grey50",
    Resource.DESERT: "dim",
}

# Highest priority first: hot > same number > same resource.
HOT_STYLE = "bold white on red3"
SAME_NUMBER_STYLE = "bold black on dark_orange3"
SAME_RESOURCE_STYLE = "underline"
PIP_ABOVE_STYLE = "bold white on red3"
PIP_BELOW_STYLE = "bold white on blue3"


def render_board(board: GeneratedBoard, grid: HexGrid = STANDARD_GRID) -> Text:
    rows: Dict[int, List[int]] = {}
    for cell in grid.cells:
        rows.setdefault(cell.r, []).append(cell.id)
    widest = max(len(row) for row in rows.values())

    text = Text()
    for r in sorted(rows):
        row = rows[r]
        text.append(" " * ((widest - len(row)) * CELL_WIDTH // 2))
        for cell_index in row:
            label, style = _cell_label(board, cell_index)
            text.append(label.center(CELL_WIDTH), style=style)
        text.append("\n")
    return text


def _cell_label(board: GeneratedBoard, cell_index: int) -> tuple[str, str]:
    resource = board.resources[cell_index]
    token_number = board.numbers[cell_index]
    label = resource.value if token_number is None else f"{resource.value} {token_number}"

    if cell_index in board.hot_tiles:
        return label, HOT_STYLE
    if cell_index in board.same_number_tiles:
        return label, SAME_NUMBER_STYLE
    style = RESOURCE_STYLES[resource]
    if cell_index in board.same_resource_tiles:
        style = f"{style} {SAME_RESOURCE_STYLE}"
    if is_hot(token_number):
        style = f"{style} reverse"
    return label, style


def breakdown_table(board: GeneratedBoard) -> Table:
    breakdown = board.breakdown
    config = board.config
    table = Table(title=f"Violations: {breakdown.total}")
    table.add_column("Rule")
    table.add_column("Count", justify="right")
    table.add_row("6/8 next to 6/8", str(breakdown.hot_adjacency))
    table.add_row(
        "Identical neighbouring numbers" + ("" if config.no_same_neighbors else " (off)"),
        str(breakdown.same_number_adjacency),
    )
    table.add_row(
        "Neighbouring resources" + ("" if config.prevent_same_resources else " (off)"),
        str(breakdown.same_resource_adjacency),
    )
    table.add_row(f"Corner score below {config.pip_min}", str(breakdown.pip_below))
    table.add_row(f"Corner score above {config.pip_max}", str(breakdown.pip_above))
    return table


def corner_scores_table(
    board: GeneratedBoard,
    size: float = DISPLAY_SIZE,
    grid: HexGrid = STANDARD_GRID,
) -> Table:
    table = Table(title="Corner scores")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("Tiles")
    table.add_column("Score", justify="right")

    sums = vertex_pip_sums(board.numbers, size=size, grid=grid)
    grid_vertices = grid.vertices
    for vertex in sorted(sums.values(), key=lambda item: (item.key[1], item.key[0])):
        if not vertex.is_interior:
            continue
        style = None
        if vertex.key in board.pip_above_vertices:
            style = PIP_ABOVE_STYLE
        elif vertex.key in board.pip_below_vertices:
            style = PIP_BELOW_STYLE
        tiles = ",".join(str(cell_index) for cell_index in grid_vertices[vertex.key].cell_ids)
        table.add_row(
            f"{vertex.point[0]:.1f}",
            f"{vertex.point[1]:.1f}",
            tiles,
            str(vertex.score),
            style=style,
        )
    return table


def board_payload(board: GeneratedBoard) -> Dict[str, Any]:
    config = board.config
    breakdown = board.breakdown
    return {
        "resource_seed": board.resource_seed,
        "number_seed": board.number_seed,
        "config": {
            "prevent_same_resources": config.prevent_same_resources,
            "keep_desert_center": config.keep_desert_center,
            "no_same_neighbors": config.no_same_neighbors,
            "pip_min": config.pip_min,
            "pip_max": config.pip_max,
        },
        "resources": [resource.value for resource in board.resources],
        "numbers": list(board.numbers),
        "desert_index": board.desert_index,
        "breakdown": {
            "hot_adjacency": breakdown.hot_adjacency,
            "same_number_adjacency": breakdown.same_number_adjacency,
            "same_resource_adjacency": breakdown.same_resource_adjacency,
            "pip_below": breakdown.pip_below,
            "pip_above": breakdown.pip_above,
            "total": breakdown.total,
        },
        "hot_tiles": sorted(board.hot_tiles),
        "same_number_tiles": sorted(board.same_number_tiles),
        "same_resource_tiles": sorted(board.same_resource_tiles),
        "pip_below_vertices": _vertex_list(board.pip_below_vertices),
        "pip_above_vertices": _vertex_list(board.pip_above_vertices),
    }


def _vertex_list(keys: Iterable[VertexKey]) -> List[List[float]]:
    return [[key[0], key[1]] for key in sorted(keys)]
