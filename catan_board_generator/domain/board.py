from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

Point = Tuple[float, float]
VertexKey = Tuple[float, float]

BOARD_RADIUS = 2
CORNER_ROUNDING = 3

AXIAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


class Resource(str, Enum):
    WOOD = "wood"
    SHEEP = "sheep"
    WHEAT = "wheat"
    BRICK = "brick"
    ORE = "ore"
    DESERT = "desert"


RESOURCE_COUNTS: Dict[Resource, int] = {
    Resource.WOOD: 4,
    Resource.SHEEP: 4,
    Resource.WHEAT: 4,
    Resource.BRICK: 3,
    Resource.ORE: 3,
    Resource.DESERT: 1,
}

NUMBER_TOKENS: Tuple[int, ...] = (2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12)
HOT_TOKENS = frozenset({6, 8})


def resource_bag() -> List[Resource]:
    bag: List[Resource] = []
    for resource, count in RESOURCE_COUNTS.items():
        bag.extend([resource] * count)
    return bag


@dataclass(frozen=True)
class HexCell:
    id: int
    q: int
    r: int
    center: Point
    corner_points: Tuple[Point, ...]

    @property
    def s(self) -> int:
        return -self.q - self.r


@dataclass(frozen=True)
class Vertex:
    key: VertexKey
    point: Point
    cell_ids: Tuple[int, ...]

    @property
    def is_interior(self) -> bool:
        return len(self.cell_ids) == 3


@dataclass(frozen=True)
class HexGrid:
    """Fixed 19-cell board: cells in row order, adjacency and shared corners.

    Everything is computed at unit size. Callers that draw at another size pass
    ``size`` to :meth:`center_of` / :meth:`corner_of`; vertex keys are normalized
    by size so they match across sizes.
    """

    cells: Tuple[HexCell, ...]
    _index_by_coord: Dict[Tuple[int, int], int] = field(init=False, repr=False, compare=False)
    _neighbors: Tuple[Tuple[int, ...], ...] = field(init=False, repr=False, compare=False)
    _vertices: Dict[VertexKey, Vertex] = field(init=False, repr=False, compare=False)
    _cell_vertex_keys: Tuple[Tuple[VertexKey, ...], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index_by_coord = {(cell.q, cell.r): cell.id for cell in self.cells}
        neighbors = tuple(
            tuple(
                index_by_coord[(cell.q + dq, cell.r + dr)]
                for dq, dr in AXIAL_DIRECTIONS
                if (cell.q + dq, cell.r + dr) in index_by_coord
            )
            for cell in self.cells
        )
        vertices, cell_vertex_keys = _build_vertices(self.cells)
        object.__setattr__(self, "_index_by_coord", index_by_coord)
        object.__setattr__(self, "_neighbors", neighbors)
        object.__setattr__(self, "_vertices", vertices)
        object.__setattr__(self, "_cell_vertex_keys", cell_vertex_keys)

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def center_index(self) -> int:
        index = self.index_of(0, 0)
        assert index is not None
        return index

    @property
    def vertices(self) -> Dict[VertexKey, Vertex]:
        return dict(self._vertices)

    def index_of(self, q: int, r: int) -> Optional[int]:
        return self._index_by_coord.get((q, r))

    def neighbors_of(self, index: int) -> Tuple[int, ...]:
        return self._neighbors[index]

    def center_of(self, index: int, size: float = 1.0) -> Point:
        cell = self.cells[index]
        return axial_to_pixel(cell.q, cell.r, size)

    def corner_of(self, index: int, corner_index: int, size: float = 1.0) -> Point:
        return hex_corner(self.center_of(index, size), size, corner_index)

    def vertex_keys_of(self, index: int) -> Tuple[VertexKey, ...]:
        return self._cell_vertex_keys[index]

    def interior_vertices(self) -> List[Vertex]:
        return [vertex for vertex in self._vertices.values() if vertex.is_interior]


def build_layout(radius: int = BOARD_RADIUS) -> Tuple[HexCell, ...]:
    cells: List[HexCell] = []
    for r in range(-radius, radius + 1):
        q_min = max(-radius, -r - radius)
        q_max = min(radius, -r + radius)
        for q in range(q_min, q_max + 1):
            center = axial_to_pixel(q, r, 1.0)
            corners = tuple(hex_corner(center, 1.0, corner_index) for corner_index in range(6))
            cells.append(HexCell(id=len(cells), q=q, r=r, center=center, corner_points=corners))
    return tuple(cells)


def axial_to_pixel(q: int, r: int, size: float = 1.0) -> Point:
    x = size * (math.sqrt(3) * q + (math.sqrt(3) / 2) * r)
    y = size * (1.5 * r)
    return (x, y)


def hex_corner(center: Point, size: float, corner_index: int) -> Point:
    angle_rad = math.radians(60 * corner_index + 30)
    return (
        center[0] + size * math.cos(angle_rad),
        center[1] + size * math.sin(angle_rad),
    )


def vertex_key(point: Point, size: float = 1.0) -> VertexKey:
    # 0.0 + ... folds -0.0 into 0.0 so keys print the same way.
    return (
        0.0 + round(point[0] / size, CORNER_ROUNDING),
        0.0 + round(point[1] / size, CORNER_ROUNDING),
    )


def _build_vertices(
    cells: Sequence[HexCell],
) -> Tuple[Dict[VertexKey, Vertex], Tuple[Tuple[VertexKey, ...], ...]]:
    vertex_points: Dict[VertexKey, Point] = {}
    vertex_cells: Dict[VertexKey, set[int]] = {}
    cell_vertex_keys: List[Tuple[VertexKey, ...]] = []

    for cell in cells:
        keys: List[VertexKey] = []
        for corner_point in cell.corner_points:
            key = vertex_key(corner_point)
            if key not in vertex_points:
                vertex_points[key] = corner_point
                vertex_cells[key] = set()
            vertex_cells[key].add(cell.id)
            keys.append(key)
        cell_vertex_keys.append(tuple(keys))

    vertices = {
        key: Vertex(key=key, point=vertex_points[key], cell_ids=tuple(sorted(vertex_cells[key])))
        for key in vertex_points
    }
    return vertices, tuple(cell_vertex_keys)


STANDARD_GRID = HexGrid(cells=build_layout())
