from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from catan_board_generator.domain.board import Resource, VertexKey

PIP_BOUND_LOW = 2
PIP_BOUND_HIGH = 13


@dataclass(frozen=True)
class ResourceLayerConfig:
    prevent_same_resources: bool = False
    keep_desert_center: bool = False


@dataclass(frozen=True)
class NumberLayerConfig:
    pip_min: int = PIP_BOUND_LOW
    pip_max: int = PIP_BOUND_HIGH
    no_same_neighbors: bool = True

    def __post_init__(self) -> None:
        if not PIP_BOUND_LOW <= self.pip_min <= self.pip_max <= PIP_BOUND_HIGH:
            raise ValueError(
                f"Pip bounds must satisfy {PIP_BOUND_LOW} <= pip_min <= pip_max <= {PIP_BOUND_HIGH}, "
                f"received pip_min={self.pip_min}, pip_max={self.pip_max}."
            )


@dataclass(frozen=True)
class BoardConfig:
    prevent_same_resources: bool = False
    keep_desert_center: bool = False
    no_same_neighbors: bool = True
    pip_min: int = PIP_BOUND_LOW
    pip_max: int = PIP_BOUND_HIGH

    def __post_init__(self) -> None:
        self.number_layer()

    def resource_layer(self) -> ResourceLayerConfig:
        return ResourceLayerConfig(
            prevent_same_resources=self.prevent_same_resources,
            keep_desert_center=self.keep_desert_center,
        )

    def number_layer(self) -> NumberLayerConfig:
        return NumberLayerConfig(
            pip_min=self.pip_min,
            pip_max=self.pip_max,
            no_same_neighbors=self.no_same_neighbors,
        )


@dataclass(frozen=True)
class ViolationBreakdown:
    hot_adjacency: int = 0
    same_number_adjacency: int = 0
    pip_below: int = 0
    pip_above: int = 0

    @property
    def total(self) -> int:
        return self.hot_adjacency + self.same_number_adjacency + self.pip_below + self.pip_above


@dataclass(frozen=True)
class BoardBreakdown(ViolationBreakdown):
    same_resource_adjacency: int = 0

    @property
    def total(self) -> int:
        return super().total + self.same_resource_adjacency


@dataclass(frozen=True)
class NumberScore:
    breakdown: ViolationBreakdown
    hot_tiles: FrozenSet[int] = frozenset()
    same_number_tiles: FrozenSet[int] = frozenset()
    pip_below_vertices: FrozenSet[VertexKey] = frozenset()
    pip_above_vertices: FrozenSet[VertexKey] = frozenset()


@dataclass(frozen=True)
class ResourceLayer:
    resources: Tuple[Resource, ...]
    desert_index: int
    violation_count: int = 0
    violating_cells: FrozenSet[int] = frozenset()
    trials: int = 0


@dataclass(frozen=True)
class NumberLayer:
    numbers: Tuple[Optional[int], ...]
    breakdown: ViolationBreakdown = field(default_factory=ViolationBreakdown)
    hot_tiles: FrozenSet[int] = frozenset()
    same_number_tiles: FrozenSet[int] = frozenset()
    pip_below_vertices: FrozenSet[VertexKey] = frozenset()
    pip_above_vertices: FrozenSet[VertexKey] = frozenset()
    trials: int = 0


@dataclass(frozen=True)
class GeneratedBoard:
    resources: Tuple[Resource, ...]
    numbers: Tuple[Optional[int], ...]
    desert_index: int
    breakdown: BoardBreakdown
    resource_seed: int
    number_seed: int
    config: BoardConfig = field(default_factory=BoardConfig)
    hot_tiles: FrozenSet[int] = frozenset()
    same_number_tiles: FrozenSet[int] = frozenset()
    same_resource_tiles: FrozenSet[int] = frozenset()
    pip_below_vertices: FrozenSet[VertexKey] = frozenset()
    pip_above_vertices: FrozenSet[VertexKey] = frozenset()
