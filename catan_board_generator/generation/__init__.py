"""Randomized resource and number layers with violation scoring."""

from .numbers import MAX_NUMBER_TRIALS, generate_numbers
from .randomizer import (
    generate_board,
    validate_hot_token_spacing,
    validate_standard_counts,
)
from .resources import MAX_RESOURCE_TRIALS, count_same_resource_neighbors, generate_resources
from .scoring import PIP_VALUES, VertexPips, is_hot, pip_value, score_numbers, vertex_pip_sums
from .seeding import derive_seed, draw_seed
from .types import (
    BoardBreakdown,
    BoardConfig,
    GeneratedBoard,
    NumberLayer,
    NumberLayerConfig,
    NumberScore,
    ResourceLayer,
    ResourceLayerConfig,
    ViolationBreakdown,
)

__all__ = [
    "MAX_NUMBER_TRIALS",
    "MAX_RESOURCE_TRIALS",
    "PIP_VALUES",
    "BoardBreakdown",
    "BoardConfig",
    "GeneratedBoard",
    "NumberLayer",
    "NumberLayerConfig",
    "NumberScore",
    "ResourceLayer",
    "ResourceLayerConfig",
    "VertexPips",
    "ViolationBreakdown",
    "count_same_resource_neighbors",
    "derive_seed",
    "draw_seed",
    "generate_board",
    "generate_numbers",
    "generate_resources",
    "is_hot",
    "pip_value",
    "score_numbers",
    "validate_hot_token_spacing",
    "validate_standard_counts",
    "vertex_pip_sums",
]
