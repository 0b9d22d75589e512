"""Hex grid model and board constants."""

from .board import (
    HOT_TOKENS,
    NUMBER_TOKENS,
    RESOURCE_COUNTS,
    STANDARD_GRID,
    HexCell,
    HexGrid,
    Resource,
    Vertex,
    VertexKey,
    axial_to_pixel,
    build_layout,
    hex_corner,
    resource_bag,
    vertex_key,
)

__all__ = [
    "HOT_TOKENS",
    "NUMBER_TOKENS",
    "RESOURCE_COUNTS",
    "STANDARD_GRID",
    "HexCell",
    "HexGrid",
    "Resource",
    "Vertex",
    "VertexKey",
    "axial_to_pixel",
    "build_layout",
    "hex_corner",
    "resource_bag",
    "vertex_key",
]
