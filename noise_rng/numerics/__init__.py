from .blocks import (
    draw_block,
    hash_byte_rows,
    hash_grid,
    hash_rows,
    to_unit_float32,
    to_unit_float64,
)

__all__ = [
    "draw_block",
    "hash_byte_rows",
    "hash_grid",
    "hash_rows",
    "to_unit_float32",
    "to_unit_float64",
]
