"""
inputs.py — Random Input Generation
=====================================
Backs the "generate input" command.  Every generator takes an optional
seed and draws from its own random.Random, so the same seed always
produces the same input.
"""

import random
from typing import List, Optional, Tuple

from engine.validation import MAX_ARRAY_LENGTH, MAX_GRAPH_NODES, ValidationError
from graph import Graph


ARRAY_SIZE_RANGE  = (5, 15)
VALUE_RANGE       = (1, 100)
TARGET_HIT_CHANCE = 0.7


def _check_size(size: Optional[int], limit: int, what: str) -> None:
    if size is not None and not 1 <= size <= limit:
        raise ValidationError(f"{what} must be between 1 and {limit}, got {size}")


def generate_array(size: Optional[int] = None, seed: Optional[int] = None) -> List[int]:
    """`size` integers (5..15 when not given), each in 1..100."""
    _check_size(size, MAX_ARRAY_LENGTH, "Array size")
    rng = random.Random(seed)
    n = size if size is not None else rng.randint(*ARRAY_SIZE_RANGE)
    return [rng.randint(*VALUE_RANGE) for _ in range(n)]


def generate_search_input(size: Optional[int] = None, seed: Optional[int] = None) -> Tuple[List[int], int]:
    """An array plus a target that is taken from the array about 70% of the time."""
    _check_size(size, MAX_ARRAY_LENGTH, "Array size")
    rng = random.Random(seed)
    n = size if size is not None else rng.randint(*ARRAY_SIZE_RANGE)
    values = [rng.randint(*VALUE_RANGE) for _ in range(n)]
    if values and rng.random() < TARGET_HIT_CHANCE:
        target = rng.choice(values)
    else:
        target = rng.randint(*VALUE_RANGE)
    return values, target


def generate_graph(num_nodes: Optional[int] = None, seed: Optional[int] = None) -> Graph:
    _check_size(num_nodes, MAX_GRAPH_NODES, "Node count")
    return Graph.generate_random(num_nodes=num_nodes, seed=seed)
