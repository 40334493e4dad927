"""
Geometry helpers shared by movement and collision
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np

Point = Tuple[float, float]


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points"""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def within_radius(p1: Point, p2: Point, r: float) -> bool:
    """True when the points are strictly closer than r (touching does not count)"""
    return distance(p1, p2) < r


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
