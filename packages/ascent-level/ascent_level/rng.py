"""Random draw helpers; every draw goes through an injected ``random.Random``."""
from __future__ import annotations

import random
from typing import Mapping, TypeVar

K = TypeVar("K")


def weighted_choice(rng: random.Random, weights: Mapping[K, float]) -> K:
    """Pick a key with probability proportional to its weight.

    Non-positive weights never win. Raises ``ValueError`` when nothing
    can be drawn.
    """
    items = [(key, w) for key, w in weights.items() if w > 0]
    if not items:
        raise ValueError("weighted_choice needs at least one positive weight")
    total = sum(w for _, w in items)
    roll = rng.random() * total
    cumulative = 0.0
    for key, w in items:
        cumulative += w
        if roll < cumulative:
            return key
    return items[-1][0]


def draw_exclusive(
    rng: random.Random,
    default: K,
    probabilities: Mapping[K, float],
) -> K:
    """One uniform draw walked across independent per-kind probabilities.

    At most one kind is picked per draw; a roll past the sum of all
    probabilities yields ``default``.
    """
    if sum(probabilities.values()) > 1.0:
        raise ValueError("exclusive probabilities must sum to at most 1.0")
    roll = rng.random()
    cumulative = 0.0
    for key, p in probabilities.items():
        if p <= 0:
            continue
        cumulative += p
        if roll < cumulative:
            return key
    return default


def uniform_gap(rng: random.Random, lo: float, hi: float, cap: float) -> float:
    """Uniform draw in ``[lo, hi]`` clamped into ``[lo, min(hi, cap)]``."""
    upper = min(hi, cap)
    if upper < lo:
        upper = lo
    return min(upper, max(lo, rng.uniform(lo, hi)))
