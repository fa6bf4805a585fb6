"""
Seeded randomness helpers.
Every engine takes an injected random.Random; nothing here touches the global RNG.
"""
from __future__ import annotations

import random
import zlib


def seed_rng(seed: int | None = None) -> random.Random:
    """Seeded RNG for reproducible runs (None => fresh, non-reproducible)."""
    return random.Random(seed)


def season_rng(base_seed: int, season: int, step: str) -> random.Random:
    """Seeded RNG per season/step (same seed, season, step => same outcome)."""
    return random.Random((base_seed * 1000003) + (season * 1000) + stable_hash(step) % 1000)


def stable_hash(text: str) -> int:
    """Process-independent hash (builtin hash() is salted per interpreter run)."""
    return zlib.crc32(text.encode("utf-8"))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def gauss_clamped(rng: random.Random, mu: float, sigma: float, lo: float, hi: float) -> float:
    return clamp(rng.gauss(mu, sigma), lo, hi)


def chance(rng: random.Random, probability: float) -> bool:
    return rng.random() < probability

