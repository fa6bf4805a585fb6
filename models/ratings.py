"""
Position-specific overall rating.
Single source of truth: weighted sum of current attributes for the position.
"""
from .constants import POSITION_OVERALL_WEIGHTS, ATTRIBUTE_MIN, ATTRIBUTE_MAX


def _attr_value_for_weight(value: float, default: float = 50.0) -> float:
    return min(float(ATTRIBUTE_MAX), max(float(ATTRIBUTE_MIN), float(value) if value is not None else default))


def compute_overall_at_position(player_attrs: dict, position: str) -> int:
    """Weighted sum of current attributes for a position. Returns 1-99."""
    weights = POSITION_OVERALL_WEIGHTS.get(position)
    if weights is None:
        raise ValueError(f"unknown position {position!r}")
    total = 0.0
    for attr, w in weights.items():
        total += w * _attr_value_for_weight(player_attrs.get(attr, 50))
    return min(ATTRIBUTE_MAX, max(ATTRIBUTE_MIN, round(total)))

