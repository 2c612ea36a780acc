"""Equipment-aware weight rounding.

Every computed weight target passes through ``round_to_increment`` as the
last step before it is returned. A DOWN policy never yields a value above
the raw computed weight.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from suggestion_engine.models.enums import RoundDirection

# Quotients within this distance of a whole step count as that step, so that
# 125.00000000000001 / 5 does not floor to 24 steps.
_STEP_PRECISION = 9


@dataclass(frozen=True)
class WeightIncrement:
    """Smallest adjustable load step for a class of equipment."""

    increment: float
    round_direction: RoundDirection = RoundDirection.DOWN


DEFAULT_INCREMENT = WeightIncrement(increment=5.0, round_direction=RoundDirection.DOWN)

_PLATE_LOADED = WeightIncrement(increment=5.0, round_direction=RoundDirection.DOWN)
_FINE_GRAINED = WeightIncrement(increment=1.0, round_direction=RoundDirection.NEAREST)

EQUIPMENT_INCREMENTS: Mapping[str, WeightIncrement] = MappingProxyType({
    "Barbell": _PLATE_LOADED,
    "Smith Machine": _PLATE_LOADED,
    "Trap Bar": _PLATE_LOADED,
    "Dumbbell": _PLATE_LOADED,
    "Kettlebell": _PLATE_LOADED,
    "Cable": _PLATE_LOADED,
    "Machine": _PLATE_LOADED,
    "Bench": _PLATE_LOADED,
    "Bodyweight": _FINE_GRAINED,
    "Bands": _FINE_GRAINED,
    "Cardio Machine": _FINE_GRAINED,
})


def get_weight_increment(equipment: Iterable[str]) -> WeightIncrement:
    """Return the increment policy of the first recognised equipment tag.

    Unknown or missing equipment falls back to DEFAULT_INCREMENT.
    """
    for tag in equipment:
        policy = EQUIPMENT_INCREMENTS.get(tag)
        if policy is not None:
            return policy
    return DEFAULT_INCREMENT


def round_to_increment(weight: float, policy: WeightIncrement) -> float:
    """Round ``weight`` to a loadable value under ``policy``.

    Args:
        weight: Raw computed weight.
        policy: Increment and rounding direction.

    Returns:
        The rounded, non-negative weight.

    Raises:
        ValueError: If the policy's increment is not positive.
    """
    if policy.increment <= 0:
        raise ValueError(f"Increment must be positive, got {policy.increment}")

    steps = round(weight / policy.increment, _STEP_PRECISION)
    if policy.round_direction == RoundDirection.NEAREST:
        whole_steps = math.floor(steps + 0.5)
    else:
        whole_steps = math.floor(steps)
    return max(0.0, float(whole_steps * policy.increment))


def round_for_equipment(weight: float, equipment: Iterable[str]) -> float:
    """Shorthand: look up the equipment policy and round ``weight``."""
    return round_to_increment(weight, get_weight_increment(equipment))


def reduce_within(weight: float, max_fraction: float, policy: WeightIncrement) -> float:
    """Lightest loadable value below ``weight`` that cuts at most ``max_fraction``.

    When no step of ``policy`` lands in ``[weight * (1 - max_fraction), weight)``
    the next loadable value below ``weight`` is used instead. A positive load
    with nothing loadable beneath it is returned unchanged.

    Raises:
        ValueError: If the policy's increment is not positive.
    """
    if policy.increment <= 0:
        raise ValueError(f"Increment must be positive, got {policy.increment}")
    if weight <= 0:
        return weight

    floor = weight * (1.0 - max_fraction)
    floor_steps = math.ceil(round(floor / policy.increment, _STEP_PRECISION))
    candidate = float(floor_steps * policy.increment)
    if candidate < weight:
        return candidate

    below_steps = math.ceil(round(weight / policy.increment, _STEP_PRECISION)) - 1
    below = float(below_steps * policy.increment)
    return below if below > 0 else weight
