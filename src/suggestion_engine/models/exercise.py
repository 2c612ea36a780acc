"""Exercise catalog entry — the subset of catalog metadata the engine reads."""

from __future__ import annotations

from dataclasses import dataclass, field

from suggestion_engine.models.enums import UNTRACKED_EXERCISE_TYPES, ExerciseType


@dataclass(frozen=True)
class ExerciseInfo:
    """Catalog metadata for one exercise.

    ``equipment`` holds catalog tags such as ``"Barbell"`` or
    ``"Smith Machine"``; the first recognised tag drives weight rounding.
    """

    name: str
    exercise_type: ExerciseType = ExerciseType.WEIGHT
    is_compound: bool = False
    is_bodyweight: bool = False
    supports_gps_tracking: bool = False
    equipment: tuple[str, ...] = field(default_factory=tuple)

    @property
    def supports_progression(self) -> bool:
        """Whether weight/rep progression concepts apply to this exercise."""
        if self.supports_gps_tracking:
            return False
        return self.exercise_type not in UNTRACKED_EXERCISE_TYPES

    @classmethod
    def unknown(cls, name: str) -> ExerciseInfo:
        """Conservative stand-in used when the catalog has no entry."""
        return cls(name=name)
