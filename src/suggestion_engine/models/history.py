"""Session history as supplied by the host application's session store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SetLog:
    """A single logged (or suggested) set.

    Weight exercises use ``weight``/``reps``; assisted exercises use
    ``assistance_weight``/``reps``; cardio and timed exercises use
    ``duration`` (seconds) and ``distance``.
    """

    completed: bool = False
    weight: float | None = None
    reps: int | None = None
    duration: float | None = None
    distance: float | None = None
    assistance_weight: float | None = None


@dataclass(frozen=True)
class WorkoutExercise:
    """One exercise inside a session, with its sets in the order performed."""

    name: str
    sets: tuple[SetLog, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutSession:
    """A past (or in-progress) workout session."""

    id: str
    date: datetime
    exercises: tuple[WorkoutExercise, ...] = field(default_factory=tuple)

    def find_exercise(self, name: str) -> WorkoutExercise | None:
        """Return the first exercise entry with the given name, if any."""
        for exercise in self.exercises:
            if exercise.name == name:
                return exercise
        return None
