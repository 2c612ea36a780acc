"""Enumerations and tuning constants for the suggestion engine.

Thresholds are grouped by the component that consumes them. Weights are in
the user's logging unit (the engine never converts units).
"""

from datetime import timedelta
from enum import IntEnum, auto


class PatternType(IntEnum):
    """Training pattern detected from an exercise's history."""

    PROGRESSIVE_OVERLOAD = auto()
    REP_CYCLING = auto()
    DELOAD = auto()
    STABLE = auto()
    FALLBACK = auto()


class SetArrangement(IntEnum):
    """Shape of the set ladder within a single session."""

    PYRAMID_UP = auto()
    PYRAMID_DOWN = auto()
    STRAIGHT_ACROSS = auto()


class ExerciseType(IntEnum):
    """How an exercise is logged (catalog-provided)."""

    WEIGHT = auto()
    BODYWEIGHT = auto()
    REPS_ONLY = auto()
    ASSISTED = auto()
    CARDIO = auto()
    DURATION = auto()


class RoundDirection(IntEnum):
    """Rounding policy applied to computed weight targets."""

    DOWN = auto()
    NEAREST = auto()


class RulePrecedence(IntEnum):
    """Evaluation order of pattern rules — lower value is checked first.

    The first rule that matches decides the pattern.
    """

    INSUFFICIENT_DATA = 0
    STALE_HISTORY = 1
    REP_CYCLING = 2
    DELOAD = 3
    PROGRESSIVE_OVERLOAD = 4
    STABLE = 5


class ShiftKind(IntEnum):
    """What the intra-session adapter did with the remaining targets."""

    NONE = auto()
    EASY_BUMP = auto()
    MISS_REDUCE = auto()
    RECLASSIFIED = auto()


# Exercise types where weight/rep progression does not apply
UNTRACKED_EXERCISE_TYPES = frozenset({ExerciseType.CARDIO, ExerciseType.DURATION})

# ---------------------------------------------------------------------------
# History extraction
# ---------------------------------------------------------------------------
LOOKBACK_WEEKS = 8
LOOKBACK = timedelta(weeks=LOOKBACK_WEEKS)
MAX_SESSIONS = 20  # Newest sessions kept per exercise

# ---------------------------------------------------------------------------
# Pattern classification
# ---------------------------------------------------------------------------
MIN_SESSIONS = 3
MIN_SESSIONS_REP_CYCLING = 4
MIN_CLUSTER_SESSIONS = 2
MIN_WEEKS_DELOAD_AUTO = 12
STALE_GAP_DAYS = 21

# R² required for a positive trend to count as progressive overload
R_SQUARED_COMPOUND = 0.6
R_SQUARED_ISOLATION = 0.5

# Population stddev of reps-per-session above which rep cycling is considered
REP_CYCLING_STDDEV = 3.0
# Heavy/light band means must differ by at least this fraction
CLUSTER_MIN_WEIGHT_GAP = 0.05
# A rep-only split needs sessions to switch bands at least this often
REP_ALTERNATION_MIN_RATE = 0.6

# Last session volume this far below the trailing average marks a deload
DELOAD_VOLUME_DROP = 0.20
DELOAD_TRAILING_SESSIONS = 3

# Set-ladder shape thresholds (fractions of the first/last/mean weight)
PYRAMID_UP_THRESHOLD = 0.10
PYRAMID_DOWN_THRESHOLD = 0.10
STRAIGHT_ACROSS_THRESHOLD = 0.05

# Confidence = weighted sum of fit, coverage and recency (weights sum to 1)
CONFIDENCE_FIT_WEIGHT = 0.5
CONFIDENCE_COVERAGE_WEIGHT = 0.3
CONFIDENCE_RECENCY_WEIGHT = 0.2

# Fit prior for patterns that are not backed by a regression
PATTERN_FIT_PRIOR = {
    PatternType.REP_CYCLING: 0.7,
    PatternType.DELOAD: 0.6,
}

# ---------------------------------------------------------------------------
# Suggestion generation
# ---------------------------------------------------------------------------
MAX_INCREASE_COMPOUND = 0.05
MAX_INCREASE_ISOLATION = 0.10
MAX_DECREASE = 0.10
SMALL_BUMP_PERCENT = 0.025
MIN_REPS = 1
MAX_REPS = 30

# Static targets used when an exercise has no history at all
DEFAULT_WEIGHT_REPS = 8
DEFAULT_BODYWEIGHT_REPS = 10
DEFAULT_ASSISTED_REPS = 8

# ---------------------------------------------------------------------------
# Intra-session adaptation
# ---------------------------------------------------------------------------
EASY_REPS_ABOVE = 2
MISS_REPS_BELOW = 2
EASY_BUMP_PERCENT = 0.025
MISS_REDUCE_PERCENT = 0.05

PATTERN_SHIFT_WEIGHT_THRESHOLD = 0.15
PATTERN_SHIFT_REPS_THRESHOLD = 0.30
PATTERN_SHIFT_MAX_SIMILARITY = 0.30
PATTERN_SHIFT_MIN_COMPLETED_SETS = 2
MAX_PATTERN_SHIFTS_PER_SESSION = 1

# Similarity blend: weight deviation matters more than reps deviation
SIMILARITY_WEIGHT_FACTOR = 0.6
SIMILARITY_REPS_FACTOR = 0.4
