"""Data models for the suggestion engine."""

from suggestion_engine.models.analysis import ClusterData, PatternAnalysis
from suggestion_engine.models.classification_trace import (
    ClassificationTrace,
    RuleResult,
    RuleStatus,
)
from suggestion_engine.models.data_point import ExerciseDataPoint, SetPositionData
from suggestion_engine.models.enums import (
    ExerciseType,
    PatternType,
    RoundDirection,
    SetArrangement,
    ShiftKind,
)
from suggestion_engine.models.exercise import ExerciseInfo
from suggestion_engine.models.history import SetLog, WorkoutExercise, WorkoutSession
from suggestion_engine.models.session_state import IntraSessionState, PatternShiftResult
from suggestion_engine.models.suggestion import SmartSuggestionResult

__all__ = [
    "ClassificationTrace",
    "ClusterData",
    "ExerciseDataPoint",
    "ExerciseInfo",
    "ExerciseType",
    "IntraSessionState",
    "PatternAnalysis",
    "PatternShiftResult",
    "PatternType",
    "RoundDirection",
    "RuleResult",
    "RuleStatus",
    "SetArrangement",
    "SetLog",
    "SetPositionData",
    "ShiftKind",
    "SmartSuggestionResult",
    "WorkoutExercise",
    "WorkoutSession",
]
