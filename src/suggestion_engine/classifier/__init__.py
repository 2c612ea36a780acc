"""Pattern classifier — precedence-ordered detection rules over a data-point series."""

from suggestion_engine.classifier.classifier import PatternClassifier, analyze_pattern
from suggestion_engine.classifier.set_arrangement import detect_set_arrangement

__all__ = ["PatternClassifier", "analyze_pattern", "detect_set_arrangement"]
