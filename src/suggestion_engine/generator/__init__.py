"""Suggestion generator — turns a classified pattern into per-set targets."""

from suggestion_engine.generator.builder import SuggestionBuilder, build_suggestion

__all__ = ["SuggestionBuilder", "build_suggestion"]
