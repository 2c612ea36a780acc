"""Serialization module — render engine results for the host application."""

from suggestion_engine.serialization.suggestion_json import (
    to_shift_dict,
    to_suggestion_dict,
    to_suggestion_json,
)

__all__ = ["to_shift_dict", "to_suggestion_dict", "to_suggestion_json"]
