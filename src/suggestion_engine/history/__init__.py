"""History extraction — turns session history into data-point series."""

from suggestion_engine.history.extractor import (
    extract_data_points,
    last_completed_sets,
    validate_data_points,
)

__all__ = ["extract_data_points", "last_completed_sets", "validate_data_points"]
