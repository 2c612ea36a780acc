"""Environment-variable-based configuration for the suggestion engine."""

from __future__ import annotations

import os
from datetime import timedelta

from suggestion_engine.models.enums import LOOKBACK_WEEKS

DEFAULT_SET_COUNT: int = int(os.environ.get("SUGGESTION_DEFAULT_SET_COUNT", "3"))
HISTORY_LOOKBACK: timedelta = timedelta(
    weeks=int(os.environ.get("SUGGESTION_LOOKBACK_WEEKS", str(LOOKBACK_WEEKS)))
)
