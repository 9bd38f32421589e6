"""Constant values and primitive definitions that can be shared throughout the code."""
import enum
from typing import Optional

from typing_extensions import Final

INTERVAL_TIER: Final = "IntervalTier"
POINT_TIER: Final = "TextTier"

DEFAULT_EXTENSION: Final = ".TextGrid"


class TierClass(enum.Enum):
    """The tier class as written in the 'class = "..."' line of a tier."""

    INTERVAL = INTERVAL_TIER
    TEXT = POINT_TIER

    @classmethod
    def fromValue(cls, value: str) -> Optional["TierClass"]:
        """Exact lookup of a tier class name; unknown names give None."""
        return _TIER_CLASS_VALUES.get(value)


_TIER_CLASS_VALUES: Final = {tierClass.value: tierClass for tierClass in TierClass}


class ErrorReportingMode:
    SILENCE: Final = "silence"
    WARNING: Final = "warning"
    ERROR: Final = "error"

    validOptions = [SILENCE, WARNING, ERROR]
