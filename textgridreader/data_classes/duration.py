"""A Duration is the (start, end) time span covered by a file, tier or entry."""
from typing import Any, NamedTuple

from textgridreader.utilities import errors


class Duration(NamedTuple):
    start: float
    end: float

    @classmethod
    def build(cls, *args: Any):
        """
        Safe constructor for Duration.

        Duration(start, end) doesn't check the values at runtime.
        Duration.build() converts both values to float and checks that
        start does not come after end.  It accepts either 2 arguments
        (start, end) or 1 argument (another Duration or a pair).

        Raises:
            ArgumentError: Wrong number of arguments, values that can't be
                converted to float, or a start time after the end time.
        """
        try:
            start, end = args[0] if len(args) == 1 else args
            start, end = float(start), float(end)
        except (TypeError, ValueError):
            raise errors.ArgumentError(f"Cannot build Duration from {args}")

        if start > end:
            raise errors.ArgumentError(
                f"Duration start ({start}) must not occur after its end ({end})"
            )
        return cls(start, end)

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def isPoint(self) -> bool:
        return self.start == self.end

    def contains(self, other: "Duration") -> bool:
        return self.start <= other.start and other.end <= self.end

    def __repr__(self):
        return str(tuple(self))
